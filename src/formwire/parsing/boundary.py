"""
Boundary extraction from a Content-Type header value.

A missing boundary is not an error: the extractor returns an empty string and
the splitter then yields no sections.
"""

import binascii
import os
import re

import structlog

logger = structlog.get_logger(__name__)

# "boundary=" at a parameter position: start of value, or after ";" / whitespace
BOUNDARY_PATTERN = re.compile(r"(?:^|[;\s])boundary=", re.IGNORECASE)


def extract_boundary(content_type: str) -> str:
    """
    Extract the boundary token from a Content-Type header value.

    Examples:
        ``multipart/form-data; boundary=abc`` -> ``abc``
        ``multipart/form-data; boundary="abc"`` -> ``abc``
        ``multipart/form-data`` -> ``""``

    Args:
        content_type: Literal Content-Type header value

    Returns:
        Boundary token, or an empty string when no boundary parameter exists
    """
    match = BOUNDARY_PATTERN.search(content_type or "")
    if not match:
        logger.warning("Content-Type has no boundary", content_type=content_type)
        return ""

    candidate = content_type[match.end():]

    if candidate.startswith('"'):
        closing = candidate.find('"', 1)
        if closing == -1:
            # Unterminated quoted-string: drop the opening quote only
            return candidate[1:]
        return candidate[1:closing]

    return candidate.split(";", 1)[0].strip()


def generate_boundary() -> str:
    """
    Create a random boundary for an outgoing message.

    Returns:
        32 hex characters, unlikely to appear inside any part body
    """
    return binascii.hexlify(os.urandom(16)).decode("ascii")
