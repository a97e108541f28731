"""
Serializer - renders parts back into the multipart wire format.

Output is an equivalent, re-parseable message rather than a byte-identical
copy of the input: parameter values are always quoted and parameter spacing
is normalized.
"""

from typing import List

import structlog

from ..models.multipart import Header, Part
from .wire import CRLF, DASH_DASH, to_bytes, to_text

logger = structlog.get_logger(__name__)


def pad_quotes(value: str, quote: str = '"') -> str:
    """Wrap a parameter value in quotes for output."""
    return quote + value + quote


def render_header(header: Header) -> str:
    """Render one header line, including its CRLF."""
    line = f"{header.name}: {header.value}"
    for key, value in header.params.items():
        line += f"; {key}={pad_quotes(value)}"
    return line + CRLF


def render_part(part: Part) -> str:
    """
    Render a single part: its headers, a blank line, the body and a CRLF.

    Args:
        part: Part to render

    Returns:
        Wire text of the part (without its leading delimiter)
    """
    chunks = [render_header(header) for header in part.headers]
    chunks.append(CRLF)
    chunks.append(to_text(part.body))
    chunks.append(CRLF)
    return "".join(chunks)


def render_message(boundary: str, parts: List[Part]) -> str:
    """
    Render all parts framed by the boundary, ending with the closing delimiter.

    Message-level headers are not included.

    Args:
        boundary: Boundary token
        parts: Parts in order

    Returns:
        Wire text of the whole body
    """
    delimiter = DASH_DASH + boundary

    for index in find_boundary_collisions(boundary, parts):
        logger.warning(
            "Part body contains the boundary delimiter",
            part_index=index,
            boundary=boundary,
        )

    chunks = []
    for part in parts:
        chunks.append(delimiter + CRLF)
        chunks.append(render_part(part))
    chunks.append(delimiter + DASH_DASH + CRLF)
    return "".join(chunks)


def render_part_bytes(part: Part) -> bytes:
    """Wire bytes of render_part()."""
    return to_bytes(render_part(part))


def render_message_bytes(boundary: str, parts: List[Part]) -> bytes:
    """Wire bytes of render_message()."""
    return to_bytes(render_message(boundary, parts))


def find_boundary_collisions(boundary: str, parts: List[Part]) -> List[int]:
    """
    Find parts whose body contains the boundary delimiter.

    Such a body cannot be framed unambiguously: parsing the rendered output
    would split the part at the embedded delimiter.

    Args:
        boundary: Boundary token
        parts: Parts to check

    Returns:
        Indexes of colliding parts
    """
    if not boundary:
        return []
    delimiter = DASH_DASH + boundary
    return [
        index for index, part in enumerate(parts)
        if delimiter in to_text(part.body)
    ]
