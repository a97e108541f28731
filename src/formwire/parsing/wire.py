"""
Wire constants shared by the splitter, the section parser and the serializer.

Bodies may arrive as text or as bytes. Byte content is mapped to text with
UTF-8 and ``surrogateescape`` so that invalid bytes survive a round trip.
"""

from typing import AnyStr

DASH_DASH = "--"
CRLF = "\r\n"

WIRE_ENCODING = "utf-8"
WIRE_ERRORS = "surrogateescape"


def to_text(data) -> str:
    """Decode wire bytes to text losslessly; text passes through."""
    if isinstance(data, bytes):
        return data.decode(WIRE_ENCODING, WIRE_ERRORS)
    return data


def to_bytes(data) -> bytes:
    """Encode text to wire bytes losslessly; bytes pass through."""
    if isinstance(data, str):
        return data.encode(WIRE_ENCODING, WIRE_ERRORS)
    return data


def like(text: str, sample: AnyStr) -> AnyStr:
    """Return ``text`` in the same type (str or bytes) as ``sample``."""
    return to_bytes(text) if isinstance(sample, bytes) else text


def display_text(data) -> str:
    """
    Render wire text or bytes as printable UTF-8 text.

    Escaped bytes that are not valid UTF-8 become U+FFFD, so the result can
    always be JSON-encoded. Not reversible; use to_bytes() for the wire form.
    """
    return to_bytes(data).decode(WIRE_ENCODING, errors="replace")


def display_header(header) -> dict:
    """
    Make a header safe to serialize for display.

    Args:
        header: Header with name, value and params

    Returns:
        Dict with display-safe name, value and params
    """
    return {
        "name": display_text(header.name),
        "value": display_text(header.value),
        "params": {
            display_text(key): display_text(value)
            for key, value in header.params.items()
        },
    }
