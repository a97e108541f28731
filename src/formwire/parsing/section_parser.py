"""
Section and header-line parsing.

Turns one raw section produced by the splitter into a Part. Defects inside a
single header degrade to empty fields; a section without a header/body
separator is a structural error.
"""

from typing import AnyStr

import structlog

from ..models.multipart import Header, Part
from .errors import MalformedSectionError
from .wire import CRLF, like, to_text

logger = structlog.get_logger(__name__)

PARAM_SEPARATOR = "; "
NAME_SEPARATOR = ": "


def trim_quotes(value: str, quote: str = '"') -> str:
    """Strip one matching pair of surrounding quotes, if present."""
    if len(value) > 1 and value[0] == quote and value[-1] == quote:
        return value[1:-1]
    return value


def parse_header_line(line: str) -> Header:
    """
    Parse one header line with trailing parameters.

    Example:
        ``Content-Disposition: form-data; name="file"; filename=report.txt``
        -> name ``Content-Disposition``, value ``form-data``,
        params ``{"name": "file", "filename": "report.txt"}``

    Args:
        line: Header line without its CRLF

    Returns:
        Parsed Header (empty name/value when the line has no ``": "``)
    """
    primary, _, remainder = line.partition(PARAM_SEPARATOR)

    name, found, value = primary.partition(NAME_SEPARATOR)
    if not found:
        logger.debug("Header line without name separator", line=line)
        name, value = "", ""

    params = {}
    while remainder:
        param, _, remainder = remainder.partition(PARAM_SEPARATOR)
        key, _, param_value = param.partition("=")
        # First occurrence wins for repeated keys
        params.setdefault(key, trim_quotes(param_value))

    return Header(name=name, value=value, params=params)


def parse_section(section: AnyStr) -> Part:
    """
    Parse one raw section into a Part.

    The header block ends at the first blank line. The body is everything
    after it minus the CRLF that preceded the next delimiter.

    Args:
        section: Raw section (str or bytes) from split_sections()

    Returns:
        Part with headers in wire order; the body keeps the section's type

    Raises:
        MalformedSectionError: If the section has no blank-line separator
    """
    crlf = like(CRLF, section)

    if section.startswith(crlf):
        head, body = section[:0], section[len(crlf):]
    else:
        found = section.find(crlf + crlf)
        if found == -1:
            raise MalformedSectionError(
                "Multipart section has no blank line between headers and body"
            )
        head = section[:found + len(crlf)]
        body = section[found + 2 * len(crlf):]

    part = Part(body=body[:-len(crlf)] if body.endswith(crlf) else body)

    for line in to_text(head).split(CRLF):
        if line:
            part.headers.append(parse_header_line(line))

    return part
