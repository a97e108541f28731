"""
Section splitter - cuts a multipart body into raw boundary-delimited sections.

The scan keeps a cursor into the original buffer instead of erasing consumed
prefixes. Each section still holds its own header block and body.
"""

from typing import AnyStr, List, Optional

import structlog

from .errors import MissingDelimiterError, SectionLimitError
from .wire import CRLF, DASH_DASH, like

logger = structlog.get_logger(__name__)


def _at_end(body: AnyStr, cursor: int, crlf: AnyStr) -> bool:
    """True when only nothing or a bare CRLF is left after the cursor."""
    remaining = len(body) - cursor
    return remaining <= 0 or (remaining == len(crlf) and body.endswith(crlf))


def split_sections(
    body: AnyStr,
    boundary: str,
    max_sections: Optional[int] = None,
) -> List[AnyStr]:
    """
    Split a multipart body on its boundary delimiter.

    After every delimiter the two following characters are skipped without
    checking them. For a content delimiter they are its CRLF. For the closing
    delimiter they are the trailing ``--``, which ends the scan.

    Args:
        body: Raw body (str or bytes); sections are returned in the same type
        boundary: Boundary token from the Content-Type header
        max_sections: Optional upper bound on the number of sections

    Returns:
        Non-empty raw sections in body order

    Raises:
        MissingDelimiterError: If the body ends without a closing delimiter
        SectionLimitError: If more than ``max_sections`` sections are found
    """
    if not boundary:
        logger.warning("No boundary, multipart body yields no sections")
        return []

    delimiter = like(DASH_DASH + boundary, body)
    crlf = like(CRLF, body)
    closing = like(DASH_DASH, body)

    sections = []
    cursor = 0
    preamble = True

    while not _at_end(body, cursor, crlf):
        found = body.find(delimiter, cursor)
        if found == -1:
            raise MissingDelimiterError(
                f"Expected delimiter {DASH_DASH + boundary!r} at offset {cursor}"
            )

        section = body[cursor:found]
        cursor = found + len(delimiter)
        is_closing = body[cursor:cursor + 2] == closing
        cursor += 2

        if preamble:
            # Text before the first delimiter is never a part
            preamble = False
            if section:
                logger.debug("Discarded multipart preamble", size=len(section))
        elif section:
            if max_sections is not None and len(sections) >= max_sections:
                raise SectionLimitError(
                    f"Multipart body has more than {max_sections} sections"
                )
            sections.append(section)

        if is_closing:
            if not _at_end(body, cursor, crlf):
                logger.debug("Ignored multipart epilogue", size=len(body) - cursor)
            break

    return sections
