# Multipart parsing module

from .boundary import extract_boundary, generate_boundary
from .errors import (
    MalformedSectionError,
    MissingDelimiterError,
    MultipartError,
    SectionLimitError,
)
from .section_parser import parse_header_line, parse_section, trim_quotes
from .serializer import (
    find_boundary_collisions,
    pad_quotes,
    render_header,
    render_message,
    render_message_bytes,
    render_part,
    render_part_bytes,
)
from .splitter import split_sections
from .wire import CRLF, DASH_DASH

__all__ = [
    "extract_boundary",
    "generate_boundary",
    "split_sections",
    "parse_section",
    "parse_header_line",
    "trim_quotes",
    "render_header",
    "render_part",
    "render_message",
    "render_part_bytes",
    "render_message_bytes",
    "find_boundary_collisions",
    "pad_quotes",
    "MultipartError",
    "MalformedSectionError",
    "MissingDelimiterError",
    "SectionLimitError",
    "CRLF",
    "DASH_DASH",
]
