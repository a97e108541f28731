"""
Multipart message - the parsed (or programmatically built) multipart body.

A Message is built once, either directly from headers, a boundary and parts,
or by parsing an inbound request body. The boundary cannot be reassigned
afterwards; only the owner's explicit edits to ``parts`` change a message.
"""

from typing import ClassVar, Dict, List, Mapping, Optional, Union

import structlog
from pydantic import BaseModel, Field

from .models.multipart import Part
from .parsing.boundary import extract_boundary
from .parsing.section_parser import parse_section
from .parsing.serializer import (
    render_message,
    render_message_bytes,
    render_part,
    render_part_bytes,
)
from .parsing.splitter import split_sections

logger = structlog.get_logger(__name__)


def lookup_header(headers: Mapping[str, str], key: str) -> str:
    """Case-insensitive header lookup returning "" when absent."""
    wanted = key.lower()
    for name, value in headers.items():
        if name.lower() == wanted:
            return value
    return ""


class Message(BaseModel):
    """
    Parsed multipart/form-data message.

    ``headers`` are the enclosing request/response headers and are never
    reparsed. ``dump()`` renders the parts only, without those headers.
    """

    content_type: ClassVar[str] = "multipart/form-data"

    headers: Dict[str, str] = Field(
        default_factory=dict, description="Request/response headers"
    )
    boundary: str = Field(frozen=True, description="Delimiter token between parts")
    parts: List[Part] = Field(default_factory=list, description="Parts in body order")

    @classmethod
    def parse(
        cls,
        headers: Mapping[str, str],
        body: Union[str, bytes],
        max_sections: Optional[int] = None,
    ) -> "Message":
        """
        Build a message from request headers and a raw body.

        Args:
            headers: Request headers (any mapping, looked up case-insensitively)
            body: Raw request body, text or bytes
            max_sections: Optional bound on the number of parts

        Returns:
            Parsed Message

        Raises:
            MultipartError: If the body framing is malformed
        """
        headers = dict(headers.items())
        boundary = extract_boundary(lookup_header(headers, "Content-Type"))
        sections = split_sections(body, boundary, max_sections=max_sections)
        parts = [parse_section(section) for section in sections]

        logger.debug("Parsed multipart body", boundary=boundary, part_count=len(parts))
        return cls(headers=headers, boundary=boundary, parts=parts)

    @classmethod
    def from_request(cls, request, max_sections: Optional[int] = None) -> "Message":
        """Build a message from any object exposing ``headers`` and ``body``."""
        return cls.parse(request.headers, request.body, max_sections=max_sections)

    def get_header_value(self, key: str) -> str:
        return lookup_header(self.headers, key)

    def get_part_by_name(self, name: str) -> Optional[Part]:
        """
        Find a part by its Content-Disposition ``name`` parameter.

        Args:
            name: Form field name

        Returns:
            First matching Part, or None
        """
        for part in self.parts:
            if part.name == name:
                return part
        return None

    def content_type_header(self) -> str:
        """Content-Type value announcing this message's boundary."""
        return f'{self.content_type}; boundary="{self.boundary}"'

    def dump(self, index: Optional[int] = None) -> str:
        """
        Render the whole message, or a single part, in wire format.

        Args:
            index: Part index; None renders every part plus the closing delimiter

        Returns:
            Wire text (message headers are not included)
        """
        if index is None:
            return render_message(self.boundary, self.parts)
        return render_part(self.parts[index])

    def dump_bytes(self, index: Optional[int] = None) -> bytes:
        """Same as dump(), encoded for the wire."""
        if index is None:
            return render_message_bytes(self.boundary, self.parts)
        return render_part_bytes(self.parts[index])
