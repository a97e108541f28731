"""
Multipart data model - headers and parts recovered from a multipart body.

A part keeps its headers in wire order. Each header holds its primary
``name: value`` pair separately from its parameters, so the order of headers
survives while parameters stay unique per header.
"""

from typing import Dict, List, Optional, Tuple, Union
from pydantic import BaseModel, Field


class Header(BaseModel):
    """One part header, e.g. ``Content-Disposition: form-data; name="file"``."""

    name: str = Field(default="", description="Header name, e.g. Content-Disposition")
    value: str = Field(default="", description="Primary header value, e.g. form-data")
    params: Dict[str, str] = Field(
        default_factory=dict, description="Header parameters (name, filename, ...)"
    )

    @property
    def pair(self) -> Tuple[str, str]:
        return (self.name, self.value)

    def get_param(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """Return a parameter value, or ``default`` when the header lacks it."""
        return self.params.get(key, default)


class Part(BaseModel):
    """One part of a multipart message."""

    headers: List[Header] = Field(
        default_factory=list, description="Part headers in wire order"
    )
    body: Union[str, bytes] = Field(
        default="", description="Raw part body, not decoded"
    )

    def get_header(self, name: str) -> Optional[Header]:
        """
        Find a header by name.

        Args:
            name: Header name, matched case-insensitively

        Returns:
            First matching Header, or None
        """
        wanted = name.lower()
        for header in self.headers:
            if header.name.lower() == wanted:
                return header
        return None

    @property
    def name(self) -> Optional[str]:
        """Form field name from Content-Disposition."""
        disposition = self.get_header("Content-Disposition")
        return disposition.get_param("name") if disposition else None

    @property
    def filename(self) -> Optional[str]:
        """Uploaded file name from Content-Disposition."""
        disposition = self.get_header("Content-Disposition")
        return disposition.get_param("filename") if disposition else None
