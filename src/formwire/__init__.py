# Multipart body parsing and serialization

from .message import Message
from .models.multipart import Header, Part
from .parsing.errors import (
    MalformedSectionError,
    MissingDelimiterError,
    MultipartError,
    SectionLimitError,
)

__all__ = [
    "Message",
    "Header",
    "Part",
    "MultipartError",
    "MalformedSectionError",
    "MissingDelimiterError",
    "SectionLimitError",
]
