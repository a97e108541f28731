# Data models for multipart messages and the HTTP API

from .multipart import Header, Part
from .api_models import (
    HealthResponse,
    ParseResponse,
    PartSummary,
    VersionResponse,
)

__all__ = [
    "Header",
    "Part",
    "HealthResponse",
    "ParseResponse",
    "PartSummary",
    "VersionResponse",
]
