"""
API request and response models for FastAPI endpoints.

This module defines the Pydantic models used for API response validation.
"""

from typing import List
from pydantic import BaseModel, Field

from .multipart import Header


class PartSummary(BaseModel):
    """A parsed part as returned by the parse endpoint."""

    headers: List[Header] = Field(default_factory=list, description="Part headers in order")
    body: str = Field(description="Part body (bytes decoded as UTF-8, invalid bytes replaced)")
    size_bytes: int = Field(description="Body size in bytes")


class ParseResponse(BaseModel):
    """Response model for the multipart parse endpoint."""

    success: bool = Field(description="Whether parsing succeeded")
    boundary: str = Field(default="", description="Boundary extracted from Content-Type")
    part_count: int = Field(default=0, description="Number of parts found")
    parts: List[PartSummary] = Field(default_factory=list, description="Parsed parts")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(description="Service status", examples=["healthy"])
    version: str = Field(description="API version", examples=["1.0.0"])
    parser_version: str = Field(description="Multipart parser version")
    uptime_seconds: float = Field(description="Service uptime")


class VersionResponse(BaseModel):
    """Version information response."""

    api_version: str = Field(description="API version")
    parser_version: str = Field(description="Multipart parser version")
    serializer_version: str = Field(description="Multipart serializer version")
