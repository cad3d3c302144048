"""Pydantic models for API I/O."""

from .roster import (
    IngestReportResponse,
    RosterPlayerResponse,
    RosterResponse,
    RosterSectionResponse,
    StatsUploadResponse,
)

__all__ = [
    "IngestReportResponse",
    "RosterPlayerResponse",
    "RosterResponse",
    "RosterSectionResponse",
    "StatsUploadResponse",
]
