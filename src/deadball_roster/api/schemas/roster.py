from __future__ import annotations

from typing import List, Literal

from pydantic import BaseModel, Field


class RosterPlayerResponse(BaseModel):
    name: str
    role: str
    handedness: str
    batting_target: int
    on_base_target: int
    traits: str
    placeholder: bool = False


class RosterSectionResponse(BaseModel):
    key: str
    title: str
    headers: List[str]
    players: List[RosterPlayerResponse]


class IngestReportResponse(BaseModel):
    total_rows: int = Field(..., ge=0)
    accepted_rows: int = Field(..., ge=0)
    skipped_rows: int = Field(..., ge=0)


class RosterResponse(BaseModel):
    team_name: str
    sections: List[RosterSectionResponse]
    batting_report: IngestReportResponse | None = None
    pitching_report: IngestReportResponse | None = None


class StatsUploadResponse(BaseModel):
    kind: Literal["batting", "pitching"]
    filename: str | None = None
    rows: int = Field(..., ge=0)
