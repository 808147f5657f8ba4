"""Pydantic schemas for the JSON report."""

from __future__ import annotations

from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, Field

from .models import Session, ShiftStats, Timeline
from .timeline import format_active_duration


class SessionSchema(BaseModel):
    """One parsed session."""

    start_minute: int
    end_minute: int = Field(..., description="May exceed 1440 when the session crosses midnight")
    project: str
    duration_minutes: int


class StatsSchema(BaseModel):
    """Summary statistics derived from the ALL row."""

    session_count: int
    active_cells: int
    active_minutes: float = Field(..., description="Active cells x minutes per column")
    active_duration: str
    first_active: Optional[str] = Field(default=None, description="HH:MM, null if no activity")
    last_active: Optional[str] = Field(default=None, description="HH:MM, null if no activity")


class ShiftReport(BaseModel):
    """Full report for one day."""

    date: str
    day_name: str
    status: Literal["ok", "ghost_day", "no_project_data"]
    cols: int
    projects: List[str] = Field(default_factory=list)
    rows: Dict[str, str] = Field(default_factory=dict)
    all_row: Optional[str] = None
    sessions: List[SessionSchema] = Field(default_factory=list)
    stats: Optional[StatsSchema] = None

    @classmethod
    def build(
        cls,
        date: str,
        day_name: str,
        cols: int,
        sessions: List[Session],
        timeline: Optional[Timeline],
        stats: Optional[ShiftStats],
    ) -> "ShiftReport":
        if timeline is None or stats is None:
            return cls(date=date, day_name=day_name, status="no_project_data", cols=cols)

        return cls(
            date=date,
            day_name=day_name,
            status="ok",
            cols=cols,
            projects=timeline.projects,
            rows={p: timeline.row_text(p) for p in timeline.projects},
            all_row=timeline.all_row_text,
            sessions=[SessionSchema(**s.to_dict()) for s in sessions],
            stats=StatsSchema(
                session_count=stats.session_count,
                active_cells=stats.active_cells,
                active_minutes=stats.active_minutes,
                active_duration=format_active_duration(stats.active_minutes),
                first_active=stats.first_active,
                last_active=stats.last_active,
            ),
        )
