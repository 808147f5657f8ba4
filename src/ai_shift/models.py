"""Shift chart data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

INACTIVE = "░"
ACTIVE = "▓"


@dataclass
class Session:
    """
    1回分の作業セッション

    Attributes:
        start_minute: 開始時刻（0時からの経過分）
        end_minute: 終了時刻（日付をまたぐ場合は1440以上）
        project: プロジェクト名（「どこで」行から確定）
    """

    start_minute: int
    end_minute: int
    project: Optional[str] = None

    @property
    def duration_minutes(self) -> int:
        return self.end_minute - self.start_minute

    def to_dict(self) -> dict:
        """辞書形式に変換（JSON出力用）"""
        return {
            "start_minute": self.start_minute,
            "end_minute": self.end_minute,
            "project": self.project,
            "duration_minutes": self.duration_minutes,
        }


@dataclass
class Timeline:
    """
    1日分のタイムライン（プロジェクト別の行とALL行）

    Attributes:
        cols: 列数（1列 = 1440 / cols 分）
        projects: プロジェクト名（昇順）
        rows: プロジェクト名 → セル列
        all_row: 全プロジェクトの論理和
    """

    cols: int
    projects: List[str]
    rows: Dict[str, List[str]]
    all_row: List[str] = field(default_factory=list)

    def row_text(self, project: str) -> str:
        return "".join(self.rows[project])

    @property
    def all_row_text(self) -> str:
        return "".join(self.all_row)


@dataclass
class ShiftStats:
    """ALL行から算出したサマリー統計"""

    session_count: int
    active_cells: int
    active_minutes: float
    first_active_col: int
    last_active_col: int
    first_active: Optional[str] = None
    last_active: Optional[str] = None

    @property
    def has_activity(self) -> bool:
        return self.first_active_col >= 0
