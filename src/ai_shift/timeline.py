"""
タイムライン生成（セッション → 固定幅グリッド）

1日（1440分）を cols 列に分割し、プロジェクトごとに稼働セルを塗ります。
丸め方は箇所ごとに異なるので統一しないこと:
  - 開始列: floor
  - 終了列: ceil（cols で頭打ち）
  - 時刻ラベルの列: 四捨五入
  - 分の端数表示: 四捨五入
"""

from __future__ import annotations

import logging
import math
from typing import Iterable, List, Optional

from .models import ACTIVE, INACTIVE, Session, ShiftStats, Timeline

logger = logging.getLogger(__name__)

TOTAL_MINUTES = 24 * 60
LABEL_HOURS = (0, 6, 12, 18)
# ラベルが右端で切れないように確保する余白
LABEL_OVERFLOW = 14


def round_half_up(value: float) -> int:
    """0.5を正の無限大方向に丸める（組み込みroundの偶数丸めとは異なる）"""
    return math.floor(value + 0.5)


def build_timeline(sessions: Iterable[Session], cols: int) -> Optional[Timeline]:
    """
    セッション一覧からタイムラインを作る

    Args:
        sessions: プロジェクト確定済みのセッション
        cols: 列数

    Returns:
        Timeline。描画対象のプロジェクトが無い場合はNone
    """
    sessions = [s for s in sessions if s.project]
    projects = sorted({s.project for s in sessions})
    if not projects:
        return None

    minutes_per_col = TOTAL_MINUTES / cols
    rows = {p: [INACTIVE] * cols for p in projects}

    for s in sessions:
        start_col = math.floor(s.start_minute / minutes_per_col)
        end_col = min(cols, math.ceil(s.end_minute / minutes_per_col))
        if start_col >= end_col:
            logger.debug(
                f"Session {s.start_minute}-{s.end_minute} ({s.project}) has no visible cells"
            )
        for c in range(start_col, end_col):
            rows[s.project][c] = ACTIVE

    all_row = [INACTIVE] * cols
    for p in projects:
        for c in range(cols):
            if rows[p][c] == ACTIVE:
                all_row[c] = ACTIVE

    return Timeline(cols=cols, projects=projects, rows=rows, all_row=all_row)


def column_to_clock(col: int, cols: int) -> str:
    """列番号をおおよその "HH:MM" に戻す"""
    minutes = col * (TOTAL_MINUTES / cols)
    hour = math.floor(minutes / 60)
    minute = round_half_up(minutes % 60)
    return f"{hour:02d}:{minute:02d}"


def _last_index(cells: List[str], value: str) -> int:
    for i in range(len(cells) - 1, -1, -1):
        if cells[i] == value:
            return i
    return -1


def compute_stats(timeline: Timeline, session_count: int) -> ShiftStats:
    """
    ALL行からサマリー統計を算出

    稼働時間はセル数 × 1列あたりの分で近似する（重複は二重計上しないが、
    列の一部だけの稼働も1列分として数える）。

    Args:
        timeline: build_timelineの結果
        session_count: 解析されたセッション数

    Returns:
        ShiftStats。稼働セルが無い場合 first/last は -1 / None
    """
    all_row = timeline.all_row
    active_cells = all_row.count(ACTIVE)
    active_minutes = active_cells * (TOTAL_MINUTES / timeline.cols)

    first_col = all_row.index(ACTIVE) if active_cells else -1
    last_col = _last_index(all_row, ACTIVE)

    return ShiftStats(
        session_count=session_count,
        active_cells=active_cells,
        active_minutes=active_minutes,
        first_active_col=first_col,
        last_active_col=last_col,
        first_active=column_to_clock(first_col, timeline.cols) if first_col >= 0 else None,
        last_active=column_to_clock(last_col, timeline.cols) if last_col >= 0 else None,
    )


def format_active_duration(minutes: float) -> str:
    """稼働分を "1h 30m" / "45m" 形式に整形"""
    hours = math.floor(minutes / 60)
    rest = round_half_up(minutes % 60)
    if hours > 0:
        return f"{hours}h {rest}m"
    return f"{rest}m"


def hour_labels(cols: int) -> str:
    """
    時刻軸ラベル（00:00 / 06:00 / 12:00 / 18:00）を生成

    cols + 14 文字のバッファに書き込んでから cols + 2 文字に切り詰めるため、
    右端のラベルも途中まで表示される。
    """
    minutes_per_col = TOTAL_MINUTES / cols
    labels = [" "] * (cols + LABEL_OVERFLOW)

    for hour in LABEL_HOURS:
        col = round_half_up(hour * 60 / minutes_per_col)
        label = f"{hour:02d}:00"
        for i, ch in enumerate(label):
            if col + i < len(labels):
                labels[col + i] = ch

    return "".join(labels)[: cols + 2]
