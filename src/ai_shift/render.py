"""テキスト形式のシフトチャート整形"""

from __future__ import annotations

import re
from datetime import date, timedelta
from typing import List, Optional

from .config import ChartConfig
from .models import ShiftStats, Timeline
from .timeline import format_active_duration, hour_labels

DAY_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")
MONTH_NAMES = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")
DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$", re.ASCII)


def get_yesterday(today: Optional[date] = None) -> str:
    """前日の日付（YYYY-MM-DD）"""
    today = today or date.today()
    return (today - timedelta(days=1)).isoformat()


def parse_date(date_str: str) -> date:
    """YYYY-MM-DD を検証してdateに変換（不正な場合ValueError）"""
    if not DATE_PATTERN.fullmatch(date_str):
        raise ValueError(f"invalid date: {date_str!r}")
    return date.fromisoformat(date_str)


def day_name(date_str: str) -> str:
    return DAY_NAMES[parse_date(date_str).weekday()]


def format_date(date_str: str) -> str:
    """2026-02-20 → Feb 20, 2026"""
    d = parse_date(date_str)
    return f"{MONTH_NAMES[d.month - 1]} {d.day}, {d.year}"


def title_line(date_str: str) -> str:
    return f"AI Shift — {format_date(date_str)} ({day_name(date_str)})"


def render_ghost_day(date_str: str) -> List[str]:
    """ログファイルが存在しない日の出力"""
    return [title_line(date_str), "", "  👻 Ghost Day — no sessions logged."]


def render_no_data(date_str: str) -> List[str]:
    """ログはあるがプロジェクトが1件も無い日の出力"""
    return [f"AI Shift — {format_date(date_str)}: no project data found."]


def truncate_label(name: str, width: int) -> str:
    """ラベルを幅に合わせて切り詰め、右を空白で埋める"""
    if len(name) > width:
        name = name[: width - 1] + "…"
    return name.ljust(width)


def format_stats_line(stats: ShiftStats, timezone_label: str = "JST") -> str:
    """
    サマリー行を整形

    稼働セルが1つも無い場合は時間帯の代わりに "no activity" を表示する。
    """
    active = format_active_duration(stats.active_minutes)
    if stats.has_activity:
        time_range = f"{stats.first_active} – {stats.last_active} {timezone_label}"
    else:
        time_range = "no activity"
    return f"  Active: {active}  ·  {time_range}  ·  {stats.session_count} sessions"


def render_chart(
    date_str: str,
    timeline: Timeline,
    stats: ShiftStats,
    chart: Optional[ChartConfig] = None,
) -> List[str]:
    """
    シフトチャート全体を行のリストとして整形

    Args:
        date_str: 対象日付（YYYY-MM-DD）
        timeline: build_timelineの結果
        stats: compute_statsの結果
        chart: 描画設定（ラベル幅・タイムゾーン表記）

    Returns:
        出力行のリスト
    """
    chart = chart or ChartConfig()
    cols = timeline.cols
    max_len = min(chart.max_label_width, max(len(p) for p in timeline.projects))

    lines = [title_line(date_str), ""]
    lines.append(" " * (max_len + 3) + hour_labels(cols))

    for project in timeline.projects:
        lines.append(f"  {truncate_label(project, max_len)}  {timeline.row_text(project)}")

    if len(timeline.projects) > 1:
        lines.append(f"  {'─' * max_len}  {'─' * cols}")
        lines.append(f"  {'ALL'.ljust(max_len)}  {timeline.all_row_text}")

    lines.append("")
    lines.append(format_stats_line(stats, chart.timezone_label))
    return lines
