"""テキスト整形のテスト"""

from datetime import date

import pytest

from src.ai_shift.config import ChartConfig
from src.ai_shift.models import Session
from src.ai_shift.render import (
    day_name,
    format_date,
    format_stats_line,
    get_yesterday,
    parse_date,
    render_chart,
    render_ghost_day,
    render_no_data,
    truncate_label,
)
from src.ai_shift.timeline import build_timeline, compute_stats


def test_format_date():
    assert format_date("2026-02-20") == "Feb 20, 2026"
    assert format_date("2025-12-01") == "Dec 1, 2025"


def test_day_name():
    assert day_name("2026-02-20") == "Friday"
    assert day_name("2026-02-22") == "Sunday"


def test_get_yesterday():
    assert get_yesterday(date(2026, 3, 1)) == "2026-02-28"
    assert get_yesterday(date(2026, 1, 1)) == "2025-12-31"


@pytest.mark.parametrize(
    "value", ["2026/02/20", "2026-13-01", "20260220", "yesterday", "２０２６-０２-２０", "2026-02-20\n"]
)
def test_parse_date_invalid(value):
    with pytest.raises(ValueError):
        parse_date(value)


def test_truncate_label():
    assert truncate_label("proj", 6) == "proj  "
    assert truncate_label("very-long-project-name", 10) == "very-long…"


def test_ghost_day():
    assert render_ghost_day("2026-02-20") == [
        "AI Shift — Feb 20, 2026 (Friday)",
        "",
        "  👻 Ghost Day — no sessions logged.",
    ]


def test_no_data():
    assert render_no_data("2026-02-20") == ["AI Shift — Feb 20, 2026: no project data found."]


class TestRenderChart:
    """render_chartのテスト"""

    def test_two_projects(self):
        sessions = [Session(540, 585, "proj-x"), Session(1430, 1450, "proj-y")]
        timeline = build_timeline(sessions, 48)
        stats = compute_stats(timeline, len(sessions))

        lines = render_chart("2026-02-20", timeline, stats)

        assert lines[0] == "AI Shift — Feb 20, 2026 (Friday)"
        assert lines[1] == ""
        # ラベル幅6 + 3文字の余白
        assert lines[2].startswith(" " * 9 + "00:00")
        assert lines[3] == "  proj-x  " + timeline.row_text("proj-x")
        assert lines[4] == "  proj-y  " + timeline.row_text("proj-y")
        assert lines[5] == "  " + "─" * 6 + "  " + "─" * 48
        assert lines[6] == "  ALL     " + timeline.all_row_text
        assert lines[7] == ""
        assert lines[8] == "  Active: 1h 30m  ·  09:00 – 23:30 JST  ·  2 sessions"

    def test_single_project_has_no_all_row(self):
        sessions = [Session(540, 600, "solo")]
        timeline = build_timeline(sessions, 48)
        lines = render_chart("2026-02-20", timeline, compute_stats(timeline, 1))

        assert not any(line.strip().startswith("ALL") for line in lines)
        assert lines[-1] == "  Active: 1h 0m  ·  09:00 – 09:30 JST  ·  1 sessions"

    def test_long_project_name_is_truncated(self):
        name = "a-very-long-project-name-indeed"
        timeline = build_timeline([Session(0, 30, name)], 48)
        lines = render_chart(
            "2026-02-20",
            timeline,
            compute_stats(timeline, 1),
            ChartConfig(max_label_width=8),
        )

        assert lines[3] == "  a-very-…  " + timeline.row_text(name)

    def test_custom_timezone_label(self):
        timeline = build_timeline([Session(0, 30, "p")], 48)
        stats = compute_stats(timeline, 1)
        assert format_stats_line(stats, "UTC").endswith("00:00 – 00:00 UTC  ·  1 sessions")

    def test_no_activity_branch(self):
        timeline = build_timeline([Session(1599, 1600, "odd")], 48)
        stats = compute_stats(timeline, 1)

        assert format_stats_line(stats) == "  Active: 0m  ·  no activity  ·  1 sessions"
