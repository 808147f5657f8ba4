"""
ai-shift: 1日分のプルーフログをシフト表のようなタイムラインに描画する

This module provides functionality for:
- Proof-log parsing (session headers and project labels)
- Rasterizing sessions onto a fixed-width 24h timeline
- Summary statistics (active time, first/last activity, session count)
"""

from .exceptions import ConfigurationError, ParseError, ShiftError
from .models import Session, ShiftStats, Timeline
from .parser import parse_proof_log, parse_time
from .timeline import build_timeline, compute_stats, hour_labels

__all__ = [
    "ConfigurationError",
    "ParseError",
    "ShiftError",
    "Session",
    "ShiftStats",
    "Timeline",
    "parse_proof_log",
    "parse_time",
    "build_timeline",
    "compute_stats",
    "hour_labels",
]
