"""
プルーフログ（日次作業ログ）パーサー

ログは以下の2種類の行だけを解釈し、それ以外は無視します。

    ### 2026-02-20 09:00-09:45 JST     ← セッション見出し
    - どこで: proj-x                   ← プロジェクト名

見出しで新しいセッションを開き、「どこで」行でプロジェクトを確定します。
プロジェクトが確定しないまま次の見出しに到達したセッションは破棄されます。
"""

from __future__ import annotations

import logging
import re
from enum import Enum
from typing import List, Optional, Tuple

from .exceptions import ParseError
from .models import Session

logger = logging.getLogger(__name__)

MINUTES_PER_DAY = 24 * 60

SESSION_HEADER = re.compile(
    r"^### (\d{4}-\d{2}-\d{2}) (\d{2}:\d{2})-(\d{2}:\d{2}) JST", re.ASCII
)
WHERE_LINE = re.compile(r"^- どこで: (.+)$")


class LineKind(str, Enum):
    """行の分類"""

    HEADER = "header"
    LABEL = "label"
    OTHER = "other"


class ParserState(str, Enum):
    """解析中セッションの状態"""

    NO_SESSION = "no_session"
    OPEN_UNLABELED = "open_unlabeled"
    OPEN_LABELED = "open_labeled"


def parse_time(hhmm: str) -> int:
    """
    "HH:MM" を0時からの経過分に変換

    範囲チェックは行わない（"25:99" は 25*60+99 になる）。

    Args:
        hhmm: 時刻文字列

    Returns:
        経過分

    Raises:
        ParseError: 時・分が整数として解釈できない場合
    """
    parts = hhmm.split(":")
    if len(parts) < 2:
        raise ParseError(f"invalid time component: {hhmm!r}")
    try:
        hour = int(parts[0])
        minute = int(parts[1])
    except ValueError as e:
        raise ParseError(f"invalid time component: {hhmm!r}") from e
    return hour * 60 + minute


def classify_line(line: str) -> Tuple[LineKind, Optional[re.Match]]:
    """トリム済みの行を分類し、マッチ結果と共に返す"""
    match = SESSION_HEADER.match(line)
    if match:
        return LineKind.HEADER, match
    match = WHERE_LINE.match(line)
    if match:
        return LineKind.LABEL, match
    return LineKind.OTHER, None


def open_session(start: str, end: str) -> Session:
    """見出しの開始・終了時刻から新しいセッションを作る"""
    start_minute = parse_time(start)
    end_minute = parse_time(end)
    # 日付またぎ
    if end_minute < start_minute:
        end_minute += MINUTES_PER_DAY
    # 最低1分
    if end_minute == start_minute:
        end_minute = start_minute + 1
    return Session(start_minute=start_minute, end_minute=end_minute)


def _state_of(current: Optional[Session]) -> ParserState:
    if current is None:
        return ParserState.NO_SESSION
    if current.project:
        return ParserState.OPEN_LABELED
    return ParserState.OPEN_UNLABELED


def parse_proof_log(content: str) -> List[Session]:
    """
    ログ本文をセッション一覧に変換

    Args:
        content: 1日分のログ本文

    Returns:
        プロジェクトが確定したセッション（出現順、時刻順ソートはしない）

    Raises:
        ParseError: 見出しの時刻成分が不正な場合
    """
    sessions: List[Session] = []
    current: Optional[Session] = None

    for lineno, raw in enumerate(content.split("\n"), start=1):
        kind, match = classify_line(raw.strip())
        state = _state_of(current)

        if kind is LineKind.HEADER:
            if state is ParserState.OPEN_LABELED:
                sessions.append(current)
            elif state is ParserState.OPEN_UNLABELED:
                logger.debug(f"Dropping unlabeled session before line {lineno}")
            current = open_session(match.group(2), match.group(3))
        elif kind is LineKind.LABEL and state is not ParserState.NO_SESSION:
            current.project = match.group(1).strip()

    state = _state_of(current)
    if state is ParserState.OPEN_LABELED:
        sessions.append(current)
    elif state is ParserState.OPEN_UNLABELED:
        logger.debug("Dropping unlabeled session at end of input")

    logger.info(f"Parsed {len(sessions)} sessions")
    return sessions
