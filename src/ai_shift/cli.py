#!/usr/bin/env python3
"""
AIシフトチャートCLI - その日AIがいつ働いていたかをタイムラインで表示

Usage:
    python -m src.ai_shift                       前日のシフトチャート
    python -m src.ai_shift --date 2026-02-20
    python -m src.ai_shift --cols 72             幅を広げる（デフォルト: 48）
    python -m src.ai_shift --format json
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List, Optional

from .config import ShiftConfig
from .exceptions import ShiftError
from .logger import setup_logger
from .parser import parse_proof_log
from .render import (
    day_name,
    get_yesterday,
    parse_date,
    render_chart,
    render_ghost_day,
    render_no_data,
)
from .schemas import ShiftReport
from .timeline import build_timeline, compute_stats

logger = logging.getLogger(__name__)


def print_lines(lines: List[str]) -> None:
    for line in lines:
        print(line)


def print_report(report: ShiftReport) -> None:
    print(json.dumps(report.model_dump(), ensure_ascii=False))


def cmd_show(config: ShiftConfig, target_date: str, output_format: str) -> int:
    """対象日のシフトチャートを表示"""
    cols = config.chart.cols
    log_file = config.log_file_for(target_date)

    if not log_file.exists():
        logger.info(f"Proof-log not found: {log_file}")
        if output_format == "json":
            print_report(
                ShiftReport(
                    date=target_date,
                    day_name=day_name(target_date),
                    status="ghost_day",
                    cols=cols,
                )
            )
        else:
            print_lines(render_ghost_day(target_date))
        return 0

    try:
        content = log_file.read_text(encoding="utf-8")
        sessions = parse_proof_log(content)
    except (OSError, ShiftError) as exc:
        print(f"Error: ログの読み込みに失敗しました: {exc}", file=sys.stderr)
        return 1

    timeline = build_timeline(sessions, cols)
    stats = compute_stats(timeline, len(sessions)) if timeline else None

    if output_format == "json":
        print_report(
            ShiftReport.build(
                date=target_date,
                day_name=day_name(target_date),
                cols=cols,
                sessions=sessions,
                timeline=timeline,
                stats=stats,
            )
        )
        return 0

    if timeline is None:
        print_lines(render_no_data(target_date))
        return 0

    print_lines(render_chart(target_date, timeline, stats, config.chart))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ai-shift",
        description="ai-shift — When did your AI work today?",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--date", help="対象日付（YYYY-MM-DD形式、デフォルト: 前日）")
    parser.add_argument("--dir", help="プルーフログのディレクトリ（デフォルト: ~/ops/proof-log）")
    parser.add_argument("--cols", type=int, help="タイムラインの幅（デフォルト: 48）")
    parser.add_argument(
        "--format",
        choices=["json", "text"],
        default="text",
        help="出力フォーマット（デフォルト: text）",
    )
    parser.add_argument("--config", help="YAML設定ファイルのパス")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="ログレベル（デフォルト: 設定値 WARNING）",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """CLIエントリポイント"""
    args = build_parser().parse_args(argv)

    # 設定読み込み（フラグが優先）
    try:
        config = ShiftConfig.from_yaml(args.config) if args.config else ShiftConfig.from_env()
    except ShiftError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    try:
        setup_logger(args.log_level or config.log_level, config.log_file)
    except OSError as exc:
        print(f"Error: ログファイルを開けません: {exc}", file=sys.stderr)
        return 1

    if args.dir:
        config.log_dir = args.dir
    if args.cols is not None:
        if args.cols <= 0:
            print(f"Error: --cols は正の整数で指定してください: {args.cols}", file=sys.stderr)
            return 1
        config.chart.cols = args.cols

    target_date = args.date or get_yesterday()
    try:
        parse_date(target_date)
    except ValueError:
        print(
            f"Error: 不正な日付: {target_date}。YYYY-MM-DD形式で指定してください。",
            file=sys.stderr,
        )
        return 1

    logger.debug(f"Rendering {target_date} from {config.log_dir_path} (cols={config.chart.cols})")
    return cmd_show(config, target_date, args.format)


if __name__ == "__main__":
    sys.exit(main())
