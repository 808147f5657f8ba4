"""
ロギング設定モジュール

チャートは標準出力に出すため、ログは標準エラー（と任意のファイル）に出す。
"""

import logging
import sys
from pathlib import Path
from typing import Optional


def setup_logger(log_level: str = "WARNING", log_file: Optional[str] = None) -> None:
    """
    ロガーのセットアップ

    Args:
        log_level: ログレベル (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: ログファイルのパス（省略時はファイル出力なし）
    """
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    if log_file:
        # ログディレクトリの作成
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=handlers,
        force=True,
    )
