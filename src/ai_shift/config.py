"""
設定管理モジュール

関連:
  - cli.main: この設定を使用するエントリポイント
  - config/ai_shift.yaml: 設定ファイルのサンプル
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .exceptions import ConfigurationError

DEFAULT_LOG_DIR = "~/ops/proof-log"
DEFAULT_COLS = 48
DEFAULT_LABEL_WIDTH = 20


@dataclass
class ChartConfig:
    """チャート描画設定"""

    cols: int = DEFAULT_COLS
    max_label_width: int = DEFAULT_LABEL_WIDTH
    timezone_label: str = "JST"


@dataclass
class ShiftConfig:
    """アプリケーション設定クラス"""

    # プルーフログの置き場所
    log_dir: str = DEFAULT_LOG_DIR

    # チャート設定
    chart: ChartConfig = None  # type: ignore

    # ログ設定
    log_level: str = "WARNING"
    log_file: Optional[str] = None

    def __post_init__(self):
        """デフォルト値の初期化と検証"""
        if self.chart is None:
            self.chart = ChartConfig()
        if self.chart.cols <= 0:
            raise ConfigurationError(f"cols must be a positive integer: {self.chart.cols}")
        if self.chart.max_label_width <= 0:
            raise ConfigurationError(
                f"max_label_width must be a positive integer: {self.chart.max_label_width}"
            )

    @property
    def log_dir_path(self) -> Path:
        return Path(self.log_dir).expanduser().resolve()

    def log_file_for(self, date: str) -> Path:
        """対象日のプルーフログのパス"""
        return self.log_dir_path / f"{date}.md"

    @classmethod
    def from_yaml(cls, config_path: Optional[Path] = None) -> "ShiftConfig":
        """YAMLファイルから設定を読み込む

        Args:
            config_path: 設定ファイルパス（省略時はconfig/ai_shift.yamlを使用）

        Returns:
            ShiftConfig: 設定インスタンス

        Raises:
            ConfigurationError: ファイルが無い・YAMLとして不正・値が不正な場合
        """
        if config_path is None:
            project_root = Path(__file__).parent.parent.parent
            config_path = project_root / "config" / "ai_shift.yaml"
        config_path = Path(config_path)

        if not config_path.exists():
            raise ConfigurationError(f"設定ファイルが見つかりません: {config_path}")

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                yaml_data: Dict[str, Any] = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigurationError(f"設定ファイルの読み込みに失敗しました: {e}") from e

        if not isinstance(yaml_data, dict):
            raise ConfigurationError(f"設定ファイルの形式が不正です: {config_path}")

        proof_log_data = _section(yaml_data, "proof_log")
        chart_data = _section(yaml_data, "chart")
        log_data = _section(yaml_data, "log")

        return cls(
            log_dir=proof_log_data.get("dir", DEFAULT_LOG_DIR),
            chart=ChartConfig(
                cols=_as_int(chart_data.get("cols", DEFAULT_COLS), "chart.cols"),
                max_label_width=_as_int(
                    chart_data.get("max_label_width", DEFAULT_LABEL_WIDTH),
                    "chart.max_label_width",
                ),
                timezone_label=chart_data.get("timezone_label", "JST"),
            ),
            log_level=log_data.get("level", "WARNING"),
            log_file=log_data.get("file"),
        )

    @classmethod
    def from_env(cls) -> "ShiftConfig":
        """環境変数から設定を読み込む"""
        return cls(
            log_dir=os.getenv("AI_SHIFT_DIR", DEFAULT_LOG_DIR),
            chart=ChartConfig(
                cols=_as_int(os.getenv("AI_SHIFT_COLS", str(DEFAULT_COLS)), "AI_SHIFT_COLS"),
                max_label_width=_as_int(
                    os.getenv("AI_SHIFT_LABEL_WIDTH", str(DEFAULT_LABEL_WIDTH)),
                    "AI_SHIFT_LABEL_WIDTH",
                ),
                timezone_label=os.getenv("AI_SHIFT_TZ_LABEL", "JST"),
            ),
            log_level=os.getenv("LOG_LEVEL", "WARNING"),
            log_file=os.getenv("LOG_FILE") or None,
        )


def _as_int(value: Any, key: str) -> int:
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"{key} must be an integer: {value!r}") from e


def _section(yaml_data: Dict[str, Any], key: str) -> Dict[str, Any]:
    value = yaml_data.get(key) or {}
    if not isinstance(value, dict):
        raise ConfigurationError(f"{key} must be a mapping: {value!r}")
    return value
