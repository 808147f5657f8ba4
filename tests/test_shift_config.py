"""ShiftConfigのテスト"""

from pathlib import Path

import pytest

from src.ai_shift.config import ChartConfig, ShiftConfig
from src.ai_shift.exceptions import ConfigurationError


def write_yaml(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "ai_shift.yaml"
    path.write_text(text, encoding="utf-8")
    return path


def test_defaults() -> None:
    """デフォルト値"""
    config = ShiftConfig()
    assert config.log_dir == "~/ops/proof-log"
    assert config.chart.cols == 48
    assert config.chart.max_label_width == 20
    assert config.chart.timezone_label == "JST"
    assert config.log_level == "WARNING"
    assert config.log_file is None


def test_load_bundled_config() -> None:
    """リポジトリ同梱のconfig/ai_shift.yaml"""
    config = ShiftConfig.from_yaml()
    assert config.chart.cols == 48
    assert config.log_dir == "~/ops/proof-log"


def test_from_yaml(tmp_path: Path) -> None:
    path = write_yaml(
        tmp_path,
        """
proof_log:
  dir: /srv/proof-log
chart:
  cols: 72
  max_label_width: 12
log:
  level: DEBUG
  file: logs/ai_shift.log
""",
    )
    config = ShiftConfig.from_yaml(path)

    assert config.log_dir == "/srv/proof-log"
    assert config.chart.cols == 72
    assert config.chart.max_label_width == 12
    assert config.chart.timezone_label == "JST"
    assert config.log_level == "DEBUG"
    assert config.log_file == "logs/ai_shift.log"


def test_from_yaml_empty_file(tmp_path: Path) -> None:
    """空ファイルはデフォルト値"""
    config = ShiftConfig.from_yaml(write_yaml(tmp_path, ""))
    assert config.chart.cols == 48


def test_from_yaml_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="見つかりません"):
        ShiftConfig.from_yaml(tmp_path / "missing.yaml")


def test_from_yaml_broken(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError):
        ShiftConfig.from_yaml(write_yaml(tmp_path, "chart: [unclosed\n"))


@pytest.mark.parametrize("cols", ["abc", 0, -4])
def test_from_yaml_invalid_cols(tmp_path: Path, cols) -> None:
    path = write_yaml(tmp_path, f"chart:\n  cols: {cols}\n")
    with pytest.raises(ConfigurationError, match="cols"):
        ShiftConfig.from_yaml(path)


def test_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("AI_SHIFT_DIR", "/tmp/proof")
    monkeypatch.setenv("AI_SHIFT_COLS", "96")
    monkeypatch.setenv("LOG_LEVEL", "INFO")
    monkeypatch.delenv("LOG_FILE", raising=False)

    config = ShiftConfig.from_env()

    assert config.log_dir == "/tmp/proof"
    assert config.chart.cols == 96
    assert config.log_level == "INFO"
    assert config.log_file is None


def test_from_env_invalid_cols(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("AI_SHIFT_COLS", "wide")
    with pytest.raises(ConfigurationError, match="AI_SHIFT_COLS"):
        ShiftConfig.from_env()


def test_log_file_for(tmp_path: Path) -> None:
    config = ShiftConfig(log_dir=str(tmp_path), chart=ChartConfig())
    assert config.log_file_for("2026-02-20") == tmp_path.resolve() / "2026-02-20.md"


def test_log_dir_expands_home() -> None:
    config = ShiftConfig(log_dir="~/ops/proof-log")
    assert config.log_dir_path == (Path.home() / "ops" / "proof-log").resolve()


@pytest.mark.parametrize(
    "text",
    [
        "- just\n- a list\n",
        "chart: wide\n",
        "proof_log: /srv/proof-log\n",
        "log:\n  - DEBUG\n",
    ],
)
def test_from_yaml_not_a_mapping(tmp_path: Path, text: str) -> None:
    """マッピング以外の構造は設定エラー"""
    with pytest.raises(ConfigurationError):
        ShiftConfig.from_yaml(write_yaml(tmp_path, text))
