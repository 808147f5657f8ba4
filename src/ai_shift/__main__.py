"""AIシフトチャートCLI実行用エントリポイント

Usage:
    python -m src.ai_shift [options]
"""

from .cli import main

if __name__ == "__main__":
    raise SystemExit(main())
