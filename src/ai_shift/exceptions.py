"""ai-shiftのカスタム例外定義

パーサー・設定読み込みで送出される例外をまとめています。
CLI層でのみ捕捉し、終了コードとエラーメッセージに変換します。
"""


class ShiftError(Exception):
    """ai-shift基底例外"""

    pass


class ParseError(ShiftError):
    """ログ解析エラー（時刻成分が数値でない等）"""

    pass


class ConfigurationError(ShiftError):
    """設定エラー"""

    pass
