"""Error types raised while loading or reading configuration."""

from __future__ import annotations


class ConfigError(Exception):
    """設定処理で発生するエラーの基底クラス"""


class ConfigIOError(ConfigError, OSError):
    """設定ファイルを開けない、または読み込めない"""

    def __init__(self, message: str, path: str):
        super().__init__(message)
        self.path = path


class ConfigParseError(ConfigError, ValueError):
    """設定ファイルの内容をデコードできない"""

    def __init__(self, message: str, path: str):
        super().__init__(message)
        self.path = path


class ConfigSchemaError(ConfigError, ValueError):
    """デコード結果の構造が設定として扱えない"""

    def __init__(self, message: str, path: str | None = None, key: str | None = None):
        super().__init__(message)
        self.path = path
        self.key = key


class ConfigTypeError(ConfigError, TypeError):
    """型付きアクセサが期待する型の値ではない"""

    def __init__(self, message: str, key: str):
        super().__init__(message)
        self.key = key
