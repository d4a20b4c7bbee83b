#!/usr/bin/env python3
"""
Release Signing - Errors
ドメイン層：ビルド構成で発生する例外
"""

from pathlib import Path


class SigningConfigError(Exception):
    """ビルド構成エラーの基底クラス（CLIのトップレベルで捕捉される）"""


class FatalConfigMissing(SigningConfigError):
    """key.properties が存在しない（ビルドを即時中断する）"""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Signing properties file is missing: {path}")


class PropertiesSyntaxError(SigningConfigError):
    """プロパティファイルの構文エラー"""

    def __init__(self, message: str, line_number: int) -> None:
        self.line_number = line_number
        super().__init__(f"line {line_number}: {message}")


class InvalidVersionValue(SigningConfigError):
    """バージョン値が正の整数として解釈できない"""

    def __init__(self, key: str, value: str) -> None:
        self.key = key
        self.value = value
        super().__init__(f"{key} must be a positive integer, got {value!r}")


class UnknownBuildVariant(SigningConfigError):
    """未定義のビルドバリアントが指定された"""

    def __init__(self, variant_name: str, known: list[str]) -> None:
        self.variant_name = variant_name
        super().__init__(
            f"Unknown build variant {variant_name!r} (known: {', '.join(known)})"
        )


class IncompleteCredentials(SigningConfigError):
    """署名情報が不足している（signing.require_complete有効時のみ）"""

    def __init__(self, path: Path, missing: list[str]) -> None:
        self.path = path
        self.missing = missing
        super().__init__(f"{path} is missing required keys: {', '.join(missing)}")
