#!/usr/bin/env python3
"""
Release Signing - Framework Version Provider
インフラ層：SDK・アプリバージョンの供給（local.properties + 設定既定値）
"""

from pathlib import Path
from typing import Protocol

from release_signing.domain import (
    FrameworkVersions,
    InvalidVersionValue,
    VersionSettings,
)

from .properties import load_properties

# local.properties のキー → FrameworkVersions の整数フィールド
_INT_KEYS = {
    "flutter.compileSdkVersion": "compile_sdk",
    "flutter.minSdkVersion": "min_sdk",
    "flutter.targetSdkVersion": "target_sdk",
    "flutter.versionCode": "version_code",
}
# local.properties のキー → FrameworkVersions の文字列フィールド
_STR_KEYS = {
    "flutter.ndkVersion": "ndk_version",
    "flutter.versionName": "version_name",
}


class FrameworkVersionProvider(Protocol):
    """SDK・アプリバージョンの供給元"""

    def versions(self) -> FrameworkVersions: ...


class LocalPropertiesVersionProvider:
    """
    local.properties からバージョン情報を取得する

    local.properties が存在しない場合や値が欠けている場合は
    VersionSettings の既定値を使う。
    """

    def __init__(self, project_root: Path, settings: VersionSettings):
        self.path = project_root / settings.local_properties_path
        self.settings = settings

    def versions(self) -> FrameworkVersions:
        """
        バージョン情報を取得

        Raises:
            InvalidVersionValue: 正の整数であるべき値がそうでない場合
        """
        values: dict[str, int | str | None] = {
            "compile_sdk": self.settings.compile_sdk,
            "min_sdk": self.settings.min_sdk,
            "target_sdk": self.settings.target_sdk,
            "ndk_version": self.settings.ndk_version,
            "version_code": self.settings.version_code,
            "version_name": self.settings.version_name,
        }

        properties = load_properties(self.path) if self.path.is_file() else {}
        for key, attr in _INT_KEYS.items():
            if key in properties:
                values[attr] = self._parse_int(key, properties[key])
        for key, attr in _STR_KEYS.items():
            if properties.get(key):
                values[attr] = properties[key]

        return FrameworkVersions(**values)  # type: ignore[arg-type]

    @staticmethod
    def _parse_int(key: str, raw: str) -> int:
        # VersionSettings と同じく正の整数のみ
        try:
            value = int(raw.strip())
        except ValueError:
            raise InvalidVersionValue(key, raw) from None
        if value <= 0:
            raise InvalidVersionValue(key, raw)
        return value
