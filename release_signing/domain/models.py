#!/usr/bin/env python3
"""
Release Signing - Domain Models
ドメイン層：署名情報とビルド構成のエンティティ（外部依存なし）
"""

import os
from dataclasses import dataclass, field
from pathlib import Path

# key.properties のキー名 → SigningCredentials のフィールド名
PROPERTY_KEYS: dict[str, str] = {
    "storeFile": "store_file_path",
    "storePassword": "store_password",
    "keyAlias": "key_alias",
    "keyPassword": "key_password",
}

MASKED_SECRET = "********"


@dataclass(frozen=True)
class SigningCredentials:
    """
    リリース署名に必要な情報

    key.properties が存在する場合のみ生成される。
    各フィールドは未設定（None）を許容する（検証は下流の署名処理に委ねる）。
    """

    store_file_path: str | None = None
    store_password: str | None = None
    key_alias: str | None = None
    key_password: str | None = None

    def missing_fields(self) -> list[str]:
        """未設定のプロパティキー名を返す（key.properties表記）"""
        return [
            key
            for key, attr in PROPERTY_KEYS.items()
            if getattr(self, attr) is None
        ]

    @property
    def is_complete(self) -> bool:
        """全フィールドが設定済みかどうか"""
        return not self.missing_fields()

    def resolve_store_file(self, base_dir: Path) -> Path | None:
        """
        キーストアのパスを解決する

        Args:
            base_dir: 相対パスの基準ディレクトリ（モジュールディレクトリ）

        Returns:
            解決済みパス（storeFile未設定の場合はNone）
        """
        if self.store_file_path is None:
            return None
        expanded = os.path.expanduser(os.path.expandvars(self.store_file_path))
        return (base_dir / expanded).resolve()

    def __repr__(self) -> str:
        def _mask(value: str | None) -> str:
            return "None" if value is None else repr(MASKED_SECRET)

        return (
            f"SigningCredentials(store_file_path={self.store_file_path!r}, "
            f"store_password={_mask(self.store_password)}, "
            f"key_alias={self.key_alias!r}, "
            f"key_password={_mask(self.key_password)})"
        )


@dataclass(frozen=True)
class FrameworkVersions:
    """フレームワークから提供されるSDK・アプリバージョン情報"""

    compile_sdk: int
    min_sdk: int
    target_sdk: int
    version_code: int
    version_name: str
    ndk_version: str | None = None


@dataclass
class BuildVariant:
    """ビルドバリアント（debug / release）"""

    name: str
    signing_profile: SigningCredentials | None = None
    uses_debug_signing: bool = False
    minify_enabled: bool = False
    shrink_resources: bool = False

    @property
    def is_signed_with_release_key(self) -> bool:
        """リリースキーで署名されるかどうか"""
        return self.signing_profile is not None


@dataclass
class BuildPlan:
    """
    アプリモジュールのビルド構成

    BuildPipeline.run() の成果物。署名ステップ以前の全設定を保持する。
    """

    namespace: str
    application_id: str
    versions: FrameworkVersions
    multidex_enabled: bool
    java_version: str
    core_library_desugaring: bool
    dependencies: list[str] = field(default_factory=list)
    variants: dict[str, BuildVariant] = field(default_factory=dict)

    def get_variant(self, name: str) -> BuildVariant | None:
        """バリアントを名前で取得"""
        return self.variants.get(name)

    def signed_variants(self) -> list[str]:
        """リリースキーで署名されるバリアント名一覧"""
        return [
            name
            for name, variant in self.variants.items()
            if variant.is_signed_with_release_key
        ]

