#!/usr/bin/env python3
"""
Release Signing - Settings Schema
設定のスキーマ定義（Pydanticモデル）
"""

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing_extensions import Self

# ========================================
# Private Constants
# ========================================
_DEFAULT_APPLICATION_ID = "de.heartpebble.hochzeitsplaner"


# ========================================
# Signing Configuration
# ========================================
class SigningSettings(BaseSettings):
    """リリース署名設定"""

    model_config = SettingsConfigDict(env_prefix="RELEASE_SIGNING_SIGNING_")

    properties_path: str = Field(
        default="key.properties",
        description="署名プロパティファイルのパス（プロジェクトルートからの相対パス）",
    )
    release_variant: str = Field(
        default="release",
        description="リリースキーで署名するビルドバリアント名",
    )
    module_dir: str = Field(
        default="app",
        description="storeFileの相対パス解決に使うモジュールディレクトリ",
    )
    require_complete: bool = Field(
        default=False,
        description="Trueの場合、4つのキーが揃っていなければビルドを中断する",
    )


# ========================================
# Android Module Configuration
# ========================================
class AndroidSettings(BaseSettings):
    """アプリモジュール設定"""

    model_config = SettingsConfigDict(env_prefix="RELEASE_SIGNING_ANDROID_")

    namespace: str = Field(
        default=_DEFAULT_APPLICATION_ID,
        description="Kotlin/Javaのパッケージ名前空間",
    )
    application_id: str = Field(
        default=_DEFAULT_APPLICATION_ID,
        description="ストア上のアプリID（namespaceと一致しなくてよい）",
    )
    multidex_enabled: bool = Field(default=True, description="MultiDexの有効化")
    java_version: str = Field(
        default="11",
        description="sourceCompatibility / targetCompatibility / jvmTarget",
    )
    core_library_desugaring: bool = Field(
        default=True,
        description="Core Library Desugaringの有効化",
    )
    dependencies: list[str] = Field(
        default=["com.android.tools:desugar_jdk_libs:1.2.2"],
        description="モジュールの依存関係（Maven座標）",
    )
    debug_variant: str = Field(
        default="debug",
        description="デバッグキーで署名されるバリアント名",
    )
    minify_release: bool = Field(default=False, description="リリースの難読化")
    shrink_release_resources: bool = Field(
        default=False, description="リリースのリソース削減"
    )

    @model_validator(mode="after")
    def validate_shrink_requires_minify(self) -> Self:
        """リソース削減は難読化が有効な場合のみ指定可能"""
        if self.shrink_release_resources and not self.minify_release:
            raise ValueError(
                "android.shrink_release_resources requires android.minify_release"
            )
        return self


# ========================================
# Version Configuration
# ========================================
class VersionSettings(BaseSettings):
    """
    SDK・アプリバージョンの既定値

    local.properties の flutter.* 値があればそちらが優先される。
    """

    model_config = SettingsConfigDict(env_prefix="RELEASE_SIGNING_VERSIONS_")

    compile_sdk: int = Field(default=34, description="compileSdk")
    min_sdk: int = Field(default=21, description="minSdk")
    target_sdk: int = Field(default=34, description="targetSdk")
    ndk_version: str | None = Field(default=None, description="ndkVersion")
    version_code: int = Field(default=1, description="versionCode")
    version_name: str = Field(default="1.0.0", description="versionName")
    local_properties_path: str = Field(
        default="local.properties",
        description="フレームワークが生成するlocal.propertiesのパス",
    )

    @field_validator("compile_sdk", "min_sdk", "target_sdk", "version_code")
    @classmethod
    def validate_positive(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("must be a positive integer")
        return value


# ========================================
# Application Configuration
# ========================================
class AppSettings(BaseSettings):
    """CLI全体設定"""

    model_config = SettingsConfigDict(env_prefix="RELEASE_SIGNING_APP_")

    mask_secrets: bool = Field(
        default=True,
        description="出力時にパスワードをマスクするかどうか",
    )
    json_indent: int = Field(default=2, description="JSON出力のインデント幅")


# ========================================
# Main Settings Class
# ========================================
class Settings(BaseSettings):
    """
    Release Signing全体設定

    設定の読み込み優先順位（後勝ち）:
    1. デフォルト値（各Settingsクラス内）
    2. release-signing.toml（プロジェクトルート）
    3. release-signing.local.toml（プロジェクトルート）
    """

    model_config = SettingsConfigDict(env_prefix="RELEASE_SIGNING_")

    signing: SigningSettings = Field(default_factory=SigningSettings)
    android: AndroidSettings = Field(default_factory=AndroidSettings)
    versions: VersionSettings = Field(default_factory=VersionSettings)
    app: AppSettings = Field(default_factory=AppSettings)

    @model_validator(mode="after")
    def validate_distinct_variants(self) -> Self:
        """リリースバリアントとデバッグバリアントは別名でなければならない"""
        if self.signing.release_variant == self.android.debug_variant:
            raise ValueError(
                "signing.release_variant must differ from android.debug_variant"
            )
        return self
