#!/usr/bin/env python3
"""
Release Signing - Build Pipeline
プレゼンテーション層：署名前提条件の検査とビルドバリアントの構成
"""

from pathlib import Path

from release_signing.domain import (
    AndroidSettings,
    BuildPlan,
    BuildVariant,
    IncompleteCredentials,
    MessageLevel,
    PlanBuiltEvent,
    Settings,
    SigningCredentials,
    UnknownBuildVariant,
    plan_built,
    post_message,
)
from release_signing.infrastructure import (
    FrameworkVersionProvider,
    LocalPropertiesVersionProvider,
)
from release_signing.infrastructure.signing import SigningConfigLoader


class BuildConfigurator:
    """
    ビルドバリアントの構成

    責務:
    - debug / release バリアントの生成
    - 指定バリアントへの署名プロファイル付与
    """

    def __init__(self, settings: AndroidSettings, release_variant: str):
        """
        Args:
            settings: モジュール設定
            release_variant: リリースキーで署名するバリアント名
        """
        self.settings = settings
        self.variants: dict[str, BuildVariant] = {
            # debugは自動的にデバッグキーで署名される
            settings.debug_variant: BuildVariant(
                name=settings.debug_variant, uses_debug_signing=True
            ),
            release_variant: BuildVariant(
                name=release_variant,
                minify_enabled=settings.minify_release,
                shrink_resources=settings.shrink_release_resources,
            ),
        }

    def attach_signing_profile(
        self, variant_name: str, credentials: SigningCredentials
    ) -> BuildVariant:
        """
        バリアントに署名プロファイルを付与する

        Raises:
            UnknownBuildVariant: バリアントが存在しない場合
        """
        variant = self.variants.get(variant_name)
        if variant is None:
            raise UnknownBuildVariant(variant_name, list(self.variants))
        variant.signing_profile = credentials
        variant.uses_debug_signing = False
        return variant


class BuildPipeline:
    """
    ビルド構成パイプライン

    責務:
    - 署名プロパティの存在確認（最初に1回だけ実行し、欠落時は即時中断）
    - フレームワークバージョンの取得
    - バリアント構成と署名プロファイルの付与

    Note:
    - FatalConfigMissing はここでは捕捉しない（CLIのトップレベルで処理）
    """

    def __init__(
        self,
        project_root: Path,
        settings: Settings,
        version_provider: FrameworkVersionProvider | None = None,
    ):
        """
        Args:
            project_root: ビルド対象プロジェクトのルート
            settings: アプリケーション設定
            version_provider: バージョン供給元（Noneの場合はlocal.propertiesを使用）
        """
        self.project_root = project_root
        self.settings = settings
        self.version_provider = version_provider or LocalPropertiesVersionProvider(
            project_root, settings.versions
        )

    @property
    def properties_path(self) -> Path:
        """署名プロパティファイルのパス"""
        return self.project_root / self.settings.signing.properties_path

    def run(self) -> BuildPlan:
        """
        ビルド構成を評価する

        Returns:
            BuildPlan

        Raises:
            FatalConfigMissing: 署名プロパティファイルが存在しない場合
            IncompleteCredentials: signing.require_complete有効時にキーが不足する場合
        """
        signing = self.settings.signing

        # 1. 前提条件（他の構成より先に評価する）
        credentials = SigningConfigLoader.load(self.properties_path)
        if signing.require_complete and not credentials.is_complete:
            raise IncompleteCredentials(
                self.properties_path, credentials.missing_fields()
            )

        # 2. フレームワークバージョン
        versions = self.version_provider.versions()

        # 3. バリアント構成
        configurator = BuildConfigurator(
            self.settings.android, release_variant=signing.release_variant
        )
        configurator.attach_signing_profile(signing.release_variant, credentials)

        keystore = credentials.resolve_store_file(
            self.project_root / signing.module_dir
        )
        if keystore is not None and not keystore.is_file():
            post_message(
                f"Keystore not found at {keystore}", level=MessageLevel.WARNING
            )

        android = self.settings.android
        plan = BuildPlan(
            namespace=android.namespace,
            application_id=android.application_id,
            versions=versions,
            multidex_enabled=android.multidex_enabled,
            java_version=android.java_version,
            core_library_desugaring=android.core_library_desugaring,
            dependencies=list(android.dependencies),
            variants=configurator.variants,
        )

        post_message(
            f"Build configured: {signing.release_variant} is signed with "
            f"{self.properties_path.name}",
            level=MessageLevel.SUCCESS,
        )
        plan_built.send(self, event=PlanBuiltEvent(plan=plan))
        return plan
