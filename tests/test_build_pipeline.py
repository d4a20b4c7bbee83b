"""BuildPipeline / BuildConfiguratorのテスト"""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from release_signing.domain import (
    AndroidSettings,
    FatalConfigMissing,
    FrameworkVersions,
    IncompleteCredentials,
    MessageLevel,
    MessagePostedEvent,
    PlanBuiltEvent,
    Settings,
    SigningCredentials,
    SigningSettings,
    UnknownBuildVariant,
    message_posted,
    plan_built,
)
from release_signing.presentation import BuildConfigurator, BuildPipeline

FULL_PROPERTIES = (
    "storePassword=store-secret\n"
    "keyPassword=key-secret\n"
    "keyAlias=my-key-alias\n"
    "storeFile=../app/my-release-key.jks\n"
)


@pytest.fixture
def versions() -> FrameworkVersions:
    return FrameworkVersions(
        compile_sdk=34, min_sdk=21, target_sdk=34, version_code=3, version_name="1.0.0"
    )


@pytest.fixture
def version_provider(versions: FrameworkVersions) -> MagicMock:
    """固定値を返すバージョン供給元のモック"""
    provider = MagicMock()
    provider.versions.return_value = versions
    return provider


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """key.propertiesとキーストアを持つプロジェクト"""
    (tmp_path / "key.properties").write_text(FULL_PROPERTIES, encoding="utf-8")
    (tmp_path / "app").mkdir()
    (tmp_path / "app" / "my-release-key.jks").write_bytes(b"keystore")
    return tmp_path


@pytest.fixture
def posted_messages():
    events: list[MessagePostedEvent] = []

    def _collect(_sender: object, event: MessagePostedEvent) -> None:
        events.append(event)

    message_posted.connect(_collect)
    yield events
    message_posted.disconnect(_collect)


class TestFailFast:
    """key.propertiesが存在しない場合"""

    def test_raises_before_versions_are_evaluated(
        self, tmp_path: Path, version_provider: MagicMock
    ) -> None:
        """バージョン取得より前に中断する"""
        pipeline = BuildPipeline(tmp_path, Settings(), version_provider)
        with pytest.raises(FatalConfigMissing) as exc_info:
            pipeline.run()
        assert exc_info.value.path == tmp_path / "key.properties"
        version_provider.versions.assert_not_called()

    def test_no_plan_is_published(
        self, tmp_path: Path, version_provider: MagicMock
    ) -> None:
        """構成完了シグナルは発行されない"""
        received: list[PlanBuiltEvent] = []

        def _collect(_sender: object, event: PlanBuiltEvent) -> None:
            received.append(event)

        plan_built.connect(_collect)
        try:
            with pytest.raises(FatalConfigMissing):
                BuildPipeline(tmp_path, Settings(), version_provider).run()
        finally:
            plan_built.disconnect(_collect)
        assert received == []

    def test_custom_properties_path(
        self, project_root: Path, version_provider: MagicMock
    ) -> None:
        """設定されたパスが存在しなければ中断する"""
        settings = Settings(
            signing=SigningSettings(properties_path="android/key.properties")
        )
        with pytest.raises(FatalConfigMissing) as exc_info:
            BuildPipeline(project_root, settings, version_provider).run()
        assert exc_info.value.path == project_root / "android" / "key.properties"


class TestVariants:
    """バリアント構成"""

    def test_only_release_is_signed(
        self, project_root: Path, version_provider: MagicMock
    ) -> None:
        """リリースキーで署名されるのはreleaseのみ"""
        plan = BuildPipeline(project_root, Settings(), version_provider).run()
        assert plan.signed_variants() == ["release"]

        release = plan.get_variant("release")
        assert release is not None
        assert release.signing_profile == SigningCredentials(
            store_file_path="../app/my-release-key.jks",
            store_password="store-secret",
            key_alias="my-key-alias",
            key_password="key-secret",
        )
        assert release.minify_enabled is False
        assert release.shrink_resources is False

    def test_debug_uses_debug_signing(
        self, project_root: Path, version_provider: MagicMock
    ) -> None:
        """debugはデバッグキーで署名される"""
        plan = BuildPipeline(project_root, Settings(), version_provider).run()
        debug = plan.get_variant("debug")
        assert debug is not None
        assert debug.uses_debug_signing is True
        assert debug.signing_profile is None

    def test_plan_carries_module_settings(
        self,
        project_root: Path,
        version_provider: MagicMock,
        versions: FrameworkVersions,
    ) -> None:
        """モジュール設定とバージョンが構成に反映される"""
        plan = BuildPipeline(project_root, Settings(), version_provider).run()
        assert plan.versions == versions
        assert plan.multidex_enabled is True
        assert plan.java_version == "11"
        assert plan.core_library_desugaring is True
        assert plan.dependencies == ["com.android.tools:desugar_jdk_libs:1.2.2"]

    def test_custom_release_variant_name(
        self, project_root: Path, version_provider: MagicMock
    ) -> None:
        """リリースバリアント名は設定で変更できる"""
        settings = Settings(signing=SigningSettings(release_variant="production"))
        plan = BuildPipeline(project_root, settings, version_provider).run()
        assert plan.signed_variants() == ["production"]


class TestPartialCredentials:
    """キー欠落時の挙動"""

    def test_tolerated_by_default(
        self, tmp_path: Path, version_provider: MagicMock
    ) -> None:
        """既定では欠落キーがあっても構成は完了する"""
        (tmp_path / "key.properties").write_text("keyAlias=foo\n", encoding="utf-8")
        plan = BuildPipeline(tmp_path, Settings(), version_provider).run()
        release = plan.get_variant("release")
        assert release is not None
        assert release.signing_profile == SigningCredentials(key_alias="foo")

    def test_rejected_when_require_complete(
        self, tmp_path: Path, version_provider: MagicMock
    ) -> None:
        """require_complete有効時はIncompleteCredentials"""
        (tmp_path / "key.properties").write_text("keyAlias=foo\n", encoding="utf-8")
        settings = Settings(signing=SigningSettings(require_complete=True))
        with pytest.raises(IncompleteCredentials) as exc_info:
            BuildPipeline(tmp_path, settings, version_provider).run()
        assert exc_info.value.missing == ["storeFile", "storePassword", "keyPassword"]
        version_provider.versions.assert_not_called()


class TestKeystoreWarning:
    """キーストアの存在確認"""

    def test_warns_when_keystore_missing(
        self,
        tmp_path: Path,
        version_provider: MagicMock,
        posted_messages: list[MessagePostedEvent],
    ) -> None:
        """キーストアが見つからなければ警告する"""
        (tmp_path / "key.properties").write_text(FULL_PROPERTIES, encoding="utf-8")
        BuildPipeline(tmp_path, Settings(), version_provider).run()
        warnings = [e for e in posted_messages if e.level == MessageLevel.WARNING]
        assert any("Keystore not found" in e.message for e in warnings)

    def test_no_warning_when_keystore_exists(
        self,
        project_root: Path,
        version_provider: MagicMock,
        posted_messages: list[MessagePostedEvent],
    ) -> None:
        """キーストアが存在すれば警告しない"""
        BuildPipeline(project_root, Settings(), version_provider).run()
        assert not [e for e in posted_messages if e.level == MessageLevel.WARNING]


class TestBuildConfigurator:
    """BuildConfigurator単体"""

    def test_attach_to_unknown_variant_raises(self) -> None:
        """未定義バリアントへの付与はUnknownBuildVariant"""
        configurator = BuildConfigurator(AndroidSettings(), release_variant="release")
        with pytest.raises(UnknownBuildVariant):
            configurator.attach_signing_profile("staging", SigningCredentials())

    def test_attach_replaces_debug_signing(self) -> None:
        """署名プロファイルを付与するとデバッグ署名は解除される"""
        configurator = BuildConfigurator(AndroidSettings(), release_variant="release")
        variant = configurator.attach_signing_profile(
            "debug", SigningCredentials(key_alias="a")
        )
        assert variant.uses_debug_signing is False
        assert variant.is_signed_with_release_key
