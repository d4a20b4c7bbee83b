#!/usr/bin/env python3
"""
Release Signing - CLI View
CLIのView層：Signal購読とコンソール表示
"""

import sys

from colorama import Fore, Style  # type: ignore[import-untyped]

from release_signing import __version__
from release_signing.domain import (
    MASKED_SECRET,
    PROPERTY_KEYS,
    BuildPlan,
    CredentialsLoadedEvent,
    MessageLevel,
    MessagePostedEvent,
    PlanBuiltEvent,
    Settings,
    SigningCredentials,
    credentials_loaded,
    message_posted,
    plan_built,
)


class CLIView:
    """
    CLI View層

    責務:
    - Signalサブスクリプションとイベント駆動表示
    - ビルド構成のフォーマッティング
    """

    _LEVEL_COLORS = {
        MessageLevel.INFO: Fore.CYAN,
        MessageLevel.SUCCESS: Fore.GREEN,
        MessageLevel.WARNING: Fore.YELLOW,
        MessageLevel.ERROR: Fore.RED,
    }

    def __init__(self, settings: Settings, quiet: bool = False) -> None:
        """
        CLIViewの初期化とSignalサブスクリプション設定

        Args:
            settings: アプリケーション設定
            quiet: Trueなら警告・エラー以外を表示しない
        """
        self.settings = settings
        self.quiet = quiet

        credentials_loaded.connect(self._on_credentials_loaded)
        message_posted.connect(self._on_message_posted)
        plan_built.connect(self._on_plan_built)

    def close(self) -> None:
        """Signalサブスクリプションを解除"""
        credentials_loaded.disconnect(self._on_credentials_loaded)
        message_posted.disconnect(self._on_message_posted)
        plan_built.disconnect(self._on_plan_built)

    # ========== Signalハンドラ ==========

    def _on_credentials_loaded(
        self, _sender: object, event: CredentialsLoadedEvent
    ) -> None:
        """署名情報読み込み表示ハンドラ"""
        self._show_credentials_source(event)

    def _on_message_posted(self, _sender: object, event: MessagePostedEvent) -> None:
        """ステータスメッセージ表示ハンドラ"""
        self._show_message(event)

    def _on_plan_built(self, _sender: object, event: PlanBuiltEvent) -> None:
        """ビルド構成表示ハンドラ"""
        self._show_plan(event.plan)

    # ========== 表示 ==========

    def show_banner(self) -> None:
        """バナーを表示"""
        if self.quiet:
            return
        print(f"{Style.BRIGHT}release-signing {__version__}{Style.RESET_ALL}")

    def _show_credentials_source(self, event: CredentialsLoadedEvent) -> None:
        if self.quiet:
            return
        defined = len(PROPERTY_KEYS) - len(event.credentials.missing_fields())
        print(
            f"{Fore.CYAN}Loaded signing properties from {event.path} "
            f"({defined}/{len(PROPERTY_KEYS)} keys){Style.RESET_ALL}"
        )

    def _show_message(self, event: MessagePostedEvent) -> None:
        if self.quiet and event.level in (MessageLevel.INFO, MessageLevel.SUCCESS):
            return
        color = self._LEVEL_COLORS.get(event.level, "")
        # エラー・警告は標準エラー出力へ
        stream = (
            sys.stderr
            if event.level in (MessageLevel.ERROR, MessageLevel.WARNING)
            else sys.stdout
        )
        print(f"{color}{event.message}{Style.RESET_ALL}", file=stream)

    @staticmethod
    def _format_plain(value: str | None) -> str:
        if value is None:
            return f"{Fore.YELLOW}(unset){Style.RESET_ALL}"
        return value

    def _format_secret(self, value: str | None) -> str:
        if value is None or not self.settings.app.mask_secrets:
            return self._format_plain(value)
        return MASKED_SECRET

    def _format_credentials(self, credentials: SigningCredentials) -> list[str]:
        return [
            f"      storeFile:     {self._format_plain(credentials.store_file_path)}",
            f"      storePassword: {self._format_secret(credentials.store_password)}",
            f"      keyAlias:      {self._format_plain(credentials.key_alias)}",
            f"      keyPassword:   {self._format_secret(credentials.key_password)}",
        ]

    def _show_plan(self, plan: BuildPlan) -> None:
        if self.quiet:
            return
        versions = plan.versions
        lines = [
            f"\n{Fore.CYAN}Module{Style.RESET_ALL}",
            f"  namespace:      {plan.namespace}",
            f"  applicationId:  {plan.application_id}",
            f"  compileSdk:     {versions.compile_sdk}",
            f"  minSdk:         {versions.min_sdk}",
            f"  targetSdk:      {versions.target_sdk}",
            f"  version:        {versions.version_name} ({versions.version_code})",
        ]
        if versions.ndk_version:
            lines.append(f"  ndkVersion:     {versions.ndk_version}")
        lines.append(f"  java:           {plan.java_version}")

        lines.append(f"\n{Fore.CYAN}Variants{Style.RESET_ALL}")
        for name, variant in plan.variants.items():
            if variant.signing_profile is not None:
                lines.append(f"  {Fore.GREEN}{name}{Style.RESET_ALL}: release key")
                lines.extend(self._format_credentials(variant.signing_profile))
            elif variant.uses_debug_signing:
                lines.append(f"  {name}: debug key")
            else:
                lines.append(f"  {name}: {Fore.YELLOW}unsigned{Style.RESET_ALL}")

        if plan.dependencies:
            lines.append(f"\n{Fore.CYAN}Dependencies{Style.RESET_ALL}")
            lines.extend(f"  {dep}" for dep in plan.dependencies)

        print("\n".join(lines))
