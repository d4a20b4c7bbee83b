#!/usr/bin/env python3
"""
Release Signing - CLI Controller
CLIアプリケーションのコントローラー層：パイプラインの実行とエラー処理
"""

import sys
import tomllib
from pathlib import Path

from colorama import Fore, Style  # type: ignore[import-untyped]
from pydantic import ValidationError

from release_signing.domain import (
    BuildPlan,
    MessageLevel,
    Settings,
    SigningConfigError,
    post_message,
)
from release_signing.infrastructure import load_settings
from release_signing.infrastructure.persistence import BuildPlanJsonExporter
from release_signing.presentation.app import BuildPipeline

from .view import CLIView

EXIT_OK = 0
EXIT_CONFIG_ERROR = 1


class CLIController:
    """
    CLIコントローラー

    責務:
    - 設定読み込みとView/Pipelineの配線
    - 構成エラーの捕捉（トップレベルで一度だけ）と終了コードへの変換
    - JSON出力
    """

    def __init__(
        self,
        project_root: Path,
        properties_path: str | None = None,
        json_path: Path | None = None,
        quiet: bool = False,
    ):
        """
        CLIControllerの初期化

        Args:
            project_root: ビルド対象プロジェクトのルート
            properties_path: 署名プロパティファイルのパス（Noneの場合は設定値）
            json_path: ビルド構成のJSON出力先（Noneの場合は出力しない）
            quiet: Trueなら警告・エラー以外の表示を抑制
        """
        self.project_root = project_root
        self.properties_path = properties_path
        self.json_path = json_path
        self.quiet = quiet

        self.view: CLIView | None = None

    def _load_settings(self) -> Settings:
        settings = load_settings(self.project_root)
        if self.properties_path is not None:
            settings.signing.properties_path = self.properties_path
        return settings

    def run(self) -> int:
        """
        パイプラインを実行

        Returns:
            終了コード（0: 成功、1: 構成エラー）
        """
        try:
            settings = self._load_settings()
        except (ValidationError, tomllib.TOMLDecodeError) as e:
            print(
                f"{Fore.RED}Invalid configuration:\n{e}{Style.RESET_ALL}",
                file=sys.stderr,
            )
            return EXIT_CONFIG_ERROR

        self.view = CLIView(settings=settings, quiet=self.quiet)
        try:
            self.view.show_banner()
            try:
                plan = BuildPipeline(self.project_root, settings).run()
            except SigningConfigError as e:
                post_message(f"Build aborted: {e}", level=MessageLevel.ERROR)
                return EXIT_CONFIG_ERROR

            if self.json_path is not None:
                self._export(plan, settings)
            return EXIT_OK
        finally:
            self.view.close()

    def _export(self, plan: BuildPlan, settings: Settings) -> None:
        assert self.json_path is not None
        saved = BuildPlanJsonExporter.save_to_file(
            plan,
            self.json_path,
            mask_secrets=settings.app.mask_secrets,
            indent=settings.app.json_indent,
        )
        post_message(f"Build plan written to {saved}", level=MessageLevel.SUCCESS)
