#!/usr/bin/env python3
"""
Release Signing - JSON Exporter
インフラ層：ビルド構成のJSON出力
"""

import json
from datetime import datetime
from pathlib import Path
from typing import Any

from release_signing.domain import MASKED_SECRET, BuildPlan, SigningCredentials


class BuildPlanJsonExporter:
    """
    BuildPlanをJSON形式で出力

    責務:
    - ビルド構成のシリアライズ（パスワードはマスク）
    - ファイルシステムへの保存
    """

    @staticmethod
    def _mask(value: str | None, mask_secrets: bool) -> str | None:
        if value is None or not mask_secrets:
            return value
        return MASKED_SECRET

    @classmethod
    def credentials_to_dict(
        cls, credentials: SigningCredentials, mask_secrets: bool = True
    ) -> dict[str, Any]:
        """署名情報をdictに変換（key.properties表記のキー名）"""
        return {
            "storeFile": credentials.store_file_path,
            "storePassword": cls._mask(credentials.store_password, mask_secrets),
            "keyAlias": credentials.key_alias,
            "keyPassword": cls._mask(credentials.key_password, mask_secrets),
        }

    @classmethod
    def to_dict(cls, plan: BuildPlan, mask_secrets: bool = True) -> dict[str, Any]:
        """
        BuildPlanをdictに変換

        Args:
            plan: 変換するビルド構成
            mask_secrets: パスワードをマスクするかどうか

        Returns:
            JSONシリアライズ可能なdict
        """
        versions = plan.versions
        variants_dict = {}
        for name, variant in plan.variants.items():
            variants_dict[name] = {
                "uses_debug_signing": variant.uses_debug_signing,
                "minify_enabled": variant.minify_enabled,
                "shrink_resources": variant.shrink_resources,
                "signing_profile": (
                    cls.credentials_to_dict(variant.signing_profile, mask_secrets)
                    if variant.signing_profile is not None
                    else None
                ),
            }

        return {
            "generated_at": datetime.now().isoformat(),
            "namespace": plan.namespace,
            "application_id": plan.application_id,
            "versions": {
                "compile_sdk": versions.compile_sdk,
                "min_sdk": versions.min_sdk,
                "target_sdk": versions.target_sdk,
                "ndk_version": versions.ndk_version,
                "version_code": versions.version_code,
                "version_name": versions.version_name,
            },
            "multidex_enabled": plan.multidex_enabled,
            "java_version": plan.java_version,
            "core_library_desugaring": plan.core_library_desugaring,
            "dependencies": list(plan.dependencies),
            "variants": variants_dict,
        }

    @classmethod
    def save_to_file(
        cls,
        plan: BuildPlan,
        output_path: Path,
        mask_secrets: bool = True,
        indent: int = 2,
    ) -> Path:
        """
        ビルド構成をJSONファイルに保存

        Args:
            plan: 保存するビルド構成
            output_path: 出力先パス
            mask_secrets: パスワードをマスクするかどうか
            indent: インデント幅

        Returns:
            Path: 保存されたファイルのパス
        """
        output_data = cls.to_dict(plan, mask_secrets=mask_secrets)
        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(output_data, f, ensure_ascii=False, indent=indent)
        return output_path
