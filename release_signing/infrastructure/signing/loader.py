#!/usr/bin/env python3
"""
Release Signing - Signing Config Loader
インフラ層：key.properties から署名情報を読み込む
"""

from pathlib import Path

from release_signing.domain import (
    PROPERTY_KEYS,
    CredentialsLoadedEvent,
    FatalConfigMissing,
    MessageLevel,
    SigningCredentials,
    credentials_loaded,
    post_message,
)
from release_signing.infrastructure.properties import load_properties


class SigningConfigLoader:
    """
    署名プロパティファイルのローダー

    責務:
    - ファイルの存在確認（存在しなければ FatalConfigMissing で即時中断）
    - key=value 形式の解析
    - 既知の4キーを SigningCredentials へ写像
    - 読み込み完了を credentials_loaded で通知

    Note:
    - 個別のキー欠落はエラーにしない（警告メッセージのみ）
    - ファイルを書き換えることはない
    """

    @staticmethod
    def load(path: Path) -> SigningCredentials:
        """
        署名情報を読み込む

        Args:
            path: プロパティファイルのパス

        Returns:
            SigningCredentials

        Raises:
            FatalConfigMissing: ファイルが存在しない場合
            PropertiesSyntaxError: ファイルの構文が不正な場合
        """
        if not path.is_file():
            raise FatalConfigMissing(path)

        properties = load_properties(path)
        credentials = SigningCredentials(
            **{attr: properties.get(key) for key, attr in PROPERTY_KEYS.items()}
        )

        missing = credentials.missing_fields()
        if missing:
            post_message(
                f"{path} does not define: {', '.join(missing)}",
                level=MessageLevel.WARNING,
            )

        credentials_loaded.send(
            None, event=CredentialsLoadedEvent(path=path, credentials=credentials)
        )
        return credentials
