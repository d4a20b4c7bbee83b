#!/usr/bin/env python3
"""
Release Signing - Domain Layer
ドメイン層：エンティティ、例外、イベント、設定
"""

# モデルとデータ構造
from .models import (
    MASKED_SECRET,
    PROPERTY_KEYS,
    BuildPlan,
    BuildVariant,
    FrameworkVersions,
    SigningCredentials,
)

# 例外
from .errors import (
    FatalConfigMissing,
    IncompleteCredentials,
    InvalidVersionValue,
    PropertiesSyntaxError,
    SigningConfigError,
    UnknownBuildVariant,
)

# イベント（Pub/Sub）
from .events import (
    CredentialsLoadedEvent,
    MessageLevel,
    MessagePostedEvent,
    PlanBuiltEvent,
    credentials_loaded,
    message_posted,
    plan_built,
    post_message,
)

# 設定スキーマ（Pydantic）
from .settings import (
    AndroidSettings,
    AppSettings,
    Settings,
    SigningSettings,
    VersionSettings,
)

__all__ = [
    # モデル
    "MASKED_SECRET",
    "PROPERTY_KEYS",
    "BuildPlan",
    "BuildVariant",
    "FrameworkVersions",
    "SigningCredentials",
    # 例外
    "FatalConfigMissing",
    "IncompleteCredentials",
    "InvalidVersionValue",
    "PropertiesSyntaxError",
    "SigningConfigError",
    "UnknownBuildVariant",
    # イベント
    "CredentialsLoadedEvent",
    "MessageLevel",
    "MessagePostedEvent",
    "PlanBuiltEvent",
    "credentials_loaded",
    "message_posted",
    "plan_built",
    "post_message",
    # 設定
    "AndroidSettings",
    "AppSettings",
    "Settings",
    "SigningSettings",
    "VersionSettings",
]
