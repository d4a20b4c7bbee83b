#!/usr/bin/env python3
"""
Release Signing - Events (Pub/Sub)
ドメイン層: 各コンポーネントからの通知を表示層へ伝える
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path

from blinker import Signal

from .models import BuildPlan, SigningCredentials

# ========================================
# イベント名定数
# ========================================
EVENT_CREDENTIALS_LOADED = "credentials_loaded"
EVENT_PLAN_BUILT = "plan_built"
EVENT_MESSAGE_POSTED = "message_posted"


# ========================================
# イベント型定義
# ========================================


class MessageLevel(str, Enum):
    """メッセージレベル"""

    INFO = "info"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class CredentialsLoadedEvent:
    """
    署名情報読み込み完了イベント

    key.properties の読み込みに成功した際に発行される。
    """

    path: Path  # 読み込んだプロパティファイル
    credentials: SigningCredentials


@dataclass(frozen=True)
class PlanBuiltEvent:
    """
    ビルド構成完了イベント

    全バリアントの構成が完了した際に発行される。
    """

    plan: BuildPlan


@dataclass(frozen=True)
class MessagePostedEvent:
    """
    メッセージ投稿イベント

    ユーザーへの通知メッセージを表示する際に発行される。
    timestampは省略時に自動的に現在時刻が設定される。
    """

    message: str
    level: MessageLevel
    timestamp: datetime = field(default_factory=datetime.now)


Event = CredentialsLoadedEvent | PlanBuiltEvent | MessagePostedEvent


# ========================================
# グローバルシグナル定義
# ========================================
credentials_loaded = Signal(EVENT_CREDENTIALS_LOADED)  # CredentialsLoadedEvent
plan_built = Signal(EVENT_PLAN_BUILT)  # PlanBuiltEvent
message_posted = Signal(EVENT_MESSAGE_POSTED)  # MessagePostedEvent


def post_message(message: str, level: MessageLevel = MessageLevel.INFO) -> None:
    """message_postedシグナルを発行するショートカット"""
    message_posted.send(None, event=MessagePostedEvent(message=message, level=level))
