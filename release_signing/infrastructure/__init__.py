#!/usr/bin/env python3
"""
Release Signing - Infrastructure Layer
インフラストラクチャ層: ファイルI/O、設定読み込み、出力
"""

from .config import load_settings
from .versions import FrameworkVersionProvider, LocalPropertiesVersionProvider

__all__ = [
    "FrameworkVersionProvider",
    "LocalPropertiesVersionProvider",
    "load_settings",
]
