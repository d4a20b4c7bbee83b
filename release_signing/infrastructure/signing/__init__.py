#!/usr/bin/env python3
"""
Release Signing - Signing Infrastructure
署名情報の読み込み
"""

from .loader import SigningConfigLoader

__all__ = [
    "SigningConfigLoader",
]
