#!/usr/bin/env python3
"""
Release Signing - Persistence Infrastructure
永続化層：ビルド構成の出力
"""

from .json_exporter import BuildPlanJsonExporter

__all__ = [
    "BuildPlanJsonExporter",
]
