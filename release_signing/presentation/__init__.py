#!/usr/bin/env python3
"""
Release Signing - Presentation Layer
プレゼンテーション層：ビルドパイプライン、CLI
"""

# ビルドパイプライン
from .app import BuildConfigurator, BuildPipeline

__all__ = [
    "BuildConfigurator",
    "BuildPipeline",
]
