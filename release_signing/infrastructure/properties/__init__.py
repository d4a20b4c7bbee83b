#!/usr/bin/env python3
"""
Release Signing - Properties Infrastructure
.propertiesファイルの読み込み
"""

from .parser import load_properties, parse_properties

__all__ = [
    "load_properties",
    "parse_properties",
]
