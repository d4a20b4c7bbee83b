#!/usr/bin/env python3
"""
Release Signing - Package Entry Point
python -m release_signing で実行
"""

from release_signing.presentation.cli import main

if __name__ == "__main__":
    main()
