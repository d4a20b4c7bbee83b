#!/usr/bin/env python3
"""
Release Signing - CLI Main Entry Point
CLIアプリケーションのエントリーポイント
"""

import argparse
import sys
from pathlib import Path

from colorama import init as colorama_init  # type: ignore[import-untyped]

from .controller import CLIController


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """CLI引数を解析する"""
    parser = argparse.ArgumentParser(
        prog="release-signing",
        description="Check release signing properties and print the module build plan",
    )
    parser.add_argument(
        "-C",
        "--project-root",
        type=Path,
        default=Path.cwd(),
        metavar="DIR",
        help="Project root containing key.properties (default: current directory)",
    )
    parser.add_argument(
        "-p",
        "--properties",
        type=str,
        default=None,
        metavar="PATH",
        help="Signing properties file relative to the project root",
    )
    parser.add_argument(
        "--json",
        type=Path,
        default=None,
        metavar="PATH",
        help="Write the build plan as JSON (passwords masked)",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Only print warnings and errors",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """エントリーポイント"""
    args = parse_args(argv)

    colorama_init(autoreset=True)

    controller = CLIController(
        project_root=args.project_root,
        properties_path=args.properties,
        json_path=args.json,
        quiet=args.quiet,
    )
    sys.exit(controller.run())


if __name__ == "__main__":
    main()
