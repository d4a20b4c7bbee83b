#!/usr/bin/env python3
"""
Release Signing - Properties Parser
インフラ層：行指向の key=value 形式（.properties）の読み込み
"""

import re
from collections.abc import Iterator
from pathlib import Path

from release_signing.domain import PropertiesSyntaxError

_LINE_BREAK_PATTERN = re.compile(r"\r\n|\r|\n")
_WHITESPACE = " \t\f"
_SEPARATORS = "=:"
_COMMENT_MARKERS = "#!"
_SIMPLE_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}


def _ends_with_continuation(line: str) -> bool:
    """行末のバックスラッシュが奇数個なら次の行へ継続する"""
    trailing = len(line) - len(line.rstrip("\\"))
    return trailing % 2 == 1


def _logical_lines(text: str) -> Iterator[tuple[int, str]]:
    """
    物理行を論理行にまとめる

    Yields:
        (開始行番号, 論理行) のタプル。空行とコメント行は除外される。
    """
    physical = _LINE_BREAK_PATTERN.split(text)
    index = 0
    while index < len(physical):
        start_line = index + 1
        line = physical[index].lstrip(_WHITESPACE)
        index += 1

        if not line or line[0] in _COMMENT_MARKERS:
            continue

        while _ends_with_continuation(line):
            line = line[:-1]
            if index >= len(physical):
                break
            line += physical[index].lstrip(_WHITESPACE)
            index += 1

        yield start_line, line


def _unescape(raw: str, line_number: int) -> str:
    """バックスラッシュエスケープを展開する"""
    if "\\" not in raw:
        return raw

    chars: list[str] = []
    i = 0
    while i < len(raw):
        ch = raw[i]
        if ch != "\\" or i + 1 >= len(raw):
            chars.append(ch)
            i += 1
            continue

        escaped = raw[i + 1]
        if escaped == "u":
            digits = raw[i + 2 : i + 6]
            if len(digits) != 4 or not all(
                c in "0123456789abcdefABCDEF" for c in digits
            ):
                raise PropertiesSyntaxError(
                    "Malformed \\uxxxx encoding", line_number
                )
            chars.append(chr(int(digits, 16)))
            i += 6
        else:
            chars.append(_SIMPLE_ESCAPES.get(escaped, escaped))
            i += 2
    return "".join(chars)


def _split_entry(line: str) -> tuple[str, str]:
    """
    論理行をキーと値の生文字列に分割する

    区切りは最初のエスケープされていない '='、':'、または空白。
    区切り前後の空白は読み飛ばす。
    """
    key_end = len(line)
    value_start = len(line)
    has_separator = False
    i = 0
    while i < len(line):
        ch = line[i]
        if ch == "\\":
            i += 2
            continue
        if ch in _SEPARATORS:
            key_end = i
            value_start = i + 1
            has_separator = True
            break
        if ch in _WHITESPACE:
            key_end = i
            value_start = i + 1
            break
        i += 1

    while value_start < len(line) and line[value_start] in _WHITESPACE:
        value_start += 1
    if (
        not has_separator
        and value_start < len(line)
        and line[value_start] in _SEPARATORS
    ):
        value_start += 1
        while value_start < len(line) and line[value_start] in _WHITESPACE:
            value_start += 1

    return line[:key_end], line[value_start:]


def parse_properties(text: str) -> dict[str, str]:
    """
    .properties形式のテキストを辞書に変換する

    Args:
        text: ファイル内容

    Returns:
        キー → 値の辞書（重複キーは後勝ち、出現順を保持）

    Raises:
        PropertiesSyntaxError: 不正な \\uXXXX エスケープ
    """
    properties: dict[str, str] = {}
    for line_number, line in _logical_lines(text):
        raw_key, raw_value = _split_entry(line)
        key = _unescape(raw_key, line_number)
        # 後勝ち（再挿入で出現順も最後の位置に揃える）
        properties.pop(key, None)
        properties[key] = _unescape(raw_value, line_number)
    return properties


def load_properties(path: Path) -> dict[str, str]:
    """
    .propertiesファイルを読み込む（UTF-8、デコード不能なバイトは置換）

    Args:
        path: ファイルパス

    Returns:
        キー → 値の辞書
    """
    with path.open("r", encoding="utf-8", errors="replace") as f:
        return parse_properties(f.read())
