"""parse_propertiesのテスト"""

from pathlib import Path

import pytest

from release_signing.domain import PropertiesSyntaxError
from release_signing.infrastructure.properties import load_properties, parse_properties


class TestBasicEntries:
    """基本的な key=value の解析"""

    def test_parses_equals_separator(self) -> None:
        """'=' 区切りを解析する"""
        assert parse_properties("keyAlias=upload") == {"keyAlias": "upload"}

    def test_parses_colon_separator(self) -> None:
        """':' 区切りを解析する"""
        assert parse_properties("keyAlias: upload") == {"keyAlias": "upload"}

    def test_parses_whitespace_separator(self) -> None:
        """空白区切りを解析する"""
        assert parse_properties("keyAlias   upload") == {"keyAlias": "upload"}

    def test_whitespace_around_separator_is_skipped(self) -> None:
        """区切り前後の空白は読み飛ばす"""
        assert parse_properties("  keyAlias  =  upload") == {"keyAlias": "upload"}

    def test_trailing_whitespace_in_value_is_kept(self) -> None:
        """値の末尾空白は保持する"""
        assert parse_properties("storePassword=secret  ") == {
            "storePassword": "secret  "
        }

    def test_value_may_contain_separators(self) -> None:
        """値の中の '=' や ':' はそのまま"""
        assert parse_properties("storeFile=C:/keys/a=b.jks") == {
            "storeFile": "C:/keys/a=b.jks"
        }

    def test_key_without_value(self) -> None:
        """値のないキーは空文字列"""
        assert parse_properties("keyPassword") == {"keyPassword": ""}
        assert parse_properties("keyPassword=") == {"keyPassword": ""}


class TestCommentsAndBlankLines:
    """コメント行と空行"""

    def test_ignores_hash_and_bang_comments(self) -> None:
        """'#' と '!' で始まる行は無視する"""
        text = "# comment\nkeyAlias=a\n! another\n   # indented\nkeyPassword=b\n"
        assert parse_properties(text) == {"keyAlias": "a", "keyPassword": "b"}

    def test_ignores_blank_lines(self) -> None:
        """空行は無視する"""
        assert parse_properties("\n\n  \nkeyAlias=a\n\n") == {"keyAlias": "a"}

    def test_hash_inside_value_is_not_a_comment(self) -> None:
        """値の途中の '#' はコメントではない"""
        assert parse_properties("storePassword=abc#123") == {
            "storePassword": "abc#123"
        }

    def test_comment_line_does_not_continue(self) -> None:
        """コメント行末のバックスラッシュは継続しない"""
        assert parse_properties("# comment \\\nkeyAlias=a") == {"keyAlias": "a"}


class TestDuplicates:
    """重複キー"""

    def test_last_value_wins(self) -> None:
        """後に出現した値が優先される"""
        assert parse_properties("keyAlias=a\nkeyAlias=b\n") == {"keyAlias": "b"}


class TestContinuationAndEscapes:
    """行継続とエスケープ"""

    def test_line_continuation(self) -> None:
        """奇数個のバックスラッシュで次の行へ継続する"""
        text = "storeFile=../app/\\\n    release.jks\n"
        assert parse_properties(text) == {"storeFile": "../app/release.jks"}

    def test_escaped_backslash_does_not_continue(self) -> None:
        """偶数個のバックスラッシュは継続しない"""
        text = "storeFile=C:\\\\\nkeyAlias=a"
        assert parse_properties(text) == {"storeFile": "C:\\", "keyAlias": "a"}

    def test_continuation_at_end_of_file(self) -> None:
        """ファイル末尾の継続記号は捨てる"""
        assert parse_properties("keyAlias=a\\") == {"keyAlias": "a"}

    def test_simple_escapes(self) -> None:
        """\\t \\n などを展開する"""
        assert parse_properties("k=a\\tb\\nc\\qd") == {"k": "a\tb\nc" + "qd"}

    def test_unicode_escape(self) -> None:
        """\\uXXXX を展開する"""
        assert parse_properties("keyAlias=\\u00e9t\\u00E9") == {"keyAlias": "été"}

    def test_escaped_separator_in_key(self) -> None:
        """エスケープされた区切り文字はキーの一部"""
        assert parse_properties("my\\=key=value") == {"my=key": "value"}
        assert parse_properties("my\\ key value") == {"my key": "value"}

    def test_malformed_unicode_escape_raises(self) -> None:
        """不正な \\u エスケープは行番号付きで失敗する"""
        with pytest.raises(PropertiesSyntaxError) as exc_info:
            parse_properties("keyAlias=a\nkeyPassword=\\u12zz\n")
        assert exc_info.value.line_number == 2

    def test_crlf_line_endings(self) -> None:
        """CRLF改行を扱える"""
        assert parse_properties("keyAlias=a\r\nkeyPassword=b\r\n") == {
            "keyAlias": "a",
            "keyPassword": "b",
        }


class TestLoadProperties:
    """ファイルからの読み込み"""

    def test_reads_utf8_file(self, tmp_path: Path) -> None:
        """UTF-8ファイルを読み込む"""
        path = tmp_path / "key.properties"
        path.write_text("keyAlias=schlüssel\n", encoding="utf-8")
        assert load_properties(path) == {"keyAlias": "schlüssel"}

    def test_undecodable_bytes_are_replaced(self, tmp_path: Path) -> None:
        """デコードできないバイトは置換文字になる"""
        path = tmp_path / "key.properties"
        path.write_bytes(b"keyAlias=a\xffb\n")
        assert load_properties(path) == {"keyAlias": "a\ufffdb"}
