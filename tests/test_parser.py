"""
tests/test_parser.py
Line tokenizer: comments, quoting, delimiters, duplicates.
"""

import pytest

from envlayer.parser import is_comment_line, parse_line, parse_text, unquote


class TestCommentLines:

    @pytest.mark.parametrize("line", ["# full comment", "; ini style", "// slashes",
                                      "=no key", "[section]", "\"quoted\"=x"])
    def test_non_key_start_is_comment(self, line):
        assert is_comment_line(line)
        assert parse_line(line) is None

    @pytest.mark.parametrize("line", ["KEY=1", "key=1", "_PRIVATE=1", "-dash=1", "9LIVES=1"])
    def test_key_characters_start_an_entry(self, line):
        assert not is_comment_line(line)
        assert parse_line(line) is not None

    def test_blank_lines_skipped(self):
        assert parse_line("") is None
        assert parse_line("   \t ") is None

    def test_leading_whitespace_before_comment(self):
        assert parse_line("    # indented comment") is None


class TestValues:

    def test_quoted_value_keeps_comment_marker(self):
        assert parse_line('A = "b # c"') == ("A", "b # c")

    def test_single_quotes(self):
        assert parse_line("A='x y'") == ("A", "x y")

    def test_quoted_value_is_verbatim(self):
        assert parse_line(r'A="line\nbreak"') == ("A", r"line\nbreak")
        assert parse_line('A="  padded  "') == ("A", "  padded  ")

    def test_trailing_comment_stripped(self):
        assert parse_line("B=b # trailing") == ("B", "b")

    def test_hash_without_space_starts_comment(self):
        assert parse_line("B=b#c") == ("B", "b")

    def test_only_first_equals_splits(self):
        assert parse_line("DSN=postgres://u:p@h/db?sslmode=require") == (
            "DSN", "postgres://u:p@h/db?sslmode=require")

    def test_key_and_value_trimmed(self):
        assert parse_line("  NAME   =   value   ") == ("NAME", "value")

    def test_missing_equals_gives_empty_value(self):
        assert parse_line("FLAG") == ("FLAG", "")

    def test_empty_value(self):
        assert parse_line("EMPTY=") == ("EMPTY", "")

    def test_unbalanced_quote_treated_as_bare(self):
        assert unquote('"open # rest') == '"open'

    def test_text_after_closing_quote_dropped(self):
        assert unquote("'abc' # note") == "abc"


class TestParseText:

    def test_builds_ordered_assoc(self):
        text = "# header\n\nA=1\nB=two\n\nC='three'\n"
        assoc = parse_text(text)
        assert list(assoc) == ["A", "B", "C"]
        assert assoc == {"A": "1", "B": "two", "C": "three"}

    def test_last_duplicate_wins(self):
        assert parse_text("A=first\nA=second\n") == {"A": "second"}

    def test_crlf_line_endings(self):
        assert parse_text("A=1\r\nB=2\r\n") == {"A": "1", "B": "2"}

    def test_only_newline_ends_a_line(self):
        text = "MSG=hello\u2028world\nFEED=a\x0cb\nNEXT=1\n"
        assert parse_text(text) == {"MSG": "hello\u2028world", "FEED": "a\x0cb", "NEXT": "1"}
