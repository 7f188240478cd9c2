"""Tests for the markdown/HTML formatting helpers."""

import pytest

from permstable.templates import (
    TABLE_HEADERS,
    escape,
    header_row,
    header_separator,
    html_list,
    sentence_case,
    slugify,
    table_row,
)


class TestSentenceCase:
    @pytest.mark.parametrize("label, expected", [
        ("Host Catalog", "Host catalog"),
        ("auth token", "Auth token"),
        ("X", "X"),
        ("SESSION RECORDING", "Session recording"),
    ])
    def test_only_first_character_upper(self, label, expected):
        assert sentence_case(label) == expected

    def test_empty(self):
        assert sentence_case("") == ""


class TestSlugify:
    def test_lowercases_and_hyphenates(self):
        assert slugify("Session Recording") == "session-recording"

    def test_single_word(self):
        assert slugify("Worker") == "worker"


class TestEscape:
    def test_escapes_angle_brackets(self):
        assert escape("/hosts/<id>") == "/hosts/&lt;id&gt;"

    def test_leaves_ampersands(self):
        assert escape("a & b") == "a & b"


class TestTable:
    def test_row(self):
        assert table_row(["a", "b"]) == "| a | b |"

    def test_header_row(self):
        assert header_row() == (
            "| API endpoint | Parameters into permissions engine | Available actions / examples |"
        )

    def test_separator_matches_header_lengths(self):
        cells = header_separator().strip("| ").split(" | ")
        assert [len(c) for c in cells] == [len(h) for h in TABLE_HEADERS]
        assert all(set(c) == {"-"} for c in cells)

    def test_html_list(self):
        assert html_list(["<li>a</li>", "<li>b</li>"]) == "<ul><li>a</li><li>b</li></ul>"

    def test_empty_html_list(self):
        assert html_list([]) == "<ul></ul>"
