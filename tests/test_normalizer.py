"""Tests for query text normalization."""

import pytest

from esqldiag.lexer import NEWLINE_CHARACTERS, is_newline
from esqldiag.normalizer import normalize


def test_tab_and_nul_become_single_space():
    assert normalize("SELECT\t*\x00FROM X") == "SELECT * FROM X"


def test_control_characters_keep_line_count():
    source = "SELECT\t*\nFROM\x00X\nWHERE\x07Y = 1"
    assert len(normalize(source).split("\n")) == len(source.split("\n"))


@pytest.mark.parametrize("terminator", sorted(NEWLINE_CHARACTERS))
def test_lexer_line_terminators_become_line_feed(terminator):
    assert is_newline(terminator)
    assert normalize(f"a{terminator}b") == "a\nb"


@pytest.mark.parametrize("c", ["\x0b", "\x0c", "\xa0", "\u3000", "\x1f"])
def test_other_whitespace_and_controls_become_space(c):
    assert normalize(f"a{c}b") == "a b"


def test_carriage_return_is_kept():
    assert normalize("a\r\nb") == "a\r\nb"
    assert not is_newline("\r")


def test_trailing_line_feeds_trimmed():
    assert normalize("SELECT 1\n\n\n") == "SELECT 1"
    assert normalize("SELECT 1\x85") == "SELECT 1"


def test_trailing_carriage_return_survives():
    # Only line feeds are trimmed; a CR before the final LF stays.
    assert normalize("SELECT 1\r\n") == "SELECT 1\r"


def test_length_preserved_without_trailing_terminators():
    source = "SELECT\tp.Name,\x00p.Price\u2028FROM Products"
    assert len(normalize(source)) == len(source)


def test_non_ascii_text_unchanged():
    assert normalize("SELECT 'Straße' FROM Ürün") == "SELECT 'Straße' FROM Ürün"


def test_empty_text():
    assert normalize("") == ""
    assert normalize("\n\n") == ""


def test_idempotent(example_file):
    once = normalize(example_file.read_bytes().decode("utf-8"))
    assert normalize(once) == once
