"""Tests for Base64 alphabets."""

from __future__ import annotations

import string

import pytest

from b64codec.alphabet import STANDARD, URL_SAFE, Alphabet

BASE = string.ascii_uppercase + string.ascii_lowercase + string.digits


def test_standard_alphabet_symbols() -> None:
    """Test that the standard alphabet ends with + and /."""
    assert STANDARD.symbols == BASE + "+/"
    assert STANDARD.padding == "="


def test_url_safe_alphabet_symbols() -> None:
    """Test that the URL-safe alphabet differs only at indices 62 and 63."""
    assert URL_SAFE.symbols[:62] == STANDARD.symbols[:62]
    assert URL_SAFE.symbol(62) == "-"
    assert URL_SAFE.symbol(63) == "_"
    assert URL_SAFE.padding == "="


def test_reverse_lookup() -> None:
    """Test that index_of inverts symbol for every value."""
    for alphabet in (STANDARD, URL_SAFE):
        for index in range(64):
            assert alphabet.index_of(alphabet.symbol(index)) == index


def test_padding_and_foreign_characters_are_not_symbols() -> None:
    """Test that padding and other alphabet's extras are not members."""
    assert STANDARD.index_of("=") is None
    assert "=" not in STANDARD
    assert "-" not in STANDARD
    assert "_" not in STANDARD
    assert "+" not in URL_SAFE
    assert "/" not in URL_SAFE
    assert 0 not in STANDARD


def test_alphabets_are_immutable() -> None:
    """Test that alphabet fields cannot be reassigned."""
    with pytest.raises(AttributeError):
        STANDARD.symbols = BASE + "-_"  # type: ignore[misc]


def test_alphabets_compare_by_value() -> None:
    """Test equality and hashing ignore the derived reverse table."""
    copy = Alphabet(name="standard", symbols=BASE + "+/")
    assert copy == STANDARD
    assert hash(copy) == hash(STANDARD)
    assert copy != URL_SAFE


@pytest.mark.parametrize(
    "symbols, padding, message",
    [
        (BASE + "+", "=", "must have 64 symbols"),
        (BASE + "+/!", "=", "must have 64 symbols"),
        (BASE + "++", "=", "duplicate symbols"),
        (BASE + "+/", "==", "single character"),
        (BASE + "+=", "=", "collides"),
        (BASE + "+ ", "=", "printable ASCII"),
    ],
)
def test_invalid_alphabets_are_rejected(symbols: str, padding: str, message: str) -> None:
    """Test that malformed alphabet definitions raise ValueError."""
    with pytest.raises(ValueError, match=message):
        Alphabet(name="broken", symbols=symbols, padding=padding)
