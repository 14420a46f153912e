# tests/test_tokenize.py
"""Tests for delimiter-preserving tokenization."""

import pytest

from muajam.core.tokenize import Token, is_delimiter, reconstruct, tokenize


def test_tokenize_simple():
    tokens = tokenize("كتب الولد")

    assert tokens == [
        Token("كتب", False, 0),
        Token(" ", True, 3),
        Token("الولد", False, 4),
    ]


def test_tokenize_with_arabic_punctuation():
    tokens = tokenize("كتب الولد، الدرس.")

    assert [t.text for t in tokens] == ["كتب", " ", "الولد", "،", " ", "الدرس", "."]
    assert tokens[3] == Token("،", True, 9)
    assert tokens[6] == Token(".", True, 16)


def test_tokenize_multiple_spaces():
    tokens = tokenize("هل    ذهبت")

    assert len(tokens) == 6
    assert all(t.is_delimiter for t in tokens[1:5])
    assert tokens[5] == Token("ذهبت", False, 6)


def test_tokenize_keeps_diacritics_inside_words():
    tokens = tokenize("كَتَبَ")
    assert tokens == [Token("كَتَبَ", False, 0)]


def test_tokenize_digits_are_words():
    tokens = tokenize("عام 2024")
    assert tokens[-1] == Token("2024", False, 4)


def test_tokenize_newlines_and_question_mark():
    tokens = tokenize("من؟\nأنا")
    assert [t.text for t in tokens] == ["من", "؟", "\n", "أنا"]
    assert [t.is_delimiter for t in tokens] == [False, True, True, False]


def test_tokenize_empty():
    assert tokenize("") == []


def test_tokenize_only_delimiters():
    tokens = tokenize(" ،.")
    assert all(t.is_delimiter for t in tokens)
    assert len(tokens) == 3


def test_no_empty_tokens():
    tokens = tokenize("،،كتب..")
    assert all(t.text for t in tokens)


@pytest.mark.parametrize("ch", [" ", "\t", "\n", "!", "/", ":", "@", "[", "`", "{", "~", "،", "؛", "؟", "۔", "—", "…", "\u00a0"])
def test_is_delimiter(ch):
    assert is_delimiter(ch)


@pytest.mark.parametrize("ch", ["a", "Z", "0", "9", "ك", "ي", "َ", "٣", "é"])
def test_is_not_delimiter(ch):
    assert not is_delimiter(ch)


@pytest.mark.parametrize("text", [
    "",
    "كتب",
    "  كتب الولد الدرسَ، ثم نام.  ",
    "قال: \"نعم\" — (ربما)!\n\nسطر جديد\tبعد تبويب",
    "mixed text, with English; and عربي?",
])
def test_tokens_rebuild_text(text):
    tokens = tokenize(text)
    assert reconstruct(tokens) == text


def test_original_index_points_into_text():
    text = "في البيت، كتاب."
    for t in tokenize(text):
        assert text[t.original_index:t.original_index + len(t.text)] == t.text
