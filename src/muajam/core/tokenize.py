# src/muajam/core/tokenize.py
"""
Tokenization.

Raw text → word and delimiter tokens. Delimiters are kept as their own
tokens so the text can be rebuilt exactly:

    "".join(t.text for t in tokenize(text)) == text
"""

from bisect import bisect_right
from dataclasses import dataclass


@dataclass(frozen=True)
class Token:
    text: str
    is_delimiter: bool
    original_index: int  # character offset in original


# Inclusive code point ranges, sorted by start. Whitespace is handled by str.isspace.
DELIMITER_RANGES = [
    (0x0020, 0x002F),  # space, ASCII punctuation
    (0x003A, 0x0040),
    (0x005B, 0x0060),
    (0x007B, 0x007F),
    (0x0600, 0x061F),  # Arabic signs, comma, semicolon, question mark
    (0x06D4, 0x06DE),  # Arabic full stop, small high ligatures
    (0x2000, 0x20FF),  # general punctuation, currency
    (0xFEFF, 0xFEFF),  # zero width no-break space
]

_RANGE_STARTS = [lo for lo, _ in DELIMITER_RANGES]


def is_delimiter(ch: str) -> bool:
    if ch.isspace():
        return True
    cp = ord(ch)
    i = bisect_right(_RANGE_STARTS, cp) - 1
    return i >= 0 and cp <= DELIMITER_RANGES[i][1]


def tokenize(text: str) -> list[Token]:
    """Split text into tokens, one token per delimiter character."""
    tokens = []
    start = 0
    for i, ch in enumerate(text):
        if not is_delimiter(ch):
            continue
        if i > start:
            tokens.append(Token(text=text[start:i], is_delimiter=False, original_index=start))
        tokens.append(Token(text=ch, is_delimiter=True, original_index=i))
        start = i + 1
    if start < len(text):
        tokens.append(Token(text=text[start:], is_delimiter=False, original_index=start))
    return tokens


def reconstruct(tokens: list[Token]) -> str:
    return "".join(t.text for t in tokens)
