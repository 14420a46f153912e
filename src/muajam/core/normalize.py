"""
Text normalization.

Two flavours:
- normalize_for_display: cosmetic clean-up of submitted content
- normalize_for_match: the key space dictionaries are compared in
  "أَكَلَ" → "اكل"
"""

import unicodedata


TATWEEL = "\u0640"

# Combining marks stripped before matching
DIACRITIC_RANGES = [
    (0x0610, 0x061A),  # honorifics / small high marks
    (0x064B, 0x065F),  # harakat, tanween, shadda, sukun
    (0x0670, 0x0670),  # superscript alef
    (0x06D6, 0x06ED),  # Quranic annotation marks
]

LETTER_VARIANTS = str.maketrans({
    "\u0622": "\u0627",  # alef with madda
    "\u0623": "\u0627",  # alef with hamza above
    "\u0625": "\u0627",  # alef with hamza below
    "\u0671": "\u0627",  # alef wasla
    "\u0649": "\u064a",  # alef maksura
    "\u06cc": "\u064a",  # farsi yeh
    "\u0629": "\u0647",  # teh marbuta
})


def is_diacritic(ch: str) -> bool:
    cp = ord(ch)
    return any(lo <= cp <= hi for lo, hi in DIACRITIC_RANGES)


def strip_diacritics(text: str) -> str:
    return "".join(ch for ch in text if ch != TATWEEL and not is_diacritic(ch))


def normalize_letters(text: str) -> str:
    return text.translate(LETTER_VARIANTS)


def normalize_for_display(text: str) -> str:
    """Fix up raw content before it is tokenized and rendered."""
    if text.startswith("\ufeff"):
        text = text[1:]
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    text = unicodedata.normalize("NFC", text)
    return "\n".join(line.rstrip() for line in text.split("\n"))


def normalize_for_match(text: str) -> str:
    """
    Canonical matching key: compatibility forms folded, case folded,
    diacritics and tatweel removed, letter variants collapsed.

    Idempotent: normalize_for_match(normalize_for_match(x)) == normalize_for_match(x)
    """
    text = unicodedata.normalize("NFKC", text)
    text = unicodedata.normalize("NFKC", text.casefold())
    text = normalize_letters(strip_diacritics(text))
    # a stripped tatweel or mark may have been blocking composition
    return unicodedata.normalize("NFC", text)
