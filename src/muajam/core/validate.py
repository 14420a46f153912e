"""
Entry validation.

Every rule runs; all violations are collected before returning:

    validate_entry(EntryForm(part_of_speech="verb", past_tense="", ...))
    → Err(ValidationFailure([PAST_BLANK, ...]))

A valid form comes back as Ok(LexiconEntry) with every field trimmed.
"""

from dataclasses import dataclass

from muajam.core.models import ConjugatedForm, LexiconEntry, PartOfSpeech, SimpleForm
from muajam.core.result import Err, Ok, Result, ValidationError, ValidationFailure


IMPERFECTIVE_PREFIX = "ي"
ARABIC_BLOCK = (0x0600, 0x06FF)
ARABIC_PUNCTUATION = set(" .,/\\")


@dataclass
class EntryForm:
    """Raw add request; any field may be missing."""
    part_of_speech: str | None = None
    word: str | None = None
    past_tense: str | None = None
    present_tense: str | None = None
    definition: str | None = None


def is_blank(value: str | None) -> bool:
    return value is None or value.strip() == ""


def trimmed(value: str | None) -> str | None:
    return value.strip() if value is not None else None


def is_arabic(text: str) -> bool:
    lo, hi = ARABIC_BLOCK
    return all(lo <= ord(ch) <= hi or ch in ARABIC_PUNCTUATION for ch in text)


def _check_arabic(value: str | None, error: ValidationError, errors: list[ValidationError]):
    if value and not is_arabic(value):
        errors.append(error)


def validate_entry(form: EntryForm) -> Result:
    errors: list[ValidationError] = []

    pos = trimmed(form.part_of_speech)
    word = trimmed(form.word)
    past = trimmed(form.past_tense)
    present = trimmed(form.present_tense)
    definition = trimmed(form.definition)

    if is_blank(pos):
        errors.append(ValidationError.POS_BLANK)
    elif pos not in {p.value for p in PartOfSpeech}:
        errors.append(ValidationError.POS_INVALID)

    if pos == PartOfSpeech.VERB.value:
        if is_blank(past):
            errors.append(ValidationError.PAST_BLANK)
        if is_blank(present):
            errors.append(ValidationError.PRESENT_BLANK)
        _check_arabic(past, ValidationError.PAST_NOT_ARABIC, errors)
        _check_arabic(present, ValidationError.PRESENT_NOT_ARABIC, errors)
        if present and not present.startswith(IMPERFECTIVE_PREFIX):
            errors.append(ValidationError.PRESENT_PREFIX)
    else:
        # also runs for a missing or unknown part of speech
        if is_blank(word):
            errors.append(ValidationError.WORD_BLANK)
        _check_arabic(word, ValidationError.WORD_NOT_ARABIC, errors)

    if is_blank(definition):
        errors.append(ValidationError.DEFINITION_BLANK)

    if errors:
        return Err(ValidationFailure(errors))

    part_of_speech = PartOfSpeech(pos)
    if part_of_speech == PartOfSpeech.VERB:
        word_form = ConjugatedForm(past_tense=past, present_tense=present)
    else:
        word_form = SimpleForm(word=word)
    return Ok(LexiconEntry(part_of_speech=part_of_speech, word_form=word_form, definition=definition))
