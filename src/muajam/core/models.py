"""
Request-scoped data model: annotations and lexicon entries.
"""

from dataclasses import dataclass, field
from enum import Enum


class PartOfSpeech(str, Enum):
    STOP = "stop"
    WORD = "word"
    VERB = "verb"


@dataclass(frozen=True)
class LexiconEntryView:
    """Read-only projection of a stored entry."""
    id: str
    part_of_speech: str
    terms: tuple[str, ...]
    definition: str
    dictionary: str = ""

    @property
    def word(self) -> str:
        return self.terms[0] if self.terms else ""

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "pos": self.part_of_speech,
            "word": self.word,
            "terms": list(self.terms),
            "definition": self.definition,
            "dictionary": self.dictionary,
        }


@dataclass(frozen=True)
class AnnotatedToken:
    text: str
    matched: bool
    exact_match: bool
    is_delimiter: bool = False
    definition: LexiconEntryView | None = None

    @classmethod
    def delimiter(cls, text: str) -> "AnnotatedToken":
        return cls(text=text, matched=True, exact_match=True, is_delimiter=True)

    @classmethod
    def unmatched(cls, text: str) -> "AnnotatedToken":
        return cls(text=text, matched=False, exact_match=False)

    def to_dict(self) -> dict:
        return {
            "text": self.text,
            "matched": self.matched,
            "exact_match": self.exact_match,
            "is_delimiter": self.is_delimiter,
            "definition": self.definition.to_dict() if self.definition else None,
        }


@dataclass(frozen=True)
class SimpleForm:
    word: str


@dataclass(frozen=True)
class ConjugatedForm:
    past_tense: str
    present_tense: str


@dataclass
class LexiconEntry:
    """Write-side entry. `id` stays None until the store persists it."""
    part_of_speech: PartOfSpeech
    word_form: SimpleForm | ConjugatedForm
    definition: str
    id: str | None = None

    def __post_init__(self):
        is_verb = self.part_of_speech == PartOfSpeech.VERB
        if is_verb != isinstance(self.word_form, ConjugatedForm):
            raise ValueError(
                f"{self.part_of_speech.value} entry cannot carry {type(self.word_form).__name__}"
            )


@dataclass
class AnnotatedDocument:
    content: str
    tokens: list[AnnotatedToken] = field(default_factory=list)
    id: str | None = None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "content": self.content,
            "tokens": [t.to_dict() for t in self.tokens],
        }
