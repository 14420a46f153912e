"""
Lexicon store: an ordered set of dictionaries behind one interface.

The first dictionary receives new entries. Lookups and writes on existing
ids walk the dictionaries in order.
"""

import logging
from typing import Protocol

from muajam.core.models import AnnotatedToken, LexiconEntryView
from muajam.core.result import StoreWriteError

logger = logging.getLogger(__name__)


class Dictionary(Protocol):
    name: str

    def match(self, token: str) -> AnnotatedToken: ...

    def search(self, query: str) -> list[LexiconEntryView]: ...

    def get_duplicates(self) -> list[LexiconEntryView]: ...

    def has(self, entry_id: str) -> bool: ...

    def add(self, part_of_speech: str, terms: tuple[str, ...], definition: str) -> LexiconEntryView: ...

    def update(self, entry_id: str, term0: str, term1: str, definition: str) -> LexiconEntryView: ...

    def delete(self, entry_id: str, term0: str, term1: str) -> None: ...

    def refresh(self) -> int: ...


class LexiconStore:
    def __init__(self, dictionaries: list[Dictionary]):
        if not dictionaries:
            raise ValueError("LexiconStore needs at least one dictionary")
        self.dictionaries = list(dictionaries)

    @property
    def writable(self) -> Dictionary:
        return self.dictionaries[0]

    def match(self, token: str) -> AnnotatedToken:
        """First exact match wins, then the first approximate one."""
        approximate = None
        for dictionary in self.dictionaries:
            result = dictionary.match(token)
            if result.exact_match:
                return result
            if result.matched and approximate is None:
                approximate = result
        return approximate or AnnotatedToken.unmatched(token)

    def add_word(self, part_of_speech: str, word: str, definition: str) -> LexiconEntryView:
        return self.writable.add(part_of_speech, (word,), definition)

    def add_verb(self, part_of_speech: str, past_tense: str, present_tense: str, definition: str) -> LexiconEntryView:
        return self.writable.add(part_of_speech, (past_tense, present_tense), definition)

    def _holder(self, entry_id: str) -> Dictionary:
        for dictionary in self.dictionaries:
            if dictionary.has(entry_id):
                return dictionary
        raise StoreWriteError(f"ID {entry_id} is not found")

    def update_word(self, entry_id: str, term0: str, term1: str, definition: str) -> LexiconEntryView:
        return self._holder(entry_id).update(entry_id, term0, term1, definition)

    def delete_word(self, entry_id: str, term0: str, term1: str) -> None:
        self._holder(entry_id).delete(entry_id, term0, term1)

    def refresh(self) -> None:
        for dictionary in self.dictionaries:
            count = dictionary.refresh()
            logger.info("refreshed %s (%d entries)", dictionary.name, count)
