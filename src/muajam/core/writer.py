"""
Entry writer: the only path from the pipeline into the lexicon store.

Store failures are reported to the notification channel and handed back
as Err(StoreWriteError); they never escape as exceptions. Faults the store
did not classify itself (a dropped Redis connection, a corrupt record) are
wrapped in a StoreWriteError with the original as its cause.
"""

import logging
from typing import Callable, Protocol

from muajam.core.models import LexiconEntry, LexiconEntryView, PartOfSpeech
from muajam.core.notify import NotificationChannel
from muajam.core.result import Err, Ok, Result, StoreWriteError

logger = logging.getLogger(__name__)


class WritableLexicon(Protocol):
    def add_word(self, part_of_speech: str, word: str, definition: str) -> LexiconEntryView: ...

    def add_verb(self, part_of_speech: str, past_tense: str, present_tense: str, definition: str) -> LexiconEntryView: ...

    def update_word(self, entry_id: str, term0: str, term1: str, definition: str) -> LexiconEntryView: ...

    def delete_word(self, entry_id: str, term0: str, term1: str) -> None: ...


def _trim(value: str | None) -> str:
    return (value or "").strip()


class EntryWriter:
    def __init__(self, lexicon: WritableLexicon, channel: NotificationChannel):
        self.lexicon = lexicon
        self.channel = channel

    def _fail(self, failure_message: str, error: StoreWriteError) -> Err:
        logger.error("%s: %s", failure_message, error)
        self.channel.submit(failure_message, error)
        return Err(error)

    def _attempt(self, failure_message: str, write: Callable[[], object]) -> Result:
        try:
            return Ok(write())
        except StoreWriteError as e:
            return self._fail(failure_message, e)
        except Exception as e:
            error = StoreWriteError(str(e) or type(e).__name__)
            error.__cause__ = e
            return self._fail(failure_message, error)

    def add(self, entry: LexiconEntry) -> Result:
        pos = entry.part_of_speech.value
        if entry.part_of_speech == PartOfSpeech.VERB:
            form = entry.word_form
            write = lambda: self.lexicon.add_verb(pos, form.past_tense, form.present_tense, entry.definition)
        else:
            write = lambda: self.lexicon.add_word(pos, entry.word_form.word, entry.definition)
        return self._attempt("Unable to add new word", write)

    def update(self, entry_id: str, term0: str | None, term1: str | None, definition: str | None) -> Result:
        entry_id, term0, term1, definition = map(_trim, (entry_id, term0, term1, definition))
        return self._attempt(
            "Unable to update word",
            lambda: self.lexicon.update_word(entry_id, term0, term1, definition),
        )

    def delete(self, entry_id: str, term0: str | None, term1: str | None) -> Result:
        entry_id, term0, term1 = map(_trim, (entry_id, term0, term1))

        def write():
            self.lexicon.delete_word(entry_id, term0, term1)
            return entry_id

        return self._attempt("Unable to delete word", write)
