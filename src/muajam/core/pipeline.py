"""
Request-level operations wired from the core components.

    annotate / open_content   text → tokens → annotated tokens
    search / duplicates       dictionaries → merged, de-duplicated results
    submit_entry              validate → write
    update_entry / delete_entry
"""

from muajam.core.aggregate import ResultAggregator
from muajam.core.annotate import Annotator
from muajam.core.content import ContentStore
from muajam.core.lexicon import LexiconStore
from muajam.core.models import AnnotatedDocument, LexiconEntryView
from muajam.core.notify import NotificationChannel
from muajam.core.result import Err, NotFound, Ok, Result
from muajam.core.validate import EntryForm, validate_entry
from muajam.core.writer import EntryWriter


class Pipeline:
    def __init__(self, lexicon: LexiconStore, content: ContentStore, channel: NotificationChannel):
        self.lexicon = lexicon
        self.content = content
        self.annotator = Annotator(lexicon)
        self.aggregator = ResultAggregator(lexicon.dictionaries)
        self.writer = EntryWriter(lexicon, channel)

    # === Content ===

    def annotate(self, text: str) -> AnnotatedDocument:
        return self.annotator.annotate_text(text)

    def store_content(self, text: str) -> str:
        return self.content.store(text)

    def open_content(self, content_id: str) -> Result:
        text = self.content.retrieve(content_id)
        if text is None:
            return Err(NotFound(content_id))
        document = self.annotate(text)
        document.id = content_id
        return Ok(document)

    # === Lexicon reads ===

    def search(self, query: str | None) -> list[LexiconEntryView]:
        return self.aggregator.search(query)

    def duplicates(self) -> list[LexiconEntryView]:
        return self.aggregator.duplicates()

    def refresh(self) -> None:
        self.lexicon.refresh()

    # === Lexicon writes ===

    def submit_entry(self, form: EntryForm) -> Result:
        validated = validate_entry(form)
        if not validated.ok:
            return validated
        return self.writer.add(validated.value)

    def update_entry(self, entry_id: str, term0: str | None, term1: str | None, definition: str | None) -> Result:
        return self.writer.update(entry_id, term0, term1, definition)

    def delete_entry(self, entry_id: str, term0: str | None, term1: str | None) -> Result:
        return self.writer.delete(entry_id, term0, term1)
