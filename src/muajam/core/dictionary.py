# src/muajam/core/dictionary.py
"""
A single dictionary stored in Redis.

Entries are keyed by a content hash, so the same entry loaded into two
dictionaries carries the same id:

    entry_id("verb", ("كتب", "يكتب")) → 12 hex chars of sha1("verb|كتب|يكتب")

Keys (prefix "dict:<name>"):
    entry:<id>     JSON entry record
    ids            list of ids in insertion order
    term:<key>     sorted set of ids indexed under a normalized term
    seq            insertion counter
"""

import hashlib
import json
import unicodedata

import redis

from muajam.core.models import AnnotatedToken, LexiconEntryView
from muajam.core.normalize import normalize_for_match
from muajam.core.result import StoreWriteError


# Normalized proclitic prefixes tried when a token has no direct hit, longest first
PROCLITICS = ["وال", "فال", "بال", "كال", "لل", "ال", "و", "ف", "ب", "ل", "ك"]
MIN_STEM = 2


def entry_id(part_of_speech: str, terms: tuple[str, ...]) -> str:
    digest = hashlib.sha1("|".join([part_of_speech, *terms]).encode("utf-8"))
    return digest.hexdigest()[:12]


class RedisDictionary:
    def __init__(self, client: redis.Redis, name: str, prefix: str = "dict"):
        self.client = client
        self.name = name
        self.prefix = f"{prefix}:{name}"

    def _entry_key(self, entry_id: str) -> str:
        return f"{self.prefix}:entry:{entry_id}"

    def _ids_key(self) -> str:
        return f"{self.prefix}:ids"

    def _term_key(self, key: str) -> str:
        return f"{self.prefix}:term:{key}"

    def _seq_key(self) -> str:
        return f"{self.prefix}:seq"

    # === Records ===

    def _load(self, entry_id: str) -> dict | None:
        data = self.client.get(self._entry_key(entry_id))
        if data is None:
            return None
        return json.loads(data)

    def _records(self) -> list[dict]:
        records = []
        for raw_id in self.client.lrange(self._ids_key(), 0, -1):
            record = self._load(raw_id.decode())
            if record:
                records.append(record)
        return records

    def _view(self, record: dict) -> LexiconEntryView:
        return LexiconEntryView(
            id=record["id"],
            part_of_speech=record["pos"],
            terms=tuple(record["terms"]),
            definition=record["definition"],
            dictionary=self.name,
        )

    def _index(self, record: dict) -> None:
        for term in record["terms"]:
            self.client.zadd(self._term_key(normalize_for_match(term)), {record["id"]: record["seq"]})

    def _unindex(self, record: dict) -> None:
        for term in record["terms"]:
            self.client.zrem(self._term_key(normalize_for_match(term)), record["id"])

    def _candidates(self, key: str) -> list[dict]:
        records = []
        for raw_id in self.client.zrange(self._term_key(key), 0, -1):
            record = self._load(raw_id.decode())
            if record:
                records.append(record)
        return records

    def _checked(self, entry_id: str, term0: str, term1: str) -> dict:
        """Load a record and verify the caller's view of its terms."""
        record = self._load(entry_id)
        if record is None:
            raise StoreWriteError(f"ID {entry_id} is not found in {self.name}")
        terms = record["terms"]
        expected = (terms[0], terms[1] if len(terms) > 1 else "")
        if (term0, term1) != expected:
            raise StoreWriteError(f"ID {entry_id} does not match {term0} {term1}".rstrip())
        return record

    def has(self, entry_id: str) -> bool:
        return bool(self.client.exists(self._entry_key(entry_id)))

    def get(self, entry_id: str) -> LexiconEntryView | None:
        record = self._load(entry_id)
        return self._view(record) if record else None

    def entries(self) -> list[LexiconEntryView]:
        return [self._view(r) for r in self._records()]

    # === Reads ===

    def match(self, token: str) -> AnnotatedToken:
        key = normalize_for_match(token)
        records = self._candidates(key)
        approximate = False

        if not records:
            for prefix in PROCLITICS:
                if key.startswith(prefix) and len(key) - len(prefix) >= MIN_STEM:
                    records = self._candidates(key[len(prefix):])
                    if records:
                        approximate = True
                        break

        if not records:
            return AnnotatedToken.unmatched(token)

        exact = None
        if not approximate:
            exact = next((r for r in records if token in r["terms"]), None)
        record = exact or records[0]

        return AnnotatedToken(
            text=token,
            matched=True,
            exact_match=exact is not None,
            definition=self._view(record),
        )

    def search(self, query: str) -> list[LexiconEntryView]:
        """Entries whose terms or definition contain the query; whole-term hits first."""
        q = normalize_for_match(query)
        if not q:
            return []

        whole, partial = [], []
        for record in self._records():
            keys = [normalize_for_match(t) for t in record["terms"]]
            if q in keys:
                whole.append(record)
            elif any(q in k for k in keys) or q in normalize_for_match(record["definition"]):
                partial.append(record)

        return [self._view(r) for r in whole + partial]

    def get_duplicates(self) -> list[LexiconEntryView]:
        """Entries sharing a normalized head term, grouped in first-seen order."""
        groups: dict[str, list[dict]] = {}
        for record in self._records():
            groups.setdefault(normalize_for_match(record["terms"][0]), []).append(record)

        return [
            self._view(record)
            for group in groups.values()
            if len(group) > 1
            for record in group
        ]

    # === Writes ===

    def add(self, part_of_speech: str, terms: tuple[str, ...], definition: str) -> LexiconEntryView:
        terms = tuple(unicodedata.normalize("NFC", t.strip()) for t in terms)
        new_id = entry_id(part_of_speech, terms)

        if self.has(new_id):
            raise StoreWriteError(f"{' / '.join(terms)} ({part_of_speech}) already exists in {self.name}")

        record = {
            "id": new_id,
            "pos": part_of_speech,
            "terms": list(terms),
            "definition": definition,
            "seq": self.client.incr(self._seq_key()),
        }
        self.client.set(self._entry_key(new_id), json.dumps(record, ensure_ascii=False))
        self.client.rpush(self._ids_key(), new_id)
        self._index(record)

        return self._view(record)

    def update(self, entry_id: str, term0: str, term1: str, definition: str) -> LexiconEntryView:
        record = self._checked(entry_id, term0, term1)
        if not definition:
            raise StoreWriteError("Definition cannot be blank")

        record["definition"] = definition
        self.client.set(self._entry_key(entry_id), json.dumps(record, ensure_ascii=False))
        return self._view(record)

    def delete(self, entry_id: str, term0: str, term1: str) -> None:
        record = self._checked(entry_id, term0, term1)
        self._unindex(record)
        self.client.lrem(self._ids_key(), 0, entry_id)
        self.client.delete(self._entry_key(entry_id))

    def refresh(self) -> int:
        """Rebuild the term index from stored entries. Returns the entry count."""
        for key in self.client.scan_iter(f"{self.prefix}:term:*"):
            self.client.delete(key)
        records = self._records()
        for record in records:
            self._index(record)
        return len(records)

    def clear(self) -> None:
        """Clear all dictionary data. Useful for tests."""
        for key in self.client.scan_iter(f"{self.prefix}:*"):
            self.client.delete(key)
