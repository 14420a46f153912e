"""
Merge ordered result lists from several dictionaries.

Dictionaries are visited in the order given at construction, results in
the order each dictionary returns them. The first result seen for an id
wins; later ones with the same id are dropped.
"""

import logging
from typing import Any, Callable, Iterable, Protocol

from muajam.core.normalize import normalize_for_match

logger = logging.getLogger(__name__)


class SearchableDictionary(Protocol):
    name: str

    def search(self, query: str) -> list[Any]: ...

    def get_duplicates(self) -> list[Any]: ...


def is_searchable(query: str | None) -> bool:
    """Queries must be non-blank and longer than one character."""
    if not query or query.isspace():
        return False
    return len(query) > 1


def merge_unique(result_lists: Iterable[Iterable[Any]], key: str = "id") -> list[Any]:
    merged = []
    seen = set()
    for results in result_lists:
        for result in results:
            ident = getattr(result, key)
            if ident in seen:
                continue
            seen.add(ident)
            merged.append(result)
    return merged


class ResultAggregator:
    def __init__(self, dictionaries: list[SearchableDictionary]):
        self.dictionaries = list(dictionaries)

    def _collect(self, fetch: Callable[[SearchableDictionary], list[Any]]) -> list[Any]:
        # generator keeps dictionary calls lazy and in order
        return merge_unique(fetch(d) for d in self.dictionaries)

    def search(self, query: str | None) -> list[Any]:
        if not is_searchable(query):
            return []
        normalized = normalize_for_match(query)
        results = self._collect(lambda d: d.search(normalized))
        logger.debug("search %r -> %d results", normalized, len(results))
        return results

    def duplicates(self) -> list[Any]:
        return self._collect(lambda d: d.get_duplicates())
