"""Tests for cross-dictionary search and duplicate aggregation."""

import pytest

from muajam.core.aggregate import ResultAggregator, is_searchable, merge_unique

from fakes import FakeDictionary, view


@pytest.mark.parametrize("query", [None, "", " ", "   ", "\t\n", "و", "a"])
def test_short_or_blank_query_contacts_no_dictionary(query):
    first = FakeDictionary("user", results=[view("a", "كتاب")])
    second = FakeDictionary("base", results=[view("b", "كتب")])

    assert ResultAggregator([first, second]).search(query) == []
    assert first.search_calls == []
    assert second.search_calls == []


def test_is_searchable():
    assert is_searchable("كت")
    assert not is_searchable("ك")
    assert not is_searchable("  ")


def test_query_is_normalized_before_search():
    user = FakeDictionary("user")
    ResultAggregator([user]).search("أَكَلَ")

    assert user.search_calls == ["اكل"]


def test_shared_id_kept_once_first_dictionary_wins():
    from_user = view("shared", "كتاب", definition="book (user)", dictionary="user")
    from_base = view("shared", "كتاب", definition="book (base)", dictionary="base")
    user = FakeDictionary("user", results=[from_user, view("u2", "كاتب")])
    base = FakeDictionary("base", results=[view("b1", "مكتبة"), from_base])

    results = ResultAggregator([user, base]).search("كتب")

    assert [r.id for r in results] == ["shared", "u2", "b1"]
    assert results[0] is from_user


def test_dictionary_order_is_caller_order():
    user = FakeDictionary("user", results=[view("x", "ب")])
    base = FakeDictionary("base", results=[view("x", "ا")])

    results = ResultAggregator([base, user]).search("قلم")

    assert results[0].terms == ("ا",)


def test_every_dictionary_searched_in_order():
    calls = []

    class Recording(FakeDictionary):
        def search(self, query):
            calls.append(self.name)
            return super().search(query)

    ResultAggregator([Recording("one"), Recording("two"), Recording("three")]).search("قلم")
    assert calls == ["one", "two", "three"]


def test_duplicates_merged_without_query():
    user = FakeDictionary("user", duplicates=[view("d1", "ولد"), view("d2", "وَلَد")])
    base = FakeDictionary("base", duplicates=[view("d2", "وَلَد"), view("d3", "ولد")])

    results = ResultAggregator([user, base]).duplicates()

    assert [r.id for r in results] == ["d1", "d2", "d3"]
    assert user.duplicate_calls == 1
    assert base.duplicate_calls == 1
    assert user.search_calls == []


def test_merge_unique_preserves_order_within_list():
    merged = merge_unique([[view("c"), view("a"), view("b")], [view("a"), view("d")]])
    assert [r.id for r in merged] == ["c", "a", "b", "d"]


def test_merge_unique_drops_repeats_within_one_list():
    merged = merge_unique([[view("a"), view("a")]])
    assert len(merged) == 1
