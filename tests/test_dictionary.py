# tests/test_dictionary.py
"""Tests for the Redis-backed dictionaries and lexicon store."""

import pytest
import redis

from muajam.core.content import ContentStore
from muajam.core.dictionary import RedisDictionary, entry_id
from muajam.core.lexicon import LexiconStore
from muajam.core.result import StoreWriteError


@pytest.fixture
def client():
    r = redis.Redis(host="localhost", port=6379, db=15)  # db=15 for tests
    try:
        r.ping()
    except redis.ConnectionError:
        pytest.skip("Redis not available")
    yield r
    # cleanup after each test
    for key in r.scan_iter("testdict:*"):
        r.delete(key)
    for key in r.scan_iter("testcontent:*"):
        r.delete(key)


@pytest.fixture
def user(client):
    return RedisDictionary(client, "user", prefix="testdict")


@pytest.fixture
def base(client):
    return RedisDictionary(client, "base", prefix="testdict")


@pytest.fixture
def store(user, base):
    return LexiconStore([user, base])


def test_entry_id_stable():
    assert entry_id("verb", ("كتب", "يكتب")) == entry_id("verb", ("كتب", "يكتب"))
    assert entry_id("verb", ("كتب", "يكتب")) != entry_id("word", ("كتب",))
    assert len(entry_id("word", ("كتاب",))) == 12


def test_add_and_get(user):
    added = user.add("word", ("  كتاب ",), "book")

    assert added.terms == ("كتاب",)
    assert added.dictionary == "user"
    assert user.get(added.id) == added
    assert user.has(added.id)


def test_add_same_entry_twice(user):
    user.add("word", ("كتاب",), "book")

    with pytest.raises(StoreWriteError):
        user.add("word", ("كتاب",), "another book")


def test_exact_match(user):
    user.add("verb", ("كتب", "يكتب"), "to write")

    result = user.match("يكتب")

    assert result.matched and result.exact_match
    assert result.definition.definition == "to write"


def test_diacritic_variant_is_approximate(user):
    user.add("verb", ("كتب", "يكتب"), "to write")

    result = user.match("كَتَبَ")

    assert result.matched
    assert not result.exact_match


def test_prefixed_word_is_approximate(user):
    user.add("word", ("كتاب",), "book")

    result = user.match("والكتاب")

    assert result.matched
    assert not result.exact_match
    assert result.definition.word == "كتاب"


def test_unknown_word(user):
    result = user.match("سيارة")
    assert not result.matched
    assert not result.exact_match
    assert result.definition is None


def test_search_whole_term_first(user):
    user.add("word", ("مكتبة",), "library")
    user.add("word", ("كتب",), "books")
    user.add("word", ("قلم",), "pen")

    results = user.search("كتب")

    assert [r.word for r in results] == ["كتب", "مكتبة"]


def test_search_definition(user):
    user.add("word", ("قلم",), "Pen")
    assert [r.word for r in user.search("pen")] == ["قلم"]


def test_duplicates(user):
    user.add("word", ("ولد",), "boy")
    user.add("word", ("قلم",), "pen")
    user.add("stop", ("وَلَد",), "boy (vocalized)")

    dups = user.get_duplicates()

    assert [d.definition for d in dups] == ["boy", "boy (vocalized)"]


def test_update_checks_terms(user):
    added = user.add("verb", ("كتب", "يكتب"), "to write")

    with pytest.raises(StoreWriteError):
        user.update(added.id, "كتب", "", "to draft")

    updated = user.update(added.id, "كتب", "يكتب", "to draft")
    assert updated.definition == "to draft"
    assert user.get(added.id).definition == "to draft"


def test_delete(user):
    added = user.add("word", ("كتاب",), "book")

    user.delete(added.id, "كتاب", "")

    assert not user.has(added.id)
    assert not user.match("كتاب").matched
    assert user.entries() == []


def test_delete_unknown(user):
    with pytest.raises(StoreWriteError):
        user.delete("000000000000", "كتاب", "")


def test_refresh_rebuilds_index(user, client):
    user.add("word", ("كتاب",), "book")
    for key in client.scan_iter("testdict:user:term:*"):
        client.delete(key)
    assert not user.match("كتاب").matched

    assert user.refresh() == 1
    assert user.match("كتاب").exact_match


def test_store_adds_to_first_dictionary(store, user, base):
    added = store.add_verb("verb", "كتب", "يكتب", "to write")

    assert user.has(added.id)
    assert not base.has(added.id)


def test_store_prefers_exact_match(store, user, base):
    user.add("word", ("كِتَاب",), "book (vocalized)")
    base.add("word", ("كتاب",), "book")

    result = store.match("كتاب")

    assert result.exact_match
    assert result.definition.dictionary == "base"


def test_store_update_finds_holder(store, base):
    added = base.add("word", ("قلم",), "pen")

    store.update_word(added.id, "قلم", "", "pencil")

    assert base.get(added.id).definition == "pencil"


def test_store_update_unknown_id(store):
    with pytest.raises(StoreWriteError):
        store.update_word("000000000000", "قلم", "", "pencil")


def test_same_entry_shares_id_across_dictionaries(user, base):
    a = user.add("word", ("كتاب",), "book")
    b = base.add("word", ("كتاب",), "book")
    assert a.id == b.id


def test_content_roundtrip(client):
    contents = ContentStore(client, prefix="testcontent")
    content_id = contents.store("مرحبا بالعالم")

    assert contents.retrieve(content_id) == "مرحبا بالعالم"
    assert contents.retrieve("missing") is None
