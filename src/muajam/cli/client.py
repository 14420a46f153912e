"""
HTTP client for the Muajam API.
"""

import httpx

from muajam.config import settings

BASE_URL = settings.api_url


# === Content ===

def create_content(text: str) -> dict:
    r = httpx.post(f"{BASE_URL}/content", json={"content": text}, timeout=60)
    r.raise_for_status()
    return r.json()


def get_content(content_id: str) -> dict:
    r = httpx.get(f"{BASE_URL}/content/{content_id}", timeout=60)
    r.raise_for_status()
    return r.json()


def annotate(text: str) -> dict:
    r = httpx.post(f"{BASE_URL}/annotate", json={"text": text}, timeout=60)
    r.raise_for_status()
    return r.json()


# === Lexicon ===

def search(q: str) -> list[dict]:
    r = httpx.get(f"{BASE_URL}/lexicon/search", params={"q": q})
    r.raise_for_status()
    return r.json()["results"]


def duplicates() -> list[dict]:
    r = httpx.get(f"{BASE_URL}/lexicon/duplicates")
    r.raise_for_status()
    return r.json()["results"]


def refresh() -> dict:
    r = httpx.post(f"{BASE_URL}/lexicon/refresh", timeout=120)
    r.raise_for_status()
    return r.json()


def add_entry(entry: dict) -> dict:
    """Validation failures (400) come back as a body, not an exception."""
    r = httpx.post(f"{BASE_URL}/lexicon/entries", json=entry)
    if r.status_code != 400:
        r.raise_for_status()
    return r.json()


def update_entry(entry_id: str, terms0: str, terms1: str, definition: str) -> dict:
    payload = {"id": entry_id, "terms0": terms0, "terms1": terms1, "def": definition}
    r = httpx.post(f"{BASE_URL}/lexicon/update", json=payload)
    r.raise_for_status()
    return r.json()


def delete_entry(entry_id: str, terms0: str, terms1: str) -> dict:
    payload = {"id": entry_id, "terms0": terms0, "terms1": terms1}
    r = httpx.post(f"{BASE_URL}/lexicon/delete", json=payload)
    r.raise_for_status()
    return r.json()
