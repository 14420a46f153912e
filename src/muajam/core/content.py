"""
Submitted content storage.
"""

import uuid

import redis


def generate_id() -> str:
    return uuid.uuid4().hex[:12]


class ContentStore:
    def __init__(self, client: redis.Redis, prefix: str = "content"):
        self.client = client
        self.prefix = prefix

    def _content_key(self, content_id: str) -> str:
        return f"{self.prefix}:{content_id}"

    def store(self, text: str) -> str:
        content_id = generate_id()
        self.client.set(self._content_key(content_id), text)
        return content_id

    def retrieve(self, content_id: str) -> str | None:
        data = self.client.get(self._content_key(content_id))
        if data is None:
            return None
        return data.decode()

    def clear(self) -> None:
        for key in self.client.scan_iter(f"{self.prefix}:*"):
            self.client.delete(key)
