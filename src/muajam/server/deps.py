"""
Shared dependencies for routes.
"""

import redis

from muajam.config import settings
from muajam.core.content import ContentStore
from muajam.core.dictionary import RedisDictionary
from muajam.core.lexicon import LexiconStore
from muajam.core.notify import LogNotifier, NotificationChannel, WebhookNotifier
from muajam.core.pipeline import Pipeline


# Global notification channel, one worker for the whole process
_channel: NotificationChannel | None = None


def get_redis() -> redis.Redis:
    return redis.Redis(host=settings.redis_host, port=settings.redis_port, db=settings.redis_db)


def get_channel() -> NotificationChannel:
    global _channel
    if _channel is None:
        if settings.notify_url:
            notifier = WebhookNotifier(settings.notify_url, timeout=settings.notify_timeout)
        else:
            notifier = LogNotifier()
        _channel = NotificationChannel(notifier)
    return _channel


def close_channel() -> None:
    global _channel
    if _channel is not None:
        _channel.close(wait=False)
        _channel = None


def get_lexicon_store() -> LexiconStore:
    client = get_redis()
    return LexiconStore([RedisDictionary(client, name) for name in settings.dictionaries])


def get_content_store() -> ContentStore:
    return ContentStore(get_redis())


def get_pipeline() -> Pipeline:
    return Pipeline(get_lexicon_store(), get_content_store(), get_channel())
