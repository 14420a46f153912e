"""
Best-effort error notification.

Notifiers deliver a message somewhere (webhook, log). The channel runs
them on a background worker so callers never wait on delivery and never
see a delivery failure.
"""

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Protocol

import httpx

logger = logging.getLogger(__name__)


class Notifier(Protocol):
    def notify_on_error(self, message: str, error: BaseException) -> None: ...


class LogNotifier:
    """Fallback when no webhook is configured."""

    def notify_on_error(self, message: str, error: BaseException) -> None:
        logger.error("%s: %s", message, error)


class WebhookNotifier:
    def __init__(self, url: str, timeout: float = 5.0, client: httpx.Client | None = None):
        self.url = url
        self.client = client or httpx.Client(timeout=timeout)

    def notify_on_error(self, message: str, error: BaseException) -> None:
        payload = {
            "text": f"{message}: {error}",
            "message": message,
            "error": repr(error),
        }
        r = self.client.post(self.url, json=payload)
        r.raise_for_status()


class NotificationChannel:
    """Fire-and-forget submission of notifications to a single worker."""

    def __init__(self, notifier: Notifier):
        self.notifier = notifier
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="notify")

    def submit(self, message: str, error: BaseException) -> None:
        try:
            future = self._executor.submit(self.notifier.notify_on_error, message, error)
        except RuntimeError as e:
            # executor already shut down
            logger.warning("notification dropped (%s): %s", e, message)
            return
        future.add_done_callback(self._report)

    @staticmethod
    def _report(future: Future) -> None:
        exc = future.exception()
        if exc is not None:
            logger.warning("notification failed: %s", exc)

    def close(self, wait: bool = True) -> None:
        self._executor.shutdown(wait=wait)
