"""
Notification dispatchers - fire-and-forget delivery of lead alerts.

Pattern: Protocol → Production impl → Dev double → Factory

This module contains:
1. HttpNotificationDispatcher - POSTs {"message": ...} to a notify endpoint
2. LoggingNotificationDispatcher - logs the message, sends nothing
3. get_notification_dispatcher() - Factory function

FIRE-AND-FORGET:
----------------
dispatch() hands the request to a small thread pool and returns at once.
The worker makes exactly one attempt with a bounded httpx timeout. A 200
response is logged as delivered; any other status, a timeout or a
connection error is logged as a failure. Nothing is retried and nothing
is raised back into the chat flow.
"""

from __future__ import annotations

import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor

import httpx

from portfolio_concierge.notify.config import NotifyConfig, get_config
from portfolio_concierge.observability.attributes import (
    NOTIFY_ENDPOINT,
    NOTIFY_OUTCOME,
    NOTIFY_STATUS_CODE,
    SPAN_NOTIFY_DISPATCH,
)
from portfolio_concierge.observability.tracer import get_tracer

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# HTTP DISPATCHER (Production)
# ---------------------------------------------------------------------------


class HttpNotificationDispatcher:
    """
    Sends lead notifications to an HTTP endpoint in the background.

    The httpx client is INJECTABLE so tests can use httpx.MockTransport.
    When no client is given, one is created with the configured timeout
    (and the optional transport) and owned by the dispatcher, which closes
    it once every queued send has finished.
    """

    def __init__(
        self,
        config: NotifyConfig | None = None,
        client: httpx.Client | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        self.config = config or get_config()
        self._owns_client = client is None
        self._client = client or httpx.Client(
            timeout=self.config.timeout_seconds,
            transport=transport,
        )
        self._executor = ThreadPoolExecutor(
            max_workers=self.config.max_workers,
            thread_name_prefix="concierge-notify",
        )
        self._lock = threading.Lock()
        self._pending: set[Future] = set()
        self._closing = False
        self._client_closed = False

    @property
    def is_closed(self) -> bool:
        """True once shutdown() was called and the owned client is released."""
        return self._closing and (self._client_closed or not self._owns_client)

    def dispatch(self, message: str) -> None:
        """Queue one delivery attempt and return immediately."""
        with self._lock:
            try:
                future = self._executor.submit(self.send, message)
            except RuntimeError as e:
                # Executor already shut down
                logger.warning(f"Notification dropped, dispatcher is closed: {e}")
                return
            self._pending.add(future)
        future.add_done_callback(self._on_done)

    def send(self, message: str) -> bool:
        """
        Make one blocking delivery attempt.

        Returns:
            True if the endpoint answered 200, False otherwise
        """
        url = self.config.endpoint_url
        with get_tracer().start_span(SPAN_NOTIFY_DISPATCH, {NOTIFY_ENDPOINT: url}) as span:
            try:
                response = self._client.post(
                    url,
                    json={"message": message},
                    timeout=self.config.timeout_seconds,
                )
            except httpx.TimeoutException as e:
                logger.warning(f"Notification to {url} timed out: {e}")
                span.set_attribute(NOTIFY_OUTCOME, "failed")
                return False
            except httpx.HTTPError as e:
                logger.warning(f"Notification to {url} failed: {e}")
                span.set_attribute(NOTIFY_OUTCOME, "failed")
                span.record_exception(e)
                return False

            span.set_attribute(NOTIFY_STATUS_CODE, response.status_code)
            if response.status_code != 200:
                logger.warning(
                    f"Notification endpoint {url} answered {response.status_code}"
                )
                span.set_attribute(NOTIFY_OUTCOME, "rejected")
                return False

            logger.info("Lead notification delivered")
            span.set_attribute(NOTIFY_OUTCOME, "delivered")
            return True

    def _on_done(self, future: Future) -> None:
        if not future.cancelled():
            exc = future.exception()
            if exc is not None:
                logger.error(f"Notification worker crashed: {exc!r}")

        with self._lock:
            self._pending.discard(future)
            drained = self._closing and not self._pending
        if drained:
            self._close_client()

    def _close_client(self) -> None:
        with self._lock:
            if not self._owns_client or self._client_closed:
                return
            self._client_closed = True
        self._client.close()
        logger.debug("Notification client closed")

    def shutdown(self, wait: bool = True) -> None:
        """
        Stop accepting work.

        With wait=True, block until queued sends finish. With wait=False,
        return at once; an owned client is closed by whichever send
        finishes last (or right away if nothing is queued).
        """
        with self._lock:
            self._closing = True
        self._executor.shutdown(wait=wait)
        with self._lock:
            drained = not self._pending
        if wait or drained:
            self._close_client()

    def __enter__(self) -> HttpNotificationDispatcher:
        return self

    def __exit__(self, *exc_info) -> None:
        self.shutdown(wait=True)


# ---------------------------------------------------------------------------
# LOGGING DISPATCHER (Development)
# ---------------------------------------------------------------------------


class LoggingNotificationDispatcher:
    """
    Dispatcher that only logs, for local development and disabled setups.
    """

    def __init__(self):
        self.sent: list[str] = []

    def dispatch(self, message: str) -> None:
        logger.info(f"Received notification request: {message}")
        self.sent.append(message)

    def shutdown(self, wait: bool = True) -> None:
        """No-op for the logging dispatcher."""
        pass


# ---------------------------------------------------------------------------
# FACTORY FUNCTION
# ---------------------------------------------------------------------------


def get_notification_dispatcher(
    config: NotifyConfig | None = None,
) -> HttpNotificationDispatcher | LoggingNotificationDispatcher:
    """
    Factory function to get the appropriate dispatcher.

    Args:
        config: Notify configuration (loaded from env if not provided)

    Returns:
        HttpNotificationDispatcher when notifications are enabled,
        LoggingNotificationDispatcher otherwise
    """
    config = config or get_config()
    if config.enabled:
        return HttpNotificationDispatcher(config)
    logger.debug("Notifications disabled, using logging dispatcher")
    return LoggingNotificationDispatcher()
