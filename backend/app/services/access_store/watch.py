"""
Subscriber Watch Hub

Publish-on-change registry for subscriber access. Listeners register for one
exact email and are called with the new AccessStatus after every committed
write to that subscriber. This is what makes the access check a live read
instead of a poll.
"""
import logging
import threading
from collections import defaultdict
from typing import Callable, Dict, List

logger = logging.getLogger(__name__)

AccessListener = Callable[["AccessStatus"], None]


class SubscriberWatchHub:
    """Thread-safe listener registry keyed by email."""

    def __init__(self):
        self._lock = threading.Lock()
        self._listeners: Dict[str, List[AccessListener]] = defaultdict(list)

    def subscribe(self, email: str, listener: AccessListener) -> Callable[[], None]:
        """
        Register a listener for one email.

        Returns an unsubscribe callable. Calling it more than once is harmless.
        """
        with self._lock:
            self._listeners[email].append(listener)

        def unsubscribe():
            with self._lock:
                listeners = self._listeners.get(email)
                if not listeners or listener not in listeners:
                    return
                listeners.remove(listener)
                if not listeners:
                    del self._listeners[email]

        return unsubscribe

    def listener_count(self, email: str) -> int:
        with self._lock:
            return len(self._listeners.get(email, ()))

    def publish(self, email: str, status) -> None:
        """Call every listener registered for email with the new status."""
        with self._lock:
            listeners = list(self._listeners.get(email, ()))

        for listener in listeners:
            try:
                listener(status)
            except Exception:
                # A dead watcher must not fail the write that triggered it
                logger.exception(f"Access listener failed for {email}")


# Process-wide hub shared by the API routers
subscriber_watch_hub = SubscriberWatchHub()
