"""
Access Store Services

Subscriber access records, audit applications, and the live access watch hub.
"""

from .store import (
    AccessStore,
    AccessStoreError,
    AccessStatus,
    SubscribeResult,
    normalize_store_url,
)
from .watch import SubscriberWatchHub, subscriber_watch_hub

__all__ = [
    'AccessStore',
    'AccessStoreError',
    'AccessStatus',
    'SubscribeResult',
    'normalize_store_url',
    'SubscriberWatchHub',
    'subscriber_watch_hub',
]
