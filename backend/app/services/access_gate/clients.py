"""
Access Store Clients

The gate talks to the Access Store through an async client. Store calls are
the only suspension points in the visitor flow.
"""
import asyncio
import logging
from typing import Callable, Optional, Protocol, Union

from sqlalchemy.orm import sessionmaker

from ...models.db_models import MonthlyAdSpend
from ..access_store import AccessStore, AccessStatus, SubscribeResult, SubscriberWatchHub

logger = logging.getLogger(__name__)

AccessCallback = Callable[[AccessStatus], None]


class AccessWatch:
    """Handle for a live access watch. cancel() stops further deliveries."""

    def __init__(self, email: str, unsubscribe: Callable[[], None]):
        self.email = email
        self._unsubscribe = unsubscribe
        self.cancelled = False

    def cancel(self) -> None:
        if self.cancelled:
            return
        self.cancelled = True
        self._unsubscribe()


class AccessStoreClient(Protocol):
    """Async boundary of the Access Store as seen by the visitor side."""

    async def subscribe(self, email: str) -> SubscribeResult:
        ...

    async def check_access(self, email: str) -> AccessStatus:
        ...

    async def submit_application(
        self,
        name: str,
        brand: str,
        store_url: str,
        monthly_ad_spend: Union[MonthlyAdSpend, str],
        email: str,
    ) -> str:
        ...

    async def watch(self, email: str, callback: AccessCallback) -> AccessWatch:
        ...


class LocalAccessStoreClient:
    """
    Runs the Access Store in-process.

    Each call gets its own session and runs in a worker thread so the event
    loop never blocks on the database. Watch callbacks are marshalled back
    onto the loop that created the watch.
    """

    def __init__(self, session_factory: sessionmaker, watch_hub: SubscriberWatchHub):
        self.session_factory = session_factory
        self.watch_hub = watch_hub

    def _run(self, operation):
        db = self.session_factory()
        try:
            return operation(AccessStore(db, self.watch_hub))
        finally:
            db.close()

    async def subscribe(self, email: str) -> SubscribeResult:
        return await asyncio.to_thread(self._run, lambda store: store.upsert_subscriber(email))

    async def check_access(self, email: str) -> AccessStatus:
        return await asyncio.to_thread(self._run, lambda store: store.check_access(email))

    async def submit_application(
        self,
        name: str,
        brand: str,
        store_url: str,
        monthly_ad_spend: Union[MonthlyAdSpend, str],
        email: str,
    ) -> str:
        return await asyncio.to_thread(
            self._run,
            lambda store: store.record_application(
                name=name,
                brand=brand,
                store_url=store_url,
                monthly_ad_spend=monthly_ad_spend,
                email=email,
            ),
        )

    async def watch(self, email: str, callback: AccessCallback) -> AccessWatch:
        """
        Watch one email.

        The current status is delivered first, then every published change,
        until the returned handle is cancelled.
        """
        loop = asyncio.get_running_loop()
        handle: Optional[AccessWatch] = None

        def deliver(status: AccessStatus):
            if handle is not None and not handle.cancelled:
                callback(status)

        def on_change(status: AccessStatus):
            loop.call_soon_threadsafe(deliver, status)

        # Register before the snapshot so no write can slip in between
        handle = AccessWatch(email, self.watch_hub.subscribe(email, on_change))
        try:
            snapshot = await self.check_access(email)
        except Exception:
            handle.cancel()
            raise

        deliver(snapshot)
        return handle
