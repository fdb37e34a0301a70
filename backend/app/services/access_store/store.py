"""
Access Store

Durable record of which emails have been granted access to the fixes, and of
free-audit applications.

RULES:
- Email is the natural key of a subscriber and is stored exactly as given
- Subscribing is idempotent: a repeat call re-grants access, never duplicates
  the record and never moves subscribed_at
- Applications are append-only here; status changes happen elsewhere
- Email format is the caller's concern; any non-empty string is a valid key
"""
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import List, Optional, Union
from uuid import uuid4
import logging
import re

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from ...models.db_models import (
    EmailSubscriberDB, AuditApplicationDB, ApplicationStatus, MonthlyAdSpend
)
from .watch import SubscriberWatchHub

logger = logging.getLogger(__name__)

_SCHEME_RE = re.compile(r"^https?://")


class AccessStoreError(Exception):
    """The record store could not complete the operation (transient)."""


# =============================================================================
# RESULTS
# =============================================================================

@dataclass(frozen=True)
class SubscribeResult:
    is_new: bool
    has_access: bool

    def to_dict(self) -> dict:
        return {"success": True, "is_new": self.is_new, "has_access": self.has_access}


@dataclass(frozen=True)
class AccessStatus:
    email: str
    exists: bool
    has_access: bool

    def to_dict(self) -> dict:
        return {"exists": self.exists, "has_access": self.has_access}


# =============================================================================
# HELPERS
# =============================================================================

def normalize_store_url(store_url: str) -> str:
    """
    Trim the URL and make sure it carries an http(s) scheme.

    "example.com" -> "https://example.com"; URLs that already start with
    http:// or https:// are kept. An empty value stays empty.
    """
    normalized = store_url.strip()
    if normalized and not _SCHEME_RE.match(normalized):
        normalized = f"https://{normalized}"
    return normalized


# =============================================================================
# ACCESS STORE
# =============================================================================

class AccessStore:
    """
    Subscriber and application persistence.

    Every successful subscriber write is published on the watch hub after
    commit, so live access checks see it without polling.
    """

    def __init__(self, db_session: Session, watch_hub: Optional[SubscriberWatchHub] = None):
        """Initialize with database session and optional watch hub."""
        self.db = db_session
        self.watch_hub = watch_hub

    # =========================================================================
    # SUBSCRIBERS
    # =========================================================================

    def _get_subscriber(self, email: str) -> Optional[EmailSubscriberDB]:
        return self.db.query(EmailSubscriberDB).filter(
            EmailSubscriberDB.email == email
        ).first()

    def upsert_subscriber(self, email: str) -> SubscribeResult:
        """
        Grant access to email, creating the subscriber on first sight.

        Returns SubscribeResult(is_new, has_access). has_access is always True.
        """
        try:
            subscriber = self._get_subscriber(email)

            if subscriber:
                subscriber.access_granted = True
                is_new = False
            else:
                self.db.add(EmailSubscriberDB(
                    id=str(uuid4()),
                    email=email,
                    subscribed_at=datetime.now(timezone.utc),
                    access_granted=True,
                ))
                is_new = True

            self.db.commit()
        except IntegrityError:
            # Lost an insert race for the same email; the other row wins
            self.db.rollback()
            logger.info(f"Concurrent subscribe for {email}, re-granting existing record")
            return self._regrant_after_race(email)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Subscriber upsert failed for {email}: {e}")
            raise AccessStoreError("Subscriber store unavailable") from e

        if is_new:
            logger.info(f"New subscriber: {email}")
        else:
            logger.info(f"Access re-granted for existing subscriber: {email}")

        if self.watch_hub is not None:
            self.watch_hub.publish(email, AccessStatus(email=email, exists=True, has_access=True))

        return SubscribeResult(is_new=is_new, has_access=True)

    def _regrant_after_race(self, email: str) -> SubscribeResult:
        try:
            subscriber = self._get_subscriber(email)
            if subscriber is None:
                raise AccessStoreError("Subscriber vanished during upsert")
            subscriber.access_granted = True
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Subscriber upsert failed for {email}: {e}")
            raise AccessStoreError("Subscriber store unavailable") from e

        if self.watch_hub is not None:
            self.watch_hub.publish(email, AccessStatus(email=email, exists=True, has_access=True))

        return SubscribeResult(is_new=False, has_access=True)

    def check_access(self, email: str) -> AccessStatus:
        """Point lookup. Empty email short-circuits without touching the store."""
        if not email:
            return AccessStatus(email=email, exists=False, has_access=False)

        try:
            subscriber = self._get_subscriber(email)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Access check failed for {email}: {e}")
            raise AccessStoreError("Subscriber store unavailable") from e

        if subscriber is None:
            return AccessStatus(email=email, exists=False, has_access=False)

        return AccessStatus(
            email=email,
            exists=True,
            has_access=bool(subscriber.access_granted),
        )

    # =========================================================================
    # AUDIT APPLICATIONS
    # =========================================================================

    def record_application(
        self,
        name: str,
        brand: str,
        store_url: str,
        monthly_ad_spend: Union[MonthlyAdSpend, str],
        email: str,
    ) -> str:
        """
        Store a free-audit application and return its id.

        No dedup: the same email may apply any number of times.
        """
        spend = MonthlyAdSpend(monthly_ad_spend)
        application = AuditApplicationDB(
            id=str(uuid4()),
            name=name,
            brand=brand,
            store_url=normalize_store_url(store_url),
            monthly_ad_spend=spend.value,
            email=email,
            submitted_at=datetime.now(timezone.utc),
            status=ApplicationStatus.PENDING.value,
        )

        try:
            self.db.add(application)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Audit application insert failed for {email}: {e}")
            raise AccessStoreError("Application store unavailable") from e

        logger.info(f"Audit application {application.id} recorded for {brand} ({application.store_url})")
        return application.id

    def list_applications(
        self,
        status: Optional[Union[ApplicationStatus, str]] = None,
    ) -> List[AuditApplicationDB]:
        """All applications, oldest first, optionally limited to one status."""
        query = self.db.query(AuditApplicationDB)
        if status is not None:
            query = query.filter(AuditApplicationDB.status == ApplicationStatus(status).value)

        try:
            return query.order_by(AuditApplicationDB.submitted_at.asc()).all()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Listing audit applications failed: {e}")
            raise AccessStoreError("Application store unavailable") from e
