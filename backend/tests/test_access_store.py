"""
Tests for the Access Store.

Tests:
1. Subscribing is idempotent per email
2. Repeat subscribes re-grant access and keep subscribed_at
3. Access checks never mutate and short-circuit on empty email
4. Applications normalize the store URL and are never deduplicated
5. Store failures surface as AccessStoreError after a rollback
6. Committed writes are published on the watch hub
"""
from datetime import datetime, timedelta
from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from app.models.db_models import ApplicationStatus, AuditApplicationDB, EmailSubscriberDB, MonthlyAdSpend
from app.services.access_store import (
    AccessStatus,
    AccessStore,
    AccessStoreError,
    SubscriberWatchHub,
    normalize_store_url,
)


def _application(store, email="owner@brand.com", store_url="brand.com", spend="$0 to $2,000"):
    return store.record_application(
        name="Sam Owner",
        brand="Brand Co",
        store_url=store_url,
        monthly_ad_spend=spend,
        email=email,
    )


# =============================================================================
# TEST: SUBSCRIBERS
# =============================================================================

class TestUpsertSubscriber:

    def test_first_subscribe_creates_record(self, store, db_session):
        result = store.upsert_subscriber("a@x.com")

        assert result.is_new is True
        assert result.has_access is True
        assert result.to_dict() == {"success": True, "is_new": True, "has_access": True}

        rows = db_session.query(EmailSubscriberDB).all()
        assert len(rows) == 1
        assert rows[0].email == "a@x.com"
        assert rows[0].access_granted is True
        assert rows[0].subscribed_at is not None

    def test_repeat_subscribe_is_idempotent(self, store, db_session):
        store.upsert_subscriber("a@x.com")
        first_subscribed_at = db_session.query(EmailSubscriberDB).one().subscribed_at

        result = store.upsert_subscriber("a@x.com")

        assert result.is_new is False
        assert result.has_access is True
        row = db_session.query(EmailSubscriberDB).one()
        assert row.subscribed_at == first_subscribed_at

    def test_repeat_subscribe_regrants_revoked_access(self, store, db_session):
        store.upsert_subscriber("a@x.com")
        row = db_session.query(EmailSubscriberDB).one()
        row.access_granted = False
        db_session.commit()

        assert store.check_access("a@x.com").has_access is False

        result = store.upsert_subscriber("a@x.com")
        assert result.is_new is False
        assert store.check_access("a@x.com").has_access is True

    def test_email_stored_exactly_as_given(self, store, db_session):
        store.upsert_subscriber("Mixed@Case.com")
        result = store.upsert_subscriber("mixed@case.com")

        assert result.is_new is True
        assert db_session.query(EmailSubscriberDB).count() == 2

    def test_any_non_empty_string_is_a_key(self, store):
        assert store.upsert_subscriber("not-an-email").is_new is True
        assert store.check_access("not-an-email").has_access is True

    def test_committed_write_is_published(self, db_session):
        hub = SubscriberWatchHub()
        received = []
        hub.subscribe("a@x.com", received.append)

        AccessStore(db_session, hub).upsert_subscriber("a@x.com")

        assert received == [AccessStatus(email="a@x.com", exists=True, has_access=True)]

    def test_works_without_hub(self, db_session):
        assert AccessStore(db_session).upsert_subscriber("a@x.com").is_new is True

    def test_store_failure_raises_after_rollback(self):
        mock_db = MagicMock()
        mock_db.query.return_value.filter.return_value.first.return_value = None
        mock_db.commit.side_effect = OperationalError("INSERT", {}, Exception("database is down"))
        hub = MagicMock()

        with pytest.raises(AccessStoreError):
            AccessStore(mock_db, hub).upsert_subscriber("a@x.com")

        mock_db.rollback.assert_called_once()
        hub.publish.assert_not_called()

    def test_lost_insert_race_regrants_existing_row(self):
        """A concurrent insert of the same email ends as a re-grant, not an error."""
        existing = MagicMock()
        existing.access_granted = False

        mock_db = MagicMock()
        mock_db.query.return_value.filter.return_value.first.side_effect = [None, existing]
        mock_db.commit.side_effect = [
            IntegrityError("INSERT", {}, Exception("UNIQUE constraint failed")),
            None,
        ]
        hub = MagicMock()

        result = AccessStore(mock_db, hub).upsert_subscriber("a@x.com")

        assert result.is_new is False
        assert result.has_access is True
        assert existing.access_granted is True
        mock_db.rollback.assert_called_once()
        assert mock_db.commit.call_count == 2
        hub.publish.assert_called_once()


class TestCheckAccess:

    def test_unknown_email(self, store):
        status = store.check_access("nobody@x.com")
        assert status.exists is False
        assert status.has_access is False
        assert status.to_dict() == {"exists": False, "has_access": False}

    def test_known_email(self, store):
        store.upsert_subscriber("a@x.com")
        assert store.check_access("a@x.com").to_dict() == {"exists": True, "has_access": True}

    def test_empty_email_does_not_query(self):
        mock_db = MagicMock()
        status = AccessStore(mock_db).check_access("")

        assert status.exists is False
        assert status.has_access is False
        mock_db.query.assert_not_called()

    def test_does_not_create_records(self, store, db_session):
        store.check_access("a@x.com")
        assert db_session.query(EmailSubscriberDB).count() == 0

    def test_store_failure(self):
        mock_db = MagicMock()
        mock_db.query.return_value.filter.return_value.first.side_effect = OperationalError(
            "SELECT", {}, Exception("database is down")
        )
        with pytest.raises(AccessStoreError):
            AccessStore(mock_db).check_access("a@x.com")
        mock_db.rollback.assert_called_once()


# =============================================================================
# TEST: AUDIT APPLICATIONS
# =============================================================================

class TestNormalizeStoreUrl:

    @pytest.mark.parametrize("raw,expected", [
        ("mystore.com", "https://mystore.com"),
        ("  mystore.com  ", "https://mystore.com"),
        ("https://mystore.com", "https://mystore.com"),
        ("http://mystore.com", "http://mystore.com"),
        ("www.mystore.com/shop", "https://www.mystore.com/shop"),
        ("", ""),
        ("   ", ""),
    ])
    def test_normalize(self, raw, expected):
        assert normalize_store_url(raw) == expected


class TestRecordApplication:

    def test_records_pending_application(self, store, db_session):
        application_id = _application(store)

        row = db_session.query(AuditApplicationDB).one()
        assert row.id == application_id
        assert row.name == "Sam Owner"
        assert row.brand == "Brand Co"
        assert row.store_url == "https://brand.com"
        assert row.monthly_ad_spend == "$0 to $2,000"
        assert row.email == "owner@brand.com"
        assert row.status == ApplicationStatus.PENDING.value
        assert row.submitted_at is not None

    def test_accepts_enum_bucket(self, store, db_session):
        _application(store, spend=MonthlyAdSpend.OVER_10K)
        assert db_session.query(AuditApplicationDB).one().monthly_ad_spend == "$10,001 and above"

    def test_same_email_may_apply_twice(self, store, db_session):
        first = _application(store)
        second = _application(store)

        assert first != second
        assert db_session.query(AuditApplicationDB).count() == 2

    def test_unknown_spend_bucket_rejected(self, store, db_session):
        with pytest.raises(ValueError):
            _application(store, spend="a lot")
        assert db_session.query(AuditApplicationDB).count() == 0

    def test_applying_does_not_grant_access(self, store):
        _application(store, email="owner@brand.com")
        assert store.check_access("owner@brand.com").exists is False

    def test_store_failure(self):
        mock_db = MagicMock()
        mock_db.commit.side_effect = OperationalError("INSERT", {}, Exception("database is down"))

        with pytest.raises(AccessStoreError):
            _application(AccessStore(mock_db))
        mock_db.rollback.assert_called_once()


class TestListApplications:

    def test_oldest_first_and_status_filter(self, store, db_session):
        newer = _application(store, email="newer@x.com")
        older = _application(store, email="older@x.com")

        now = datetime(2024, 1, 10, 12, 0, 0)
        db_session.get(AuditApplicationDB, newer).submitted_at = now
        db_session.get(AuditApplicationDB, older).submitted_at = now - timedelta(days=1)
        db_session.get(AuditApplicationDB, newer).status = ApplicationStatus.REVIEWED.value
        db_session.commit()

        assert [a.id for a in store.list_applications()] == [older, newer]
        assert [a.id for a in store.list_applications(status="reviewed")] == [newer]
        assert [a.id for a in store.list_applications(status=ApplicationStatus.PENDING)] == [older]

    def test_unknown_status_rejected(self, store):
        with pytest.raises(ValueError):
            store.list_applications(status="archived")
