"""
Tests for the sheet shortcut: best-effort subscribe, unconditional sheet link.
"""
import asyncio
from unittest.mock import AsyncMock

from app.database import SessionLocal
from app.services.access_gate import (
    GateNotice,
    LocalAccessStoreClient,
    OPENING_MESSAGE,
    SHEET_URL,
    SheetShortcut,
)
from app.services.access_store import AccessStore, AccessStoreError, SubscribeResult


SHEET = "https://sheets.example.com/101-fixes"


class TestSheetShortcut:

    def test_saves_email_and_returns_link(self, watch_hub):
        notices = []
        shortcut = SheetShortcut(LocalAccessStoreClient(SessionLocal, watch_hub), SHEET, notices.append)

        url = asyncio.run(shortcut.request_sheet("reader@x.com"))

        assert url == SHEET
        assert notices == [GateNotice("success", OPENING_MESSAGE)]
        db = SessionLocal()
        try:
            assert AccessStore(db).check_access("reader@x.com").has_access is True
        finally:
            db.close()

    def test_store_failure_still_returns_link(self):
        client = AsyncMock()
        client.subscribe.side_effect = AccessStoreError("store unavailable")
        notices = []

        url = asyncio.run(SheetShortcut(client, SHEET, notices.append).request_sheet("reader@x.com"))

        assert url == SHEET
        assert notices == [GateNotice("success", OPENING_MESSAGE)]
        client.subscribe.assert_awaited_once_with("reader@x.com")

    def test_any_client_failure_still_returns_link(self):
        client = AsyncMock()
        client.subscribe.side_effect = ConnectionError("network down")
        shortcut = SheetShortcut(client, SHEET)

        assert asyncio.run(shortcut.request_sheet("reader@x.com")) == SHEET
        assert shortcut.busy is False

    def test_empty_email_returns_nothing(self):
        client = AsyncMock()

        url = asyncio.run(SheetShortcut(client, SHEET).request_sheet(""))

        assert url is None
        client.subscribe.assert_not_called()

    def test_busy_request_ignored(self):
        client = AsyncMock()
        shortcut = SheetShortcut(client, SHEET)
        shortcut.busy = True

        assert asyncio.run(shortcut.request_sheet("reader@x.com")) is None
        client.subscribe.assert_not_called()

    def test_repeat_requests_each_return_link(self):
        client = AsyncMock()
        client.subscribe.return_value = SubscribeResult(is_new=False, has_access=True)
        shortcut = SheetShortcut(client, SHEET)

        assert asyncio.run(shortcut.request_sheet("reader@x.com")) == SHEET
        assert asyncio.run(shortcut.request_sheet("reader@x.com")) == SHEET
        assert shortcut.busy is False

    def test_default_link(self):
        assert SheetShortcut(AsyncMock()).sheet_url == SHEET_URL
        assert SHEET_URL.startswith("https://")
