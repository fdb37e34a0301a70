"""
Sheet Shortcut

Bottom-of-page entry path: save the email if the store is reachable, then
always hand over the link to the shared fixes sheet. This path never touches
the AccessGate state machine.
"""
import logging
import os
from typing import Callable, Optional

from .clients import AccessStoreClient
from .state_machine import GateNotice

logger = logging.getLogger(__name__)

SHEET_URL = os.getenv(
    "FIXES_SHEET_URL",
    "https://docs.google.com/spreadsheets/d/1BaeOJeP5oIpbumgh5VN4LJZAhjuByTSssxbMlHuyHrI/view?gid=1589637341",
)

OPENING_MESSAGE = "Opening your 101 Fixes Sheet..."


class SheetShortcut:
    """Best-effort subscribe followed by an unconditional sheet link."""

    def __init__(
        self,
        client: AccessStoreClient,
        sheet_url: str = SHEET_URL,
        notify: Optional[Callable[[GateNotice], None]] = None,
    ):
        self.client = client
        self.sheet_url = sheet_url
        self.notify = notify
        self.busy = False

    async def request_sheet(self, email: str) -> Optional[str]:
        """
        Record email as a subscriber (best effort) and return the sheet URL.

        Returns None for an empty email or while a request is in flight.
        """
        if not email or self.busy:
            return None

        self.busy = True
        try:
            try:
                await self.client.subscribe(email)
            except Exception as e:
                # Any failure to save is non-blocking; the link is handed out anyway
                logger.warning(f"Non-blocking email save error for {email}: {e}")
        finally:
            self.busy = False

        if self.notify is not None:
            self.notify(GateNotice("success", OPENING_MESSAGE))
        logger.info(f"Sheet link handed out to {email}")
        return self.sheet_url
