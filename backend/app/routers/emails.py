"""
101 Fixes - Email Access Router
Subscribe for access, check access, and watch access live.
"""
import asyncio
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, WebSocket, status
from pydantic import BaseModel, Field
from sqlalchemy.orm import Session

from ..database import SessionLocal, get_db
from ..services.access_store import (
    AccessStore, AccessStoreError, AccessStatus, subscriber_watch_hub
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/emails", tags=["emails"])

STORE_FAILURE_DETAIL = "Something went wrong. Please try again."


# =============================================================================
# PYDANTIC MODELS
# =============================================================================

class SubscribeRequest(BaseModel):
    # Any non-empty string is accepted; no format validation
    email: str = Field(..., min_length=1, max_length=320)


class SubscribeResponse(BaseModel):
    success: bool
    is_new: bool
    has_access: bool


class AccessResponse(BaseModel):
    exists: bool
    has_access: bool


# =============================================================================
# API ENDPOINTS
# =============================================================================

@router.post("/subscribe", response_model=SubscribeResponse)
async def subscribe_email(
    request: SubscribeRequest,
    db: Session = Depends(get_db),
):
    """
    Grant access to the fixes for an email.

    Idempotent: repeat calls return is_new=False and keep a single record.
    """
    store = AccessStore(db, subscriber_watch_hub)
    try:
        result = store.upsert_subscriber(request.email)
    except AccessStoreError:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=STORE_FAILURE_DETAIL,
        )
    return SubscribeResponse(**result.to_dict())


@router.get("/access", response_model=AccessResponse)
async def check_email_access(
    email: str = Query("", max_length=320),
    db: Session = Depends(get_db),
):
    """Whether an email exists and has access. Never mutates."""
    store = AccessStore(db, subscriber_watch_hub)
    try:
        access = store.check_access(email)
    except AccessStoreError:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=STORE_FAILURE_DETAIL,
        )
    return AccessResponse(**access.to_dict())


async def _next_update(websocket: WebSocket, updates: "asyncio.Queue[AccessStatus]") -> Optional[AccessStatus]:
    """Wait for the next published status. Returns None once the client goes away."""
    while True:
        receive = asyncio.ensure_future(websocket.receive())
        update = asyncio.ensure_future(updates.get())
        done, pending = await asyncio.wait({receive, update}, return_when=asyncio.FIRST_COMPLETED)
        for task in pending:
            task.cancel()

        if update in done:
            return update.result()
        if receive.result()["type"] == "websocket.disconnect":
            return None


@router.websocket("/access/watch")
async def watch_email_access(
    websocket: WebSocket,
    email: str = Query(""),
):
    """
    Live access check.

    Sends the current status, then every change, and closes once access is
    granted. Access only ever flips from false to true here.
    """
    await websocket.accept()

    loop = asyncio.get_running_loop()
    updates: "asyncio.Queue[AccessStatus]" = asyncio.Queue()
    unsubscribe = subscriber_watch_hub.subscribe(
        email, lambda access: loop.call_soon_threadsafe(updates.put_nowait, access)
    )

    try:
        db = SessionLocal()
        try:
            access = AccessStore(db, subscriber_watch_hub).check_access(email)
        except AccessStoreError:
            await websocket.close(code=1011, reason=STORE_FAILURE_DETAIL)
            return
        finally:
            # The socket can stay open for minutes; do not hold a connection
            db.close()

        await websocket.send_json(access.to_dict())
        if not email:
            # Nothing can ever grant access to an empty email
            await websocket.close()
            return

        while not access.has_access:
            access = await _next_update(websocket, updates)
            if access is None:
                logger.debug(f"Access watcher for {email} disconnected")
                return
            await websocket.send_json(access.to_dict())

        await websocket.close()
    finally:
        unsubscribe()
