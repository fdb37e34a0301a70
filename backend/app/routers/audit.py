"""
101 Fixes - Audit Application Router
Lead capture for the free ecommerce audit.
"""
import logging

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, Field
from sqlalchemy.orm import Session

from ..database import get_db
from ..models.db_models import MonthlyAdSpend
from ..services.access_store import AccessStore, AccessStoreError
from .emails import STORE_FAILURE_DETAIL

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/audit", tags=["audit"])


# =============================================================================
# PYDANTIC MODELS
# =============================================================================

class AuditApplicationRequest(BaseModel):
    """Free audit application form."""
    name: str = Field(..., min_length=1, max_length=255)
    brand: str = Field(..., min_length=1, max_length=255)
    store_url: str = Field(..., min_length=1, max_length=2048, description="mystore.com or https://mystore.com")
    monthly_ad_spend: MonthlyAdSpend
    email: str = Field(..., min_length=1, max_length=320)


class AuditApplicationResponse(BaseModel):
    success: bool
    message: str
    application_id: str


# =============================================================================
# API ENDPOINTS
# =============================================================================

@router.post("/applications", response_model=AuditApplicationResponse)
async def submit_application(
    request: AuditApplicationRequest,
    db: Session = Depends(get_db),
):
    """
    Submit a free audit application.

    The store URL is normalized to carry a scheme. Repeat applications from
    the same email are all kept.
    """
    store = AccessStore(db)
    try:
        application_id = store.record_application(
            name=request.name,
            brand=request.brand,
            store_url=request.store_url,
            monthly_ad_spend=request.monthly_ad_spend,
            email=request.email,
        )
    except AccessStoreError:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=STORE_FAILURE_DETAIL,
        )

    return AuditApplicationResponse(
        success=True,
        message="Application submitted successfully",
        application_id=application_id,
    )
