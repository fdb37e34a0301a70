"""
101 Fixes - Catalog Router
Read-only access to the fixes catalog. Progress stays on the visitor's
device, so there is no progress filter here.
"""
from collections import Counter
from typing import Dict, List, Optional

from fastapi import APIRouter, HTTPException, Query
from pydantic import BaseModel

from ..data import FIXES, FIXES_BY_ID
from ..models.catalog import ALL, Channel, Difficulty, FixQuery
from ..services.catalog import filter_fixes

router = APIRouter(prefix="/fixes", tags=["fixes"])


# =============================================================================
# PYDANTIC MODELS
# =============================================================================

class FixResponse(BaseModel):
    id: int
    difficulty: Difficulty
    channel: Channel
    problem: str
    solution: str
    example: str


class FixListResponse(BaseModel):
    fixes: List[FixResponse]
    total: int


class CatalogSummary(BaseModel):
    total: int
    by_difficulty: Dict[str, int]
    by_channel: Dict[str, int]


# =============================================================================
# API ENDPOINTS
# =============================================================================

@router.get("", response_model=FixListResponse)
async def list_fixes(
    search: str = Query("", max_length=200),
    difficulty: Optional[Difficulty] = Query(None),
    channel: Optional[Channel] = Query(None),
):
    """Fixes matching every given filter, in catalog order."""
    query = FixQuery(
        search_term=search,
        difficulty=difficulty or ALL,
        channel=channel or ALL,
    )
    matches = filter_fixes(FIXES, query)
    return FixListResponse(
        fixes=[FixResponse(**fix.to_dict()) for fix in matches],
        total=len(matches),
    )


@router.get("/summary", response_model=CatalogSummary)
async def catalog_summary():
    """Catalog size broken down by difficulty and channel."""
    by_difficulty = Counter(fix.difficulty.value for fix in FIXES)
    by_channel = Counter(fix.channel.value for fix in FIXES)
    return CatalogSummary(
        total=len(FIXES),
        by_difficulty={difficulty.value: by_difficulty[difficulty.value] for difficulty in Difficulty},
        by_channel={channel.value: by_channel[channel.value] for channel in Channel},
    )


@router.get("/{fix_id}", response_model=FixResponse)
async def get_fix(fix_id: int):
    """Get a single fix by id."""
    fix = FIXES_BY_ID.get(fix_id)
    if fix is None:
        raise HTTPException(status_code=404, detail="Fix not found")
    return FixResponse(**fix.to_dict())
