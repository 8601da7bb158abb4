"""Claim Count Route — POST criteria, get the combined GIS + non-GIS claim count.

Invariants:
    - Body is validated as core Criteria; malformed bodies never reach the counter
    - LookupFailure / SourceUnavailable propagate to the global handler (503), never a partial count
"""

import logging

from fastapi import APIRouter, Depends, Request

from claimcount.core.criteria import Criteria
from claimcount.infrastructure.database import get_db_manager
from claimcount.schemas.claim_count import ClaimCountResponse
from claimcount.services.claim_counter import ClaimCounter, build_sql_claim_counter

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/claim-counts", tags=["claim-counts"])


def get_claim_counter(
    request: Request, db=Depends(get_db_manager),
) -> ClaimCounter:
    """FastAPI dependency wiring the SQL collaborators."""
    codes = request.app.state.settings.classification_codes()
    return build_sql_claim_counter(db, codes)


@router.post("", response_model=ClaimCountResponse)
async def count_claims(
    criteria: Criteria, counter: ClaimCounter = Depends(get_claim_counter),
):
    """Count claims for a policy version under the given criteria."""
    result = await counter.count(criteria)
    return ClaimCountResponse(
        claim_count=result.total,
        by_source=result.by_source,
        window_boundary=result.window.boundary,
        window_direction=result.window.direction,
    )
