"""Claim Count Schemas — public response for POST /api/v1/claim-counts."""

from datetime import date

from pydantic import BaseModel

from claimcount.core.domain_types import WindowDirection


class ClaimCountResponse(BaseModel):
    """Total claim count with per-source breakdown and the window applied."""
    claim_count: int
    by_source: dict[str, int]
    window_boundary: date
    window_direction: WindowDirection
