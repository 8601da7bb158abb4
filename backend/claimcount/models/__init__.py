"""ORM Models — read-only SQLAlchemy mappings of the external claim tables.

Invariants:
    - All models inherit from Base (db/base.py)
    - The engine only SELECTs from these tables; it never inserts, updates or migrates them

Design Decisions:
    - One file per table for locality
    - All models imported here so Base.metadata is complete before any query runs
"""

from claimcount.models.policy_version import PolicyVersion  # noqa: F401
from claimcount.models.policy_driver import PolicyDriver  # noqa: F401
from claimcount.models.gis_claim import GisClaim  # noqa: F401
from claimcount.models.other_claim import OtherClaim  # noqa: F401
from claimcount.models.other_claim_version import OtherClaimVersion  # noqa: F401
