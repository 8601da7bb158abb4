"""Service test fixtures — the claim dataset as in-memory collaborators and as a seeded SQLite db.

Invariants:
    - memory_* and seeded_db expose the same rows (tests/services/claim_dataset.py)
"""

import pytest

from claimcount.services.memory_sources import InMemoryClaimSource, InMemorySubjectLookup
from tests.services.claim_dataset import (
    CODES, DRIVERS, GIS_RECORDS, OTHER_RECORDS, orm_rows,
)


@pytest.fixture
def memory_sources():
    return [
        InMemoryClaimSource("gis", GIS_RECORDS, CODES),
        InMemoryClaimSource("non_gis", OTHER_RECORDS, CODES),
    ]


@pytest.fixture
def memory_lookup():
    return InMemorySubjectLookup(DRIVERS)


@pytest.fixture
async def seeded_db(db_manager, seed):
    await seed(*orm_rows(GIS_RECORDS, OTHER_RECORDS))
    return db_manager
