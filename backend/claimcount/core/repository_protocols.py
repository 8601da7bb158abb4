"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - Collaborators are read-only; none of these methods writes
    - find_subject returns None for "driver not found"; it raises only when unavailable
    - count returns a non-negative int, 0 when no rows match

Design Decisions:
    - Protocol over ABC: structural subtyping, SQL and in-memory sources share no base class
    - Async in Protocol: implementations do IO; the pure composition in core stays sync
"""

from datetime import date
from typing import Protocol

from claimcount.core.domain_types import DriverId, PolicyId, SubjectId
from claimcount.core.predicate import RecordPredicate


class SubjectLookup(Protocol):
    """Resolves a driver number on a policy version to its canonical subject."""
    async def find_subject(
        self, policy_id: PolicyId, policy_version_date: date, driver_id: DriverId,
    ) -> SubjectId | None: ...


class ClaimSource(Protocol):
    """One claim collection able to count records matching a predicate."""
    name: str

    async def count(self, predicate: RecordPredicate) -> int: ...
