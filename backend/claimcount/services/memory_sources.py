"""In-Memory Collaborators — ClaimSource and SubjectLookup over plain record lists.

Invariants:
    - Same predicate semantics as the SQL sources (RecordPredicate.matches)
    - Fixed exclusions come from each record's is_countable(codes)
    - Records are never mutated
"""

from collections.abc import Iterable, Mapping
from datetime import date

from claimcount.core.domain_types import (
    ClassificationCodes, DriverId, PolicyId, SubjectId,
)
from claimcount.core.predicate import RecordPredicate, count_matching
from claimcount.core.source_records import GisClaimRecord, OtherClaimRecord


class InMemoryClaimSource:
    """ClaimSource evaluating the predicate against records already in memory."""

    def __init__(
        self,
        name: str,
        records: Iterable[GisClaimRecord | OtherClaimRecord],
        codes: ClassificationCodes,
    ):
        self.name = name
        self._records = tuple(records)
        self._codes = codes

    async def count(self, predicate: RecordPredicate) -> int:
        countable = (r for r in self._records if r.is_countable(self._codes))
        return count_matching(countable, predicate)


class InMemorySubjectLookup:
    """SubjectLookup over a {(policy_id, version_date, driver_id): subject_id} map."""

    def __init__(self, subjects: Mapping[tuple[int, date, int], int]):
        self._subjects = dict(subjects)

    async def find_subject(
        self, policy_id: PolicyId, policy_version_date: date, driver_id: DriverId,
    ) -> SubjectId | None:
        subject_id = self._subjects.get((policy_id, policy_version_date, driver_id))
        return SubjectId(subject_id) if subject_id is not None else None
