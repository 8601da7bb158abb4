"""Resolved Subject — outcome of mapping a caller-facing driver number to a canonical subject.

Invariants:
    - Only constructed when a driver_id was supplied
    - subject_id None means "not found": driver-scoped clauses match nothing
"""

from dataclasses import dataclass

from claimcount.core.domain_types import DriverId, SubjectId


@dataclass(frozen=True)
class ResolvedSubject:
    driver_id: DriverId
    subject_id: SubjectId | None

    @property
    def found(self) -> bool:
        return self.subject_id is not None

    @classmethod
    def not_found(cls, driver_id: DriverId) -> "ResolvedSubject":
        return cls(driver_id=driver_id, subject_id=None)
