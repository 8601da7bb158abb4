"""Source Records — the two claim shapes and their fixed, non-parameterized exclusions.

Invariants:
    - Records are read-only snapshots; nothing here mutates them
    - GIS: countable iff application code is overridden/automatic and no related claim is linked
    - Non-GIS: countable iff application code is overridden/automatic, amount >= 0 and
      the charge status (missing = default status) is not the deleted status
    - Non-GIS subject linkage is two-valued: claim subject OR driver subject

Design Decisions:
    - field_values() adapts each shape to RecordField so one RecordPredicate serves both
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Any

from claimcount.core.domain_types import ClassificationCodes, RecordField


@dataclass(frozen=True)
class GisClaimRecord:
    """Claim recorded by the GIS system."""
    policy_id: int
    policy_version_date: date
    location_id: int | None
    subject_id: int | None
    classification_code: int
    claim_type_code: int | None
    plan_code: int | None
    loss_date: date
    application_code: int
    related_claim_no: int | None = None

    def field_values(self, field: RecordField) -> tuple[Any, ...]:
        return (getattr(self, field.value),)

    def is_countable(self, codes: ClassificationCodes) -> bool:
        return (
            self.application_code in codes.applied
            and self.related_claim_no is None
        )


@dataclass(frozen=True)
class OtherClaimRecord:
    """Non-GIS claim joined with its claim version row."""
    policy_id: int
    policy_version_date: date
    location_id: int | None
    subject_id: int
    driver_subject_id: int | None
    classification_code: int
    claim_type_code: int | None
    plan_code: int | None
    loss_date: date
    application_code: int
    amount: Decimal
    charge_status_code: str | None = None

    def field_values(self, field: RecordField) -> tuple[Any, ...]:
        if field is RecordField.SUBJECT_ID:
            return (self.subject_id, self.driver_subject_id)
        return (getattr(self, field.value),)

    def is_countable(self, codes: ClassificationCodes) -> bool:
        status = self.charge_status_code or codes.default_charge_status
        return (
            self.application_code in codes.applied
            and self.amount >= 0
            and status != codes.deleted_charge_status
        )
