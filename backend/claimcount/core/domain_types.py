"""Domain Types — identity types, enums and classification constants.

Invariants:
    - PolicyId, DriverId, SubjectId wrap ints — driver and subject ids are never interchangeable
    - All valid selector states encoded as Enums — no raw string matching downstream
    - ClassificationCodes is immutable and injected, never read from module globals

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

PolicyId = NewType("PolicyId", int)
DriverId = NewType("DriverId", int)      # caller-facing driver number on the policy
SubjectId = NewType("SubjectId", int)    # canonical person id used by claim rows


# ─── Enums ───────────────────────────────────────────────────────

class AtFault(str, Enum):
    """Ternary at-fault selector."""
    ONLY_AT_FAULT = "only_at_fault"
    ONLY_NOT_AT_FAULT = "only_not_at_fault"
    ANY = "any"


class WindowDirection(str, Enum):
    """Which side of the window boundary a loss date must fall on."""
    BEFORE = "before"
    DURING = "during"


class RecordField(str, Enum):
    """Logical claim fields a clause can test, independent of source shape."""
    POLICY_ID = "policy_id"
    POLICY_VERSION_DATE = "policy_version_date"
    LOCATION_ID = "location_id"
    SUBJECT_ID = "subject_id"
    CLASSIFICATION_CODE = "classification_code"
    CLAIM_TYPE_CODE = "claim_type_code"
    PLAN_CODE = "plan_code"
    LOSS_DATE = "loss_date"


# ─── Classification Constants ────────────────────────────────────

CHARGEABLE_CODE = 100
OVERRIDDEN_APPLICATION_CODE = 1
AUTOMATIC_APPLICATION_CODE = 4
DELETED_CHARGE_STATUS = "D"
DEFAULT_CHARGE_STATUS = "N"


@dataclass(frozen=True)
class ClassificationCodes:
    """Process-wide classification values injected into sources and the counter."""
    chargeable: int = CHARGEABLE_CODE
    applied: frozenset[int] = field(
        default_factory=lambda: frozenset(
            {OVERRIDDEN_APPLICATION_CODE, AUTOMATIC_APPLICATION_CODE},
        ),
    )
    deleted_charge_status: str = DELETED_CHARGE_STATUS
    default_charge_status: str = DEFAULT_CHARGE_STATUS
