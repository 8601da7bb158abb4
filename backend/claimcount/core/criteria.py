"""Criteria Model — immutable, validated claim count criteria.

Invariants:
    - Criteria is frozen; optional fields left as None impose no restriction
    - window_years >= 0, policy_id > 0, dates are real calendar dates
    - Integer fields are strict: booleans and numeric strings are rejected
    - Enum inputs are case-insensitive and accept legacy one-letter codes
    - parse_criteria raises core ValidationError (never pydantic's) with every failing field

Design Decisions:
    - Pydantic model in core: same class validates programmatic callers and the HTTP body
    - extra="forbid": a misspelled optional filter must fail instead of silently widening the count
"""

from collections.abc import Mapping
from datetime import date
from typing import Annotated, Any

from pydantic import (
    BaseModel, ConfigDict, Field, Strict, StrictInt, ValidationInfo, field_validator,
)
from pydantic import ValidationError as PydanticValidationError

from claimcount.core.domain_types import AtFault, DriverId, PolicyId, WindowDirection
from claimcount.core.errors import ErrorContext, ValidationError

_AT_FAULT_CODES = {
    "y": AtFault.ONLY_AT_FAULT,
    "n": AtFault.ONLY_NOT_AT_FAULT,
    "a": AtFault.ANY,
}

# legacy "before period" flag: Y = before, N = during
_DIRECTION_CODES = {
    "y": WindowDirection.BEFORE,
    "n": WindowDirection.DURING,
}


class Criteria(BaseModel):
    """Filter parameters for one claim count."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    policy_id: PolicyId = Field(gt=0, strict=True)
    policy_version_date: date
    anchor_date: date
    window_years: int = Field(ge=0, strict=True)
    at_fault: AtFault
    window_direction: WindowDirection = WindowDirection.DURING

    vehicle_location_id: StrictInt | None = None
    driver_id: Annotated[DriverId, Strict()] | None = None
    claim_type_code: StrictInt | None = None
    plan_code: StrictInt | None = None

    @field_validator("window_years")
    @classmethod
    def window_within_calendar(cls, v: int, info: ValidationInfo) -> int:
        anchor = info.data.get("anchor_date")
        if anchor is not None and v >= anchor.year:
            raise ValueError("window reaches before year 1")
        return v

    @field_validator("at_fault", mode="before")
    @classmethod
    def normalize_at_fault(cls, v: Any) -> Any:
        if isinstance(v, str):
            key = v.strip().lower()
            return _AT_FAULT_CODES.get(key, key)
        return v

    @field_validator("window_direction", mode="before")
    @classmethod
    def normalize_window_direction(cls, v: Any) -> Any:
        if v is None:
            return WindowDirection.DURING
        if isinstance(v, str):
            key = v.strip().lower()
            return _DIRECTION_CODES.get(key, key)
        return v


def parse_criteria(raw: Mapping[str, Any] | Criteria) -> Criteria:
    """Validate raw caller input into Criteria. Pure, no IO."""
    if isinstance(raw, Criteria):
        return raw
    if not isinstance(raw, Mapping):
        raise ValidationError(
            f"Criteria must be a mapping, got {type(raw).__name__}", ["__root__"],
        )
    try:
        return Criteria.model_validate(dict(raw))
    except PydanticValidationError as e:
        errors = e.errors(include_url=False)
        fields = sorted({
            ".".join(str(part) for part in err["loc"]) or "__root__"
            for err in errors
        })
        raise ValidationError(
            f"Invalid criteria: {', '.join(fields)}",
            fields,
            ErrorContext(
                policy_id=_policy_id_hint(raw),
                debug_info={"errors": [
                    {"field": ".".join(str(p) for p in err["loc"]), "message": err["msg"]}
                    for err in errors
                ]},
            ),
        ) from e


def _policy_id_hint(raw: Mapping[str, Any]) -> int | None:
    value = raw.get("policy_id")
    return value if isinstance(value, int) and not isinstance(value, bool) else None
