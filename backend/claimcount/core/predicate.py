"""Predicate Composer — one reusable AND-of-clauses predicate for every claim source.

Invariants:
    - An omitted optional criterion adds no clause (identity of the conjunction)
    - Policy id, policy version date, window and classification clauses are always present
    - Driver supplied but not resolved -> a MATCH_NOTHING clause on SUBJECT_ID (count is 0)
    - A clause matches a record when ANY of the record's candidate values satisfies it
    - Pure data: sources compile clauses to their own query language

Design Decisions:
    - Clause as (field, op, value) data rather than closures: the same object is
      evaluated in memory (matches) and compiled to SQL (services/claim_sources.py)
    - Multi-valued fields model linkage such as "claim subject OR driver subject"
"""

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Any, Protocol

from claimcount.core.criteria import Criteria
from claimcount.core.domain_types import RecordField, WindowDirection
from claimcount.core.subject import ResolvedSubject
from claimcount.core.time_window import TimeWindow


class Op(str, Enum):
    """Clause operators."""
    EQ = "eq"
    NE = "ne"
    GE = "ge"
    LT = "lt"
    MATCH_ALL = "match_all"
    MATCH_NOTHING = "match_nothing"


class RecordView(Protocol):
    """Anything a predicate can be evaluated against."""
    def field_values(self, field: RecordField) -> tuple[Any, ...]: ...


@dataclass(frozen=True)
class Clause:
    """Single test of one logical record field."""
    field: RecordField
    op: Op
    value: Any = None

    def test(self, candidate: Any) -> bool:
        match self.op:
            case Op.MATCH_ALL:
                return True
            case Op.MATCH_NOTHING:
                return False
            case Op.EQ:
                return candidate is not None and candidate == self.value
            case Op.NE:
                return candidate is not None and candidate != self.value
            case Op.GE:
                return candidate is not None and candidate >= self.value
            case Op.LT:
                return candidate is not None and candidate < self.value
        raise ValueError(f"Unknown operator: {self.op}")

    def matches(self, record: RecordView) -> bool:
        if self.op is Op.MATCH_ALL:
            return True
        return any(self.test(v) for v in record.field_values(self.field))


@dataclass(frozen=True)
class RecordPredicate:
    """Conjunction of clauses shared by all sources."""
    clauses: tuple[Clause, ...]

    def matches(self, record: RecordView) -> bool:
        return all(clause.matches(record) for clause in self.clauses)

    def clauses_for(self, field: RecordField) -> list[Clause]:
        return [c for c in self.clauses if c.field is field]


def optional_equals(field: RecordField, value: Any) -> list[Clause]:
    """Optional-equality: no clause when the criterion is absent."""
    if value is None:
        return []
    return [Clause(field, Op.EQ, value)]


def window_clause(window: TimeWindow) -> Clause:
    """DURING keeps loss dates on or after the boundary; BEFORE keeps the rest."""
    op = Op.GE if window.direction is WindowDirection.DURING else Op.LT
    return Clause(RecordField.LOSS_DATE, op, window.boundary)


def subject_clauses(resolved: ResolvedSubject | None) -> list[Clause]:
    if resolved is None:
        return []
    if not resolved.found:
        return [Clause(RecordField.SUBJECT_ID, Op.MATCH_NOTHING)]
    return [Clause(RecordField.SUBJECT_ID, Op.EQ, resolved.subject_id)]


def compose(
    criteria: Criteria,
    resolved_subject: ResolvedSubject | None,
    window: TimeWindow,
    classification: Clause,
) -> RecordPredicate:
    """Assemble the final predicate from resolved criteria. Pure."""
    clauses: list[Clause] = [
        Clause(RecordField.POLICY_ID, Op.EQ, criteria.policy_id),
        Clause(RecordField.POLICY_VERSION_DATE, Op.EQ, criteria.policy_version_date),
    ]
    clauses += optional_equals(RecordField.LOCATION_ID, criteria.vehicle_location_id)
    clauses += subject_clauses(resolved_subject)
    clauses += optional_equals(RecordField.CLAIM_TYPE_CODE, criteria.claim_type_code)
    clauses += optional_equals(RecordField.PLAN_CODE, criteria.plan_code)
    clauses.append(window_clause(window))
    clauses.append(classification)
    return RecordPredicate(clauses=tuple(clauses))


def count_matching(records: Iterable[RecordView], predicate: RecordPredicate) -> int:
    return sum(1 for r in records if predicate.matches(r))
