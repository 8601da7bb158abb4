"""SQL Claim Sources — GIS and non-GIS claim counts for one composed predicate.

Invariants:
    - Both sources compile the SAME RecordPredicate; only the field-to-column map differs
    - Fixed exclusions are baked into each source and are not criteria:
        GIS:     application code overridden/automatic, related_claim_no IS NULL
        non-GIS: application code overridden/automatic, amount >= 0,
                 COALESCE(charge_status_code, default) != deleted
    - Both join policy_versions: claims of a missing policy version are not counted
    - count() returns a non-negative int (0 for no rows); DatabaseError -> SourceUnavailable
    - Each count() opens its own session so sources can run concurrently

Design Decisions:
    - Shared base class holds the compile/execute path; subclasses supply the
      FROM clause, the column map and the exclusions
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence

from sqlalchemy import Select, and_, false, func, or_, select, true
from sqlalchemy.sql.elements import ColumnElement

from claimcount.core.domain_types import ClassificationCodes, RecordField
from claimcount.core.errors import DatabaseError, ErrorContext, SourceUnavailable
from claimcount.core.predicate import Clause, Op, RecordPredicate
from claimcount.infrastructure.database import DatabaseSessionManager
from claimcount.models.gis_claim import GisClaim
from claimcount.models.other_claim import OtherClaim
from claimcount.models.other_claim_version import OtherClaimVersion
from claimcount.models.policy_version import PolicyVersion

logger = logging.getLogger(__name__)

GIS_SOURCE = "gis"
NON_GIS_SOURCE = "non_gis"


def compile_clause(
    clause: Clause, columns: Sequence[ColumnElement],
) -> ColumnElement[bool]:
    """Translate one clause into SQL; several columns means any of them may match."""
    match clause.op:
        case Op.MATCH_ALL:
            return true()
        case Op.MATCH_NOTHING:
            return false()
        case Op.EQ:
            tests = [col == clause.value for col in columns]
        case Op.NE:
            tests = [col != clause.value for col in columns]
        case Op.GE:
            tests = [col >= clause.value for col in columns]
        case Op.LT:
            tests = [col < clause.value for col in columns]
        case _:
            raise ValueError(f"Unknown operator: {clause.op}")
    return tests[0] if len(tests) == 1 else or_(*tests)


class SqlClaimSource(ABC):
    """Counts rows of one claim table that satisfy a RecordPredicate."""

    name: str = ""

    def __init__(self, db: DatabaseSessionManager, codes: ClassificationCodes):
        self._db = db
        self._codes = codes

    @abstractmethod
    def columns(self) -> Mapping[RecordField, Sequence[ColumnElement]]:
        ...

    @abstractmethod
    def base_query(self) -> Select:
        ...

    @abstractmethod
    def exclusions(self) -> list[ColumnElement[bool]]:
        ...

    def build_query(self, predicate: RecordPredicate) -> Select:
        columns = self.columns()
        conditions = [
            compile_clause(clause, columns[clause.field])
            for clause in predicate.clauses
        ]
        return self.base_query().where(*self.exclusions(), *conditions)

    async def count(self, predicate: RecordPredicate) -> int:
        query = self.build_query(predicate)
        policy_id = _policy_id(predicate)
        try:
            async with self._db.session() as session:
                result = await session.execute(query)
                total = result.scalar_one()
        except DatabaseError as e:
            failure = SourceUnavailable(
                self.name, e.message, ErrorContext(policy_id=policy_id),
            )
            logger.error(failure.message, extra=failure.log_extra())
            raise failure from e

        count = int(total or 0)
        logger.debug(
            "Source counted",
            extra={"source": self.name, "policy_id": policy_id, "claim_count": count},
        )
        return count


class GisClaimSource(SqlClaimSource):
    """Claims recorded by the GIS system (gis_claims)."""

    name = GIS_SOURCE

    def columns(self) -> Mapping[RecordField, Sequence[ColumnElement]]:
        return {
            RecordField.POLICY_ID: [GisClaim.policy_id],
            RecordField.POLICY_VERSION_DATE: [GisClaim.policy_version_date],
            RecordField.LOCATION_ID: [GisClaim.charge_location_id],
            RecordField.SUBJECT_ID: [GisClaim.subject_id],
            RecordField.CLASSIFICATION_CODE: [GisClaim.classification_code],
            RecordField.CLAIM_TYPE_CODE: [GisClaim.claim_type_code],
            RecordField.PLAN_CODE: [GisClaim.plan_code],
            RecordField.LOSS_DATE: [GisClaim.loss_date],
        }

    def base_query(self) -> Select:
        return (
            select(func.count())
            .select_from(GisClaim)
            .join(PolicyVersion, and_(
                PolicyVersion.policy_id == GisClaim.policy_id,
                PolicyVersion.version_date == GisClaim.policy_version_date,
            ))
        )

    def exclusions(self) -> list[ColumnElement[bool]]:
        return [
            GisClaim.application_code.in_(sorted(self._codes.applied)),
            GisClaim.related_claim_no.is_(None),
        ]


class OtherClaimSource(SqlClaimSource):
    """Non-GIS claims (other_claims joined to other_claim_versions)."""

    name = NON_GIS_SOURCE

    def columns(self) -> Mapping[RecordField, Sequence[ColumnElement]]:
        return {
            RecordField.POLICY_ID: [OtherClaim.policy_id],
            RecordField.POLICY_VERSION_DATE: [OtherClaim.policy_version_date],
            RecordField.LOCATION_ID: [OtherClaim.charge_location_id],
            RecordField.SUBJECT_ID: [
                OtherClaimVersion.subject_id, OtherClaimVersion.driver_subject_id,
            ],
            RecordField.CLASSIFICATION_CODE: [OtherClaimVersion.classification_code],
            RecordField.CLAIM_TYPE_CODE: [OtherClaimVersion.claim_type_code],
            RecordField.PLAN_CODE: [OtherClaimVersion.plan_code],
            RecordField.LOSS_DATE: [OtherClaimVersion.loss_date],
        }

    def base_query(self) -> Select:
        return (
            select(func.count())
            .select_from(OtherClaim)
            .join(OtherClaimVersion, and_(
                OtherClaimVersion.subject_id == OtherClaim.subject_id,
                OtherClaimVersion.other_claim_no == OtherClaim.other_claim_no,
                OtherClaimVersion.version_date == OtherClaim.other_claim_version_date,
            ))
            .join(PolicyVersion, and_(
                PolicyVersion.policy_id == OtherClaim.policy_id,
                PolicyVersion.version_date == OtherClaim.policy_version_date,
            ))
        )

    def exclusions(self) -> list[ColumnElement[bool]]:
        return [
            OtherClaim.application_code.in_(sorted(self._codes.applied)),
            OtherClaimVersion.amount >= 0,
            func.coalesce(
                OtherClaim.charge_status_code, self._codes.default_charge_status,
            ) != self._codes.deleted_charge_status,
        ]


def _policy_id(predicate: RecordPredicate) -> int | None:
    clauses = predicate.clauses_for(RecordField.POLICY_ID)
    return clauses[0].value if clauses else None
