"""SQL Subject Lookup — finds a driver's canonical subject on a policy version.

Invariants:
    - Read-only: a single SELECT against policy_drivers
    - Missing row -> None; database failure -> LookupFailure
"""

import logging
from datetime import date

from sqlalchemy import select

from claimcount.core.domain_types import DriverId, PolicyId, SubjectId
from claimcount.core.errors import DatabaseError, ErrorContext, LookupFailure
from claimcount.infrastructure.database import DatabaseSessionManager
from claimcount.models.policy_driver import PolicyDriver

logger = logging.getLogger(__name__)


class SqlSubjectLookup:
    """SubjectLookup backed by the policy_drivers table."""

    def __init__(self, db: DatabaseSessionManager):
        self._db = db

    async def find_subject(
        self, policy_id: PolicyId, policy_version_date: date, driver_id: DriverId,
    ) -> SubjectId | None:
        query = (
            select(PolicyDriver.subject_id)
            .where(PolicyDriver.policy_id == policy_id)
            .where(PolicyDriver.version_date == policy_version_date)
            .where(PolicyDriver.driver_no == driver_id)
        )
        try:
            async with self._db.session() as session:
                result = await session.execute(query)
                subject_id = result.scalar_one_or_none()
        except DatabaseError as e:
            failure = LookupFailure(
                e.message, ErrorContext(policy_id=policy_id, driver_id=driver_id),
            )
            logger.error(failure.message, extra=failure.log_extra())
            raise failure from e
        return SubjectId(subject_id) if subject_id is not None else None
