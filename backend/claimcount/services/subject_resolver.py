"""Subject Resolver — maps the caller-facing driver number to the canonical subject id.

Invariants:
    - No driver_id -> returns None without touching the lookup
    - Lookup returns nothing -> ResolvedSubject.not_found (normal outcome, not an error)
    - Lookup raises -> LookupFailure; the count is aborted
"""

import logging

from claimcount.core.criteria import Criteria
from claimcount.core.errors import ErrorContext, LookupFailure
from claimcount.core.repository_protocols import SubjectLookup
from claimcount.core.subject import ResolvedSubject

logger = logging.getLogger(__name__)


class SubjectResolver:
    """Resolves the dependent driver parameter before predicate composition."""

    def __init__(self, lookup: SubjectLookup):
        self._lookup = lookup

    async def resolve(self, criteria: Criteria) -> ResolvedSubject | None:
        if criteria.driver_id is None:
            return None

        try:
            subject_id = await self._lookup.find_subject(
                criteria.policy_id, criteria.policy_version_date, criteria.driver_id,
            )
        except LookupFailure:
            raise
        except Exception as e:
            failure = LookupFailure(str(e), ErrorContext(
                policy_id=criteria.policy_id, driver_id=criteria.driver_id,
            ))
            logger.error(failure.message, extra=failure.log_extra())
            raise failure from e

        if subject_id is None:
            logger.info(
                "Driver not found on policy version; driver filter matches nothing",
                extra={"policy_id": criteria.policy_id, "driver_id": criteria.driver_id},
            )
            return ResolvedSubject.not_found(criteria.driver_id)

        return ResolvedSubject(driver_id=criteria.driver_id, subject_id=subject_id)
