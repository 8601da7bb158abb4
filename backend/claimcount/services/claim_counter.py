"""Claim Counter — validates criteria, resolves the driver, composes one predicate and
sums the counts of every claim source.

Invariants:
    - Invalid criteria raise ValidationError before any collaborator is called
    - Subject resolution completes before composition; sources run concurrently after it
    - total == sum(by_source.values()) and every addend is >= 0
    - A failing source aborts the whole count (remaining source tasks are cancelled);
      no partial total is ever returned
    - A source reporting no rows contributes 0
    - Source names are unique per counter; by_source never merges two sources

Design Decisions:
    - Classification codes injected at construction, not read from settings here
    - Sources passed as a sequence: GIS and non-GIS in production, any ClaimSource in tests
"""

import asyncio
import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from claimcount.core.classification import build_classification_predicate
from claimcount.core.criteria import Criteria, parse_criteria
from claimcount.core.domain_types import ClassificationCodes
from claimcount.core.errors import ErrorContext, SourceUnavailable
from claimcount.core.predicate import RecordPredicate, compose
from claimcount.core.repository_protocols import ClaimSource, SubjectLookup
from claimcount.core.time_window import TimeWindow, compute_window
from claimcount.infrastructure.database import DatabaseSessionManager
from claimcount.services.claim_sources import GisClaimSource, OtherClaimSource
from claimcount.services.subject_lookup import SqlSubjectLookup
from claimcount.services.subject_resolver import SubjectResolver

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClaimCount:
    """Combined claim count with its per-source breakdown."""
    total: int
    window: TimeWindow
    by_source: dict[str, int] = field(default_factory=dict)


class ClaimCounter:
    """Counts claims across several sources under one set of criteria."""

    def __init__(
        self,
        lookup: SubjectLookup,
        sources: Sequence[ClaimSource],
        codes: ClassificationCodes,
    ):
        names = [source.name for source in sources]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise ValueError(f"Duplicate claim source names: {', '.join(duplicates)}")
        self._resolver = SubjectResolver(lookup)
        self._sources = tuple(sources)
        self._codes = codes

    async def compute_claim_count(self, criteria: Mapping[str, Any] | Criteria) -> int:
        result = await self.count(criteria)
        return result.total

    async def count(self, criteria: Mapping[str, Any] | Criteria) -> ClaimCount:
        parsed = parse_criteria(criteria)
        predicate, window = await self.build_predicate(parsed)
        counts = await self._count_sources(predicate, parsed.policy_id)
        total = sum(counts)
        by_source = {
            source.name: count for source, count in zip(self._sources, counts)
        }
        logger.info(
            "Claims counted",
            extra={"policy_id": parsed.policy_id, "claim_count": total},
        )
        return ClaimCount(total=total, window=window, by_source=by_source)

    async def build_predicate(
        self, criteria: Criteria,
    ) -> tuple[RecordPredicate, TimeWindow]:
        resolved = await self._resolver.resolve(criteria)
        window = compute_window(
            criteria.anchor_date, criteria.window_years, criteria.window_direction,
        )
        classification = build_classification_predicate(
            criteria.at_fault, self._codes.chargeable,
        )
        return compose(criteria, resolved, window, classification), window

    async def _count_sources(
        self, predicate: RecordPredicate, policy_id: int,
    ) -> list[int]:
        tasks = [
            asyncio.create_task(_count_one(source, predicate, policy_id))
            for source in self._sources
        ]
        try:
            counts = await asyncio.gather(*tasks)
        except BaseException:
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise
        return counts


async def _count_one(
    source: ClaimSource, predicate: RecordPredicate, policy_id: int,
) -> int:
    try:
        count = await source.count(predicate)
    except SourceUnavailable:
        raise
    except Exception as e:
        failure = SourceUnavailable(
            source.name, str(e), ErrorContext(policy_id=policy_id),
        )
        logger.error(failure.message, extra=failure.log_extra())
        raise failure from e
    if count is None:
        return 0
    if count < 0:
        raise SourceUnavailable(
            source.name, f"returned negative count {count}",
            ErrorContext(policy_id=policy_id),
        )
    return count


def build_sql_claim_counter(
    db: DatabaseSessionManager, codes: ClassificationCodes,
) -> ClaimCounter:
    """Wire the counter to the policy_drivers lookup and both SQL claim sources."""
    return ClaimCounter(
        lookup=SqlSubjectLookup(db),
        sources=[GisClaimSource(db, codes), OtherClaimSource(db, codes)],
        codes=codes,
    )
