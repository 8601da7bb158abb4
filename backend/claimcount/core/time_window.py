"""Time Window — anchor date minus N calendar years, split into BEFORE / DURING.

Invariants:
    - boundary keeps month and day; 29 Feb clamps to 28 Feb in non-leap target years
    - DURING keeps d >= boundary, BEFORE keeps d < boundary (see predicate.window_clause)
"""

from dataclasses import dataclass
from datetime import date

from claimcount.core.domain_types import WindowDirection


@dataclass(frozen=True)
class TimeWindow:
    """Concrete lookback window for one query."""
    boundary: date
    direction: WindowDirection


def subtract_years(anchor: date, years: int) -> date:
    """Shift anchor back by whole calendar years, keeping month/day."""
    try:
        return anchor.replace(year=anchor.year - years)
    except ValueError:
        # 29 Feb into a non-leap year
        return anchor.replace(year=anchor.year - years, day=28)


def compute_window(
    anchor_date: date, window_years: int, direction: WindowDirection,
) -> TimeWindow:
    """Compute the window boundary. Pure, deterministic."""
    return TimeWindow(
        boundary=subtract_years(anchor_date, window_years),
        direction=direction,
    )
