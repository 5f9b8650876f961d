"""Y-axis domains and ticks for the net-worth and stacked category charts."""

import math
from decimal import Decimal
from typing import Iterable

from networth.domain.models import ASSET_CATEGORIES, LIABILITY_CATEGORIES
from networth.domain.views import AxisScale, CategoryRollupRow, TimeSeriesPoint

AXIS_STEP = 500_000
NET_WORTH_FLOOR = 2_000_000
HEADROOM = Decimal("1.05")
STACKED_PADDING = Decimal("0.05")


def _ticks(low: int, high: int, step: int) -> list[int]:
    return list(range(low, high + 1, step))


def net_worth_scale(
    points: Iterable[TimeSeriesPoint],
    floor: int = NET_WORTH_FLOOR,
    step: int = AXIS_STEP,
) -> AxisScale:
    """
    Fixed-floor axis for the net-worth line.

    The top is the highest net worth plus 5% headroom rounded up to a whole
    step, and never less than one step above the floor.
    """
    values = [p.net_worth for p in points]
    top = floor + step
    if values:
        rounded = math.ceil(max(values) * HEADROOM / step) * step
        top = max(top, rounded)
    return AxisScale(domain_min=floor, domain_max=top, ticks=_ticks(floor, top, step))


def stacked_scale(rows: Iterable[CategoryRollupRow], step: int = AXIS_STEP) -> AxisScale:
    """
    Axis for stacked category areas: assets stack above zero, liabilities below.

    Covers the per-date asset total and liability total with 5% padding, always
    includes zero, and rounds outward to whole steps.
    """
    values: list[Decimal] = []
    for row in rows:
        values.append(sum((row.categories.get(c, Decimal("0")) for c in ASSET_CATEGORIES), Decimal("0")))
        values.append(sum((row.categories.get(c, Decimal("0")) for c in LIABILITY_CATEGORIES), Decimal("0")))

    if not values:
        return AxisScale(domain_min=0, domain_max=step, ticks=_ticks(0, step, step))

    low, high = min(values), max(values)
    if low == high:
        spread = abs(low) or Decimal("1")
        low, high = low - spread, high + spread

    padding = (high - low) * STACKED_PADDING
    low = min(low - padding, Decimal("0"))
    high = max(high + padding, Decimal("0"))

    domain_min = math.floor(low / step) * step
    domain_max = math.ceil(high / step) * step
    return AxisScale(
        domain_min=domain_min,
        domain_max=domain_max,
        ticks=_ticks(domain_min, domain_max, step),
    )
