"""View models for time-series and chart outputs."""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional


@dataclass
class TimeSeriesPoint:
    """All account balances recorded on one date, with their flat sum."""

    date: str
    timestamp: int
    balances: dict[str, Decimal] = field(default_factory=dict)
    net_worth: Decimal = field(default_factory=lambda: Decimal("0"))


@dataclass
class CategoryRollupRow:
    """
    Per-date category sums for stacked charts.

    Liability categories hold non-positive values so they stack below zero;
    ``net_worth`` is the signed sum of every category.
    """

    date: str
    timestamp: int
    categories: dict[str, Decimal] = field(default_factory=dict)
    net_worth: Decimal = field(default_factory=lambda: Decimal("0"))


@dataclass
class MonthTick:
    """X-axis tick at the start of a calendar month."""

    timestamp: int
    label: str


@dataclass
class AxisScale:
    """Y-axis domain and the ticks spanning it."""

    domain_min: int
    domain_max: int
    ticks: list[int] = field(default_factory=list)


@dataclass
class CategorySlice:
    """One category's share of a snapshot."""

    category: str
    value: Decimal
    percentage: Decimal


@dataclass
class CategorySnapshot:
    """Category breakdown at the data point closest to a requested date."""

    date: Optional[str] = None
    timestamp: int = 0
    slices: list[CategorySlice] = field(default_factory=list)
    total: Decimal = field(default_factory=lambda: Decimal("0"))


@dataclass
class ChartOverview:
    """Everything the chart page draws, computed from one read of the store."""

    points: list[TimeSeriesPoint] = field(default_factory=list)
    rollup: list[CategoryRollupRow] = field(default_factory=list)
    month_ticks: list[MonthTick] = field(default_factory=list)
    net_worth_axis: Optional[AxisScale] = None
    stacked_axis: Optional[AxisScale] = None
    snapshot: Optional[CategorySnapshot] = None
