"""Dense time series and category rollups from the sparse balance grid."""

from collections import defaultdict
from decimal import Decimal
from typing import Callable, Generic, Iterable, Iterator, Mapping, Optional, TypeVar

from dateutil.relativedelta import relativedelta

from networth.core.dates import canonicalize, to_calendar_date, to_timestamp
from networth.core.exceptions import InvariantViolation
from networth.core.timezone import from_utc_ms, utc_midnight_ms
from networth.domain.models import (
    ALL_CATEGORIES,
    AccountType,
    BalanceEntry,
    DEFAULT_CATEGORY,
    LIABILITY_CATEGORIES,
    category_type,
    normalize_category,
)
from networth.domain.views import (
    CategoryRollupRow,
    CategorySlice,
    CategorySnapshot,
    MonthTick,
    TimeSeriesPoint,
)

T = TypeVar("T")

ZERO = Decimal("0")

_MONTH_NAMES = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


class LazySeries(Generic[T]):
    """Iterable that re-runs its generator on every pass."""

    def __init__(self, factory: Callable[[], Iterator[T]]):
        self._factory = factory

    def __iter__(self) -> Iterator[T]:
        return self._factory()


def rollup_category(category: Optional[str]) -> str:
    """Map a stored category onto the fixed vocabulary; unknown tokens become ``other``."""
    token = normalize_category(category)
    return token if token in ALL_CATEGORIES else DEFAULT_CATEGORY


def month_label(ms: int) -> str:
    """``Mon YY`` label for a month-start tick."""
    moment = from_utc_ms(ms)
    return f"{_MONTH_NAMES[moment.month - 1]} {moment.year % 100:02d}"


class TimeSeriesBuilder:
    """
    Builds chart series from raw balance rows.

    Nothing is cached: every iteration regroups the rows, so results always
    reflect the rows and category map the builder was given.
    """

    def __init__(self, rows: Iterable[BalanceEntry], account_categories: Mapping[str, str]):
        self._rows = list(rows)
        self._categories = dict(account_categories)

    def _category_of(self, account: str) -> str:
        return normalize_category(self._categories.get(account, DEFAULT_CATEGORY))

    def _grouped(self) -> list[tuple[str, dict[str, Decimal]]]:
        """(canonical date, account → balance) in ascending timestamp order."""
        by_date: dict[str, dict[str, Decimal]] = {}
        for row in self._rows:
            date = canonicalize(row.date)
            by_date.setdefault(date, {})[row.account or ""] = Decimal(row.balance)
        # sorted() is stable, so equal timestamps keep discovery order
        return sorted(by_date.items(), key=lambda item: to_timestamp(item[0]))

    def _iter_points(self) -> Iterator[TimeSeriesPoint]:
        for date, balances in self._grouped():
            yield TimeSeriesPoint(
                date=date,
                timestamp=to_timestamp(date),
                balances=dict(balances),
                net_worth=sum(balances.values(), ZERO),
            )

    def _iter_rollup(self) -> Iterator[CategoryRollupRow]:
        for date, balances in self._grouped():
            sums: dict[str, Decimal] = {c: ZERO for c in ALL_CATEGORIES}
            for account, balance in balances.items():
                sums[rollup_category(self._category_of(account))] += balance
            for category in LIABILITY_CATEGORIES:
                sums[category] = -abs(sums[category])

            net_worth = sum(sums.values(), ZERO)
            self._check_rollup(date, balances, net_worth)
            yield CategoryRollupRow(
                date=date,
                timestamp=to_timestamp(date),
                categories=sums,
                net_worth=net_worth,
            )

    def _check_rollup(self, date: str, balances: dict[str, Decimal], net_worth: Decimal) -> None:
        """Assets minus per-category liability magnitudes must equal the rollup net worth."""
        assets = ZERO
        liabilities: dict[str, Decimal] = defaultdict(lambda: ZERO)
        for account, balance in balances.items():
            category = self._category_of(account)
            if category_type(category) == AccountType.LIABILITY:
                liabilities[category] += balance
            else:
                assets += balance
        expected = assets - sum((abs(v) for v in liabilities.values()), ZERO)
        if expected != net_worth:
            raise InvariantViolation(
                f"Rollup net worth {net_worth} on {date} does not match "
                f"assets minus liabilities {expected}"
            )

    @property
    def points(self) -> LazySeries[TimeSeriesPoint]:
        """One point per date with every balance recorded that day and their flat sum."""
        return LazySeries(self._iter_points)

    @property
    def rollup(self) -> LazySeries[CategoryRollupRow]:
        """One row per date with a signed sum for each fixed category."""
        return LazySeries(self._iter_rollup)

    def month_ticks(self) -> list[MonthTick]:
        """Month starts from the earliest to the latest data month, inclusive."""
        days = [to_calendar_date(date) for date, _ in self._grouped()]
        days = [d for d in days if d is not None]
        if not days:
            return []

        cursor = min(days).replace(day=1)
        end = max(days).replace(day=1)
        ticks = []
        while cursor <= end:
            ms = utc_midnight_ms(cursor)
            ticks.append(MonthTick(timestamp=ms, label=month_label(ms)))
            cursor += relativedelta(months=1)
        return ticks

    def snapshot(self, target_date: Optional[str] = None) -> CategorySnapshot:
        """
        Category breakdown at the recorded date closest to ``target_date``.

        Defaults to the latest date. Scans forward and stops once the distance
        starts growing; on a tie the later date wins.
        """
        points = list(self.points)
        if not points:
            return CategorySnapshot()

        target = canonicalize(target_date) if target_date else points[-1].date
        target_ms = to_timestamp(target)

        closest = points[0]
        distance = abs(closest.timestamp - target_ms)
        for point in points:
            candidate = abs(point.timestamp - target_ms)
            if candidate <= distance:
                distance = candidate
                closest = point
            else:
                break

        sums: dict[str, Decimal] = {c: ZERO for c in ALL_CATEGORIES}
        for account, balance in closest.balances.items():
            sums[rollup_category(self._category_of(account))] += balance
        total = sum(sums.values(), ZERO)

        slices = [
            CategorySlice(
                category=category,
                value=value,
                percentage=(value / total * 100).quantize(Decimal("0.01")) if total else ZERO,
            )
            for category, value in sums.items()
        ]
        return CategorySnapshot(
            date=closest.date,
            timestamp=closest.timestamp,
            slices=slices,
            total=total,
        )
