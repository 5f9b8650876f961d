"""Chart data service."""

from typing import Optional

from networth.domain.views import (
    AxisScale,
    CategoryRollupRow,
    CategorySnapshot,
    ChartOverview,
    MonthTick,
    TimeSeriesPoint,
)
from networth.repositories.protocols import AccountRepository, BalanceRepository
from networth.services.axis_scaler import net_worth_scale, stacked_scale
from networth.services.timeseries_builder import TimeSeriesBuilder


class ChartService:
    """
    Service for chart series.

    Reads the owner's balances and account categories on every call and
    derives the series from scratch.
    """

    def __init__(self, account_repo: AccountRepository, balance_repo: BalanceRepository):
        self._account_repo = account_repo
        self._balance_repo = balance_repo

    def builder(self, owner_id: str) -> TimeSeriesBuilder:
        """TimeSeriesBuilder over the owner's current rows."""
        categories = {a.name: a.category for a in self._account_repo.list_all(owner_id)}
        return TimeSeriesBuilder(self._balance_repo.list_all(owner_id), categories)

    def timeseries(self, owner_id: str) -> list[TimeSeriesPoint]:
        return list(self.builder(owner_id).points)

    def rollup(self, owner_id: str) -> list[CategoryRollupRow]:
        return list(self.builder(owner_id).rollup)

    def month_ticks(self, owner_id: str) -> list[MonthTick]:
        return self.builder(owner_id).month_ticks()

    def net_worth_axis(self, owner_id: str) -> AxisScale:
        return net_worth_scale(self.builder(owner_id).points)

    def stacked_axis(self, owner_id: str) -> AxisScale:
        return stacked_scale(self.builder(owner_id).rollup)

    def snapshot(self, owner_id: str, target_date: Optional[str] = None) -> CategorySnapshot:
        """Category breakdown at the recorded date closest to ``target_date`` (default latest)."""
        return self.builder(owner_id).snapshot(target_date)

    def overview(self, owner_id: str, target_date: Optional[str] = None) -> ChartOverview:
        """All chart data for the owner from a single read."""
        builder = self.builder(owner_id)
        points = list(builder.points)
        rollup = list(builder.rollup)
        return ChartOverview(
            points=points,
            rollup=rollup,
            month_ticks=builder.month_ticks(),
            net_worth_axis=net_worth_scale(points),
            stacked_axis=stacked_scale(rollup),
            snapshot=builder.snapshot(target_date),
        )
