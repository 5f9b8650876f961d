"""Chart data endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from networth.api.deps import get_chart_service, get_owner_id
from networth.api.schemas import (
    AxisScaleResponse,
    CategoryRollupRowResponse,
    CategorySnapshotResponse,
    ChartOverviewResponse,
    MonthTickResponse,
    RollupResponse,
    TimeSeriesPointResponse,
    TimeSeriesResponse,
)
from networth.services import ChartService, net_worth_scale, stacked_scale

router = APIRouter(prefix="/charts", tags=["charts"])


@router.get("/timeseries", response_model=TimeSeriesResponse)
def get_timeseries(
    owner_id: str = Depends(get_owner_id),
    service: ChartService = Depends(get_chart_service),
) -> TimeSeriesResponse:
    """Net worth per recorded date, with month ticks and the net-worth axis."""
    builder = service.builder(owner_id)
    points = list(builder.points)
    return TimeSeriesResponse(
        points=[TimeSeriesPointResponse.model_validate(p) for p in points],
        month_ticks=[MonthTickResponse.model_validate(t) for t in builder.month_ticks()],
        axis=AxisScaleResponse.model_validate(net_worth_scale(points)),
    )


@router.get("/rollup", response_model=RollupResponse)
def get_rollup(
    owner_id: str = Depends(get_owner_id),
    service: ChartService = Depends(get_chart_service),
) -> RollupResponse:
    """Per-date category sums, with month ticks and the stacked axis."""
    builder = service.builder(owner_id)
    rows = list(builder.rollup)
    return RollupResponse(
        rows=[CategoryRollupRowResponse.model_validate(r) for r in rows],
        month_ticks=[MonthTickResponse.model_validate(t) for t in builder.month_ticks()],
        axis=AxisScaleResponse.model_validate(stacked_scale(rows)),
    )


@router.get("/snapshot", response_model=CategorySnapshotResponse)
def get_snapshot(
    date: Optional[str] = Query(None, description="Target date; latest if omitted"),
    owner_id: str = Depends(get_owner_id),
    service: ChartService = Depends(get_chart_service),
) -> CategorySnapshotResponse:
    """Category breakdown at the recorded date closest to ``date``."""
    return CategorySnapshotResponse.model_validate(service.snapshot(owner_id, date))


@router.get("/overview", response_model=ChartOverviewResponse)
def get_overview(
    date: Optional[str] = Query(None, description="Snapshot date; latest if omitted"),
    owner_id: str = Depends(get_owner_id),
    service: ChartService = Depends(get_chart_service),
) -> ChartOverviewResponse:
    """Every chart series and axis in one response."""
    return ChartOverviewResponse.model_validate(service.overview(owner_id, date))
