"""Pydantic schemas for chart endpoints."""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel


class TimeSeriesPointResponse(BaseModel):
    model_config = {"from_attributes": True}

    date: str
    timestamp: int
    balances: dict[str, Decimal]
    net_worth: Decimal


class CategoryRollupRowResponse(BaseModel):
    model_config = {"from_attributes": True}

    date: str
    timestamp: int
    categories: dict[str, Decimal]
    net_worth: Decimal


class MonthTickResponse(BaseModel):
    model_config = {"from_attributes": True}

    timestamp: int
    label: str


class AxisScaleResponse(BaseModel):
    model_config = {"from_attributes": True}

    domain_min: int
    domain_max: int
    ticks: list[int]


class CategorySliceResponse(BaseModel):
    model_config = {"from_attributes": True}

    category: str
    value: Decimal
    percentage: Decimal


class CategorySnapshotResponse(BaseModel):
    """Category breakdown at the recorded date closest to the requested one."""

    model_config = {"from_attributes": True}

    date: Optional[str] = None
    timestamp: int
    slices: list[CategorySliceResponse]
    total: Decimal


class TimeSeriesResponse(BaseModel):
    """Net-worth series with its axis."""

    points: list[TimeSeriesPointResponse]
    month_ticks: list[MonthTickResponse]
    axis: AxisScaleResponse


class RollupResponse(BaseModel):
    """Stacked category series with its axis."""

    rows: list[CategoryRollupRowResponse]
    month_ticks: list[MonthTickResponse]
    axis: AxisScaleResponse


class ChartOverviewResponse(BaseModel):
    """Everything the chart page draws."""

    model_config = {"from_attributes": True}

    points: list[TimeSeriesPointResponse]
    rollup: list[CategoryRollupRowResponse]
    month_ticks: list[MonthTickResponse]
    net_worth_axis: AxisScaleResponse
    stacked_axis: AxisScaleResponse
    snapshot: CategorySnapshotResponse
