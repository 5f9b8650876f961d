"""Pydantic schemas for balance endpoints."""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field


class BalanceRecordRequest(BaseModel):
    """Request schema for recording a balance by account name."""

    account: str = Field(..., min_length=1, description="Account name; created if unknown")
    date: str = Field(..., min_length=1, description="M/D/Y, M/D/YY or YYYY-MM-DD")
    balance: Decimal


class BalanceUpdateRequest(BaseModel):
    """Request schema for changing a balance value."""

    balance: Decimal


class BalanceResponse(BaseModel):
    """Response schema for a single balance."""

    model_config = {"from_attributes": True}

    balance_id: str
    account_id: str
    account: Optional[str] = None
    date: str
    balance: Decimal


class BalanceListResponse(BaseModel):
    """Response schema for listing balances."""

    balances: list[BalanceResponse]
    count: int


class RowSaveRequest(BaseModel):
    """Request schema for saving an edited date row."""

    date: str = Field(..., min_length=1, description="Date the row is saved under")
    original_date: Optional[str] = Field(
        default=None,
        description="Date the row was loaded from; omit for a new row",
    )
    values: dict[str, Optional[str]] = Field(
        default_factory=dict,
        description="Account name to typed value; blank clears the entry",
    )


class RowSaveResponse(BaseModel):
    """Response schema for a saved date row."""

    model_config = {"from_attributes": True}

    date: str
    saved_count: int
    deleted_count: int
    failed_count: int


class BulkDeleteResponse(BaseModel):
    """Response schema for batched deletes."""

    model_config = {"from_attributes": True}

    deleted_count: int
    failed_count: int
