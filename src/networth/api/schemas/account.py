"""Pydantic schemas for account endpoints."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from networth.domain.models.enums import AccountType


class AccountCreate(BaseModel):
    """Request schema for creating an account."""

    name: str = Field(..., min_length=1, max_length=255, description="Account name, unique per owner")
    category: Optional[str] = Field(
        default="other",
        max_length=64,
        description="Category token; decides asset or liability",
    )


class AccountUpdate(BaseModel):
    """Request schema for renaming or recategorizing an account."""

    name: str = Field(..., min_length=1, max_length=255)
    category: Optional[str] = Field(default="other", max_length=64)


class AccountResponse(BaseModel):
    """Response schema for a single account."""

    model_config = {"from_attributes": True}

    account_id: str
    name: str
    category: str
    type: AccountType
    created_at: Optional[datetime] = None


class AccountListResponse(BaseModel):
    """Response schema for listing accounts."""

    accounts: list[AccountResponse]
    count: int
