"""Pydantic schemas for ledger import endpoints."""

from pydantic import BaseModel


class ImportSummaryResponse(BaseModel):
    """Response schema for a ledger import."""

    model_config = {"from_attributes": True}

    imported_count: int
    failed_count: int
    deleted_count: int
    accounts_created: list[str]
    accounts_updated: list[str]
    errors: list[str]
    status_message: str
