"""Balance endpoints: single entries and whole date rows."""

from fastapi import APIRouter, Depends

from networth.api.deps import get_balance_service, get_owner_id
from networth.api.schemas import (
    BalanceRecordRequest,
    BalanceUpdateRequest,
    BalanceResponse,
    BalanceListResponse,
    RowSaveRequest,
    RowSaveResponse,
    BulkDeleteResponse,
)
from networth.services import BalanceService

router = APIRouter(prefix="/balances", tags=["balances"])


@router.get("", response_model=BalanceListResponse)
def list_balances(
    owner_id: str = Depends(get_owner_id),
    service: BalanceService = Depends(get_balance_service),
) -> BalanceListResponse:
    """List balances ordered by date, then account name."""
    balances = service.list_balances(owner_id)
    return BalanceListResponse(
        balances=[BalanceResponse.model_validate(b) for b in balances],
        count=len(balances),
    )


@router.post("", response_model=BalanceResponse, status_code=201)
def record_balance(
    data: BalanceRecordRequest,
    owner_id: str = Depends(get_owner_id),
    service: BalanceService = Depends(get_balance_service),
) -> BalanceResponse:
    """Record a balance by account name; unknown accounts are created."""
    entry = service.record_balance(owner_id, data.account, data.date, data.balance)
    return BalanceResponse.model_validate(entry)


@router.delete("", response_model=BulkDeleteResponse)
def delete_all_balances(
    owner_id: str = Depends(get_owner_id),
    service: BalanceService = Depends(get_balance_service),
) -> BulkDeleteResponse:
    """Delete the owner's whole balance history."""
    return BulkDeleteResponse.model_validate(service.delete_all(owner_id))


@router.put("/rows", response_model=RowSaveResponse)
def save_row(
    data: RowSaveRequest,
    owner_id: str = Depends(get_owner_id),
    service: BalanceService = Depends(get_balance_service),
) -> RowSaveResponse:
    """Save an edited date row."""
    result = service.save_date_row(
        owner_id,
        new_date=data.date,
        values=data.values,
        original_date=data.original_date,
    )
    return RowSaveResponse.model_validate(result)


@router.delete("/rows/{date}", response_model=BulkDeleteResponse)
def delete_row(
    date: str,
    owner_id: str = Depends(get_owner_id),
    service: BalanceService = Depends(get_balance_service),
) -> BulkDeleteResponse:
    """Delete every balance recorded on a date (``YYYY-MM-DD``)."""
    return BulkDeleteResponse.model_validate(service.delete_date_row(owner_id, date))


@router.patch("/{balance_id}", response_model=BalanceResponse)
def update_balance(
    balance_id: str,
    data: BalanceUpdateRequest,
    owner_id: str = Depends(get_owner_id),
    service: BalanceService = Depends(get_balance_service),
) -> BalanceResponse:
    """Change the value of a balance."""
    return BalanceResponse.model_validate(service.update_balance(owner_id, balance_id, data.balance))


@router.delete("/{balance_id}", status_code=204)
def delete_balance(
    balance_id: str,
    owner_id: str = Depends(get_owner_id),
    service: BalanceService = Depends(get_balance_service),
) -> None:
    """Delete a balance (idempotent)."""
    service.delete_balance(owner_id, balance_id)
