"""Account management endpoints."""

from fastapi import APIRouter, Depends

from networth.api.deps import get_account_service, get_owner_id
from networth.api.schemas import (
    AccountCreate,
    AccountUpdate,
    AccountResponse,
    AccountListResponse,
)
from networth.services import AccountService

router = APIRouter(prefix="/accounts", tags=["accounts"])


@router.get("", response_model=AccountListResponse)
def list_accounts(
    owner_id: str = Depends(get_owner_id),
    service: AccountService = Depends(get_account_service),
) -> AccountListResponse:
    """List the owner's accounts ordered by name."""
    accounts = service.list_accounts(owner_id)
    return AccountListResponse(
        accounts=[AccountResponse.model_validate(a) for a in accounts],
        count=len(accounts),
    )


@router.post("", response_model=AccountResponse, status_code=201)
def create_account(
    data: AccountCreate,
    owner_id: str = Depends(get_owner_id),
    service: AccountService = Depends(get_account_service),
) -> AccountResponse:
    """Create a new account."""
    account = service.create_account(owner_id, data.name, data.category)
    return AccountResponse.model_validate(account)


@router.get("/{account_id}", response_model=AccountResponse)
def get_account(
    account_id: str,
    owner_id: str = Depends(get_owner_id),
    service: AccountService = Depends(get_account_service),
) -> AccountResponse:
    """Get account by ID."""
    return AccountResponse.model_validate(service.get_account(owner_id, account_id))


@router.patch("/{account_id}", response_model=AccountResponse)
def update_account(
    account_id: str,
    data: AccountUpdate,
    owner_id: str = Depends(get_owner_id),
    service: AccountService = Depends(get_account_service),
) -> AccountResponse:
    """Rename and/or recategorize an account."""
    account = service.update_account(owner_id, account_id, data.name, data.category)
    return AccountResponse.model_validate(account)


@router.delete("/{account_id}", status_code=204)
def delete_account(
    account_id: str,
    owner_id: str = Depends(get_owner_id),
    service: AccountService = Depends(get_account_service),
) -> None:
    """Delete an account together with its balances."""
    service.delete_account(owner_id, account_id)
