"""Customer account endpoints."""

from fastapi import APIRouter, Depends, Response

from customer_accounts.api.deps import (
    get_create_account,
    get_get_account,
    get_list_accounts,
    get_update_account,
    get_delete_account,
)
from customer_accounts.api.schemas import (
    AccountCreateRequest,
    AccountUpdateRequest,
    AccountResponse,
    ErrorResponse,
)
from customer_accounts.services import (
    AccountCreate,
    AccountUpdate,
    CreateAccount,
    GetAccount,
    ListAccounts,
    UpdateAccount,
    DeleteAccount,
)

router = APIRouter(prefix="/customer-accounts", tags=["customer-accounts"])

_NOT_FOUND = {404: {"model": ErrorResponse, "description": "Customer account not found"}}
_BAD_REQUEST = {400: {"model": ErrorResponse, "description": "Invalid input data"}}
_CONFLICT = {409: {"model": ErrorResponse, "description": "Email already exists"}}


@router.post(
    "",
    response_model=AccountResponse,
    status_code=201,
    responses={**_BAD_REQUEST, **_CONFLICT},
)
def create_account(
    data: AccountCreateRequest,
    use_case: CreateAccount = Depends(get_create_account),
):
    """Create a new customer account. Email must be unique."""
    account = use_case.execute(AccountCreate(**data.model_dump()))
    return AccountResponse.model_validate(account)


@router.get("", response_model=list[AccountResponse])
def list_accounts(use_case: ListAccounts = Depends(get_list_accounts)):
    """List all customer accounts, newest first."""
    return [AccountResponse.model_validate(a) for a in use_case.execute()]


@router.get("/{account_id}", response_model=AccountResponse, responses=_NOT_FOUND)
def get_account(account_id: str, use_case: GetAccount = Depends(get_get_account)):
    """Get a single customer account by ID."""
    return AccountResponse.model_validate(use_case.execute(account_id))


@router.patch(
    "/{account_id}",
    response_model=AccountResponse,
    responses={**_BAD_REQUEST, **_NOT_FOUND, **_CONFLICT},
)
def update_account(
    account_id: str,
    data: AccountUpdateRequest,
    use_case: UpdateAccount = Depends(get_update_account),
):
    """Update an existing customer account. Only provided fields are changed."""
    patch = AccountUpdate(**data.model_dump(exclude_unset=True))
    return AccountResponse.model_validate(use_case.execute(account_id, patch))


@router.delete("/{account_id}", status_code=204, responses=_NOT_FOUND)
def delete_account(account_id: str, use_case: DeleteAccount = Depends(get_delete_account)):
    """Permanently delete a customer account."""
    use_case.execute(account_id)
    return Response(status_code=204)
