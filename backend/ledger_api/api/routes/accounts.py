from __future__ import annotations

import logging
from uuid import UUID

from fastapi import APIRouter, HTTPException, Request, Response

from ledger_api.api.deps import get_account_service, get_ledger_service
from ledger_api.api.mappers.account_mapper import to_account_response, to_balance_response
from ledger_api.api.pagination import InvalidParameter, parse_pagination
from ledger_api.api.schemas.accounts import AccountCreateRequest, AccountResponse, BalanceResponse
from ledger_api.domain.account import normalize_currency
from ledger_api.services.account_service import AccountNotFound


logger = logging.getLogger(__name__)
router = APIRouter(prefix="/accounts", tags=["accounts"])

_NIL_UUID = UUID(int=0)


@router.post("", status_code=201, response_model=AccountResponse, response_model_exclude_none=True)
def create_account(req: AccountCreateRequest) -> AccountResponse:
    if req.owner_id is None or req.owner_id == _NIL_UUID:
        raise HTTPException(status_code=400, detail="owner_id is required")
    # null et "" sont equivalents ; "  " est une devise invalide, pas absente
    if not req.currency:
        raise HTTPException(status_code=400, detail="currency is required")

    try:
        currency = normalize_currency(req.currency)
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid currency")

    try:
        account = get_account_service().create_account(
            owner_id=req.owner_id,
            currency=currency,
            metadata=req.metadata,
        )
    except Exception as e:
        logger.exception("Failed to create account: %s", e)
        raise HTTPException(status_code=500, detail="Could not create account")

    return to_account_response(account)


@router.get("", response_model=list[AccountResponse], response_model_exclude_none=True)
def list_accounts(request: Request, response: Response) -> list[AccountResponse]:
    try:
        limit, offset = parse_pagination(_first_values(request))
    except InvalidParameter as e:
        logger.warning("Invalid pagination parameters: %s", e)
        raise HTTPException(status_code=400, detail=str(e))

    try:
        accounts = get_account_service().list_accounts(limit=limit, offset=offset)
    except Exception as e:
        logger.exception("Failed to list accounts: %s", e)
        raise HTTPException(status_code=500, detail="Could not list accounts")

    # effective values, a clamped limit shows up here
    response.headers["X-Pagination-Limit"] = str(limit)
    response.headers["X-Pagination-Offset"] = str(offset)
    return [to_account_response(a) for a in accounts]


@router.get("/{account_id}", response_model=AccountResponse, response_model_exclude_none=True)
def get_account(account_id: str) -> AccountResponse:
    acc_id = _parse_account_id(account_id)

    try:
        acc = get_account_service().get_account(acc_id)
    except AccountNotFound:
        logger.warning("Account not found: %s", acc_id)
        raise HTTPException(status_code=404, detail="Account not found")
    except Exception as e:
        logger.exception("Failed to retrieve account %s: %s", acc_id, e)
        raise HTTPException(status_code=500, detail="Could not retrieve account")

    return to_account_response(acc)


@router.get("/{account_id}/balance", response_model=BalanceResponse)
def get_account_balance(account_id: str) -> BalanceResponse:
    acc_id = _parse_account_id(account_id)

    # 1) compte (404 avant toute lecture du ledger)
    try:
        acc = get_account_service().get_account(acc_id)
    except AccountNotFound:
        logger.warning("Account not found: %s", acc_id)
        raise HTTPException(status_code=404, detail="Account not found")
    except Exception as e:
        logger.exception("Failed to retrieve account %s before getting balance: %s", acc_id, e)
        raise HTTPException(status_code=500, detail="Could not retrieve account")

    # 2) balance
    try:
        bal = get_ledger_service().get_account_balance(acc.id)
    except Exception as e:
        logger.exception("Failed to get balance for account %s: %s", acc_id, e)
        raise HTTPException(status_code=500, detail="Could not retrieve account balance")

    return to_balance_response(acc, bal)


def _parse_account_id(raw: str) -> UUID:
    try:
        return UUID(raw)
    except ValueError:
        logger.warning("Invalid account ID format: %r", raw)
        raise HTTPException(status_code=400, detail="Invalid account ID format")


def _first_values(request: Request) -> dict[str, str]:
    # a repeated key keeps its first occurrence (Starlette's .get returns the last)
    return {k: request.query_params.getlist(k)[0] for k in request.query_params.keys()}
