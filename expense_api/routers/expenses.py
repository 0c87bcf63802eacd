import json
import logging
from typing import Any, List

from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel

from expense_api.core.errors import ExpenseCreationError, ExpenseValidationError
from expense_api.db.store import ExpenseStore
from expense_api.models import Expense
from expense_api.services.expense_validation import (
    build_expense_in,
    validate_expense_payload,
)

router = APIRouter(prefix="/expenses", tags=["expenses"])

logger = logging.getLogger("expense_api.expenses")

# Dependencies -----------------------------------------------------


def get_store(request: Request) -> ExpenseStore:
    return request.app.state.store


# Response Models --------------------------------------------------
class ExpenseListResponse(BaseModel):
    success: bool = True
    data: List[Expense]


class ExpenseCreateResponse(BaseModel):
    success: bool = True
    message: str = "Expense added successfully"
    data: Expense


# Helpers ----------------------------------------------------------


async def _read_payload(request: Request) -> Any:
    """Decode the JSON body; an empty body counts as an empty object."""
    raw = await request.body()
    if not raw.strip():
        return {}
    return json.loads(raw)


# Routes -----------------------------------------------------------
@router.get(
    "",
    response_model=ExpenseListResponse,
    summary="List expenses, newest date first",
)
@router.get("/", response_model=ExpenseListResponse, include_in_schema=False)
async def list_expenses_endpoint(store: ExpenseStore = Depends(get_store)):
    return ExpenseListResponse(data=store.list_expenses())


@router.post(
    "",
    response_model=ExpenseCreateResponse,
    status_code=201,
    summary="Create an expense",
)
@router.post(
    "/", response_model=ExpenseCreateResponse, status_code=201, include_in_schema=False
)
async def create_expense(request: Request, store: ExpenseStore = Depends(get_store)):
    # 1. Decode body
    try:
        payload = await _read_payload(request)
    except Exception as e:
        raise ExpenseCreationError("request body could not be decoded") from e

    # 2. Field validation (all checks, all failures)
    issues = validate_expense_payload(payload)
    if issues:
        logger.info(
            "expense rejected",
            extra={"fields": {"codes": [issue.code for issue in issues]}},
        )
        raise ExpenseValidationError([issue.message for issue in issues])

    # 3. Build and append
    try:
        expense = store.add_expense(build_expense_in(payload))
    except Exception as e:
        raise ExpenseCreationError("failed to store expense") from e

    logger.info("expense created", extra={"fields": {"expense_id": expense.id}})
    return ExpenseCreateResponse(data=expense)
