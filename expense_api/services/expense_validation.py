"""Field validation for expense creation payloads.

``validate_expense_payload`` is a pure function: it inspects a decoded JSON
value, runs every field check, and returns the list of failures without raising.
Callers turn a non-empty result into a 400 response and an empty one into an
``ExpenseIn`` via ``build_expense_in``.

Rules
-----
- amount: rejected when missing, falsy (0, "", false, null) or when no leading
  number can be read from it. Strings are read leniently, so ``"12.5abc"``
  yields 12.5 while ``"abc"`` is rejected. ``"0"`` is a non-empty string and
  therefore accepted as 0.0. Lists and objects are rejected, including
  one-element lists such as ``[5]``.
- description / category: must be strings that are non-empty after trimming.
- date: must be a string of the exact shape ``NNNN-NN-NN``. Impossible
  calendar dates such as ``2025-02-30`` pass.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Any, List, Mapping, Optional

from expense_api.models import DATE_PATTERN, ExpenseIn

_DATE_RE = re.compile(DATE_PATTERN)
_LEADING_NUMBER_RE = re.compile(
    r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
)

AMOUNT_MESSAGE = "Missing or invalid 'amount'. Must be a number."
DESCRIPTION_MESSAGE = "Missing or invalid 'description'. Must be a non-empty string."
CATEGORY_MESSAGE = "Missing or invalid 'category'. Must be a non-empty string."
DATE_MESSAGE = "Missing or invalid 'date'. Must be in YYYY-MM-DD format."


@dataclass(frozen=True)
class ValidationIssue:
    field: str
    code: str
    message: str


def parse_amount(value: Any) -> Optional[float]:
    """Return the float read from ``value`` or None when it is not a usable amount."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        if value == 0:
            return None
        number = value
    elif isinstance(value, str):
        match = _LEADING_NUMBER_RE.match(value.lstrip())
        if not match:
            return None
        number = match.group(0)
    else:
        return None
    try:
        amount = float(number)
    except OverflowError:
        return None
    # JSON cannot carry inf or nan back to the client
    if not math.isfinite(amount):
        return None
    return amount


def _is_non_empty_text(value: Any) -> bool:
    return isinstance(value, str) and len(value.strip()) > 0


def _is_date_string(value: Any) -> bool:
    return isinstance(value, str) and _DATE_RE.fullmatch(value) is not None


def validate_expense_payload(payload: Any) -> List[ValidationIssue]:
    """Run all field checks; a payload that is not an object is treated as empty."""
    data: Mapping[str, Any] = payload if isinstance(payload, Mapping) else {}
    issues: List[ValidationIssue] = []

    if parse_amount(data.get("amount")) is None:
        issues.append(ValidationIssue("amount", "invalid_amount", AMOUNT_MESSAGE))
    if not _is_non_empty_text(data.get("description")):
        issues.append(
            ValidationIssue("description", "invalid_description", DESCRIPTION_MESSAGE)
        )
    if not _is_non_empty_text(data.get("category")):
        issues.append(ValidationIssue("category", "invalid_category", CATEGORY_MESSAGE))
    if not _is_date_string(data.get("date")):
        issues.append(ValidationIssue("date", "invalid_date", DATE_MESSAGE))

    return issues


def build_expense_in(payload: Mapping[str, Any]) -> ExpenseIn:
    """Coerce a payload that passed validation into the typed creation model."""
    amount = parse_amount(payload.get("amount"))
    if amount is None:
        raise ValueError("payload was not validated: amount unusable")
    return ExpenseIn(
        amount=amount,
        description=payload["description"],
        category=payload["category"],
        date=payload["date"],
    )
