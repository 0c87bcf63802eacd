"""Pydantic domain models for the Expense API."""

from .constants import DATE_PATTERN  # re-export
from .expense import Expense, ExpenseIn

__all__ = [
    "DATE_PATTERN",
    "Expense",
    "ExpenseIn",
]
