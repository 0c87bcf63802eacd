"""Seeding helpers for the demo expense fixtures.

Provides ``seed_expenses`` returning fresh copies of the three baseline
records loaded into every new store when ``Settings.seed_demo_data`` is on.
"""

from __future__ import annotations
from typing import List

from expense_api.models import Expense

DEMO_EXPENSES = (
    {
        "id": "e1",
        "amount": 45.99,
        "description": "Groceries at Trader Joe's",
        "category": "Food",
        "date": "2025-11-28",
    },
    {
        "id": "e2",
        "amount": 120.00,
        "description": "Electricity Bill",
        "category": "Utilities",
        "date": "2025-11-30",
    },
    {
        "id": "e3",
        "amount": 25.50,
        "description": "Coffee with client",
        "category": "Misc",
        "date": "2025-12-01",
    },
)


def seed_expenses() -> List[Expense]:
    return [Expense(**row) for row in DEMO_EXPENSES]
