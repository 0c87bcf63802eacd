"""In-memory expense storage.

Responsibilities
----------------
- Own the list of expenses for one application instance. Each app built by
  ``create_app`` gets its own store, so tests never share state.
- Assign identifiers that stay unique even when several expenses are created
  within the same millisecond.
- Present expenses newest-date first without reordering what is stored.

Nothing here persists; data lives as long as the owning process.
"""

from __future__ import annotations

import threading
import time
from typing import Callable, Iterable, List, Optional

from expense_api.models import Expense, ExpenseIn

ID_PREFIX = "e"


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


class ExpenseIdGenerator:
    """Monotonic ``e<millis>`` identifiers.

    Uses the wall clock in milliseconds, bumped past the last issued value
    whenever the clock has not advanced.
    """

    def __init__(self, clock: Callable[[], int] = _now_ms):
        self._clock = clock
        self._last = 0
        self._lock = threading.Lock()

    def __call__(self) -> str:
        with self._lock:
            candidate = self._clock()
            if candidate <= self._last:
                candidate = self._last + 1
            self._last = candidate
        return f"{ID_PREFIX}{candidate}"


class ExpenseStore:
    def __init__(
        self,
        id_generator: Optional[Callable[[], str]] = None,
        seed: Optional[Iterable[Expense]] = None,
    ):
        self._id_generator = id_generator or ExpenseIdGenerator()
        self._expenses: List[Expense] = list(seed or [])
        self._lock = threading.Lock()

    # ------------------------------------------------------------------
    # Reads
    def list_expenses(self) -> List[Expense]:
        """Return all expenses sorted by date, newest first.

        Dates share the fixed YYYY-MM-DD shape, so string order is date order.
        The sort is stable; equal dates keep insertion order.
        """
        with self._lock:
            snapshot = list(self._expenses)
        return sorted(snapshot, key=lambda e: e.date, reverse=True)

    def count(self) -> int:
        with self._lock:
            return len(self._expenses)

    def __len__(self) -> int:
        return self.count()

    # ------------------------------------------------------------------
    # Writes
    def add_expense(self, expense_in: ExpenseIn) -> Expense:
        with self._lock:
            expense = Expense(id=self._id_generator(), **expense_in.model_dump())
            self._expenses.append(expense)
        return expense
