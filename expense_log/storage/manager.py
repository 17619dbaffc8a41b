import logging
from collections import defaultdict
from datetime import date
from decimal import Decimal
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

from expense_log.storage.codec import decode_lines, encode_expense
from expense_log.storage.models import Expense
from expense_log.utils import week_start

logger = logging.getLogger(__name__)


class ExpenseManager:
    """In-memory list of expenses backed by a flat comma-separated file."""

    def __init__(self, path: Union[str, Path], expenses: Optional[Iterable[Expense]] = None):
        self.path = Path(path)
        self.expenses: List[Expense] = list(expenses or [])
        self.last_error: Optional[str] = None

    def __len__(self) -> int:
        return len(self.expenses)

    def __iter__(self):
        return iter(self.expenses)

    # Storage

    def load(self) -> int:
        """Replace the in-memory list with the file contents. Returns the record count."""
        self.last_error = None
        if not self.path.exists():
            logger.info(f"No expense file at {self.path}, starting empty")
            self.expenses = []
            return 0
        try:
            with self.path.open("r", encoding="utf-8", newline="") as f:
                self.expenses = list(decode_lines(f, source=str(self.path)))
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Error reading expense file {self.path}: {e}")
            self.last_error = str(e)
            self.expenses = []
            return 0
        logger.info(f"Loaded {len(self.expenses)} expenses from {self.path}")
        return len(self.expenses)

    def save(self) -> bool:
        """Rewrite the whole file. Returns False (and keeps memory as is) on I/O error."""
        self.last_error = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("w", encoding="utf-8", newline="") as f:
                for expense in self.expenses:
                    f.write(encode_expense(expense) + "\n")
        except OSError as e:
            logger.error(f"Error saving expenses to {self.path}: {e}")
            self.last_error = str(e)
            return False
        logger.debug(f"Saved {len(self.expenses)} expenses to {self.path}")
        return True

    def add(self, expense: Expense) -> bool:
        self.expenses.append(expense)
        logger.info(
            f"Added expense {expense.amount} ({expense.category}) on {expense.date.isoformat()}"
        )
        return self.save()

    # Aggregation

    def total_between(self, start: date, end: date) -> Decimal:
        """Sum of amounts with start <= date <= end."""
        return sum((e.amount for e in self.expenses if start <= e.date <= end), Decimal("0"))

    def daily_total(self, day: Optional[date] = None) -> Decimal:
        day = day or date.today()
        return sum((e.amount for e in self.expenses if e.date == day), Decimal("0"))

    def weekly_total(self, today: Optional[date] = None) -> Decimal:
        """Monday of the current week up to and including today."""
        today = today or date.today()
        return self.total_between(week_start(today), today)

    def monthly_total(self, today: Optional[date] = None) -> Decimal:
        today = today or date.today()
        return sum(
            (e.amount for e in self.expenses
             if e.date.year == today.year and e.date.month == today.month),
            Decimal("0"),
        )

    def summary(self, today: Optional[date] = None) -> Dict[str, Decimal]:
        today = today or date.today()
        return {
            "day": self.daily_total(today),
            "week": self.weekly_total(today),
            "month": self.monthly_total(today),
        }

    def totals_by_category(self, start: Optional[date] = None, end: Optional[date] = None) -> Dict[str, Decimal]:
        """Category totals within an optional inclusive window, largest first."""
        totals: Dict[str, Decimal] = defaultdict(lambda: Decimal("0"))
        for e in self.expenses:
            if start is not None and e.date < start:
                continue
            if end is not None and e.date > end:
                continue
            totals[e.category] += e.amount
        return dict(sorted(totals.items(), key=lambda x: (-x[1], x[0])))

    def grand_total(self) -> Decimal:
        return sum((e.amount for e in self.expenses), Decimal("0"))
