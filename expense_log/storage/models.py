"""
Expense record type and the suggested category set.
"""
from dataclasses import dataclass, field
import datetime
from decimal import Decimal
from enum import Enum
from typing import Any

from expense_log.utils import parse_amount, parse_date


class Category(Enum):
    FOOD = "food"
    TRAVEL = "travel"
    UTILITIES = "utilities"
    OTHER = "other"


def normalize_category(value: Any) -> str:
    """Lower-case and strip a category. Free text is kept; empty means 'other'."""
    if isinstance(value, Category):
        return value.value
    text = " ".join(str(value or "").split()).lower()
    return text or Category.OTHER.value


def _single_line(text: Any) -> str:
    return " ".join(str(text or "").splitlines()).strip()


@dataclass(frozen=True)
class Expense:
    """One recorded spending event. Immutable once created."""
    amount: Decimal
    category: str = Category.OTHER.value
    description: str = ""
    date: datetime.date = field(default_factory=datetime.date.today)

    def __post_init__(self):
        # frozen dataclass: normalise through object.__setattr__
        object.__setattr__(self, "amount", parse_amount(self.amount))
        object.__setattr__(self, "category", normalize_category(self.category))
        object.__setattr__(self, "description", _single_line(self.description))
        object.__setattr__(self, "date", parse_date(self.date))
