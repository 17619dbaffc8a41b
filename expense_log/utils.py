import calendar
import logging
from datetime import date, datetime, timedelta
from decimal import Decimal, InvalidOperation
from typing import Optional, Tuple, Union

logger = logging.getLogger(__name__)

DATE_FORMAT = "%Y-%m-%d"


def safe_decimal(value, default=Decimal('0.00')):
    try:
        if value is None:
            return default
        if isinstance(value, (float, int)):
            return Decimal(str(round(value, 2)))
        return Decimal(str(value).strip())
    except (InvalidOperation, ValueError, TypeError):
        return default


def parse_amount(value) -> Decimal:
    """Parse a positive amount. Raises ValueError on anything else."""
    amount = safe_decimal(value, default=None)
    if amount is None or not amount.is_finite():
        raise ValueError(f"Invalid amount: {value!r}")
    if amount <= 0:
        raise ValueError(f"Amount must be greater than 0, got {value!r}")
    return amount


def parse_date(value: Union[str, date, datetime, None]) -> date:
    if value is None:
        return date.today()
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return datetime.strptime(str(value).strip(), DATE_FORMAT).date()


def week_start(day: Optional[date] = None) -> date:
    """Monday of the week containing ``day``."""
    day = day or date.today()
    return day - timedelta(days=day.weekday())


def month_bounds(day: Optional[date] = None) -> Tuple[date, date]:
    """First and last day of the month containing ``day``."""
    day = day or date.today()
    last = calendar.monthrange(day.year, day.month)[1]
    return day.replace(day=1), day.replace(day=last)
