"""
Line format of the expense file: ``YYYY-MM-DD,amount,category,description``.

Fields containing a comma or a double quote are quoted with standard CSV
rules, so descriptions with commas survive a save/load round trip.
"""
import csv
import io
import logging
from typing import Iterable, Iterator, List, Optional

from expense_log.storage.models import Expense
from expense_log.utils import parse_amount, parse_date

logger = logging.getLogger(__name__)

FIELD_COUNT = 4


class ExpenseDialect(csv.Dialect):
    delimiter = ","
    quotechar = '"'
    doublequote = True
    skipinitialspace = False
    lineterminator = "\n"
    quoting = csv.QUOTE_MINIMAL
    strict = True


def encode_expense(expense: Expense) -> str:
    """Serialize one expense to a single line, without the line terminator."""
    buffer = io.StringIO()
    csv.writer(buffer, dialect=ExpenseDialect).writerow([
        expense.date.isoformat(),
        str(expense.amount),
        expense.category,
        expense.description,
    ])
    return buffer.getvalue().rstrip("\n")


def decode_fields(fields: List[str]) -> Expense:
    """Build an expense from exactly four fields. Raises ValueError on bad data."""
    if len(fields) != FIELD_COUNT:
        raise ValueError(f"Expected {FIELD_COUNT} fields, got {len(fields)}")
    date_str, amount_str, category, description = fields
    return Expense(
        amount=parse_amount(amount_str),
        category=category,
        description=description,
        date=parse_date(date_str),
    )


def decode_line(line: str) -> List[str]:
    """Split one physical line into fields. Raises csv.Error on broken quoting."""
    return next(csv.reader([line.rstrip("\r\n")], dialect=ExpenseDialect), [])


def decode_lines(lines: Iterable[str], source: Optional[str] = None) -> Iterator[Expense]:
    """Yield expenses line by line, skipping blank, wrong-width and unparsable rows."""
    where = source or "<lines>"
    for line_no, line in enumerate(lines, 1):
        try:
            fields = decode_line(line)
        except csv.Error as e:
            logger.warning(f"{where}:{line_no}: skipping unreadable line: {e}")
            continue
        if not any(f.strip() for f in fields):
            continue
        if len(fields) != FIELD_COUNT:
            logger.debug(f"{where}:{line_no}: skipping line with {len(fields)} fields")
            continue
        try:
            yield decode_fields(fields)
        except ValueError as e:
            logger.warning(f"{where}:{line_no}: skipping malformed record: {e}")
