import os
from dotenv import load_dotenv
import logging
from typing import Optional

load_dotenv()

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Config:
    EXPENSE_FILE: str = os.getenv("EXPENSE_FILE", "expenses.csv")
    LOG_FILE: Optional[str] = os.getenv("EXPENSE_LOG_FILE", "expense_log.log")
    LOG_LEVEL: str = os.getenv("EXPENSE_LOG_LEVEL", "INFO").upper()
    CURRENCY: str = os.getenv("EXPENSE_CURRENCY", "$")

    @classmethod
    def validate(cls):
        if cls.LOG_LEVEL not in LOG_LEVELS:
            logger.error(f"Invalid EXPENSE_LOG_LEVEL: {cls.LOG_LEVEL}")
            raise ValueError(
                f"Invalid EXPENSE_LOG_LEVEL '{cls.LOG_LEVEL}', expected one of: {', '.join(LOG_LEVELS)}"
            )
        if not cls.EXPENSE_FILE:
            logger.error("EXPENSE_FILE is empty")
            raise ValueError("EXPENSE_FILE must not be empty")
