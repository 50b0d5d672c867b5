import logging
from datetime import date, datetime
from typing import Annotated, Any

from pydantic import BeforeValidator, PlainSerializer

logger = logging.getLogger(__name__)

API_DATE_FORMAT = "%Y-%m-%d"


def parse_api_date(value: Any) -> date:
    """
    Parse a fixed-format `yyyy-MM-dd` date string.

    ## Parameters
    - `value`: a string such as "2024-12-22", or an existing `date`

    ## Returns
    - The parsed `date`

    ## Raises
    - `ValueError` if the value is not a `yyyy-MM-dd` string. Other formats
      (timestamps, ISO datetimes) are rejected on purpose.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise ValueError(f"Expected a yyyy-MM-dd string, got {type(value).__name__}")
    try:
        return datetime.strptime(value, API_DATE_FORMAT).date()
    except ValueError as e:
        logger.debug(f"Failed to parse date '{value}': {e}")
        raise ValueError(f"Invalid date '{value}', expected yyyy-MM-dd") from e


def format_api_date(value: date) -> str:
    """Format a date as `yyyy-MM-dd`."""
    return value.strftime(API_DATE_FORMAT)


APIDate = Annotated[
    date,
    BeforeValidator(parse_api_date),
    PlainSerializer(format_api_date, return_type=str),
]
