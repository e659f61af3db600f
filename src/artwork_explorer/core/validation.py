"""Input validation with clear error messages."""

from __future__ import annotations

import math
import numbers
from typing import Any

from ..config import MIN_BULK_COUNT
from .errors import InvalidArgument


def validate_bulk_count(count: Any) -> int:
    """Validate the "select first N rows" input.

    Accepts integers and integral floats (numeric widgets may deliver
    either). Returns the count as an int.
    """
    if count is None:
        raise InvalidArgument(
            "Please enter a valid number greater than 0."
        )
    if isinstance(count, bool) or not isinstance(count, numbers.Real):
        raise InvalidArgument(
            f"Row count must be a number, got {type(count).__name__}."
        )
    if not math.isfinite(count):
        raise InvalidArgument(f"Row count must be a finite number, got {count}.")
    if count != int(count):
        raise InvalidArgument(
            f"Row count must be a whole number, got {count}."
        )
    count = int(count)
    if count < MIN_BULK_COUNT:
        raise InvalidArgument(
            f"Row count must be at least {MIN_BULK_COUNT}, got {count}."
        )
    return count


def validate_page_number(page_number: Any, total_pages: int | None = None) -> int:
    """Validate a 1-based page number, optionally against the page count."""
    if isinstance(page_number, bool) or not isinstance(page_number, numbers.Integral):
        raise InvalidArgument(
            f"Page number must be an integer, got {type(page_number).__name__}."
        )
    page_number = int(page_number)
    if page_number < 1:
        raise InvalidArgument(f"Page number must be at least 1, got {page_number}.")
    if total_pages is not None and page_number > total_pages:
        raise InvalidArgument(
            f"Page {page_number} is out of range; there are {total_pages} pages."
        )
    return page_number


def validate_page_size(page_size: Any) -> int:
    """Validate a positive page size."""
    if isinstance(page_size, bool) or not isinstance(page_size, numbers.Integral):
        raise InvalidArgument(
            f"Page size must be an integer, got {type(page_size).__name__}."
        )
    if page_size < 1:
        raise InvalidArgument(f"Page size must be at least 1, got {page_size}.")
    return int(page_size)
