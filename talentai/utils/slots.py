"""Helpers for calendar dates, times of day and meeting links."""

import secrets
import string
from datetime import datetime
from typing import Iterable, List

from talentai.constants import DATE_FORMAT, MEET_CODE_LENGTH, MEET_LINK_BASE, TIME_FORMAT

MEET_CODE_ALPHABET = string.ascii_lowercase + string.digits


def normalize_date(value: str) -> str:
    """Validate an ISO date string and return it as "YYYY-MM-DD".

    Raises:
        ValueError: If the value is not a calendar date.
    """
    try:
        return datetime.strptime(value.strip(), DATE_FORMAT).date().isoformat()
    except (AttributeError, ValueError):
        raise ValueError(f"Invalid date '{value}', expected YYYY-MM-DD")


def normalize_time(value: str) -> str:
    """Validate a time of day and return it zero-padded as "HH:MM".

    Raises:
        ValueError: If the value is not a time of day.
    """
    try:
        return datetime.strptime(value.strip(), TIME_FORMAT).strftime(TIME_FORMAT)
    except (AttributeError, ValueError):
        raise ValueError(f"Invalid time '{value}', expected HH:MM")


def normalize_times(values: Iterable[str]) -> List[str]:
    """Validate, de-duplicate and sort a list of times of day."""
    return sorted({normalize_time(value) for value in values})


def generate_meet_link() -> str:
    code = "".join(secrets.choice(MEET_CODE_ALPHABET) for _ in range(MEET_CODE_LENGTH))
    return f"{MEET_LINK_BASE}{code}"
