"""
Age calculation from ``MM/dd/yyyy`` birthdates.
"""

import logging
import re
from datetime import date, datetime
from typing import Optional

logger = logging.getLogger(__name__)

BIRTHDATE_FORMAT = "%m/%d/%Y"
UNKNOWN_AGE = -1
ADULT_AGE = 18

_BIRTHDATE_PATTERN = re.compile(r"\d{2}/\d{2}/\d{4}")


def calculate_age(birthdate: str, today: Optional[date] = None) -> int:
    """Return the number of completed years since ``birthdate``.

    ``birthdate`` must be ``MM/dd/yyyy``.  Anything that cannot be
    parsed, and birthdates after ``today``, yield ``UNKNOWN_AGE``
    instead of raising so that one bad record never fails a whole view.
    """
    if today is None:
        today = date.today()
    if not isinstance(birthdate, str) or not _BIRTHDATE_PATTERN.fullmatch(birthdate):
        logger.warning("Invalid birthdate format: %r", birthdate)
        return UNKNOWN_AGE
    try:
        born = datetime.strptime(birthdate, BIRTHDATE_FORMAT).date()
    except ValueError:
        logger.warning("Invalid birthdate: %r", birthdate)
        return UNKNOWN_AGE
    age = today.year - born.year - ((today.month, today.day) < (born.month, born.day))
    if age < 0:
        logger.warning("Birthdate %s is after %s", birthdate, today.isoformat())
        return UNKNOWN_AGE
    return age


def is_adult(age: int) -> bool:
    return age >= ADULT_AGE


def is_minor(age: int) -> bool:
    """A known age under 18; ``UNKNOWN_AGE`` is neither adult nor minor."""
    return 0 <= age < ADULT_AGE
