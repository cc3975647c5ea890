"""
Input validation helpers for user endpoints.
"""

import re

from .domain.exceptions import ValidationException

USER_ID_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_user_id(raw: str) -> int:
    """
    Parse a user id supplied as a query string value.

    Accepts an optionally signed ASCII decimal integer with no
    surrounding whitespace, the same inputs strconv-style integer
    parsing accepts.

    Args:
        raw: Raw id string

    Returns:
        Parsed id

    Raises:
        ValidationException: If the value is not an integer
    """
    if not USER_ID_PATTERN.fullmatch(raw):
        raise ValidationException("id", raw, "invalid userID")
    return int(raw)
