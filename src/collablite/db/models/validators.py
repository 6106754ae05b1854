"""Field validation shared by the models' `@validates` hooks"""
import re
from typing import Optional

from collablite.exceptions import InvalidInputError

EMAIL_PATTERN = re.compile(r"^\S+@\S+\.\S+$")


def trimmed_length(field: str, value: str, min_length: int, max_length: int) -> str:
    if value is None:
        raise InvalidInputError(f"{field} is required")
    value = value.strip()
    if len(value) < min_length:
        raise InvalidInputError(f"{field} must be at least {min_length} characters")
    if len(value) > max_length:
        raise InvalidInputError(f"{field} must be at most {max_length} characters")
    return value


def optional_max_length(field: str, value: Optional[str], max_length: int) -> Optional[str]:
    if value is not None and len(value) > max_length:
        raise InvalidInputError(f"{field} must be at most {max_length} characters")
    return value


def email(value: str) -> str:
    if value is None:
        raise InvalidInputError("email is required")
    value = value.strip().lower()
    if not EMAIL_PATTERN.match(value):
        raise InvalidInputError("Please enter a valid email")
    return value
