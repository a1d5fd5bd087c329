"""
Shared validation for database serial identifiers.

Only the type is checked. An id that was never issued (zero, negative, past
the column range) is still a valid value: lookups simply find nothing.
"""

from directchat.domain.exceptions.validation_error import InvalidValueError


def validate_serial(value: int, label: str) -> None:
    # bool is an int subclass, reject it explicitly
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidValueError(f"{label} must be an integer, got {value!r}")
