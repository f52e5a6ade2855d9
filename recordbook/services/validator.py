"""
Recordbook: Record Validator
===============================

What:  Bounds checks for a candidate name/age pair.
Who:   Called by the create and update route handlers before the store.

Rules (checked in this order, first failure wins):
    1. name must not be empty                    → EmptyNameError
    2. name must be shorter than 100 code points → NameTooLongError
    3. age must satisfy 0 <= age < 200           → AgeOutOfRangeError
"""

from recordbook.exceptions import (
    AgeOutOfRangeError,
    EmptyNameError,
    NameTooLongError,
)

MAX_NAME_LENGTH = 100
MAX_AGE = 200


def validate_record(name: str, age: int) -> None:
    """
    Raise a ValidationError subclass if (name, age) is out of bounds.

    Returns None when the pair is acceptable. Pure: no I/O, no logging.
    """
    if len(name) == 0:
        raise EmptyNameError()

    # Length is counted in code points, not UTF-8 bytes
    if len(name) >= MAX_NAME_LENGTH:
        raise NameTooLongError(length=len(name))

    if age < 0 or age >= MAX_AGE:
        raise AgeOutOfRangeError(age=age)
