"""
Input validation helpers.

Small argument checks used by the configuration layer. They raise plain
ValueError/TypeError; callers wrap them in the domain error that fits.
"""

from shapematch.constants import FALSY_ENV_VALUES, TRUTHY_ENV_VALUES


def validate_positive_integer(
    value: int,
    name: str,
    allow_zero: bool = False,
) -> None:
    """
    Validate that a value is a positive integer.

    Args:
        value: Value to validate
        name: Parameter name for error messages
        allow_zero: Whether zero is allowed

    Raises:
        TypeError: If value is not an int
        ValueError: If value is out of range
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
    if allow_zero:
        if value < 0:
            raise ValueError(f"{name} must be non-negative")
    else:
        if value <= 0:
            raise ValueError(f"{name} must be positive")


def parse_bool(value: str, name: str) -> bool:
    """
    Parse a boolean flag from its string form.

    Raises:
        ValueError: If the string is not a recognised boolean
    """
    normalized = value.strip().lower()
    if normalized in TRUTHY_ENV_VALUES:
        return True
    if normalized in FALSY_ENV_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean flag, got {value!r}")


def parse_positive_integer(value: str, name: str) -> int:
    """
    Parse a positive integer from its string form.

    Raises:
        ValueError: If the string is not a positive integer
    """
    try:
        number = int(value.strip())
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {value!r}") from None
    validate_positive_integer(number, name)
    return number
