"""
Input validation functions.
"""

import re

LV_NAME_MAX_LENGTH = 127


def validate_name(name: str) -> None:
    """
    Validate an LVM object name (volume group or logical volume).

    Args:
        name: Name to validate

    Raises:
        ValueError: If name is invalid
    """
    if not name:
        raise ValueError("Name cannot be empty")

    if len(name) > LV_NAME_MAX_LENGTH:
        raise ValueError(f"Name must be between 1 and {LV_NAME_MAX_LENGTH} characters")

    if name in (".", ".."):
        raise ValueError("Name cannot be '.' or '..'")

    # LVM accepts alphanumerics, '+', '_', '.', '-' but not a leading hyphen
    if not re.match(r"^[a-zA-Z0-9+_.][a-zA-Z0-9+_.-]*$", name):
        raise ValueError(
            "Name must not start with a hyphen and contain only alphanumeric, plus, dots, underscores, or hyphens"
        )


def validate_size(size_bytes: int) -> None:
    """
    Validate a volume size in bytes.

    Raises:
        ValueError: If size is not a positive integer
    """
    if isinstance(size_bytes, bool) or not isinstance(size_bytes, int):
        raise ValueError(f"Size must be an integer number of bytes, got {size_bytes!r}")

    if size_bytes <= 0:
        raise ValueError("Size must be greater than 0")
