import os
from typing import Any, TypeVar

from treewalk.errors import InvalidInput

T = TypeVar("T")


def ensure_not_none(value: T | None, what: str = "value") -> T:
    if value is None:
        raise InvalidInput(f"{what} must not be None")
    return value


def ensure_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise InvalidInput(f"{field_name} must be a string")
    return value


def ensure_non_empty_text(value: Any, field_name: str) -> str:
    value = ensure_string(value, field_name)
    if not value.strip():
        raise InvalidInput(f"{field_name} cannot be empty")
    return value


def ensure_path_text(value: Any, field_name: str) -> str:
    """Accept a string or ``os.PathLike`` and return its non-empty string form."""
    if isinstance(value, os.PathLike):
        value = os.fspath(value)
    if isinstance(value, bytes):
        raise InvalidInput(f"{field_name} must be a text path, not bytes")
    return ensure_non_empty_text(value, field_name)
