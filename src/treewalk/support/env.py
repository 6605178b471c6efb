"""Environment variable lookup."""

import os

from treewalk.errors import KeyNotFound


def get_env_default(key: str, default: str) -> str:
    value = os.environ.get(key)
    return default if value is None else value


def get_env(key: str) -> str:
    """Return the value of ``key`` or raise KeyNotFound."""
    value = os.environ.get(key)
    if value is None:
        raise KeyNotFound(key, "environment")
    return value
