from pathlib import Path

import pytest

from treewalk.errors import InvalidInput
from treewalk.models.base import (
    ensure_non_empty_text,
    ensure_not_none,
    ensure_path_text,
    ensure_string,
)


def test_ensure_not_none() -> None:
    assert ensure_not_none(0) == 0
    with pytest.raises(InvalidInput, match="root must not be None"):
        ensure_not_none(None, "root")


def test_ensure_string() -> None:
    assert ensure_string("", "name") == ""
    with pytest.raises(InvalidInput):
        ensure_string(3, "name")


def test_ensure_non_empty_text() -> None:
    assert ensure_non_empty_text(" x ", "name") == " x "
    with pytest.raises(InvalidInput, match="name cannot be empty"):
        ensure_non_empty_text(" \t", "name")


def test_ensure_path_text_accepts_path_like() -> None:
    assert ensure_path_text(Path("/tmp/x"), "root") == "/tmp/x"


def test_ensure_path_text_rejects_bytes() -> None:
    with pytest.raises(InvalidInput):
        ensure_path_text(b"/tmp", "root")
