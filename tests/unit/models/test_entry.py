import pytest
from pydantic import ValidationError

from treewalk.models.entry import Classification, Entry
from treewalk.models.enums import EntryType


def test_entry_fields() -> None:
    entry = Entry(path="/r/sub", name="sub", entry_type=EntryType.DIRECTORY, depth=0)

    assert entry.is_directory
    assert entry.entry_type == "directory"


def test_entry_rejects_absent_type() -> None:
    with pytest.raises(ValidationError):
        Entry(path="/r/x", name="x", entry_type=EntryType.ABSENT, depth=0)


def test_entry_rejects_negative_depth() -> None:
    with pytest.raises(ValidationError):
        Entry(path="/r/x", name="x", entry_type=EntryType.FILE, depth=-1)


def test_entry_is_frozen() -> None:
    entry = Entry(path="/r/x", name="x", entry_type=EntryType.FILE, depth=0)

    with pytest.raises(ValidationError):
        entry.path = "/elsewhere"


def test_absent_classification_defaults_to_no_emit() -> None:
    classification = Classification(path="/r/x", name="x", depth=0, entry_type=EntryType.ABSENT)

    assert classification.is_absent
    assert classification.emit is False
    assert not classification.is_directory


def test_absent_classification_cannot_become_entry() -> None:
    classification = Classification(path="/r/x", name="x", depth=0, entry_type=EntryType.ABSENT)

    with pytest.raises(ValidationError):
        classification.to_entry()
