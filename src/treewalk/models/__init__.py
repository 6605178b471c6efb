from treewalk.models.config import WalkConfiguration
from treewalk.models.entry import Classification, Entry
from treewalk.models.enums import EntryType

__all__ = [
    "WalkConfiguration",
    "Entry",
    "Classification",
    "EntryType",
]
