from enum import StrEnum


class EntryType(StrEnum):
    DIRECTORY = "directory"
    FILE = "file"
    SPECIAL = "special"
    ABSENT = "absent"
