from pydantic import BaseModel, ConfigDict, Field, field_validator

from treewalk.models.enums import EntryType


class Entry(BaseModel):
    """A path produced by a traversal, with its inferred type and depth."""

    path: str
    name: str
    entry_type: EntryType
    depth: int = Field(ge=0)

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("entry_type")
    @classmethod
    def _reject_absent(cls, value: EntryType) -> EntryType:
        if value is EntryType.ABSENT:
            raise ValueError("an emitted entry cannot be absent")
        return value

    @property
    def is_directory(self) -> bool:
        return self.entry_type is EntryType.DIRECTORY


class Classification(BaseModel):
    """Outcome of inspecting one raw directory-listing name.

    ``entry_type`` is ``ABSENT`` when the entry vanished or its type could not
    be determined; such classifications never emit and are never descended.
    """

    path: str
    name: str
    depth: int = Field(ge=0)
    entry_type: EntryType
    emit: bool = False

    model_config = ConfigDict(frozen=True, extra="forbid")

    @property
    def is_absent(self) -> bool:
        return self.entry_type is EntryType.ABSENT

    @property
    def is_directory(self) -> bool:
        return self.entry_type is EntryType.DIRECTORY

    def to_entry(self) -> Entry:
        return Entry(
            path=self.path,
            name=self.name,
            entry_type=self.entry_type,
            depth=self.depth,
        )
