import re

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, field_validator

from treewalk.models.base import ensure_non_empty_text


class WalkConfiguration(BaseModel):
    """Immutable description of one traversal.

    Built by ``PathResolver``, which guarantees that ``root`` is the canonical
    path of an existing directory. A configuration can start any number of
    independent walks.
    """

    root: str
    filter: re.Pattern[str]
    include_dirs: StrictBool = True
    include_files: StrictBool = True
    include_special: StrictBool = True
    max_depth: StrictInt = 1
    cycle_guard: StrictBool = Field(default=False)

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("root")
    @classmethod
    def _ensure_root(cls, value: str) -> str:
        return ensure_non_empty_text(value, "root")

    @property
    def unlimited_depth(self) -> bool:
        return self.max_depth < 0

    def descends_from(self, depth: int) -> bool:
        """Whether a directory found at ``depth`` may be recursed into."""
        return self.unlimited_depth or depth < self.max_depth
