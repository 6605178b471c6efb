"""Per-entry classification: type, name match and inclusion."""

import os

import structlog

from treewalk.models.config import WalkConfiguration
from treewalk.models.entry import Classification
from treewalk.models.enums import EntryType
from treewalk.services.filesystem import FileSystem, LocalFileSystem

_DOT_ENTRIES = frozenset({".", ".."})


class EntryClassifier:
    """Decides whether a raw directory-listing name is emitted.

    Emission requires both the type's inclusion flag and a match of the filter
    against the bare name. Whether a directory is later recursed into is not
    decided here.
    """

    def __init__(
        self,
        config: WalkConfiguration,
        filesystem: FileSystem | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        self._config = config
        self._filesystem = filesystem or LocalFileSystem()
        self._logger = logger or structlog.get_logger(__name__)

    def classify(self, directory: str, name: str, depth: int) -> Classification | None:
        """Classify one entry of ``directory``.

        Args:
            directory: Directory currently being scanned.
            name: Bare entry name as returned by the listing.
            depth: Depth of the entry; the root's children are depth 0.

        Returns:
            None for ``.`` and ``..``, otherwise a Classification. Entries that
            vanished since the listing come back with type ``ABSENT``.
        """
        if name in _DOT_ENTRIES:
            return None

        path = os.path.join(directory, name)
        entry_type = self._filesystem.entry_type(path)

        if entry_type is EntryType.ABSENT:
            self._logger.debug("entry_transiently_absent", path=path)
            return Classification(path=path, name=name, depth=depth, entry_type=entry_type)

        return Classification(
            path=path,
            name=name,
            depth=depth,
            entry_type=entry_type,
            emit=self.is_type_included(entry_type) and self.matches(name),
        )

    def is_type_included(self, entry_type: EntryType) -> bool:
        if entry_type is EntryType.DIRECTORY:
            return self._config.include_dirs
        if entry_type is EntryType.FILE:
            return self._config.include_files
        if entry_type is EntryType.ABSENT:
            return False
        return self._config.include_special

    def matches(self, name: str) -> bool:
        """Search the filter in the bare name, never the joined path."""
        return self._config.filter.search(name) is not None
