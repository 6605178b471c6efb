"""Lazy, depth-bounded, pre-order directory traversal."""

from collections.abc import Iterator
from typing import NamedTuple

import structlog

from treewalk.errors import IOFailure
from treewalk.models.config import WalkConfiguration
from treewalk.models.entry import Entry
from treewalk.services.classifier import EntryClassifier
from treewalk.services.filesystem import DirectoryIdentity, FileSystem, LocalFileSystem


class _Frame(NamedTuple):
    directory: str
    names: Iterator[str]
    depth: int


class RecursiveWalker:
    """Walks a configured root and yields qualifying paths on demand.

    Each directory is listed in full when it is entered, then its names are
    consumed one pull at a time from an explicit stack of frames. For every
    name the entry is yielded first (if it qualifies) and, if it is a
    directory within the depth limit, its whole subtree follows before the
    next sibling.

    The walker holds no state between traversals: every call to ``walk`` or
    ``walk_entries`` re-reads the filesystem.
    """

    def __init__(
        self,
        config: WalkConfiguration,
        classifier: EntryClassifier | None = None,
        filesystem: FileSystem | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        self._config = config
        self._filesystem = filesystem or LocalFileSystem()
        self._logger = logger or structlog.get_logger(__name__)
        self._classifier = classifier or EntryClassifier(
            config,
            filesystem=self._filesystem,
            logger=self._logger,
        )

    @property
    def config(self) -> WalkConfiguration:
        return self._config

    def __iter__(self) -> Iterator[str]:
        return self.walk()

    def walk(self) -> Iterator[str]:
        """Yield absolute paths of qualifying entries.

        Yields:
            Paths joined from the scanned directory and the bare entry name.

        Raises:
            IOFailure: If a directory cannot be listed. Paths already yielded
                remain valid; the sequence ends at that point.
        """
        for entry in self.walk_entries():
            yield entry.path

    def walk_entries(self) -> Iterator[Entry]:
        """Yield qualifying entries with their type and depth."""
        config = self._config
        self._logger.info(
            "directory_walk_started",
            root=config.root,
            filter=config.filter.pattern,
            include_dirs=config.include_dirs,
            include_files=config.include_files,
            include_special=config.include_special,
            max_depth=config.max_depth,
            cycle_guard=config.cycle_guard,
        )

        visited: set[DirectoryIdentity] = set()
        if config.cycle_guard:
            visited.add(self._identify(config.root))

        stack = [self._open(config.root, 0)]
        entry_count = 0

        while stack:
            frame = stack[-1]
            name = next(frame.names, None)
            if name is None:
                stack.pop()
                continue

            classification = self._classifier.classify(frame.directory, name, frame.depth)
            if classification is None or classification.is_absent:
                continue

            if classification.emit:
                entry_count += 1
                yield classification.to_entry()

            if not classification.is_directory or not config.descends_from(frame.depth):
                continue

            if config.cycle_guard and not self._first_visit(classification.path, visited):
                self._logger.debug("directory_cycle_skipped", directory=classification.path)
                continue

            stack.append(self._open(classification.path, frame.depth + 1))

        self._logger.info(
            "directory_walk_completed",
            root=config.root,
            entry_count=entry_count,
        )

    def _open(self, directory: str, depth: int) -> _Frame:
        try:
            names = self._filesystem.list_directory(directory)
        except OSError as e:
            self._logger.warning(
                "directory_listing_failed",
                directory=directory,
                depth=depth,
                error=str(e),
            )
            raise IOFailure("listdir", directory) from e
        return _Frame(directory, iter(names), depth)

    def _identify(self, directory: str) -> DirectoryIdentity:
        try:
            return self._filesystem.directory_identity(directory)
        except OSError as e:
            self._logger.warning("directory_stat_failed", directory=directory, error=str(e))
            raise IOFailure("stat", directory) from e

    def _first_visit(self, directory: str, visited: set[DirectoryIdentity]) -> bool:
        identity = self._identify(directory)
        if identity in visited:
            return False
        visited.add(identity)
        return True
