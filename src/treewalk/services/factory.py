"""Factory functions for creating and wiring walkers.

Configuration errors surface when the factory is called, before the first
entry is requested.
"""

import os
from collections.abc import Iterator

import structlog

from treewalk.services.classifier import EntryClassifier
from treewalk.services.filesystem import FileSystem, LocalFileSystem
from treewalk.services.path_resolver import MATCH_ALL, PathResolver
from treewalk.services.walker import RecursiveWalker


def create_walker(
    root: str | os.PathLike[str],
    filter: str = MATCH_ALL,
    *,
    include_dirs: bool = True,
    include_files: bool = True,
    include_special: bool = True,
    max_depth: int = 1,
    cycle_guard: bool = False,
    filesystem: FileSystem | None = None,
) -> RecursiveWalker:
    """Create a RecursiveWalker for ``root``.

    Args:
        root: Directory to walk.
        filter: Regular expression searched in each bare entry name.
        include_dirs: Emit directories.
        include_files: Emit regular files.
        include_special: Emit entries that are neither files nor directories.
        max_depth: Deepest emitted level (root's children are 0); negative is unlimited.
        cycle_guard: Skip directories already descended into during one walk.
        filesystem: Filesystem implementation; defaults to the local one.

    Returns:
        Configured RecursiveWalker. Iterating it starts a fresh traversal.

    Raises:
        InvalidInput: If the root or the filter is invalid.
        IOFailure: If the root cannot be canonicalized.
    """
    logger = structlog.get_logger(__name__)

    config = PathResolver(logger=logger).resolve(
        root,
        filter,
        include_dirs=include_dirs,
        include_files=include_files,
        include_special=include_special,
        max_depth=max_depth,
        cycle_guard=cycle_guard,
    )

    effective_filesystem = filesystem or LocalFileSystem()

    classifier = EntryClassifier(
        config,
        filesystem=effective_filesystem,
        logger=logger,
    )

    return RecursiveWalker(
        config,
        classifier=classifier,
        filesystem=effective_filesystem,
        logger=logger,
    )


def walk_directory(
    root: str | os.PathLike[str],
    filter: str = MATCH_ALL,
    *,
    include_dirs: bool = True,
    include_files: bool = True,
    include_special: bool = True,
    max_depth: int = 1,
    cycle_guard: bool = False,
) -> Iterator[str]:
    """Validate inputs now and return a lazy iterator over matching paths."""
    walker = create_walker(
        root,
        filter,
        include_dirs=include_dirs,
        include_files=include_files,
        include_special=include_special,
        max_depth=max_depth,
        cycle_guard=cycle_guard,
    )
    return walker.walk()
