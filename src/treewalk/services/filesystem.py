"""Filesystem access used by the classifier and the walker.

The walker only needs two queries: list the names in a directory and report
the type of a single path. Keeping them behind a small protocol lets tests
substitute a fake that simulates races and permission failures.
"""

import os
import stat
from typing import Protocol

from treewalk.models.enums import EntryType

DirectoryIdentity = tuple[int, int]


class FileSystem(Protocol):
    def list_directory(self, path: str) -> list[str]:
        """Return the raw names in ``path``, in listing order.

        Raises:
            OSError: If the directory cannot be listed.
        """
        ...

    def entry_type(self, path: str) -> EntryType:
        """Report the type of ``path`` without following symlinks.

        Never raises; an entry that is gone or cannot be inspected is
        reported as ``EntryType.ABSENT``.
        """
        ...

    def directory_identity(self, path: str) -> DirectoryIdentity:
        """Return a value identifying the directory across different paths.

        Raises:
            OSError: If the directory cannot be inspected.
        """
        ...


class LocalFileSystem:
    """FileSystem backed by the ``os`` module.

    ``os.listdir`` reads the whole directory and closes it before returning,
    so no handle stays open while the walker yields entries.
    """

    def list_directory(self, path: str) -> list[str]:
        return os.listdir(path)

    def entry_type(self, path: str) -> EntryType:
        try:
            mode = os.lstat(path).st_mode
        except (OSError, ValueError):
            return EntryType.ABSENT

        if stat.S_ISDIR(mode):
            return EntryType.DIRECTORY
        if stat.S_ISREG(mode):
            return EntryType.FILE
        if stat.S_ISLNK(mode) and not os.path.exists(path):
            # Dangling link: nothing exists behind the name.
            return EntryType.ABSENT
        return EntryType.SPECIAL

    def directory_identity(self, path: str) -> DirectoryIdentity:
        info = os.stat(path)
        return info.st_dev, info.st_ino
