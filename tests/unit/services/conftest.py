"""Shared fixtures for service tests."""

import posixpath

import pytest

from treewalk.models.enums import EntryType


class FakeFileSystem:
    """In-memory FileSystem with a fixed listing order and scripted failures."""

    def __init__(self) -> None:
        self.listings: dict[str, list[str]] = {}
        self.types: dict[str, EntryType] = {}
        self.identities: dict[str, tuple[int, int]] = {}
        self.unreadable: set[str] = set()
        self.unstatable: set[str] = set()
        self.listed: list[str] = []

    def add_directory(self, path: str, names: list[str]) -> None:
        self.listings[path] = list(names)
        self.types.setdefault(path, EntryType.DIRECTORY)

    def add_file(self, path: str) -> None:
        self.types[path] = EntryType.FILE

    def list_directory(self, path: str) -> list[str]:
        self.listed.append(path)
        if path in self.unreadable:
            raise PermissionError(13, "Permission denied", path)
        if path not in self.listings:
            raise FileNotFoundError(2, "No such file or directory", path)
        return list(self.listings[path])

    def entry_type(self, path: str) -> EntryType:
        return self.types.get(path, EntryType.ABSENT)

    def directory_identity(self, path: str) -> tuple[int, int]:
        if path in self.unstatable:
            raise PermissionError(13, "Permission denied", path)
        return self.identities.get(path, (1, hash(posixpath.normpath(path))))


@pytest.fixture
def fake_filesystem() -> FakeFileSystem:
    return FakeFileSystem()
