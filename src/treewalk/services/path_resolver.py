"""Validation and canonicalization of walk construction inputs."""

import os
import re
from typing import Any

import structlog
from pydantic import ValidationError

from treewalk.errors import InvalidInput, IOFailure
from treewalk.models.base import ensure_not_none, ensure_path_text, ensure_string
from treewalk.models.config import WalkConfiguration

MATCH_ALL = ".*"


class PathResolver:
    """Builds ``WalkConfiguration`` instances from raw user input.

    Checks run in a fixed order: the filter pattern first (no filesystem
    access), then the root's existence and type, then canonicalization of the
    root. Nothing is ever listed.
    """

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None) -> None:
        self._logger = logger or structlog.get_logger(__name__)

    def resolve(
        self,
        root: str | os.PathLike[str],
        filter: str = MATCH_ALL,
        *,
        include_dirs: bool = True,
        include_files: bool = True,
        include_special: bool = True,
        max_depth: int = 1,
        cycle_guard: bool = False,
    ) -> WalkConfiguration:
        """Validate inputs and produce an immutable configuration.

        Args:
            root: Directory to walk. Relative paths and symlinks are resolved.
            filter: Regular expression searched in each bare entry name.
            include_dirs: Emit directories.
            include_files: Emit regular files.
            include_special: Emit everything else (symlinks, devices, FIFOs, sockets).
            max_depth: Deepest level emitted, counting the root's children as
                level 0. Negative means unlimited.
            cycle_guard: Never descend into the same directory twice in one walk.

        Returns:
            A frozen WalkConfiguration.

        Raises:
            InvalidInput: If the root is not an existing directory, the pattern
                does not compile, or an option has the wrong type.
            IOFailure: If the root cannot be canonicalized.
        """
        root_text = ensure_path_text(ensure_not_none(root, "root"), "root")
        pattern = self._compile_filter(filter)

        if not os.path.isdir(root_text):
            raise InvalidInput(f"Root directory '{root_text}' does not exist or is not a directory.")

        canonical_root = self._canonicalize(root_text)

        try:
            config = WalkConfiguration(
                root=canonical_root,
                filter=pattern,
                include_dirs=include_dirs,
                include_files=include_files,
                include_special=include_special,
                max_depth=max_depth,
                cycle_guard=cycle_guard,
            )
        except ValidationError as e:
            raise InvalidInput(f"Invalid walk configuration: {e}") from e

        self._logger.debug(
            "walk_configuration_resolved",
            root=config.root,
            requested_root=root_text,
            filter=pattern.pattern,
            max_depth=config.max_depth,
        )
        return config

    def _compile_filter(self, filter: Any) -> re.Pattern[str]:
        """Compile the filter and prove it usable with a trial search."""
        text = ensure_string(filter, "filter")
        try:
            pattern = re.compile(text)
            pattern.search("")
        except (re.error, OverflowError, RecursionError) as e:
            raise InvalidInput(f"Invalid regex '{text}': {e}") from e
        return pattern

    def _canonicalize(self, root: str) -> str:
        try:
            return os.path.realpath(root, strict=True)
        except OSError as e:
            self._logger.warning("root_canonicalization_failed", root=root, error=str(e))
            raise IOFailure("realpath", root) from e


def resolve_configuration(
    root: str | os.PathLike[str],
    filter: str = MATCH_ALL,
    *,
    include_dirs: bool = True,
    include_files: bool = True,
    include_special: bool = True,
    max_depth: int = 1,
    cycle_guard: bool = False,
) -> WalkConfiguration:
    """Shortcut for ``PathResolver().resolve(...)``."""
    return PathResolver().resolve(
        root,
        filter,
        include_dirs=include_dirs,
        include_files=include_files,
        include_special=include_special,
        max_depth=max_depth,
        cycle_guard=cycle_guard,
    )
