"""treewalk - lazy, filtered, depth-bounded directory traversal.

The walker lives in ``treewalk.services``; ``treewalk.support`` holds companion
helpers (environment lookup, file and CSV reading, numeric utilities) that
share the same error types.
"""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("treewalk")
except PackageNotFoundError:
    __version__ = "unknown"

__all__ = ["__version__"]
