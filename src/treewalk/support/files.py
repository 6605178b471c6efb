"""Whole-file and delimited-record helpers.

Every failure is reported as ``IOFailure`` so callers can handle these
helpers and the walker the same way.
"""

import csv
import os
from pathlib import Path

from treewalk.errors import IOFailure

PathArg = str | os.PathLike[str]


def read_file(path: PathArg, trim: bool = False, encoding: str = "utf-8") -> str:
    """Read a whole text file.

    Args:
        path: File to read.
        trim: Strip leading and trailing whitespace from the content.
        encoding: Text encoding of the file.

    Raises:
        IOFailure: If the file cannot be opened, read or decoded.
    """
    try:
        content = Path(path).read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as e:
        raise IOFailure.for_read(os.fspath(path)) from e
    return content.strip() if trim else content


def write_file(path: PathArg, content: str, encoding: str = "utf-8") -> None:
    """Write ``content`` to ``path``, replacing any existing file."""
    try:
        Path(path).write_text(content, encoding=encoding)
    except OSError as e:
        raise IOFailure.for_write(os.fspath(path)) from e


def read_csv_file(path: PathArg, delimiter: str = ",", quotechar: str = '"') -> list[list[str]]:
    """Read every record of a delimited text file.

    Returns:
        One list of field strings per record, in file order.

    Raises:
        IOFailure: If the file cannot be opened, decoded or parsed.
    """
    try:
        with open(path, newline="", encoding="utf-8") as handle:
            return list(csv.reader(handle, delimiter=delimiter, quotechar=quotechar))
    except (OSError, UnicodeDecodeError, csv.Error) as e:
        raise IOFailure("read_csv", os.fspath(path)) from e
