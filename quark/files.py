"""Whole-file reading and existence checks."""

from __future__ import annotations

import os
from typing import IO, Any

from quark.text import PanicError


def open_file_or_panic(filename: str | os.PathLike[str], mode: str, error_message: str) -> IO[Any]:
    """Open a file, raising PanicError with a descriptive message on failure."""
    try:
        return open(filename, mode)
    except OSError as exc:
        code = exc.errno if exc.errno is not None else -1
        raise PanicError(
            f'Failed to open file: "{os.fspath(filename)}" with error message: '
            f'"{error_message}"\nGot file error: {code}\n'
        ) from exc


def file_size(file: IO[Any]) -> int:
    """Size of an open file in bytes; the file is rewound to the start."""
    file.seek(0, os.SEEK_END)
    size = file.tell()
    file.seek(0)
    return size


def read_entire_file(filename: str | os.PathLike[str]) -> bytes:
    """Read the whole file as bytes."""
    with open_file_or_panic(filename, "rb", "Failed to read entire file") as file:
        size = file_size(file)
        return file.read(size)


def file_exists(filename: str | os.PathLike[str]) -> bool:
    return os.path.exists(filename)


def path_exists(path: str | os.PathLike[str]) -> bool:
    return file_exists(path)