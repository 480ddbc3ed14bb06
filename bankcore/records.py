"""Line-oriented record storage in plain text files."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import Union

__all__ = ["CLIENTS_FILE", "USERS_FILE", "save_record", "save_records", "restore_records"]

PathLike = Union[str, Path]

CLIENTS_FILE = "data/Clients.txt"
USERS_FILE = "data/Users.txt"


def _warn(path: PathLike) -> None:
    print(f"Warning: Unable to open file: {path}")


def save_record(record: str, path: PathLike) -> None:
    """Overwrite ``path`` with a single record line."""
    save_records([record], path)


def save_records(records: Iterable[str], path: PathLike) -> None:
    """Overwrite ``path`` with one line per record.

    A warning is printed if the file cannot be opened.
    """
    try:
        with open(path, "w", encoding="utf-8") as file:
            file.writelines(f"{record}\n" for record in records)
    except OSError:
        _warn(path)


def restore_records(path: PathLike) -> list[str]:
    """Return the lines of ``path`` without their line endings.

    A warning is printed and an empty list returned if the file cannot be
    opened.
    """
    try:
        with open(path, encoding="utf-8") as file:
            return [line.removesuffix("\n") for line in file]
    except OSError:
        _warn(path)
        return []