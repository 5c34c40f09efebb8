"""Reading and writing the word file: a state line followed by one line per word."""

from __future__ import annotations

from os import PathLike

from .state import State
from .word import Word


class StorageError(Exception):
    """The word file could not be read or written."""


def read_file(path: str | PathLike[str]) -> tuple[State, list[Word]]:
    """Load the session state and the word list from ``path``."""
    try:
        with open(path, "rb") as handle:
            raw = handle.read()
    except OSError as error:
        raise StorageError("Failed to open the file") from error

    lines = raw.split(b"\n")
    if lines[-1] == b"":
        lines.pop()
    if not lines:
        raise StorageError("File is empty")

    decoded: list[str] = []
    for number, line in enumerate(lines, start=1):
        if line.endswith(b"\r"):
            line = line[:-1]
        try:
            decoded.append(line.decode("utf-8"))
        except UnicodeDecodeError as error:
            raise StorageError(f"Failed to read line {number}") from error

    state = State.deserialize(decoded[0])
    return state, [Word.deserialize(line) for line in decoded[1:]]


def write_file(path: str | PathLike[str], state: State, words: list[Word]) -> None:
    """Replace the contents of the existing file at ``path``."""
    try:
        handle = open(path, "r+b")
    except OSError as error:
        raise StorageError("Failed to open the file") from error

    with handle:
        try:
            handle.truncate(0)
            handle.write(f"{state.serialize()}\n".encode("utf-8"))
        except OSError as error:
            raise StorageError("Failed to write state to file") from error
        try:
            for word in words:
                handle.write(f"{word.serialize()}\n".encode("utf-8"))
        except OSError as error:
            raise StorageError("Failed to write word to file") from error