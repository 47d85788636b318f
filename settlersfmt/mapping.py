"""Reader for mapping files: lines of '<index><space or tab><value>'.

Lines that are empty or start with '#' are ignored.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from os import PathLike

_INDEX_RE = re.compile(r"[+-]?[0-9]+")


class MappingError(ValueError):
    """A line of a mapping file could not be parsed."""

    def __init__(self, line: int, reason: str):
        self.line = line
        self.reason = reason
        super().__init__(f"Error at line {line}: {reason}")


def _parse_line(line: str) -> tuple[int, str]:
    positions = [pos for pos in (line.find(" "), line.find("\t")) if pos >= 0]
    if not positions or min(positions) == 0:
        raise ValueError("No index or value")
    delimiter = min(positions)
    index_text = line[:delimiter]
    if not _INDEX_RE.fullmatch(index_text) or int(index_text) < 0:
        raise ValueError(f"Invalid index: {index_text}")
    return int(index_text), line[delimiter + 1:]


def read_mapping(stream: Iterable[str]) -> Iterator[tuple[int, str]]:
    """Yield (index, value) pairs from the lines of a text stream."""
    for line_nr, raw in enumerate(stream, start=1):
        line = raw[:-1] if raw.endswith("\n") else raw
        if not line or line.startswith("#"):
            continue
        try:
            yield _parse_line(line)
        except ValueError as exc:
            raise MappingError(line_nr, str(exc)) from exc


def read_mapping_file(path: str | PathLike) -> list[tuple[int, str]]:
    """Read all (index, value) pairs from a mapping file."""
    with open(path, encoding="utf-8", newline="") as stream:
        return list(read_mapping(stream))