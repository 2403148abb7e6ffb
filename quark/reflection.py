"""Recover a struct's name and fields from a line-by-line struct dump."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

_STRUCT = "struct "
_OPEN = " {"
_FIELD = " :"


@dataclass(frozen=True)
class ReflectionFieldInfo:
    type: str
    name: str


@dataclass
class ReflectionInfo:
    name: str | None
    size: int
    fields: list[ReflectionFieldInfo] = field(default_factory=list)


def _take(text: str, length: int) -> str:
    # A negative precision prints the whole string.
    return text if length < 0 else text[:length]


class ReflectionParser:
    """Consumes dump lines such as 'struct Foo {' and 'int x : '."""

    def __init__(self, size: int, capacity: int = 64) -> None:
        self.size = size
        self.capacity = capacity
        self._depth = 0
        self._new = True
        self._name: str | None = None
        self._fields: list[ReflectionFieldInfo] = []

    def feed(self, line: str) -> None:
        if len(line) <= 1:
            return

        if "{" in line:
            self._depth += 1
        elif "}" in line:
            self._depth -= 1

        if self._depth > 1:
            return

        name: str | None = None
        match = line.find(_STRUCT)
        if match >= 0:
            name = line[match + len(_STRUCT):]
        elif _OPEN in line:
            name = line

        if name is not None and self._new:
            self._name = _take(name, len(name) - len(_OPEN))
            self._new = False
            return

        if _FIELD not in line:
            return

        type_offset = 0
        if _STRUCT in line:
            type_offset = len(_STRUCT)

        i = len(line) - 4
        while i > 0 and line[i] != " ":
            i -= 1
        name_offset = i + 1

        if len(self._fields) >= self.capacity:
            raise ValueError(f"struct has more than {self.capacity} fields")

        field_type = _take(line[type_offset:], name_offset - type_offset - 1)
        field_name_part = line[name_offset:]
        field_name = _take(field_name_part, len(field_name_part) - len(_FIELD) - 1)
        self._fields.append(ReflectionFieldInfo(field_type, field_name))

    def finish(self) -> ReflectionInfo:
        return ReflectionInfo(self._name, self.size, list(self._fields))


def parse_struct_dump(lines: Iterable[str], size: int) -> ReflectionInfo:
    """Parse a whole struct dump into a ReflectionInfo."""
    parser = ReflectionParser(size)
    for line in lines:
        parser.feed(line)
    return parser.finish()