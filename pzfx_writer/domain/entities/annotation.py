"""Annotation rows for Info tables.

A flat key/value table becomes a sequence of tagged rows: free-text ``Note``
lines and ``Constant`` name/value pairs.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from ...constants import Annotations


@dataclass(frozen=True, slots=True)
class Note:
    text: str | None


@dataclass(frozen=True, slots=True)
class Constant:
    name: str
    value: str | None


AnnotationRow = Note | Constant


def _empty_rows() -> tuple[AnnotationRow, ...]:
    return ()


@dataclass(frozen=True, slots=True)
class AnnotationTable:
    entries: tuple[AnnotationRow, ...] = field(default_factory=_empty_rows)

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[str, str | None]]) -> AnnotationTable:
        rows: list[AnnotationRow] = []
        for key, value in pairs:
            if key == Annotations.NOTES_KEY:
                rows.append(Note(value))
            else:
                rows.append(Constant(key, value))
        return cls(entries=tuple(rows))

    def notes(self) -> list[Note]:
        return [row for row in self.entries if isinstance(row, Note)]

    def constants(self) -> list[Constant]:
        return [row for row in self.entries if isinstance(row, Constant)]


def default_annotation_table() -> AnnotationTable:
    return AnnotationTable.from_pairs((key, None) for key in Annotations.DEFAULT_KEYS)
