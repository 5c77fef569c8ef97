"""The workbook's table of shared strings with reference counts."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class _Entry:
    index: int
    count: int = 1


class SharedStrings:
    """Unique strings kept in first-use order, each counted by how often it is used."""

    def __init__(self) -> None:
        self._table: dict[str, _Entry] = {}
        self._strings: list[str] = []
        self.count = 0

    def __len__(self) -> int:
        return len(self._strings)

    def __contains__(self, text: object) -> bool:
        return text in self._table

    def is_empty(self) -> bool:
        return not self._strings

    def add(self, text: str) -> int:
        """Add one use of ``text`` and return its index."""
        self.count += 1
        entry = self._table.get(text)
        if entry is not None:
            entry.count += 1
            return entry.index
        index = len(self._strings)
        self._table[text] = _Entry(index)
        self._strings.append(text)
        return index

    def remove(self, text: str) -> None:
        """Drop one use of ``text``; the string leaves the table when unused."""
        entry = self._table.get(text)
        if entry is None:
            return
        self.count -= 1
        entry.count -= 1
        if entry.count <= 0:
            for later in self._strings[entry.index + 1:]:
                self._table[later].index -= 1
            del self._strings[entry.index]
            del self._table[text]

    def inc_ref(self, index: int) -> None:
        """Add one use of the string at ``index``."""
        if not 0 <= index < len(self._strings):
            raise IndexError(f"shared string index {index} out of range")
        self.add(self._strings[index])

    def index_of(self, text: str) -> int:
        """Return the index of ``text``; raises KeyError when absent."""
        return self._table[text].index

    def get(self, index: int) -> str:
        """Return the string at ``index``, or an empty string when out of range."""
        if 0 <= index < len(self._strings):
            return self._strings[index]
        return ""

    def strings(self) -> list[str]:
        return list(self._strings)