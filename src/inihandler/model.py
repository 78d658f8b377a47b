"""In-memory structure of an INI document.

A :class:`Document` is an ordered list of :class:`Section` objects, each an
ordered list of :class:`Entry` records.  Nothing here touches the disk; see
:mod:`inihandler.codec` for that.
"""
from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from pathlib import Path
from typing import NamedTuple


class Entry(NamedTuple):
    """A single ``key=value`` line."""

    key: str
    value: str

    @classmethod
    def coerce(cls, item: Entry | tuple[str, str]) -> Entry:
        if isinstance(item, cls):
            return item
        key, value = item
        return cls(str(key), str(value))


@dataclass
class Section:
    name: str
    entries: list[Entry] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.entries = [Entry.coerce(e) for e in self.entries]

    def __iter__(self) -> Iterator[Entry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __bool__(self) -> bool:
        return True

    def __contains__(self, key: object) -> bool:
        return any(e.key == key for e in self.entries)

    def keys(self) -> list[str]:
        return [e.key for e in self.entries]

    def get(self, key: str) -> str | None:
        """Return the value of the first entry named *key*."""
        for entry in self.entries:
            if entry.key == key:
                return entry.value
        return None

    def set(self, key: str, value: str) -> None:
        """Overwrite the first entry named *key* in place or append one."""
        for idx, entry in enumerate(self.entries):
            if entry.key == key:
                self.entries[idx] = Entry.coerce((key, value))
                return
        self.entries.append(Entry.coerce((key, value)))


@dataclass
class Document:
    path: Path
    sections: list[Section] = field(default_factory=list)

    def __iter__(self) -> Iterator[Section]:
        return iter(self.sections)

    def __len__(self) -> int:
        return len(self.sections)

    def __bool__(self) -> bool:
        return True

    def section_names(self) -> list[str]:
        return [s.name for s in self.sections]

    def find(self, name: str) -> Section | None:
        for section in self.sections:
            if section.name == name:
                return section
        return None

    def section(self, name: str) -> Section:
        """Return section *name*, appending an empty one if it is missing."""
        found = self.find(name)
        if found is None:
            found = Section(name)
            self.sections.append(found)
        return found

    def replace(self, name: str, entries: Iterable[Entry | tuple[str, str]]) -> Section:
        """Replace every entry of section *name*.

        An existing section keeps its position in the document; a new one is
        appended at the end.
        """
        target = self.section(name)
        target.entries = [Entry.coerce(e) for e in entries]
        return target
