"""File-backed INI store.

:class:`IniHandler` never keeps a document between calls.  Every operation
reloads the file, acts on a fresh :class:`~inihandler.model.Document` and,
for writes, serialises the whole document back.  Failures are reported
through return values and logged; only :meth:`IniHandler.reload` raises.
"""
from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from . import codec
from .errors import IniIOError
from .model import Document, Entry, Section

logger = logging.getLogger(__name__)

EntryLike = Entry | tuple[str, str]


class IniHandler:
    def __init__(self, path: Path | str, *, encoding: str = codec.DEFAULT_ENCODING) -> None:
        self._path = Path(path)
        self.encoding = encoding
        if not self._path.exists():
            try:
                self._path.touch()
            except OSError as exc:
                logger.warning("Failed to create INI file %s: %s", self._path, exc)

    @classmethod
    def for_app(
        cls, app_name: str, filename: str = "settings.ini", **kwargs: Any
    ) -> IniHandler:
        """Return a handler on *filename* in the user config dir of *app_name*."""
        from .paths import user_config_file

        return cls(user_config_file(app_name, filename), **kwargs)

    @property
    def path(self) -> Path:
        return self._path

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self._path)!r})"

    # ----- loading / persisting -----

    def reload(self) -> Document:
        """Parse the backing file into a new document.

        Raises :class:`~inihandler.errors.IniIOError` if the file cannot be
        read.
        """
        return codec.load(self._path, self.encoding)

    def _load(self) -> Document | None:
        try:
            return self.reload()
        except IniIOError as exc:
            logger.warning("Failed to read config %s: %s", self._path, exc)
            return None

    def _save(self, doc: Document) -> bool:
        try:
            codec.dump(doc, self.encoding)
        except IniIOError as exc:
            logger.warning("Failed to write config %s: %s", self._path, exc)
            return False
        return True

    # ----- values -----

    def read_value(self, section: str, key: str) -> str:
        """Return the value of *key* in *section*.

        Missing sections, missing keys and unreadable files all yield ``""``.
        """
        doc = self._load()
        if doc is None:
            return ""
        found = doc.find(section)
        if found is None:
            return ""
        value = found.get(key)
        return "" if value is None else value

    def write_value(self, section: str, key: str, value: str) -> bool:
        doc = self._load()
        if doc is None:
            return False
        doc.section(section).set(key, value)
        return self._save(doc)

    # ----- sections -----

    def read_section(self, section: str) -> tuple[list[Entry], bool]:
        """Return ``(entries, found)`` for *section*.

        A section without entries is reported exactly like a missing one.
        """
        doc = self._load()
        if doc is None:
            return [], False
        found = doc.find(section)
        if found is None or not found.entries:
            return [], False
        return list(found.entries), True

    def write_section(
        self, section: str | Section, entries: Iterable[EntryLike] = ()
    ) -> bool:
        """Replace all entries of *section*.

        *section* may also be a :class:`Section`, whose own entries are
        written and *entries* is ignored.
        """
        if isinstance(section, Section):
            name, new_entries = section.name, list(section.entries)
        else:
            name, new_entries = section, list(entries)
        doc = self._load()
        if doc is None:
            return False
        doc.replace(name, new_entries)
        return self._save(doc)

    def has_section(self, section: str) -> bool:
        doc = self._load()
        return doc is not None and doc.find(section) is not None

    def sections(self) -> list[str]:
        doc = self._load()
        return [] if doc is None else doc.section_names()

    # ----- file state -----

    def empty(self) -> bool:
        """Return ``True`` if the backing file is missing or has no bytes."""
        try:
            return self._path.stat().st_size == 0
        except FileNotFoundError:
            return True
        except OSError as exc:
            logger.warning("Failed to stat config %s: %s", self._path, exc)
            return False
