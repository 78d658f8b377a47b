from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from .errors import IniIOError
from .model import Document, Entry, Section

logger = logging.getLogger(__name__)

DEFAULT_ENCODING = "utf-8"


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------

def parse_lines(lines: Iterable[str]) -> list[Section]:
    """Parse INI *lines* into sections.

    The parser is permissive: blank lines, lines without ``=`` and entries
    that appear before the first header are dropped.  A repeated header
    continues the section it names instead of creating a second one.
    """
    sections: list[Section] = []
    by_name: dict[str, Section] = {}
    current: Section | None = None
    for raw in lines:
        line = raw.rstrip("\r\n")
        if not line:
            continue
        if line[0] == "[" and line[-1] == "]":
            name = line[1:-1]
            current = by_name.get(name)
            if current is None:
                current = by_name[name] = Section(name)
                sections.append(current)
            continue
        if current is None or "=" not in line:
            continue
        key, value = line.split("=", 1)
        current.entries.append(Entry(key, value))
    return sections


def parse_text(text: str) -> list[Section]:
    # str.splitlines() would also break on form feeds and unicode separators
    normalized = text.replace("\r\n", "\n").replace("\r", "\n")
    return parse_lines(normalized.split("\n"))


def load(path: Path | str, encoding: str = DEFAULT_ENCODING) -> Document:
    path = Path(path)
    try:
        with path.open("r", encoding=encoding, newline=None) as fh:
            sections = parse_lines(fh)
    except (OSError, UnicodeError) as exc:
        raise IniIOError(f"cannot read {path}: {exc}") from exc
    return Document(path, sections)


# ---------------------------------------------------------------------------
# Serialisation
# ---------------------------------------------------------------------------

def dumps(document: Document) -> str:
    out: list[str] = []
    for section in document.sections:
        out.append(f"[{section.name}]\n")
        for key, value in section.entries:
            out.append(f"{key}={value}\n")
        out.append("\n")
    return "".join(out)


def dump(document: Document, encoding: str = DEFAULT_ENCODING) -> None:
    """Overwrite ``document.path`` with the serialised *document*.

    The text is encoded up front and written with a single call, so an
    encoding failure leaves the file untouched.  The file is rewritten in
    place: symlinks are followed and the file mode is kept.
    """
    path = Path(document.path)
    try:
        data = dumps(document).encode(encoding)
        with path.open("wb") as fh:
            fh.write(data)
    except (OSError, UnicodeError) as exc:
        raise IniIOError(f"cannot write {path}: {exc}") from exc
    logger.debug("Wrote %d section(s) to %s", len(document.sections), path)
