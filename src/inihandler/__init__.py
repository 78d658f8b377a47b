from .codec import dump, dumps, load, parse_text
from .errors import IniHandlerError, IniIOError
from .handler import IniHandler
from .model import Document, Entry, Section

__all__ = [
    "IniHandler",
    "Document",
    "Section",
    "Entry",
    "IniHandlerError",
    "IniIOError",
    "load",
    "dump",
    "dumps",
    "parse_text",
]
