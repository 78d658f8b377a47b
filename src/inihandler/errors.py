class IniHandlerError(Exception):
    """Base class for inihandler errors."""


class IniIOError(IniHandlerError):
    """Raised when an INI file cannot be read or written."""
