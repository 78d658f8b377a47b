from __future__ import annotations

import os
from pathlib import Path

from platformdirs import user_config_dir as _uc

APP_NAME_ENV = "INIHANDLER_APP_NAME"
DEFAULT_FILENAME = "settings.ini"


def _app_name(default: str) -> str:
    return os.getenv(APP_NAME_ENV, default)


def user_config_dir(app_name: str) -> Path:
    """Return the per-user configuration directory for *app_name*.

    ``INIHANDLER_APP_NAME`` overrides *app_name* when set.
    """
    app = _app_name(app_name)
    return Path(_uc(appname=app)).resolve()


def user_config_file(
    app_name: str, filename: str = DEFAULT_FILENAME, *, create_dir: bool = True
) -> Path:
    base = user_config_dir(app_name)
    if create_dir:
        base.mkdir(parents=True, exist_ok=True)
    return base / filename
