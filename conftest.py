import sys
from pathlib import Path

import pytest

# Ensure 'src' directory is on sys.path for tests
PROJECT_ROOT = Path(__file__).resolve().parent
SRC_DIR = PROJECT_ROOT / 'src'
if SRC_DIR.exists() and str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))


@pytest.fixture
def ini_path(tmp_path: Path) -> Path:
    return tmp_path / "config.ini"


@pytest.fixture
def handler(ini_path: Path):
    from inihandler import IniHandler

    return IniHandler(ini_path)
