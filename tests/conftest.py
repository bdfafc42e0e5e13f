import sys
from pathlib import Path

import pytest

# Repository root on sys.path so the flat modules import without installing
project_root = Path(__file__).resolve().parents[1]
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture
def app_path():
    return str(project_root / "app.py")
