"""Shared test configuration.

Settings are cached on first use, so the database and journal locations
must be pointed at a temporary directory before anything under app/ is
imported.
"""

import os
import tempfile
from pathlib import Path

_TMP_DIR = Path(tempfile.mkdtemp(prefix="codec-tests-"))

os.environ.setdefault("DATABASE_URL", f"sqlite+aiosqlite:///{_TMP_DIR / 'test.db'}")
os.environ.setdefault("JOURNAL_PATH", str(_TMP_DIR / "journal.log"))

import pytest  # noqa: E402

from app.models.schemas import LayoutMode  # noqa: E402
from app.services.engines.base import TransformParams  # noqa: E402


@pytest.fixture
def params():
    """Default transform parameters: shift 3, auto layout."""
    return TransformParams(shift=3, layout=LayoutMode.AUTO)


@pytest.fixture
def tmp_dir():
    return _TMP_DIR
