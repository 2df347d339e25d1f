"""Put the repository root on sys.path so `generic_queue` and `main` import
without installing the project."""
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT))

from generic_queue import QueueStats  # noqa: E402


@pytest.fixture
def stats():
    return QueueStats()
