import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Ensure the project root (backend/) is on sys.path so tests can import the `autosplit` package.
ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT))

from autosplit.main import app  # noqa: E402


@pytest.fixture
def test_client():
    with TestClient(app) as client:
        yield client
