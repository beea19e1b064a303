import os
import tempfile

# must be set before catalog.config is imported
_DB_DIR = tempfile.mkdtemp(prefix="catalog-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_DB_DIR, 'test_catalog.db')}"
os.environ["SEED_DEMO_DATA"] = "true"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest

from catalog.db import SessionLocal, init_db


@pytest.fixture(autouse=True)
def reset_db():
    # fresh schema + the three demo products (ids 1..3) for every test
    init_db(reset=True, seed=True)
    yield


@pytest.fixture
def db():
    s = SessionLocal()
    try:
        yield s
    finally:
        s.close()
