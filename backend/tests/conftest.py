import os
import shutil
import tempfile
from pathlib import Path

import pytest
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, Session, create_engine

# Point the app at a throwaway database before `codecamp` is imported.
_DB_DIR = Path(tempfile.mkdtemp(prefix="codecamp-tests-"))
os.environ["DATABASE_URL"] = f"sqlite:///{_DB_DIR / 'test.db'}"
os.environ["SEED_DATA"] = "true"

from codecamp import models  # noqa: E402
from codecamp.seed import seed_sample_data  # noqa: E402


@pytest.fixture(scope="session", autouse=True)
def cleanup_db_dir():
    """Remove the temporary database directory after the test session."""
    yield
    shutil.rmtree(_DB_DIR, ignore_errors=True)


@pytest.fixture()
def session():
    """A fresh in-memory database seeded with the sample camp."""
    engine = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    SQLModel.metadata.create_all(engine)
    with Session(engine) as s:
        seed_sample_data(s)
        yield s
    engine.dispose()


class StaticLinks:
    """Link generator double returning a fixed path (or None)."""
    def __init__(self, path="/api/camps/x"):
        self.path = path
        self.calls = []

    def get_path(self, route_name, **params):
        self.calls.append((route_name, params))
        return self.path


@pytest.fixture()
def links():
    return StaticLinks()
