"""Database engine and helpers.

This module configures the SQLModel/SQLAlchemy engine from
`settings.DATABASE_URL` (a local SQLite file by default) and provides
small helpers used by the application and tests.
"""

import logging

from sqlmodel import SQLModel, create_engine, Session

from .config import settings

logger = logging.getLogger("codecamp.database")

_connect_args = {"check_same_thread": False} if settings.DATABASE_URL.startswith("sqlite") else {}
engine = create_engine(settings.DATABASE_URL, echo=settings.SQL_ECHO, connect_args=_connect_args)


def create_db_and_tables():
    """Create database tables using SQLModel metadata.

    When `settings.SEED_DATA` is enabled the sample camp, speakers and
    talks are inserted into an empty database.
    """
    # models must be imported so their tables are registered on the metadata
    from . import models  # noqa: F401
    SQLModel.metadata.create_all(engine)
    if settings.SEED_DATA:
        from .seed import seed_sample_data
        with Session(engine) as session:
            if seed_sample_data(session):
                logger.info("seeded sample data into %s", engine.url.render_as_string(hide_password=True))


def get_session():
    """Yield a database `Session` for FastAPI dependency injection.

    The generator yields a session and ensures it is closed when the
    request scope finishes. Uncommitted changes are discarded on close.
    """
    with Session(engine) as session:
        yield session
