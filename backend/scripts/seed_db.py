"""CLI script to create the database tables and load the sample camp.
Usage: python scripts/seed_db.py [--reset]
"""
import sys
import argparse
import pathlib
# Ensure `backend/` is on sys.path so `codecamp` package imports work when running this script directly
ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))
from sqlmodel import SQLModel, Session
from codecamp.database import engine
from codecamp import models  # noqa: F401
from codecamp.seed import seed_sample_data


def main(reset: bool = False):
    """Create tables on the configured database and seed it when empty.

    With `reset`, every table is dropped first so the sample data is
    loaded into a clean database.
    """
    print('Using database:', engine.url.render_as_string(hide_password=True))
    if reset:
        SQLModel.metadata.drop_all(engine)
        print('Dropped all tables')
    SQLModel.metadata.create_all(engine)
    with Session(engine) as session:
        if seed_sample_data(session):
            print('Sample data loaded.')
        else:
            print('Camps already present; nothing seeded.')


if __name__ == '__main__':
    parser = argparse.ArgumentParser()
    parser.add_argument('--reset', action='store_true', help='Drop all tables before seeding')
    args = parser.parse_args()
    main(reset=args.reset)
