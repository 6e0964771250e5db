"""Repository encapsulating database operations for the camp aggregate.

Reads return SQLModel objects, optionally with related rows eagerly
loaded. Writes are staged with `add`/`delete` and only reach the
database when `save_changes` commits them.
"""

import logging
from datetime import date
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import selectinload
from sqlmodel import Session, select

from . import models

logger = logging.getLogger("codecamp.repositories")


class CampRepository:
    """Queries and unit-of-work style writes over camps, talks and speakers."""
    def __init__(self, session: Session):
        self.session = session

    def add(self, entity) -> None:
        """Stage a new entity for insertion."""
        self.session.add(entity)

    def delete(self, entity) -> None:
        """Stage an existing entity for deletion."""
        self.session.delete(entity)

    def save_changes(self) -> bool:
        """Commit staged changes.

        Returns True when the commit succeeded. A database error rolls
        the session back and returns False instead of raising.
        """
        try:
            self.session.commit()
        except SQLAlchemyError as e:
            logger.warning("commit failed, rolling back: %s", e)
            self.session.rollback()
            return False
        return True

    def _camp_query(self, include_talks: bool):
        stmt = select(models.Camp).options(selectinload(models.Camp.location))
        if include_talks:
            stmt = stmt.options(selectinload(models.Camp.talks).selectinload(models.Talk.speaker))
        return stmt

    def get_all_camps(self, include_talks: bool = False) -> List[models.Camp]:
        """Return every camp ordered by event date."""
        stmt = self._camp_query(include_talks).order_by(models.Camp.event_date)
        return self.session.exec(stmt).all()

    def get_camp(self, moniker: str, include_talks: bool = False) -> Optional[models.Camp]:
        """Return a `Camp` by moniker or `None` if not found."""
        stmt = self._camp_query(include_talks).where(models.Camp.moniker == moniker)
        return self.session.exec(stmt).first()

    def get_all_camps_by_event_date(self, event_date: date, include_talks: bool = False) -> List[models.Camp]:
        """Return camps whose event date equals `event_date`."""
        stmt = self._camp_query(include_talks).where(models.Camp.event_date == event_date).order_by(models.Camp.name)
        return self.session.exec(stmt).all()

    def _talk_query(self, moniker: str, include_speakers: bool):
        stmt = select(models.Talk).join(models.Camp).where(models.Camp.moniker == moniker)
        if include_speakers:
            stmt = stmt.options(selectinload(models.Talk.speaker))
        return stmt

    def get_talks_by_moniker(self, moniker: str, include_speakers: bool = False) -> List[models.Talk]:
        """Return the talks of the camp identified by `moniker`, ordered by title."""
        stmt = self._talk_query(moniker, include_speakers).order_by(models.Talk.title)
        return self.session.exec(stmt).all()

    def get_talk_by_moniker(self, moniker: str, talk_id: int, include_speakers: bool = False) -> Optional[models.Talk]:
        """Return a talk only if it belongs to the camp identified by `moniker`."""
        stmt = self._talk_query(moniker, include_speakers).where(models.Talk.id == talk_id)
        return self.session.exec(stmt).first()

    def get_speaker(self, speaker_id: int) -> Optional[models.Speaker]:
        """Get a `Speaker` by primary key."""
        return self.session.get(models.Speaker, speaker_id)
