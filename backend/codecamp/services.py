"""Business logic services used by HTTP controllers.

This module holds the camp and talk services. Each public method
validates input against the store, performs at most one commit through
`CampRepository` and returns an explicit `Ok`/`Failure` result. Every
method guards its whole body: an unexpected exception is logged and
turned into a generic failure so internal details never reach clients.
"""

import logging
from datetime import date

from sqlmodel import Session

from . import mapping, repositories
from .links import LinkGenerator
from .results import Ok, Result, conflict, created, invalid, not_found, persistence_failed, unexpected
from .schemas import CampModel, TalkModel

logger = logging.getLogger("codecamp.services")

DATABASE_FAILURE = "Database failure"


class CampService:
    """List, search and maintain camps identified by their moniker."""
    def __init__(self, session: Session, links: LinkGenerator):
        self.session = session
        self.links = links
        self.repo = repositories.CampRepository(session)

    def list_camps(self, include_talks: bool = False) -> Result:
        """Return all camps; an empty store yields an empty list."""
        try:
            camps = self.repo.get_all_camps(include_talks)
            return Ok([mapping.camp_to_model(c, include_talks) for c in camps])
        except Exception:
            logger.exception("failed to list camps")
            return unexpected(DATABASE_FAILURE)

    def get_camp(self, moniker: str) -> Result:
        try:
            camp = self.repo.get_camp(moniker)
            if camp is None:
                return not_found(f"Could not find camp with moniker of {moniker}")
            return Ok(mapping.camp_to_model(camp))
        except Exception:
            logger.exception("failed to get camp %s", moniker)
            return unexpected(DATABASE_FAILURE)

    def search_by_date(self, event_date: date, include_talks: bool = False) -> Result:
        """Return camps held on `event_date`.

        Unlike `list_camps`, an empty result is reported as not found.
        """
        try:
            camps = self.repo.get_all_camps_by_event_date(event_date, include_talks)
            if not camps:
                return not_found(f"No camps found on {event_date.isoformat()}")
            return Ok([mapping.camp_to_model(c, include_talks) for c in camps])
        except Exception:
            logger.exception("failed to search camps by date %s", event_date)
            return unexpected(DATABASE_FAILURE)

    def create_camp(self, model: CampModel) -> Result:
        """Create a camp unless its moniker is unusable or already taken."""
        try:
            location = self.links.get_path("get_camp", moniker=model.moniker)
            if not location:
                return invalid("Could not use current moniker")
            if self.repo.get_camp(model.moniker) is not None:
                return conflict(f"Moniker {model.moniker} Already Exists")
            camp = mapping.model_to_camp(model)
            self.repo.add(camp)
            if self.repo.save_changes():
                logger.info("created camp %s", camp.moniker)
                return created(mapping.camp_to_model(camp), location)
        except Exception:
            logger.exception("failed to create camp %s", model.moniker)
            return unexpected(DATABASE_FAILURE)
        return persistence_failed(f"Failed to save camp {model.moniker}")

    def update_camp(self, moniker: str, model: CampModel) -> Result:
        """Overwrite the camp identified by `moniker` with `model`.

        The moniker itself may change, but only to one that can be routed
        back to this camp; a collision with another camp makes the commit
        fail.
        """
        try:
            camp = self.repo.get_camp(moniker)
            if camp is None:
                return not_found(f"Could not find camp with moniker of {moniker}")
            if not self.links.get_path("get_camp", moniker=model.moniker):
                return invalid("Could not use current moniker")
            mapping.apply_camp_model(model, camp)
            if self.repo.save_changes():
                return Ok(mapping.camp_to_model(camp))
        except Exception:
            logger.exception("failed to update camp %s", moniker)
            return unexpected(DATABASE_FAILURE)
        return persistence_failed(f"Failed to update camp {moniker}")

    def delete_camp(self, moniker: str) -> Result:
        try:
            camp = self.repo.get_camp(moniker)
            if camp is None:
                return not_found(f"Could not find camp with moniker of {moniker}")
            self.repo.delete(camp)
            if self.repo.save_changes():
                logger.info("deleted camp %s", moniker)
                return Ok()
        except Exception:
            logger.exception("failed to delete camp %s", moniker)
            return unexpected(DATABASE_FAILURE)
        return persistence_failed("Failed to Delete Camp")


class TalkService:
    """Talks nested under a camp, each presented by a known speaker."""
    def __init__(self, session: Session, links: LinkGenerator):
        self.session = session
        self.links = links
        self.repo = repositories.CampRepository(session)

    def list_talks(self, moniker: str) -> Result:
        """Return the camp's talks with speakers; no talks is reported as not found."""
        try:
            talks = self.repo.get_talks_by_moniker(moniker, include_speakers=True)
            if not talks:
                return not_found("Talks not found")
            return Ok([mapping.talk_to_model(t) for t in talks])
        except Exception:
            logger.exception("failed to list talks for %s", moniker)
            return unexpected(f"Failed to get Talks for the Camps with Moniker {moniker}")

    def get_talk(self, moniker: str, talk_id: int) -> Result:
        try:
            talk = self.repo.get_talk_by_moniker(moniker, talk_id, include_speakers=True)
            if talk is None:
                return not_found("Talk not found")
            return Ok(mapping.talk_to_model(talk))
        except Exception:
            logger.exception("failed to get talk %s for %s", talk_id, moniker)
            return unexpected(f"Failed to get Talk for the Camps with Moniker {moniker}")

    def create_talk(self, moniker: str, model: TalkModel) -> Result:
        """Create a talk under the camp `moniker`.

        The camp and the referenced speaker must both exist; nothing is
        staged until they have been resolved.
        """
        try:
            camp = self.repo.get_camp(moniker)
            if camp is None:
                return invalid(f"Camp not found for the Moniker {moniker}")
            if model.speaker is None:
                return invalid("Speaker ID is required")
            speaker = self._resolve_speaker(model.speaker.speaker_id)
            if speaker is None:
                return invalid("Speaker not found")
            talk = mapping.model_to_talk(model)
            talk.camp = camp
            talk.speaker = speaker
            self.repo.add(talk)
            if self.repo.save_changes():
                location = self.links.get_path("get_talk", moniker=moniker, talk_id=talk.id)
                logger.info("created talk %s for %s", talk.id, moniker)
                return created(mapping.talk_to_model(talk), location)
        except Exception:
            logger.exception("failed to create talk for %s", moniker)
            return unexpected(f"Failed to create Talk for the Camps with Moniker {moniker}")
        return persistence_failed("Failed to save talk")

    def update_talk(self, moniker: str, talk_id: int, model: TalkModel) -> Result:
        """Copy `model` onto an existing talk.

        A speaker is optional here, but when supplied it must resolve;
        otherwise the talk is left untouched.
        """
        try:
            talk = self.repo.get_talk_by_moniker(moniker, talk_id, include_speakers=True)
            if talk is None:
                return not_found("Couldn't find the talk")
            speaker = None
            if model.speaker is not None:
                speaker = self._resolve_speaker(model.speaker.speaker_id)
                if speaker is None:
                    return invalid("Speaker not found")
            mapping.apply_talk_model(model, talk)
            if speaker is not None:
                talk.speaker = speaker
            if self.repo.save_changes():
                return Ok(mapping.talk_to_model(talk))
        except Exception:
            logger.exception("failed to update talk %s for %s", talk_id, moniker)
            return unexpected(f"Failed to update Talk with Moniker {moniker}")
        return persistence_failed("Failed to update database with talk")

    def delete_talk(self, moniker: str, talk_id: int) -> Result:
        try:
            talk = self.repo.get_talk_by_moniker(moniker, talk_id)
            if talk is None:
                return not_found("Talk not found")
            self.repo.delete(talk)
            if self.repo.save_changes():
                logger.info("deleted talk %s for %s", talk_id, moniker)
                return Ok()
            return persistence_failed("Failed to Delete Talk")
        except Exception:
            logger.exception("failed to delete talk %s for %s", talk_id, moniker)
            return unexpected(f"Failed to Delete Talk with Moniker {moniker}")

    def _resolve_speaker(self, speaker_id):
        if speaker_id is None:
            return None
        return self.repo.get_speaker(speaker_id)
