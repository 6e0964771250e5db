"""Explicit conversions between persisted entities and wire models.

Each entity/DTO pair has a function per direction. `apply_*` functions
copy client-settable fields onto an already persisted entity; identity
columns and associations (a talk's camp and speaker) are never copied
from a DTO and must be attached by the caller.

DTOs built from entities use `model_construct`: stored rows are returned
as they are even when they fall outside the input constraints.
"""

from typing import Optional

from . import models
from .schemas import CampModel, SpeakerModel, TalkModel

# Camp DTO field -> Location column
LOCATION_FIELDS = {
    'venue': 'venue_name',
    'location_address1': 'address1',
    'location_address2': 'address2',
    'location_address3': 'address3',
    'location_city_town': 'city_town',
    'location_state_province': 'state_province',
    'location_postal_code': 'postal_code',
    'location_country': 'country',
}

CAMP_FIELDS = ('name', 'moniker', 'event_date', 'length')
TALK_FIELDS = ('title', 'abstract', 'level')
SPEAKER_FIELDS = (
    'first_name', 'middle_name', 'last_name', 'company',
    'company_url', 'blog_url', 'twitter', 'git_hub',
)


def speaker_to_model(speaker: Optional[models.Speaker]) -> Optional[SpeakerModel]:
    if speaker is None:
        return None
    values = {f: getattr(speaker, f) for f in SPEAKER_FIELDS}
    return SpeakerModel.model_construct(speaker_id=speaker.id, **values)


def talk_to_model(talk: models.Talk, include_speaker: bool = True) -> TalkModel:
    """Map a `Talk` to its DTO, embedding the speaker when requested."""
    values = {f: getattr(talk, f) for f in TALK_FIELDS}
    speaker = speaker_to_model(talk.speaker) if include_speaker else None
    return TalkModel.model_construct(talk_id=talk.id, speaker=speaker, **values)


def model_to_talk(model: TalkModel) -> models.Talk:
    """Build a new, unattached `Talk` from a DTO."""
    return models.Talk(**{f: getattr(model, f) for f in TALK_FIELDS})


def apply_talk_model(model: TalkModel, talk: models.Talk) -> models.Talk:
    for f in TALK_FIELDS:
        setattr(talk, f, getattr(model, f))
    return talk


def camp_to_model(camp: models.Camp, include_talks: bool = False) -> CampModel:
    """Map a `Camp` to its DTO.

    The owned location is flattened onto the DTO. Talks are only mapped
    when `include_talks` is set, so callers must have eager-loaded them.
    """
    values = {f: getattr(camp, f) for f in CAMP_FIELDS}
    location = camp.location
    for dto_field, column in LOCATION_FIELDS.items():
        values[dto_field] = getattr(location, column) if location is not None else None
    talks = [talk_to_model(t) for t in camp.talks] if include_talks else []
    return CampModel.model_construct(talks=talks, **values)


def model_to_camp(model: CampModel) -> models.Camp:
    """Build a new `Camp` (with its `Location`) from a DTO.

    Talks on the DTO are ignored; they are managed through the talk
    endpoints.
    """
    camp = models.Camp(**{f: getattr(model, f) for f in CAMP_FIELDS})
    camp.location = models.Location(**{c: getattr(model, f) for f, c in LOCATION_FIELDS.items()})
    return camp


def apply_camp_model(model: CampModel, camp: models.Camp) -> models.Camp:
    """Overwrite the client-settable fields of `camp` with `model`."""
    for f in CAMP_FIELDS:
        setattr(camp, f, getattr(model, f))
    if camp.location is None:
        camp.location = models.Location()
    for dto_field, column in LOCATION_FIELDS.items():
        setattr(camp.location, column, getattr(model, dto_field))
    return camp
