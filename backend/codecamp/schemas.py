"""Pydantic request/response schemas used by the API.

Schemas keep the wire shapes stable and separate from the persisted
tables. Fields are serialized with camelCase aliases; input accepts
either the alias or the Python field name.
"""

from datetime import date
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import List, Optional


class ApiModel(BaseModel):
    """Base for wire models: camelCase on the wire, snake_case in Python."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SpeakerModel(ApiModel):
    """Speaker reference/representation embedded in talks."""
    speaker_id: Optional[int] = None
    first_name: Optional[str] = None
    middle_name: Optional[str] = None
    last_name: Optional[str] = None
    company: Optional[str] = None
    company_url: Optional[str] = None
    blog_url: Optional[str] = None
    twitter: Optional[str] = None
    git_hub: Optional[str] = None


class TalkModel(ApiModel):
    """A talk as exchanged with clients.

    `talk_id` is assigned by the server and ignored on input. `speaker`
    is required when creating a talk and optional on update.
    """
    talk_id: Optional[int] = None
    title: str = Field(min_length=1, max_length=100)
    abstract: str = Field(min_length=20, max_length=4000)
    level: int = Field(default=100, ge=100, le=300)
    speaker: Optional[SpeakerModel] = None


class CampModel(ApiModel):
    """A camp as exchanged with clients, with its location flattened."""
    name: str = Field(min_length=1, max_length=100)
    moniker: str = Field(min_length=1, max_length=100)
    event_date: date
    length: int = Field(default=1, ge=1, le=100)
    venue: Optional[str] = None
    location_address1: Optional[str] = None
    location_address2: Optional[str] = None
    location_address3: Optional[str] = None
    location_city_town: Optional[str] = None
    location_state_province: Optional[str] = None
    location_postal_code: Optional[str] = None
    location_country: Optional[str] = None
    talks: List[TalkModel] = Field(default_factory=list)
