"""SQLModel data models.

This module defines the application's database tables using SQLModel.
A `Camp` owns its `Location` and its `Talk` rows; each `Talk` points at
exactly one `Speaker`.
"""

from typing import Optional
from sqlmodel import SQLModel, Field, Relationship
from datetime import date
from typing import List


class Location(SQLModel, table=True):
    """Venue and postal address of a camp."""
    id: Optional[int] = Field(default=None, primary_key=True)
    venue_name: Optional[str] = None
    address1: Optional[str] = None
    address2: Optional[str] = None
    address3: Optional[str] = None
    city_town: Optional[str] = None
    state_province: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[str] = None


class Camp(SQLModel, table=True):
    """A code camp event.

    Fields:
    - `moniker`: unique, human-readable natural key used in URLs
    - `event_date`: the first day of the event
    - `length`: duration in days
    """
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str
    moniker: str = Field(index=True, nullable=False, unique=True)
    event_date: date = Field(index=True)
    length: int = 1
    location_id: Optional[int] = Field(default=None, foreign_key='location.id')
    location: Optional[Location] = Relationship(
        sa_relationship_kwargs={'cascade': 'all, delete-orphan', 'single_parent': True}
    )
    talks: List['Talk'] = Relationship(
        back_populates='camp',
        sa_relationship_kwargs={'cascade': 'all, delete-orphan', 'order_by': 'Talk.title'},
    )


class Speaker(SQLModel, table=True):
    """A person presenting one or more talks."""
    id: Optional[int] = Field(default=None, primary_key=True)
    first_name: str
    middle_name: Optional[str] = None
    last_name: str
    company: Optional[str] = None
    company_url: Optional[str] = None
    blog_url: Optional[str] = None
    twitter: Optional[str] = None
    git_hub: Optional[str] = None


class Talk(SQLModel, table=True):
    """A session presented at a `Camp` by a `Speaker`."""
    id: Optional[int] = Field(default=None, primary_key=True)
    title: str
    abstract: str
    level: int = 100
    camp_id: int = Field(foreign_key='camp.id', nullable=False, index=True)
    speaker_id: int = Field(foreign_key='speaker.id', nullable=False)
    camp: Optional[Camp] = Relationship(back_populates='talks')
    speaker: Optional[Speaker] = Relationship()
