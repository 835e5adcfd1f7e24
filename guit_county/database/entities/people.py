"""
People ORM Models
=================

Directories of people featured on the public site: politicians, military
personnel, artists, community leaders and students. Payam / boma fields are
plain-text names, not foreign keys.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import VARCHAR, TEXT, Integer, Boolean, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from guit_county.database.config.connection_engine import declarativeBase
from guit_county.database.entities.base import DocumentMixin


class Politician(DocumentMixin, declarativeBase):
    __tablename__ = "politician"

    name: Mapped[Optional[str]] = mapped_column(TEXT)
    position: Mapped[Optional[str]] = mapped_column(TEXT)
    party: Mapped[Optional[str]] = mapped_column(TEXT)
    bio: Mapped[Optional[str]] = mapped_column(TEXT)
    photo: Mapped[Optional[str]] = mapped_column(TEXT)
    status: Mapped[Optional[str]] = mapped_column(VARCHAR(32), default="active")

    @property
    def display_title(self) -> str:
        return self.name or ""


class Military(DocumentMixin, declarativeBase):
    __tablename__ = "military"

    name: Mapped[Optional[str]] = mapped_column(TEXT)
    rank: Mapped[Optional[str]] = mapped_column(TEXT)
    branch: Mapped[Optional[str]] = mapped_column(TEXT)
    unit: Mapped[Optional[str]] = mapped_column(TEXT)
    bio: Mapped[Optional[str]] = mapped_column(TEXT)
    photo: Mapped[Optional[str]] = mapped_column(TEXT)
    status: Mapped[Optional[str]] = mapped_column(VARCHAR(32), default="active")

    @property
    def display_title(self) -> str:
        return " ".join(part for part in (self.rank, self.name) if part)


class Artist(DocumentMixin, declarativeBase):
    """Artist profile. ``featured`` artists are highlighted on the culture page."""

    __tablename__ = "artist"

    full_name: Mapped[Optional[str]] = mapped_column(TEXT)
    stage_name: Mapped[Optional[str]] = mapped_column(TEXT)
    category: Mapped[Optional[str]] = mapped_column(TEXT)
    genre: Mapped[Optional[str]] = mapped_column(TEXT)
    bio: Mapped[Optional[str]] = mapped_column(TEXT)
    achievements: Mapped[Optional[str]] = mapped_column(TEXT)
    payam: Mapped[Optional[str]] = mapped_column(TEXT)
    contact: Mapped[Optional[str]] = mapped_column(TEXT)
    facebook: Mapped[Optional[str]] = mapped_column(TEXT)
    instagram: Mapped[Optional[str]] = mapped_column(TEXT)
    youtube: Mapped[Optional[str]] = mapped_column(TEXT)
    tiktok: Mapped[Optional[str]] = mapped_column(TEXT)
    photo: Mapped[Optional[str]] = mapped_column(TEXT)
    featured: Mapped[Optional[bool]] = mapped_column(Boolean, default=False)
    status: Mapped[Optional[str]] = mapped_column(VARCHAR(32), default="active")

    @property
    def display_title(self) -> str:
        return self.stage_name or self.full_name or ""


class Leader(DocumentMixin, declarativeBase):
    """Community leader (chiefs, elders, religious and youth leaders)."""

    __tablename__ = "leader"

    full_name: Mapped[Optional[str]] = mapped_column(TEXT)
    title: Mapped[Optional[str]] = mapped_column(TEXT)
    category: Mapped[Optional[str]] = mapped_column(TEXT)
    payam: Mapped[Optional[str]] = mapped_column(TEXT)
    boma: Mapped[Optional[str]] = mapped_column(TEXT)
    bio: Mapped[Optional[str]] = mapped_column(TEXT)
    phone: Mapped[Optional[str]] = mapped_column(TEXT)
    email: Mapped[Optional[str]] = mapped_column(TEXT)
    photo: Mapped[Optional[str]] = mapped_column(TEXT)
    status: Mapped[Optional[str]] = mapped_column(VARCHAR(32), default="active")

    @property
    def display_title(self) -> str:
        return " ".join(part for part in (self.title, self.full_name) if part)


class Student(DocumentMixin, declarativeBase):
    """
    Student registry entry.

    Students are registered either with ``full_name`` or with the split
    ``first_name`` / ``middle_name`` / ``last_name`` fields.
    """

    __tablename__ = "student"

    full_name: Mapped[Optional[str]] = mapped_column(TEXT)
    first_name: Mapped[Optional[str]] = mapped_column(TEXT)
    middle_name: Mapped[Optional[str]] = mapped_column(TEXT)
    last_name: Mapped[Optional[str]] = mapped_column(TEXT)
    gender: Mapped[Optional[str]] = mapped_column(TEXT)
    dob: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True))
    payam: Mapped[Optional[str]] = mapped_column(TEXT)
    photo: Mapped[Optional[str]] = mapped_column(TEXT)
    level: Mapped[Optional[str]] = mapped_column(TEXT)
    study_status: Mapped[Optional[str]] = mapped_column(TEXT)
    institution: Mapped[Optional[str]] = mapped_column(TEXT)
    country: Mapped[Optional[str]] = mapped_column(TEXT)
    field: Mapped[Optional[str]] = mapped_column(TEXT)
    specialization: Mapped[Optional[str]] = mapped_column(TEXT)
    year: Mapped[Optional[str]] = mapped_column(TEXT)
    enroll_year: Mapped[Optional[int]] = mapped_column(Integer)
    grad_year: Mapped[Optional[int]] = mapped_column(Integer)
    scholarship: Mapped[Optional[bool]] = mapped_column(Boolean, default=False)
    scholarship_name: Mapped[Optional[str]] = mapped_column(TEXT)
    scholarship_type: Mapped[Optional[str]] = mapped_column(TEXT)
    phone: Mapped[Optional[str]] = mapped_column(TEXT)
    email: Mapped[Optional[str]] = mapped_column(TEXT)
    address: Mapped[Optional[str]] = mapped_column(TEXT)
    facebook: Mapped[Optional[str]] = mapped_column(TEXT)
    linked_in: Mapped[Optional[str]] = mapped_column(TEXT)
    achievements: Mapped[Optional[str]] = mapped_column(TEXT)
    activities: Mapped[Optional[str]] = mapped_column(TEXT)
    career_goal: Mapped[Optional[str]] = mapped_column(TEXT)
    member_status: Mapped[Optional[str]] = mapped_column(TEXT)
    join_date: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True))
    notable: Mapped[Optional[bool]] = mapped_column(Boolean, default=False)
    status: Mapped[Optional[str]] = mapped_column(VARCHAR(32), default="active")

    @property
    def display_title(self) -> str:
        if self.full_name:
            return self.full_name
        return " ".join(part for part in (self.first_name, self.middle_name, self.last_name) if part)
