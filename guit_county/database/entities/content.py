"""
Content ORM Models
==================

Editorial and service-directory collections rendered on the public site:
news, history timeline, public services, education, healthcare and sports.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import VARCHAR, TEXT, Integer, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from guit_county.database.config.connection_engine import declarativeBase
from guit_county.database.entities.base import DocumentMixin, utcnow


class News(DocumentMixin, declarativeBase):
    """
    News article.

    Attributes
    ----------
    media_type : str
        ``image``, ``video`` or ``audio``; selects how ``media_url`` is rendered.
    likes : int
        Like counter, only ever incremented by the like endpoint.
    status : str
        ``draft`` or ``published`` (default). Only published news is public.
    date : datetime
        Publication date used to sort the public feed.
    """

    __tablename__ = "news"

    title: Mapped[Optional[str]] = mapped_column(TEXT)
    category: Mapped[Optional[str]] = mapped_column(TEXT)
    author: Mapped[Optional[str]] = mapped_column(TEXT)
    content: Mapped[Optional[str]] = mapped_column(TEXT)
    image: Mapped[Optional[str]] = mapped_column(TEXT)
    media_type: Mapped[Optional[str]] = mapped_column(VARCHAR(16), default="image")
    media_url: Mapped[Optional[str]] = mapped_column(TEXT)
    likes: Mapped[Optional[int]] = mapped_column(Integer, default=0)
    status: Mapped[Optional[str]] = mapped_column(VARCHAR(32), default="published")
    date: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), default=utcnow)

    @property
    def display_title(self) -> str:
        return self.title or ""


class History(DocumentMixin, declarativeBase):
    """History timeline entry. Has no status: every entry is public."""

    __tablename__ = "history"

    title: Mapped[Optional[str]] = mapped_column(TEXT)
    year: Mapped[Optional[str]] = mapped_column(VARCHAR(32))
    category: Mapped[Optional[str]] = mapped_column(TEXT)
    description: Mapped[Optional[str]] = mapped_column(TEXT)
    image: Mapped[Optional[str]] = mapped_column(TEXT)
    media_type: Mapped[Optional[str]] = mapped_column(VARCHAR(16), default="image")
    media_url: Mapped[Optional[str]] = mapped_column(TEXT)

    @property
    def display_title(self) -> str:
        if self.year:
            return f"{self.year}: {self.title or ''}"
        return self.title or ""


class Service(DocumentMixin, declarativeBase):
    __tablename__ = "service"

    name: Mapped[Optional[str]] = mapped_column(TEXT)
    category: Mapped[Optional[str]] = mapped_column(TEXT)
    location: Mapped[Optional[str]] = mapped_column(TEXT)
    description: Mapped[Optional[str]] = mapped_column(TEXT)
    status: Mapped[Optional[str]] = mapped_column(VARCHAR(32), default="active")

    @property
    def display_title(self) -> str:
        return self.name or ""


class Education(DocumentMixin, declarativeBase):
    __tablename__ = "education"

    name: Mapped[Optional[str]] = mapped_column(TEXT)
    level: Mapped[Optional[str]] = mapped_column(TEXT)
    location: Mapped[Optional[str]] = mapped_column(TEXT)
    principal: Mapped[Optional[str]] = mapped_column(TEXT)
    image: Mapped[Optional[str]] = mapped_column(TEXT)
    status: Mapped[Optional[str]] = mapped_column(VARCHAR(32), default="active")

    @property
    def display_title(self) -> str:
        return self.name or ""


class Healthcare(DocumentMixin, declarativeBase):
    __tablename__ = "healthcare"

    name: Mapped[Optional[str]] = mapped_column(TEXT)
    type: Mapped[Optional[str]] = mapped_column(TEXT)
    location: Mapped[Optional[str]] = mapped_column(TEXT)
    director: Mapped[Optional[str]] = mapped_column(TEXT)
    services: Mapped[Optional[str]] = mapped_column(TEXT)
    image: Mapped[Optional[str]] = mapped_column(TEXT)
    status: Mapped[Optional[str]] = mapped_column(VARCHAR(32), default="active")

    @property
    def display_title(self) -> str:
        return self.name or ""


class Sport(DocumentMixin, declarativeBase):
    __tablename__ = "sport"

    name: Mapped[Optional[str]] = mapped_column(TEXT)
    category: Mapped[Optional[str]] = mapped_column(TEXT)
    details: Mapped[Optional[str]] = mapped_column(TEXT)
    location: Mapped[Optional[str]] = mapped_column(TEXT)
    image: Mapped[Optional[str]] = mapped_column(TEXT)
    status: Mapped[Optional[str]] = mapped_column(VARCHAR(32), default="active")

    @property
    def display_title(self) -> str:
        return self.name or ""
