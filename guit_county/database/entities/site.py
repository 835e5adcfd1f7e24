"""
Site ORM Models
===============

Collections that drive the site chrome rather than county content:

- ``Slide``: homepage slideshow entries, ordered by ``order``.
- ``Setting``: singleton site settings (title, contact details, social links).
- ``Commissioner``: singleton commissioner profile shown on the homepage.
- ``Message``: contact-form submissions (``status`` starts as ``new``).
- ``Newsletter``: newsletter subscriptions, unique by email.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import VARCHAR, TEXT, Integer, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from guit_county.database.config.connection_engine import declarativeBase
from guit_county.database.entities.base import DocumentMixin, utcnow


class Slide(DocumentMixin, declarativeBase):
    """Homepage slideshow entry."""

    __tablename__ = "slide"

    title: Mapped[Optional[str]] = mapped_column(TEXT)
    subtitle: Mapped[Optional[str]] = mapped_column(TEXT)
    image: Mapped[Optional[str]] = mapped_column(TEXT)
    btn_text: Mapped[Optional[str]] = mapped_column(TEXT)
    btn_link: Mapped[Optional[str]] = mapped_column(TEXT)
    order: Mapped[Optional[int]] = mapped_column(Integer, default=0)
    status: Mapped[Optional[str]] = mapped_column(VARCHAR(32), default="active")

    @property
    def display_title(self) -> str:
        return self.title or ""


class Setting(DocumentMixin, declarativeBase):
    """
    Site settings. Expected to hold a single row; the service layer
    finds-or-creates instead of inserting.
    """

    __tablename__ = "setting"

    site_title: Mapped[Optional[str]] = mapped_column(TEXT)
    contact_email: Mapped[Optional[str]] = mapped_column(TEXT)
    contact_phone: Mapped[Optional[str]] = mapped_column(TEXT)
    facebook: Mapped[Optional[str]] = mapped_column(TEXT)
    twitter: Mapped[Optional[str]] = mapped_column(TEXT)
    instagram: Mapped[Optional[str]] = mapped_column(TEXT)
    youtube: Mapped[Optional[str]] = mapped_column(TEXT)

    @property
    def display_title(self) -> str:
        return self.site_title or "Site settings"


class Commissioner(DocumentMixin, declarativeBase):
    """Commissioner profile (singleton)."""

    __tablename__ = "commissioner"

    name: Mapped[Optional[str]] = mapped_column(TEXT)
    message: Mapped[Optional[str]] = mapped_column(TEXT)
    photo: Mapped[Optional[str]] = mapped_column(TEXT)

    @property
    def display_title(self) -> str:
        return self.name or ""


class Message(DocumentMixin, declarativeBase):
    """Contact-form message. Anything whose status is not ``read`` counts as unread."""

    __tablename__ = "message"

    name: Mapped[Optional[str]] = mapped_column(TEXT)
    email: Mapped[Optional[str]] = mapped_column(TEXT)
    subject: Mapped[Optional[str]] = mapped_column(TEXT)
    message: Mapped[Optional[str]] = mapped_column(TEXT)
    status: Mapped[Optional[str]] = mapped_column(VARCHAR(32), default="new")

    @property
    def display_title(self) -> str:
        return self.subject or ""


class Newsletter(DocumentMixin, declarativeBase):
    """Newsletter subscription."""

    __tablename__ = "newsletter"

    email: Mapped[str] = mapped_column(VARCHAR(255), unique=True, nullable=False)
    subscribed_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), default=utcnow)

    @property
    def display_title(self) -> str:
        return self.email
