"""
User ORM Model
==============

The ``User`` ORM model represents a back-office account. It maps to the
``app_user`` table and is exposed both through the generic ``/api/users``
collection and the ``/api/auth`` endpoints.

Key features
~~~~~~~~~~~~
- UUID primary key and timestamps from :class:`DocumentMixin`
- Unique username and email
- bcrypt password hash (never serialized)
- Role (defaults to ``admin``) and status

"""

from typing import Optional

from sqlalchemy import VARCHAR, TEXT
from sqlalchemy.orm import Mapped, mapped_column

from guit_county.database.config.connection_engine import declarativeBase
from guit_county.database.entities.base import DocumentMixin


class User(DocumentMixin, declarativeBase):
    """
    ORM model for the `app_user` table.

    Attributes
    ----------
    username : str | None
        Login name (unique). Defaults to the email local part on registration.
    first_name, last_name : str | None
        Personal names.
    email : str
        Email address (unique, required).
    password : str
        bcrypt hash of the password.
    phone, gender, location : str | None
        Optional profile fields.
    role : str
        Role of the user (e.g. "admin").
    status : str
        Account status ("active" / "inactive").
    """

    __tablename__ = "app_user"

    HIDDEN_FIELDS = frozenset({"password"})

    username: Mapped[Optional[str]] = mapped_column(VARCHAR(255), unique=True, nullable=True)
    first_name: Mapped[Optional[str]] = mapped_column(TEXT)
    last_name: Mapped[Optional[str]] = mapped_column(TEXT)
    email: Mapped[str] = mapped_column(VARCHAR(255), unique=True, nullable=False)
    password: Mapped[str] = mapped_column(TEXT, nullable=False)
    phone: Mapped[Optional[str]] = mapped_column(TEXT)
    gender: Mapped[Optional[str]] = mapped_column(TEXT)
    location: Mapped[Optional[str]] = mapped_column(TEXT)
    role: Mapped[Optional[str]] = mapped_column(VARCHAR(32), default="admin")
    status: Mapped[Optional[str]] = mapped_column(VARCHAR(32), default="active")

    @property
    def display_title(self) -> str:
        return self.username or self.email or ""
