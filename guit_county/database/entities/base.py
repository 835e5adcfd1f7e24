"""
Document Mixin
==============

Shared columns and behaviour of every collection table.

Each collection row is a flat "document":

- ``id``: store-assigned UUID primary key (immutable).
- ``created_at`` / ``updated_at``: timezone-aware UTC timestamps.
- ``revision``: internal counter bumped on every update. It is versioning
  metadata only and never leaves the service layer.

Documents are serialized with camelCase keys (``btn_text`` → ``btnText``) so
the JSON contract of the admin panel and public site is preserved.
"""

import uuid
from datetime import datetime, timezone
from uuid import UUID

from pydantic.alias_generators import to_camel
from sqlalchemy import DateTime, Integer, Uuid
from sqlalchemy.orm import Mapped, mapped_column


def utcnow() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


class DocumentMixin:
    """
    Mixin adding identifier, timestamps and serialization to a collection model.

    Attributes
    ----------
    id : UUID
        Primary key assigned on insert.
    created_at : datetime
        Insert time (UTC).
    updated_at : datetime
        Last write time (UTC), refreshed on every update.
    revision : int
        Internal update counter, stripped from serialized documents.
    """

    INTERNAL_FIELDS = frozenset({"revision"})
    """Columns never exposed to API clients, for every collection."""

    HIDDEN_FIELDS = frozenset()
    """Extra columns a specific collection keeps private (e.g. password hashes)."""

    id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, nullable=False)
    revision: Mapped[int] = mapped_column(Integer, default=0, nullable=False)

    @property
    def display_title(self) -> str:
        """Human readable label of the document; every collection defines its own."""
        raise NotImplementedError

    def apply(self, fields: dict) -> None:
        """Merge already-validated ``fields`` (snake_case keys) onto the document."""
        for key, value in fields.items():
            setattr(self, key, value)

    def to_document(self) -> dict:
        """
        Serialize the row into its public JSON shape.

        Returns
        -------
        dict
            camelCase keys, ``id`` rendered as a string, internal and hidden
            columns removed.
        """
        private = self.INTERNAL_FIELDS | self.HIDDEN_FIELDS
        document = {"id": str(self.id)}
        for column in self.__table__.columns:
            if column.key == "id" or column.key in private:
                continue
            value = getattr(self, column.key)
            # some drivers (SQLite) hand back naive datetimes; stored values are UTC
            if isinstance(value, datetime) and value.tzinfo is None:
                value = value.replace(tzinfo=timezone.utc)
            document[to_camel(column.key)] = value
        return document

    def __str__(self) -> str:
        return f"{type(self).__name__}: id:{self.id}, title: {self.display_title}"
