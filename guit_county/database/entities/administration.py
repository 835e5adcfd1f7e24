"""
Administrative Unit ORM Models
==============================

The county is divided into payams, and payams into bomas. A ``Boma`` refers
to its payam by name only; nothing enforces that the payam exists.
"""

from typing import Optional

from sqlalchemy import VARCHAR, TEXT
from sqlalchemy.orm import Mapped, mapped_column

from guit_county.database.config.connection_engine import declarativeBase
from guit_county.database.entities.base import DocumentMixin


class Payam(DocumentMixin, declarativeBase):
    __tablename__ = "payam"

    name: Mapped[Optional[str]] = mapped_column(TEXT)
    chief: Mapped[Optional[str]] = mapped_column(TEXT)
    population: Mapped[Optional[str]] = mapped_column(TEXT)
    image: Mapped[Optional[str]] = mapped_column(TEXT)
    status: Mapped[Optional[str]] = mapped_column(VARCHAR(32), default="active")

    @property
    def display_title(self) -> str:
        return self.name or ""


class Boma(DocumentMixin, declarativeBase):
    __tablename__ = "boma"

    name: Mapped[Optional[str]] = mapped_column(TEXT)
    payam: Mapped[Optional[str]] = mapped_column(TEXT)
    chief: Mapped[Optional[str]] = mapped_column(TEXT)
    population: Mapped[Optional[str]] = mapped_column(TEXT)
    image: Mapped[Optional[str]] = mapped_column(TEXT)
    status: Mapped[Optional[str]] = mapped_column(VARCHAR(32), default="active")

    @property
    def display_title(self) -> str:
        if self.payam:
            return f"{self.name or ''} ({self.payam})"
        return self.name or ""
