"""
Connection Engine (SQLAlchemy)

Purpose
-------
Centralizes database initialization for the application:
- Builds the SQLAlchemy connection URL from environment-backed settings.
- Creates the Engine (connection pool + SQL execution entry point).
- Defines shared MetaData for the collection tables.
- Exposes a Declarative Base class for ORM models.

Notes
-----
- PostgreSQL is the production target; SQLite files work for local runs and
  tests. SQLite connections are opened with ``check_same_thread=False`` because
  the public-data aggregator reads from worker threads.
- All ORM models must inherit from `declarativeBase`.
"""


from sqlalchemy import create_engine
from sqlalchemy.engine import URL
from sqlalchemy.orm import declarative_base
from sqlalchemy.schema import MetaData
from guit_county.database.config.config import settings

connection_url = URL.create(
    drivername=settings.DB_DRIVER_NAME,
    username=settings.DB_USERNAME,
    password=settings.DB_PASSWORD,
    host=settings.DB_HOST,
    port=settings.DB_PORT,
    database=settings.DB_DATABASE_NAME
)
"""Constructs the SQLAlchemy connection URL using values from Settings."""

connect_args = {"check_same_thread": False} if settings.DB_DRIVER_NAME.startswith("sqlite") else {}

connection_engine = create_engine(connection_url, connect_args=connect_args, pool_pre_ping=True)
"""Engine object: Core interface to the database.
Responsible for managing connections, executing SQL, and pooling.
"""

metadata = MetaData()
"""
Metadata object: Stores schema-level information about the collection tables. Shared across all models.
"""

declarativeBase = declarative_base(metadata=metadata)
"""Declarative Base: Root class for ORM models."""
