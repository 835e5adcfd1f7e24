"""
Entities Package — SQLAlchemy 2.0 ORM Models (one table per collection)
=======================================================================

The `entities` package defines the ORM models of the application. Every
collection is a flat document table sharing :class:`DocumentMixin`
(UUID id, UTC timestamps, internal revision counter, camelCase
serialization and an explicit ``display_title``).

Contents
--------
- base: ``DocumentMixin`` and ``utcnow``
- user: ``User`` (back-office accounts, bcrypt password hash)
- site: ``Slide``, ``Setting`` (singleton), ``Commissioner`` (singleton),
  ``Message``, ``Newsletter``
- content: ``News``, ``History``, ``Service``, ``Education``, ``Healthcare``, ``Sport``
- people: ``Politician``, ``Military``, ``Artist``, ``Leader``, ``Student``
- administration: ``Payam``, ``Boma``

Importing this package registers every table on the shared metadata, which
is what ``metadata.create_all`` relies on at startup.
"""

from guit_county.database.entities.user import User
from guit_county.database.entities.site import Slide, Setting, Commissioner, Message, Newsletter
from guit_county.database.entities.content import News, History, Service, Education, Healthcare, Sport
from guit_county.database.entities.people import Politician, Military, Artist, Leader, Student
from guit_county.database.entities.administration import Payam, Boma

__all__ = [
    "User", "Slide", "Setting", "Commissioner", "Message", "Newsletter",
    "News", "History", "Service", "Education", "Healthcare", "Sport",
    "Politician", "Military", "Artist", "Leader", "Student", "Payam", "Boma",
]
