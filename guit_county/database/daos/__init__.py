"""
DAOs Package — Data Access Layer (SQLAlchemy 2.0)
=================================================

The `daos` package provides the Data Access Layer for the application.
It encapsulates all interactions with SQLAlchemy ORM entities, providing
clean CRUD APIs for the service layer while hiding direct query details.

Conventions
-----------
- Session lifecycle (open/commit/rollback) is handled by callers
- DAOs surface exceptions so upper layers decide error policy

Contents
--------
- DocumentDao
    Generic, entity-bound access for every collection:
    * createDocument / fetchDocuments / fetchDocumentById / fetchFirstDocument
    * countDocuments / deleteDocumentById
    * incrementField (atomic counters such as news likes)

- UserDao
    Account lookups on top of the users collection:
    * Creates users with password hashing
    * Fetches users by username-or-email, email, username
    * Counts administrators for startup seeding
"""
