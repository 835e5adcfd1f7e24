"""
Database Transaction Management
===============================

This module provides utilities for managing SQLAlchemy database sessions
using Python context variables and a decorator-based transaction wrapper.

Every service function in ``guit_county.database.core`` is decorated with
``@transactional``: one request handler call maps to one session and one
transaction. The public-data aggregator runs its reads in worker threads;
each thread starts from a copied context whose session slot is empty, so
every parallel read gets its own session.

Key features
~~~~~~~~~~~~
- Context variable to store the active session
- Implicit reuse of existing sessions
- Automatic commit and rollback handling
- Clean session closure after execution

"""

from functools import wraps
from sqlalchemy.orm import sessionmaker
import contextvars
from guit_county.database.config.connection_engine import connection_engine

db_session_context = contextvars.ContextVar("db_session_context", default=None)
"""Context variable storing the active SQLAlchemy session."""

SessionFactory = sessionmaker(bind=connection_engine)
"""Session factory bound to the application engine."""


def transactional(func):
    """
    Decorator to wrap functions in a managed SQLAlchemy transaction.

    Ensures that:
    - If a session already exists in context, it is reused.
    - Otherwise, a new session is created, committed, and closed.
    - On errors, the session is rolled back and closed.

    Parameters
    ----------
    func : callable
        The function to wrap. It must accept a `session` keyword argument,
        and callers pass every other argument by keyword.

    Returns
    -------
    callable
        The wrapped function, executed within a database transaction.

    Example
    -------
    >>> @transactional
    ... def count_news(session=None):
    ...     return session.query(News).count()
    ...
    >>> count_news()
    """
    @wraps(func)
    def wrap_func(*args, **kwargs):
        session = db_session_context.get()
        if session:
            return func(*args, session=session, **kwargs)

        session = SessionFactory()
        token = db_session_context.set(session)

        try:
            result = func(*args, session=session, **kwargs)
            session.flush()
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()
            db_session_context.reset(token)

        return result

    return wrap_func
