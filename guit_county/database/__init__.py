"""
The `database` package holds the data layer of the site backend.

Contents:
    - config:
        Environment settings, the SQLAlchemy engine and the declarative base.

    - entities:
        One ORM model per collection, all sharing ``DocumentMixin``.

    - daos:
        ``DocumentDao`` (generic per-table access) and ``UserDao`` (accounts).

    - core:
        The collection registry, ``@transactional`` service functions called
        by the routers, and the public-data aggregator.

    - helpers:
        Context-variable session handling and the ``@transactional`` decorator.
"""
