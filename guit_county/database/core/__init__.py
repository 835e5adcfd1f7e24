"""
The `core` package connects the API routers with the data layer.

Contents
--------
- resources:
    Registry of the exposed collections (entity, schemas, public visibility
    and ordering, write hooks).
- funcs:
    ``@transactional`` service functions (CRUD, singletons, likes, stats,
    accounts).
- aggregation:
    The public-data snapshot, assembled from parallel reads.
"""
