"""
API Package — FastAPI Router • Generic CRUD • Models • Uploads • JWT Utils
==========================================================================

Contents
--------
- fast_api
    The ``/api`` router: public snapshot, stats, upload, news likes,
    settings, commissioner save, accounts (register, login, me, logout),
    plus the generic routes of every registry collection.

- crud
    ``create_crud_routes(router, resource, exclude=())`` — list, get-one,
    create, update and delete handlers driven by a registry entry.

- models
    Pydantic data contracts: one ``*Fields`` schema per collection (camelCase
    or snake_case keys, partial bodies), stricter ``*Create`` schemas,
    ``RegistrationDetails``, ``UserCredentials`` and ``FileRec``.

- uploads
    ``persist_upload(UploadFile) -> FileRec`` — type and size checked,
    chunked write to the upload directory.

- utils
    JWT helpers:
      • create_access_token(payload) — issues signed JWTs with exp
      • verify_token(token) — validates JWTs and extracts the subject

Operational Notes
-----------------
- Security: Auth via HttpOnly `token` cookie (JWT). Never log secrets.
- Uploaded media is served back from ``/uploads`` by the application.
"""
