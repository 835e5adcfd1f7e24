"""
FastAPI Router — Collections • Public data • Uploads • Accounts
================================================================

Purpose
-------
Defines the HTTP API served under ``/api``:
- Generic CRUD routes for every registry collection (see ``crud.py``)
- Singleton settings (``GET``/``PUT /settings``) and commissioner save
- Consolidated public snapshot (``/public-data``) and admin stats (``/stats``)
- Media upload (``/upload``) and news likes
- Accounts: register, login, me, logout

Key Notes
---------
- Input validation via Pydantic models in ``guit_county.api.models``.
- Auth cookie: ``token`` (JWT, HttpOnly). ``/auth/me`` also accepts an
  ``Authorization: Bearer`` header.
- Database-bound handlers are plain ``def`` (threadpool); the public snapshot
  is ``async`` and fans its reads out to worker threads.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Body, Cookie, File, Header, Response, UploadFile
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from guit_county.api.crud import create_crud_routes, error_response, validate_fields
from guit_county.api.models import RegistrationDetails, UserCredentials
from guit_county.api.uploads import UploadRejected, persist_upload
from guit_county.api.utils import create_access_token, extract_token, verify_token
from guit_county.database.core.aggregation import build_public_data
from guit_county.database.core.funcs import (
    collection_stats, get_account, get_singleton, like_news, login_user, register_user, save_singleton,
)
from guit_county.database.core.resources import COMMISSIONER, CRUD_RESOURCES, SETTINGS

logger = logging.getLogger("uvicorn")

router = APIRouter(prefix="/api")
"""Creates the FastAPI router in which we define its routes"""


@router.get('/public-data', tags=["public"])
async def public_data():
    """Everything the public site renders on load, in one response.

    Each key is read independently; a failed read yields an empty value for
    its key instead of failing the whole response.
    """
    return await build_public_data()


@router.get('/stats', tags=["admin"])
def stats():
    """Document counts per collection, plus unread messages and published news."""
    try:
        return collection_stats()
    except Exception as e:
        logger.exception("Computing stats failed")
        return error_response(500, e)


@router.post('/upload', tags=["media"])
def upload(image: Optional[UploadFile] = File(None)):
    """Store an image, video or audio file and return its public URL.

    Response:
        200: {'url': '/uploads/<name>'}
        400: no file, disallowed type or too large
        500: the file could not be written
    """
    if image is None or not image.filename:
        return error_response(400, "No file selected")
    try:
        rec = persist_upload(image)
    except UploadRejected as e:
        return error_response(400, f"Upload error: {e}")
    except Exception as e:
        logger.exception("Upload failed")
        return error_response(500, f"Server error: {e}")
    logger.info(f"Stored upload {rec.path} ({rec.mime}, {rec.size} bytes)")
    return {"url": rec.url}


@router.post('/news/{news_id}/like', tags=["news"])
def like(news_id: str):
    """Add one like to a news article and return the new count."""
    try:
        likes = like_news(news_id=news_id)
    except Exception as e:
        logger.exception(f"Liking news {news_id} failed")
        return error_response(500, e)
    if likes is None:
        return JSONResponse(status_code=404, content={"message": "News not found"})
    return {"success": True, "likes": likes}


@router.get('/settings', tags=["settings"])
def read_settings():
    """The site settings document, created empty on first access."""
    try:
        return get_singleton(resource=SETTINGS)
    except Exception as e:
        logger.exception("Reading settings failed")
        return error_response(500, e)


@router.put('/settings', tags=["settings"])
def write_settings(payload: dict = Body(...)):
    """Merge the body onto the settings document (created if missing)."""
    try:
        fields = validate_fields(SETTINGS.schema, payload)
        document, _ = save_singleton(resource=SETTINGS, fields=fields)
    except ValidationError as e:
        return error_response(400, e)
    except Exception as e:
        logger.exception("Saving settings failed")
        return error_response(500, e)
    return document


@router.post('/commissioner', tags=["commissioner"])
def save_commissioner(payload: dict = Body(...)):
    """Create the commissioner profile, or update the existing one.

    Response:
        201: profile created
        200: existing profile updated
    """
    try:
        fields = validate_fields(COMMISSIONER.schema, payload)
        document, created = save_singleton(resource=COMMISSIONER, fields=fields)
    except ValidationError as e:
        return error_response(400, e)
    except Exception as e:
        logger.exception("Saving commissioner failed")
        return error_response(500, e)
    return JSONResponse(status_code=201 if created else 200, content=jsonable_encoder(document))


@router.post('/auth/register', tags=["auth"])
def register(data: RegistrationDetails):
    """Register a new account from the public form.

    Response:
        201: {'success': True, 'message': 'Registration successful'}
        400: {'success': False, 'message': <reason>}
    """
    try:
        res = register_user(data=data)
    except Exception as e:
        logger.exception("Registration failed")
        return error_response(500, e)
    if res['res']:
        return JSONResponse(status_code=201, content={"success": True, "message": "Registration successful"})
    return JSONResponse(status_code=400, content={"success": False, "message": res['detail']})


@router.post('/auth/login', tags=["auth"])
def login(data: UserCredentials, response: Response):
    """Authenticate with username (or email) and password, and set a signed JWT cookie.

    Response:
        200: {'success': True, 'user': {username, role, id}, 'token': <jwt>}
        401: {'success': False, 'message': 'Invalid credentials'}
    """
    try:
        auth = login_user(username=data.username, password=data.password)
    except Exception:
        logger.exception("Login failed")
        return JSONResponse(status_code=500, content={"success": False, "message": "Internal server error"})
    if not auth['authenticated']:
        return JSONResponse(status_code=401, content={"success": False, "message": auth['detail']})
    user = auth['user_details']
    access_token = create_access_token({'sub': user['id'], 'role': user['role']})
    response.set_cookie(
        key="token",
        value=access_token,
        httponly=True,
        secure=False,  # True in production
        samesite="lax"
    )
    logger.info(f"User {user['username']} logged in")
    return {"success": True, "user": user, "token": access_token}


@router.get('/auth/me', tags=["auth"])
def me(token: Optional[str] = Cookie(None), authorization: Optional[str] = Header(None)):
    """Return the account behind the session token, or 401."""
    user_id = verify_token(extract_token(token, authorization))
    try:
        user = get_account(user_id=user_id) if user_id else None
    except Exception as e:
        logger.exception("Resolving the session account failed")
        return error_response(500, e)
    if user is None:
        return JSONResponse(status_code=401, content={"success": False, "message": "Invalid or expired token"})
    return {"success": True, "user": user}


@router.post('/auth/logout', tags=["auth"])
def logout(response: Response):
    """Clear the session cookie."""
    response.delete_cookie(key="token")
    return {"success": True}


for _resource in CRUD_RESOURCES:
    create_crud_routes(router, _resource, exclude={"create"} if _resource is COMMISSIONER else ())
