import time

import pytest
from fastapi import APIRouter
from jose import jwt

from guit_county.api.crud import create_crud_routes
from guit_county.api.uploads import guess_ext, is_allowed_media
from guit_county.api.utils import create_access_token, extract_token, verify_token
from guit_county.database.config.config import settings
from guit_county.database.core.funcs import parse_identifier
from guit_county.database.core.resources import NEWS


def test_token_round_trip():
    token = create_access_token({"sub": "42"})
    assert verify_token(token) == "42"


def test_expired_and_garbage_tokens_are_rejected():
    expired = jwt.encode({"sub": "42", "exp": int(time.time()) - 10}, settings.SECRET_KEY, algorithm=settings.ALGORITHM)
    assert verify_token(expired) is None
    assert verify_token("garbage") is None
    assert verify_token(None) is None


def test_extract_token_prefers_cookie():
    assert extract_token("cookie", "Bearer header") == "cookie"
    assert extract_token(None, "Bearer header") == "header"
    assert extract_token(None, "Basic abc") is None
    assert extract_token(None, None) is None


def test_media_type_check():
    assert is_allowed_media("image/jpeg")
    assert is_allowed_media("VIDEO/mp4")
    assert is_allowed_media("audio/ogg")
    assert not is_allowed_media("application/pdf")
    assert not is_allowed_media(None)
    assert guess_ext("clip.MOV") == ".mov"
    assert guess_ext("noext") == ""


def test_parse_identifier():
    assert parse_identifier("not-a-uuid") is None
    assert str(parse_identifier("0b7e6f52-4a52-4a8e-9a43-2f1e1f0c9b11")) == "0b7e6f52-4a52-4a8e-9a43-2f1e1f0c9b11"


def test_crud_routes_respect_exclusions():
    router = create_crud_routes(APIRouter(), NEWS, exclude={"create", "delete"})
    methods = {(route.path, method) for route in router.routes for method in route.methods}
    assert ("/news", "GET") in methods
    assert ("/news/{item_id}", "PUT") in methods
    assert ("/news", "POST") not in methods
    assert ("/news/{item_id}", "DELETE") not in methods


def test_crud_routes_reject_unknown_operations():
    with pytest.raises(ValueError):
        create_crud_routes(APIRouter(), NEWS, exclude={"archive"})
