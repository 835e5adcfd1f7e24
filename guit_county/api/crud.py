"""
Generic CRUD routes
===================

``create_crud_routes`` registers list / get-one / create / update / delete
handlers for one registry :class:`~guit_county.database.core.resources.Resource`
on a router. The handlers carry no per-collection logic: validation comes
from the resource schema and any write side effect from its ``before_write``
hook.

Status codes
------------
- 200 list, get-one, update, delete
- 201 create
- 400 ``{"error": ...}`` when the body fails validation or violates a
  uniqueness constraint
- 404 ``{"message": "Not Found"}`` for an unknown (or malformed) id
- 500 ``{"error": ...}`` for any other store failure

Handlers are plain ``def`` functions so FastAPI runs them in its threadpool
and each call gets its own ``@transactional`` session.
"""

import logging
from typing import Iterable

from fastapi import APIRouter, Body
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from sqlalchemy.exc import IntegrityError

from guit_county.database.core.funcs import (
    create_document, delete_document, get_document, list_documents, update_document,
)
from guit_county.database.core.resources import Resource

logger = logging.getLogger("uvicorn")

OPERATIONS = ("list", "get", "create", "update", "delete")

NOT_FOUND = {"message": "Not Found"}


def error_response(status_code: int, message) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": str(message)})


def validate_fields(schema, payload: dict) -> dict:
    """Validate ``payload`` against ``schema`` and keep only the keys the client sent."""
    return schema.model_validate(payload).model_dump(exclude_unset=True)


def create_crud_routes(router: APIRouter, resource: Resource, exclude: Iterable[str] = ()) -> APIRouter:
    """
    Register the generic routes of ``resource`` under ``/<resource.name>``.

    Parameters
    ----------
    router : APIRouter
        Router to register on (the ``/api`` router in production).
    resource : Resource
        Registry entry describing the collection.
    exclude : Iterable[str]
        Operation names (``list``, ``get``, ``create``, ``update``, ``delete``)
        to leave out, so a dedicated handler can take their place.

    Returns
    -------
    APIRouter
        The same router, for chaining.
    """
    exclude = set(exclude)
    unknown = exclude - set(OPERATIONS)
    if unknown:
        raise ValueError(f"Unknown CRUD operations: {sorted(unknown)}")

    path = f"/{resource.name}"
    tag = resource.name

    def list_items():
        try:
            return list_documents(resource=resource)
        except Exception as e:
            logger.exception(f"Listing {resource.name} failed")
            return error_response(500, e)

    def get_item(item_id: str):
        try:
            document = get_document(resource=resource, document_id=item_id)
        except Exception as e:
            logger.exception(f"Fetching {resource.name} {item_id} failed")
            return error_response(500, e)
        if document is None:
            return JSONResponse(status_code=404, content=NOT_FOUND)
        return document

    def create_item(payload: dict = Body(...)):
        try:
            fields = validate_fields(resource.create_schema or resource.schema, payload)
            document = create_document(resource=resource, fields=fields)
        except (ValidationError, IntegrityError) as e:
            return error_response(400, e)
        except Exception as e:
            logger.exception(f"Creating {resource.name} failed")
            return error_response(500, e)
        return JSONResponse(status_code=201, content=jsonable_encoder(document))

    def update_item(item_id: str, payload: dict = Body(...)):
        try:
            fields = validate_fields(resource.schema, payload)
            document = update_document(resource=resource, document_id=item_id, fields=fields)
        except (ValidationError, IntegrityError) as e:
            return error_response(400, e)
        except Exception as e:
            logger.exception(f"Updating {resource.name} {item_id} failed")
            return error_response(500, e)
        if document is None:
            return JSONResponse(status_code=404, content=NOT_FOUND)
        return document

    def delete_item(item_id: str):
        try:
            delete_document(resource=resource, document_id=item_id)
        except Exception as e:
            logger.exception(f"Deleting {resource.name} {item_id} failed")
            return error_response(500, e)
        return {"message": "Deleted successfully"}

    if "list" not in exclude:
        router.add_api_route(path, list_items, methods=["GET"], tags=[tag], name=f"list_{resource.name}")
    if "get" not in exclude:
        router.add_api_route(path + "/{item_id}", get_item, methods=["GET"], tags=[tag], name=f"get_{resource.name}")
    if "create" not in exclude:
        router.add_api_route(path, create_item, methods=["POST"], tags=[tag], name=f"create_{resource.name}")
    if "update" not in exclude:
        router.add_api_route(path + "/{item_id}", update_item, methods=["PUT"], tags=[tag], name=f"update_{resource.name}")
    if "delete" not in exclude:
        router.add_api_route(path + "/{item_id}", delete_item, methods=["DELETE"], tags=[tag], name=f"delete_{resource.name}")
    return router
