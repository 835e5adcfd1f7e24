"""
Public data snapshot.

``build_public_data`` assembles everything the public site renders on load
in a single response. Each read is a ``@transactional`` service call pushed
to a worker thread (``asyncio.to_thread``), so every read gets its own
session and the reads run concurrently.

A read that fails is logged and replaced by its empty value: ``[]`` for a
collection, ``None`` for settings and commissioner, ``0`` for a count. The
snapshot always carries every key.
"""

import asyncio
import logging

from guit_county.database.core.funcs import count_documents, fetch_public_collection, get_singleton
from guit_county.database.core.resources import (
    COMMISSIONER, NEWS, PUBLIC_RESOURCES, SETTINGS, STUDENTS,
)

logger = logging.getLogger("uvicorn")


def _fallback(key: str, result, empty):
    if isinstance(result, BaseException):
        logger.warning(f"Public data read '{key}' failed, serving empty value. Error: {result}")
        return empty
    return result


async def build_public_data() -> dict:
    """
    Build the public snapshot.

    Returns
    -------
    dict
        ``news`` … ``history`` lists (public documents in their natural
        order), ``settings``, ``commissioner`` and
        ``stats: {totalStudents, totalNews}``.
    """
    collection_reads = [
        asyncio.to_thread(fetch_public_collection, resource=resource)
        for resource in PUBLIC_RESOURCES
    ]
    other_reads = [
        asyncio.to_thread(get_singleton, resource=SETTINGS, create=False),
        asyncio.to_thread(get_singleton, resource=COMMISSIONER, create=False),
        asyncio.to_thread(count_documents, resource=STUDENTS, filters=STUDENTS.public_filters()),
        asyncio.to_thread(count_documents, resource=NEWS, filters=NEWS.public_filters()),
    ]
    results = await asyncio.gather(*collection_reads, *other_reads, return_exceptions=True)

    data = {}
    for resource, result in zip(PUBLIC_RESOURCES, results):
        data[resource.name] = _fallback(resource.name, result, [])

    settings_doc, commissioner_doc, total_students, total_news = results[len(PUBLIC_RESOURCES):]
    data["settings"] = _fallback("settings", settings_doc, None)
    data["commissioner"] = _fallback("commissioner", commissioner_doc, None)
    data["stats"] = {
        "totalStudents": _fallback("totalStudents", total_students, 0),
        "totalNews": _fallback("totalNews", total_news, 0),
    }
    return data
