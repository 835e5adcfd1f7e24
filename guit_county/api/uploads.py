"""
Media upload helpers.

Uploaded files are streamed to ``settings.UPLOAD_DIR`` under a generated
name (``image-<epoch-ms>-<hex><ext>``) and served back from ``/uploads``.
Only image, video and audio content types are accepted, and a file larger
than ``settings.MAX_UPLOAD_MB`` is rejected with the partial write removed.
"""

import os
import time
import uuid

from fastapi import UploadFile

from guit_county.api.models import FileRec
from guit_county.database.config.config import settings

ALLOWED_MEDIA_PREFIXES = ("image/", "video/", "audio/")

CHUNK_SIZE = 1024 * 1024


class UploadRejected(Exception):
    """The client sent a file that may not be stored."""


def guess_ext(filename: str) -> str:
    """
    Extract the file extension from a filename.

    Args:
        filename (str): Input filename.

    Returns:
        str: Lowercased file extension (e.g., ".jpg"), or "" when there is none.
    """
    _, ext = os.path.splitext(filename or "")
    return ext.lower()


def is_allowed_media(content_type: str) -> bool:
    return (content_type or "").lower().startswith(ALLOWED_MEDIA_PREFIXES)


def generate_name(filename: str) -> str:
    return f"image-{int(time.time() * 1000)}-{uuid.uuid4().hex[:10]}{guess_ext(filename)}"


def persist_upload(f: UploadFile, upload_dir: str = None, max_bytes: int = None) -> FileRec:
    """
    Save an uploaded media file to the upload directory.

    - Rejects anything that is not image/*, video/* or audio/* before writing.
    - Copies the stream in chunks and aborts once ``max_bytes`` is exceeded,
      deleting what was written so far.

    Args:
        f (UploadFile): The file uploaded by the client.
        upload_dir (str): Target directory, defaults to ``settings.UPLOAD_DIR``.
        max_bytes (int): Size limit, defaults to ``settings.MAX_UPLOAD_MB`` megabytes.

    Returns:
        FileRec: Metadata of the stored file, including its public URL.

    Raises:
        UploadRejected: Wrong media type or file too large.
        OSError: The file could not be written.
    """
    upload_dir = upload_dir or settings.UPLOAD_DIR
    max_bytes = max_bytes or settings.MAX_UPLOAD_MB * 1024 * 1024
    mime = (f.content_type or "").lower()
    if not is_allowed_media(mime):
        raise UploadRejected("Only images, videos, and audio files are allowed")

    os.makedirs(upload_dir, exist_ok=True)
    new_name = generate_name(f.filename)
    dest = os.path.join(upload_dir, new_name)
    size = 0
    try:
        with open(dest, "wb") as out:
            while True:
                chunk = f.file.read(CHUNK_SIZE)
                if not chunk:
                    break
                size += len(chunk)
                if size > max_bytes:
                    raise UploadRejected("File too large")
                out.write(chunk)
    except BaseException:
        if os.path.exists(dest):
            os.remove(dest)
        raise
    return FileRec(original=f.filename or new_name, path=dest, url=f"/uploads/{new_name}", mime=mime, size=size)
