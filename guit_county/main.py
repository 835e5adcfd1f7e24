"""
FastAPI application bootstrap with: \n
- Lifespan-managed initialization (tables created, default admin seeded) \n
- CORS configured for the frontend \n
- JSON `{"error": ...}` responses for malformed request bodies \n
- Static serving of uploaded media under /uploads \n
- Optional static site with an index.html catch-all \n

Environment contract (from `settings`): \n
- FRONTEND_URL: allowed CORS origin. \n
- UPLOAD_DIR: directory backing /uploads. \n
- SITE_DIR: built public site; served only when set. \n
"""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles

from guit_county.api.fast_api import router
from guit_county.database import entities  # noqa: F401  registers every table on the metadata
from guit_county.database.config.config import settings
from guit_county.database.config.connection_engine import connection_engine, metadata
from guit_county.database.core.funcs import seed_admin

logger = logging.getLogger("uvicorn")
"""Logger instance for capturing and emitting Uvicorn server logs."""


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    App lifespan manager.

    Notes
    ------------
    - On startup (before yielding):
        * Create missing tables.
        * Seed the default administrator when no admin account exists.
    - On shutdown (after yielding):
        * Dispose of the connection pool.
    """
    metadata.create_all(connection_engine)
    if seed_admin():
        logger.warning(f"Seeded default admin '{settings.ADMIN_USERNAME}'; change its password.")
    logger.info("Database ready.")
    try:
        yield
    finally:
        connection_engine.dispose()
        logger.info("App shutting down.")


# Instantiate the FastAPI app with lifespan handler
app = FastAPI(title="Guit County", lifespan=lifespan)
"""Instatiates a FastAPI application object
    The lifespan=lifespan argument registers the startup/shutdown manager that
    creates the schema and seeds the default administrator.
"""

# -----------------------
# CORS configuration
# -----------------------
url = settings.FRONTEND_URL
"""The allowed frontend origin (URL) used for CORS configuration."""

app.add_middleware(
    CORSMiddleware,
    allow_origins=[url],      # Frontend origin
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed or missing request bodies are client errors (400), not 422."""
    logger.info(f"Rejected request to {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=400,
        content={"error": "Validation error", "details": jsonable_encoder(exc.errors())},
    )


# -----------------------
# API routes
# -----------------------
app.include_router(router)

# -----------------------
# Uploaded media
# -----------------------
os.makedirs(settings.UPLOAD_DIR, exist_ok=True)
app.mount("/uploads", StaticFiles(directory=settings.UPLOAD_DIR), name="uploads")


# -----------------------
# Public site (optional)
# -----------------------
if settings.SITE_DIR:
    site_root = os.path.realpath(settings.SITE_DIR)

    # Catch-all for the site (must come after the API routes and mounts)
    @app.get("/", include_in_schema=False)
    @app.get("/{full_path:path}", include_in_schema=False)
    async def serve_site(full_path: str = ""):
        """
        Serve a file of the built site, or its index.html for client-side routes.
        """
        if full_path.startswith("api/"):
            return JSONResponse(status_code=404, content={"message": "Not Found"})
        candidate = os.path.realpath(os.path.join(site_root, full_path))
        if full_path and candidate.startswith(site_root + os.sep) and os.path.isfile(candidate):
            return FileResponse(candidate)
        return FileResponse(os.path.join(site_root, "index.html"))
