import os
import shutil
import tempfile

import pytest

# Settings are read at import time, so the environment is prepared first.
_workdir = tempfile.mkdtemp(prefix="guit-county-tests-")
os.environ["DB_DRIVER_NAME"] = "sqlite"
os.environ["DB_DATABASE_NAME"] = os.path.join(_workdir, "test.db")
os.environ["SECRET_KEY"] = "test-secret"
os.environ["UPLOAD_DIR"] = os.path.join(_workdir, "uploads")
os.environ["MAX_UPLOAD_MB"] = "1"
os.environ["FRONTEND_URL"] = "http://localhost:5173"
os.environ.pop("SITE_DIR", None)

from fastapi.testclient import TestClient  # noqa: E402

from guit_county.database.config.config import settings  # noqa: E402
from guit_county.database.config.connection_engine import connection_engine, metadata  # noqa: E402
from guit_county.main import app as fastapi_app  # noqa: E402


@pytest.fixture()
def app():
    """The FastAPI app on a fresh schema and an empty upload directory."""
    metadata.drop_all(connection_engine)
    metadata.create_all(connection_engine)
    shutil.rmtree(settings.UPLOAD_DIR, ignore_errors=True)
    os.makedirs(settings.UPLOAD_DIR, exist_ok=True)
    return fastapi_app


@pytest.fixture()
def client(app):
    """A test client for the FastAPI app; entering it runs the lifespan (admin seeding)."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def make(client):
    """Create a document through the API and return its JSON."""
    def _make(collection, **body):
        res = client.post(f"/api/{collection}", json=body)
        assert res.status_code == 201, res.text
        return res.json()
    return _make
