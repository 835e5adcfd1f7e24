from guit_county.database.core.funcs import count_documents
from guit_county.database.core.resources import COMMISSIONER, SETTINGS


def test_settings_are_created_on_first_read(client):
    assert count_documents(resource=SETTINGS) == 0
    first = client.get("/api/settings")
    assert first.status_code == 200
    second = client.get("/api/settings")
    assert first.json()["id"] == second.json()["id"]
    assert count_documents(resource=SETTINGS) == 1


def test_consecutive_settings_puts_keep_one_document(client):
    first = client.put("/api/settings", json={"siteTitle": "Guit County", "contactEmail": "info@guitcounty.gov"})
    assert first.status_code == 200
    second = client.put("/api/settings", json={"contactPhone": "+211 900 000 000"})
    assert second.status_code == 200
    assert first.json()["id"] == second.json()["id"]
    assert second.json()["siteTitle"] == "Guit County"
    assert second.json()["contactPhone"] == "+211 900 000 000"
    assert count_documents(resource=SETTINGS) == 1
    assert client.get("/api/settings").json()["contactEmail"] == "info@guitcounty.gov"


def test_settings_have_no_generic_routes(client):
    assert client.post("/api/settings", json={"siteTitle": "x"}).status_code == 405


def test_commissioner_post_is_find_or_create(client):
    created = client.post("/api/commissioner", json={"name": "Hon. Commissioner", "message": "Welcome"})
    assert created.status_code == 201
    updated = client.post("/api/commissioner", json={"message": "Welcome to Guit"})
    assert updated.status_code == 200
    assert updated.json()["id"] == created.json()["id"]
    assert updated.json()["name"] == "Hon. Commissioner"
    assert updated.json()["message"] == "Welcome to Guit"
    assert count_documents(resource=COMMISSIONER) == 1


def test_commissioner_keeps_generic_read_update_delete(client):
    profile = client.post("/api/commissioner", json={"name": "Hon. Commissioner"}).json()
    assert client.get(f"/api/commissioner/{profile['id']}").json()["name"] == "Hon. Commissioner"
    assert client.put(f"/api/commissioner/{profile['id']}", json={"photo": "/uploads/p.jpg"}).json()["photo"] == "/uploads/p.jpg"
    assert len(client.get("/api/commissioner").json()) == 1
    assert client.delete(f"/api/commissioner/{profile['id']}").json() == {"message": "Deleted successfully"}
    assert client.get("/api/commissioner").json() == []
