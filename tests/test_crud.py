import uuid

from guit_county.crypt.encrypt_decrypt import EncryptionDec
from guit_county.database.core.funcs import count_documents
from guit_county.database.core.resources import USERS


def test_list_empty_collection_returns_array(client):
    res = client.get("/api/services")
    assert res.status_code == 200
    assert res.json() == []


def test_create_returns_document_with_id_and_timestamps(make):
    news = make("news", title="Road Repairs Begin", category="Infrastructure", status="draft")
    assert uuid.UUID(news["id"])
    assert news["status"] == "draft"
    assert news["title"] == "Road Repairs Begin"
    assert news["createdAt"] and news["updatedAt"]
    assert "revision" not in news
    assert "_id" not in news


def test_create_applies_column_defaults(make):
    news = make("news", title="Market Day")
    assert news["status"] == "published"
    assert news["likes"] == 0
    assert news["mediaType"] == "image"


def test_get_one_is_normalized_like_list(client, make):
    slide = make("slides", title="Welcome", btnText="Read more", order=2)
    res = client.get(f"/api/slides/{slide['id']}")
    assert res.status_code == 200
    assert res.json()["id"] == slide["id"]
    assert res.json()["btnText"] == "Read more"
    assert client.get("/api/slides").json()[0].keys() == res.json().keys()


def test_get_unknown_and_malformed_ids_are_not_found(client):
    assert client.get(f"/api/news/{uuid.uuid4()}").status_code == 404
    res = client.get("/api/news/not-an-id")
    assert res.status_code == 404
    assert res.json() == {"message": "Not Found"}


def test_update_is_partial_and_refreshes_updated_at(client, make):
    service = make("services", name="Water Point", category="Water", location="Turkei")
    res = client.put(f"/api/services/{service['id']}", json={"status": "inactive"})
    assert res.status_code == 200
    updated = res.json()
    assert updated["status"] == "inactive"
    assert updated["name"] == "Water Point"
    assert updated["location"] == "Turkei"
    assert updated["createdAt"] == service["createdAt"]
    assert updated["updatedAt"] != service["updatedAt"]


def test_update_unknown_id_is_not_found(client):
    res = client.put(f"/api/services/{uuid.uuid4()}", json={"name": "x"})
    assert res.status_code == 404
    assert res.json() == {"message": "Not Found"}


def test_list_is_most_recently_updated_first(client, make):
    first = make("payams", name="Guit")
    second = make("payams", name="Kuerguiena")
    assert [p["id"] for p in client.get("/api/payams").json()] == [second["id"], first["id"]]
    client.put(f"/api/payams/{first['id']}", json={"chief": "Chief Gatluak"})
    assert [p["id"] for p in client.get("/api/payams").json()] == [first["id"], second["id"]]


def test_delete_always_reports_success(client, make):
    boma = make("bomas", name="Nyal", payam="Guit")
    res = client.delete(f"/api/bomas/{boma['id']}")
    assert res.status_code == 200
    assert res.json() == {"message": "Deleted successfully"}
    assert client.get(f"/api/bomas/{boma['id']}").status_code == 404
    again = client.delete(f"/api/bomas/{boma['id']}")
    assert again.status_code == 200
    assert again.json() == {"message": "Deleted successfully"}


def test_unknown_fields_are_ignored_and_numbers_coerced(make):
    slide = make("slides", title="Harvest", order="3", bogus="ignored")
    assert slide["order"] == 3
    assert "bogus" not in slide
    payam = make("payams", name="Guit", population=12000)
    assert payam["population"] == "12000"


def test_business_emptiness_is_accepted(make):
    politician = make("politicians", name="")
    assert politician["name"] == ""


def test_type_failure_is_a_client_error(client):
    res = client.post("/api/slides", json={"title": "Bad", "order": "first"})
    assert res.status_code == 400
    assert "error" in res.json()
    assert client.get("/api/slides").json() == []


def test_non_object_body_is_a_client_error(client):
    res = client.post("/api/services", json=[1, 2, 3])
    assert res.status_code == 400
    assert "error" in res.json()


def test_newsletter_requires_unique_email(client, make):
    make("newsletter", email="reader@example.com")
    duplicate = client.post("/api/newsletter", json={"email": "reader@example.com"})
    assert duplicate.status_code == 400
    assert "error" in duplicate.json()
    missing = client.post("/api/newsletter", json={})
    assert missing.status_code == 400


def test_users_store_a_hash_and_never_expose_it(client, make):
    user = make("users", username="editor", email="editor@example.com", password="s3cret", role="editor")
    assert "password" not in user
    assert count_documents(resource=USERS) == 2  # seeded admin + editor

    res = client.post("/api/auth/login", json={"username": "editor", "password": "s3cret"})
    assert res.status_code == 200
    assert res.json()["user"]["role"] == "editor"

    client.put(f"/api/users/{user['id']}", json={"password": "n3w"})
    assert client.post("/api/auth/login", json={"username": "editor", "password": "s3cret"}).status_code == 401
    assert client.post("/api/auth/login", json={"username": "editor", "password": "n3w"}).status_code == 200


def test_hash_is_not_hashed_twice():
    enc = EncryptionDec()
    hashed = enc.hash_password(text="pw")
    assert enc.is_hashed(hashed)
    assert not enc.is_hashed("pw")
    assert enc.check_passwords("pw", hashed)
    assert not enc.check_passwords("pw", "pw")
    assert not enc.check_passwords("p" * 100, hashed)


def test_users_reject_overlong_and_empty_passwords(client):
    long_password = client.post("/api/users", json={"email": "long@example.com", "password": "p" * 100})
    assert long_password.status_code == 400
    assert "error" in long_password.json()
    empty = client.post("/api/users", json={"email": "empty@example.com", "password": ""})
    assert empty.status_code == 400
    assert count_documents(resource=USERS) == 1


def test_empty_password_update_keeps_the_stored_credential(client, make):
    user = make("users", username="clerk", email="clerk@example.com", password="s3cret")
    res = client.put(f"/api/users/{user['id']}", json={"password": "", "phone": "0912"})
    assert res.status_code == 200
    assert res.json()["phone"] == "0912"
    assert client.put(f"/api/users/{user['id']}", json={"password": None}).status_code == 200
    assert client.post("/api/auth/login", json={"username": "clerk", "password": "s3cret"}).status_code == 200


def test_overlong_password_update_is_a_client_error(client, make):
    user = make("users", username="clerk", email="clerk@example.com", password="s3cret")
    res = client.put(f"/api/users/{user['id']}", json={"password": "p" * 100})
    assert res.status_code == 400
    assert client.post("/api/auth/login", json={"username": "clerk", "password": "s3cret"}).status_code == 200
