from guit_county.database.core import aggregation

PUBLIC_KEYS = [
    "news", "services", "education", "healthcare", "politicians", "military", "payams",
    "bomas", "sports", "artists", "leaders", "students", "slides", "history",
    "settings", "commissioner", "stats",
]


def test_empty_snapshot_has_every_key(client):
    res = client.get("/api/public-data")
    assert res.status_code == 200
    data = res.json()
    assert list(data) == PUBLIC_KEYS
    for key in PUBLIC_KEYS[:14]:
        assert data[key] == []
    assert data["settings"] is None
    assert data["commissioner"] is None
    assert data["stats"] == {"totalStudents": 0, "totalNews": 0}


def test_draft_news_is_published_ahead_of_older_items(client, make):
    make("news", title="Old Story", status="published", date="2024-01-01T00:00:00")
    draft = make("news", title="Road Repairs Begin", category="Infrastructure", status="draft")
    assert draft["status"] == "draft"

    titles = [n["title"] for n in client.get("/api/public-data").json()["news"]]
    assert titles == ["Old Story"]

    client.put(f"/api/news/{draft['id']}", json={"status": "published"})
    data = client.get("/api/public-data").json()
    assert [n["title"] for n in data["news"]] == ["Road Repairs Begin", "Old Story"]
    assert data["stats"]["totalNews"] == 2


def test_only_active_documents_are_public(client, make):
    make("services", name="Clinic Transport", status="active")
    make("services", name="Closed Office", status="inactive")
    make("students", fullName="Nyakuoth Gatdet", status="active")
    make("students", fullName="Former Student", status="inactive")
    data = client.get("/api/public-data").json()
    assert [s["name"] for s in data["services"]] == ["Clinic Transport"]
    assert [s["fullName"] for s in data["students"]] == ["Nyakuoth Gatdet"]
    assert data["stats"]["totalStudents"] == 1


def test_natural_ordering(client, make):
    make("slides", title="Second", order=2)
    make("slides", title="First", order=1)
    make("history", title="Independence", year="2011")
    make("history", title="County founded", year="2016")
    make("leaders", fullName="A Leader")
    make("leaders", fullName="B Leader")
    data = client.get("/api/public-data").json()
    assert [s["title"] for s in data["slides"]] == ["First", "Second"]
    assert [h["year"] for h in data["history"]] == ["2016", "2011"]
    assert [l["fullName"] for l in data["leaders"]] == ["A Leader", "B Leader"]


def test_singletons_appear_once_saved(client):
    client.put("/api/settings", json={"siteTitle": "Guit County"})
    client.post("/api/commissioner", json={"name": "Hon. Commissioner"})
    data = client.get("/api/public-data").json()
    assert data["settings"]["siteTitle"] == "Guit County"
    assert data["commissioner"]["name"] == "Hon. Commissioner"


def test_failing_read_degrades_to_empty_value(client, make, monkeypatch):
    make("services", name="Clinic Transport")
    make("sports", name="Football League")
    original = aggregation.fetch_public_collection

    def broken(resource):
        if resource.name == "services":
            raise RuntimeError("services collection unavailable")
        return original(resource=resource)

    monkeypatch.setattr(aggregation, "fetch_public_collection", broken)
    res = client.get("/api/public-data")
    assert res.status_code == 200
    data = res.json()
    assert list(data) == PUBLIC_KEYS
    assert data["services"] == []
    assert [s["name"] for s in data["sports"]] == ["Football League"]


def test_public_read_has_no_side_effects(client):
    client.get("/api/public-data")
    assert client.get("/api/public-data").json()["settings"] is None


def test_undated_news_is_listed_last(client, make):
    make("news", title="Undated", date=None)
    make("news", title="Dated", date="2024-01-01T00:00:00")
    titles = [n["title"] for n in client.get("/api/public-data").json()["news"]]
    assert titles == ["Dated", "Undated"]
