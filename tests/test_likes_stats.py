import uuid


def test_like_increments_counter(client, make):
    news = make("news", title="Road Repairs Begin")
    first = client.post(f"/api/news/{news['id']}/like")
    assert first.status_code == 200
    assert first.json() == {"success": True, "likes": 1}
    assert client.post(f"/api/news/{news['id']}/like").json()["likes"] == 2
    assert client.get(f"/api/news/{news['id']}").json()["likes"] == 2


def test_like_treats_missing_counter_as_zero(client, make):
    news = make("news", title="No Counter", likes=None)
    assert news["likes"] is None
    assert client.post(f"/api/news/{news['id']}/like").json()["likes"] == 1


def test_like_unknown_news(client):
    for news_id in (str(uuid.uuid4()), "nope"):
        res = client.post(f"/api/news/{news_id}/like")
        assert res.status_code == 404
        assert res.json() == {"message": "News not found"}


def test_stats_counts_collections(client, make):
    make("news", title="Published")
    make("news", title="Draft", status="draft")
    make("messages", name="A", subject="Water", status="new")
    make("messages", name="B", subject="Roads", status="read")
    make("messages", name="C", subject="Schools", status=None)
    make("students", fullName="Nyakuoth Gatdet")

    res = client.get("/api/stats")
    assert res.status_code == 200
    stats = res.json()
    assert stats["news"] == 2
    assert stats["publishedNews"] == 1
    assert stats["messages"] == 3
    assert stats["unreadMessages"] == 2
    assert stats["students"] == 1
    assert stats["users"] == 1  # seeded admin
    assert stats["services"] == 0
    assert "settings" not in stats
    assert "newsletter" not in stats
