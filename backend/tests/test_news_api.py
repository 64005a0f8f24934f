from conftest import seed_news

URL = "/api/v1/news"


def test_lists_published_news_newest_first(client, database):
    seed_news(database)

    body = client.get(URL).json()

    assert [item["id"] for item in body["data"]] == ["post-3", "post-2", "post-1"]
    assert body["metadata"] == {"total": 3, "page": 1, "limit": 10, "totalPages": 1}


def test_search_and_ascending_order(client, database):
    seed_news(database)

    body = client.get(URL, params={"search": "berita", "order": "asc"}).json()

    assert [item["id"] for item in body["data"]] == ["post-1", "post-3"]
    assert body["metadata"]["total"] == 2
    first = body["data"][0]
    assert first["postTags"] == [{"title": "berita", "slug": "berita"}]
    assert first["author"] == {
        "id": "usr-author",
        "name": "Rina",
        "username": "rina",
        "image": "rina.png",
    }
    assert first["metaTitle"] == "Berita pertama"
    assert first["publishedAt"] == "2024-01-01T08:00:00"


def test_drafts_and_other_tags_are_excluded(client, database):
    seed_news(database)

    ids = [item["id"] for item in client.get(URL, params={"limit": "50"}).json()["data"]]

    assert "post-draft" not in ids
    assert "post-other" not in ids


def test_search_treats_wildcards_literally(client, database):
    seed_news(database)

    body = client.get(URL, params={"search": "%"}).json()

    assert body["data"] == []
    assert body["metadata"]["total"] == 0


def test_unknown_order_falls_back_to_newest_first(client, database):
    seed_news(database)

    res = client.get(URL, params={"order": "sideways", "limit": "1"})

    assert res.status_code == 200
    assert [item["id"] for item in res.json()["data"]] == ["post-3"]
    assert res.json()["metadata"]["totalPages"] == 3
