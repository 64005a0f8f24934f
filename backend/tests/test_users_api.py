from conftest import seed_users

URL = "/api/v1/users"


def _names(body):
    return [item["name"] for item in body["data"]]


def test_default_order_and_nested_lists(client, database):
    seed_users(database)

    body = client.get(URL).json()

    assert _names(body) == ["Andi", "Budi", "Citra"]
    assert body["metadata"] == {"total": 3, "page": 1, "limit": 10, "totalPages": 1}

    andi = body["data"][0]
    assert [d["acronym"] for d in andi["departments"]] == ["humas", "kominfo"]
    assert [p["year"] for p in andi["periods"]] == [2024, 2025]
    assert [p["name"] for p in andi["positions"]] == ["ketua", "staff"]
    assert andi["departments"][1] == {
        "id": "dep-kominfo",
        "name": "Komunikasi dan Informasi",
        "acronym": "kominfo",
        "periodYear": 2024,
        "image": None,
    }


def test_user_without_links_has_empty_lists(client, database):
    seed_users(database)

    citra = client.get(URL).json()["data"][2]

    assert citra["departments"] == []
    assert citra["periods"] == []
    assert citra["positions"] == [
        {"id": "pos-admin", "name": "administrator", "departmentId": None}
    ]


def test_order_by_username_descending(client, database):
    seed_users(database)

    body = client.get(URL, params={"orderBy": "username", "order": "desc"}).json()

    # usernames: zandi, citra, budi
    assert _names(body) == ["Andi", "Citra", "Budi"]


def test_position_filter_narrows_users_and_positions(client, database):
    seed_users(database)

    body = client.get(URL, params={"positionNames": "ketua"}).json()

    assert _names(body) == ["Andi"]
    assert body["metadata"]["total"] == 1
    andi = body["data"][0]
    assert andi["positions"] == [
        {"id": "pos-ketua", "name": "ketua", "departmentId": "dep-kominfo"}
    ]
    assert len(andi["departments"]) == 2


def test_period_filter(client, database):
    seed_users(database)

    body = client.get(URL, params={"periodYears": "2025"}).json()

    assert _names(body) == ["Andi", "Budi"]
    assert body["data"][0]["periods"] == [
        {"id": "per-2025", "year": 2025, "name": "Kabinet 2025"}
    ]


def test_filters_are_conjunctive(client, database):
    seed_users(database)

    both = client.get(
        URL, params={"departmentIds": "dep-humas", "positionNames": "staff"}
    ).json()
    narrowed = client.get(
        URL, params={"periodYears": "2024", "positionNames": "staff,ketua"}
    ).json()

    assert _names(both) == ["Andi", "Budi"]
    assert [d["id"] for d in both["data"][0]["departments"]] == ["dep-humas"]
    assert _names(narrowed) == ["Andi"]
    assert narrowed["metadata"]["total"] == 1


def test_non_numeric_years_are_ignored(client, database):
    seed_users(database)

    body = client.get(URL, params={"periodYears": "abc"}).json()

    assert body["metadata"]["total"] == 3


def test_paging_over_users_with_many_links(client, database):
    seed_users(database)

    first = client.get(URL, params={"limit": "1"}).json()
    second = client.get(URL, params={"limit": "1", "page": "2"}).json()

    assert _names(first) == ["Andi"]
    assert len(first["data"][0]["departments"]) == 2
    assert _names(second) == ["Budi"]
    assert second["metadata"]["totalPages"] == 3


def test_period_years_too_large_to_store_are_ignored_in_the_list(client, database):
    seed_users(database)

    res = client.get(URL, params={"periodYears": "2024,99999999999999999999"})

    assert res.status_code == 200
    assert _names(res.json()) == ["Andi"]
    assert [p["year"] for p in res.json()["data"][0]["periods"]] == [2024]


def test_only_unstorable_period_years_match_nothing(client, database):
    seed_users(database)

    res = client.get(URL, params={"periodYears": "99999999999999999999"})

    assert res.status_code == 200
    assert res.json()["data"] == []
    assert res.json()["metadata"]["total"] == 0


def test_children_are_read_per_relation(client, database):
    seed_users(database)

    client.get(URL)

    # page + count, then departments, positions and periods for the page's users
    assert len(database.calls) == 5
    assert sum("count(distinct" in sql.lower() for sql in database.calls) == 1


def test_empty_page_skips_child_queries(client, database):
    seed_users(database)

    body = client.get(URL, params={"page": "9"}).json()

    assert body["data"] == []
    assert body["metadata"]["total"] == 3
    assert len(database.calls) == 2
