"""Tests for the /api/entries and /api/_search/entries endpoints."""

from blog import db
from blog.model import Entry, User
from tests.helpers.auth import bearer_headers


def _create(client, headers, **body):
    return client.post("/api/entries", json=body, headers=headers)


def _row(app, entry_id):
    with app.app_context():
        entry = db.session.get(Entry, entry_id)
        return entry.to_display_dict() if entry else None


# --- create ---

def test_create_entry_returns_201_with_location_and_alert(client, auth_headers, seed, es_repo):
    resp = _create(
        client, auth_headers,
        title="Hello", content="First post", date="2026-01-01T10:00:00Z",
        blog={"id": seed["alice_blog"]},
    )

    assert resp.status_code == 201
    body = resp.get_json()
    assert body["id"] is not None
    assert body["title"] == "Hello"
    assert body["content"] == "First post"
    assert body["blog"] == {"id": seed["alice_blog"], "name": "Alice writes", "handle": "alice"}
    assert resp.headers["Location"] == f"/api/entries/{body['id']}"
    assert resp.headers["X-blogApp-alert"] == f"A new entry is created with identifier {body['id']}"
    assert resp.headers["X-blogApp-params"] == str(body["id"])


def test_create_entry_writes_store_then_index(client, auth_headers, seed, es_repo, app):
    resp = _create(client, auth_headers, title="Indexed", blog={"id": seed["alice_blog"]})
    entry_id = resp.get_json()["id"]

    assert _row(app, entry_id)["title"] == "Indexed"
    assert es_repo.docs[entry_id]["title"] == "Indexed"
    assert es_repo.docs[entry_id] == resp.get_json()


def test_create_entry_with_id_is_rejected(client, auth_headers, seed, es_repo, entry_repo):
    resp = _create(client, auth_headers, id=99, title="Nope", blog={"id": seed["alice_blog"]})

    assert resp.status_code == 400
    assert resp.get_json()["resultCode"] == "idexists"
    assert resp.headers["X-blogApp-error"] == "A new entry cannot already have an ID"
    assert resp.headers["X-blogApp-params"] == "entry"
    assert entry_repo.save_calls == []
    assert es_repo.saved == []


def test_create_entry_defaults_date_and_allows_missing_content(client, auth_headers, seed):
    resp = _create(client, auth_headers, title="Bare", blog={"id": seed["alice_blog"]})

    assert resp.status_code == 201
    body = resp.get_json()
    assert body["content"] is None
    assert body["date"] is not None


def test_create_entry_attaches_known_tags_and_skips_unknown(client, auth_headers, seed):
    resp = _create(
        client, auth_headers,
        title="Tagged", blog={"id": seed["alice_blog"]},
        tags=[{"id": seed["flask"]}, {"id": seed["python"]}, {"id": 4242}],
    )

    assert resp.status_code == 201
    assert resp.get_json()["tags"] == [
        {"id": seed["python"], "name": "python"},
        {"id": seed["flask"], "name": "flask"},
    ]


def test_create_entry_without_title_is_a_validation_error(client, auth_headers, seed, es_repo):
    resp = _create(client, auth_headers, content="no title", blog={"id": seed["alice_blog"]})

    assert resp.status_code == 400
    body = resp.get_json()
    assert body["resultCode"] == "VAL001"
    assert body["details"]["errors"][0]["field"] == "title"
    assert es_repo.saved == []


def test_create_entry_with_blank_title_is_rejected(client, auth_headers, seed):
    resp = _create(client, auth_headers, title="   ", blog={"id": seed["alice_blog"]})
    assert resp.status_code == 400


def test_create_entry_with_non_object_body_is_rejected(client, auth_headers, seed):
    resp = client.post("/api/entries", json=["not", "an", "object"], headers=auth_headers)

    assert resp.status_code == 400
    assert resp.get_json()["resultCode"] == "INVALID_JSON"


def test_index_failure_returns_500_and_keeps_store_row(client, auth_headers, seed, es_repo, app):
    es_repo.fail_on_save = True

    resp = _create(client, auth_headers, title="Orphan", blog={"id": seed["alice_blog"]})

    assert resp.status_code == 500
    assert resp.get_json()["resultCode"] == "DB005"
    with app.app_context():
        titles = [e.title for e in db.session.execute(db.select(Entry)).scalars()]
    assert titles == ["Orphan"]
    assert es_repo.docs == {}


# --- update ---

def test_update_entry_replaces_fields_and_reindexes(client, auth_headers, seed, es_repo, app):
    created = _create(
        client, auth_headers, title="Draft", content="v1",
        blog={"id": seed["alice_blog"]}, tags=[{"id": seed["python"]}],
    ).get_json()

    resp = client.put("/api/entries", json={
        "id": created["id"],
        "title": "Final",
        "content": "v2",
        "date": "2026-02-01T08:30:00Z",
        "blog": {"id": seed["alice_blog"]},
        "tags": [{"id": seed["flask"]}],
    }, headers=auth_headers)

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["id"] == created["id"]
    assert body["title"] == "Final"
    assert body["tags"] == [{"id": seed["flask"], "name": "flask"}]
    assert resp.headers["X-blogApp-alert"] == f"An entry is updated with identifier {created['id']}"
    assert _row(app, created["id"])["content"] == "v2"
    assert es_repo.docs[created["id"]]["title"] == "Final"


def test_update_without_id_creates(client, auth_headers, seed):
    resp = client.put(
        "/api/entries",
        json={"title": "Via PUT", "blog": {"id": seed["alice_blog"]}},
        headers=auth_headers,
    )

    assert resp.status_code == 201
    assert resp.headers["Location"] == f"/api/entries/{resp.get_json()['id']}"


def test_update_with_unknown_id_inserts_under_a_store_assigned_id(client, auth_headers, seed, app, es_repo):
    resp = client.put(
        "/api/entries",
        json={"id": 777, "title": "Upserted", "blog": {"id": seed["alice_blog"]}},
        headers=auth_headers,
    )

    assert resp.status_code == 200
    new_id = resp.get_json()["id"]
    assert new_id != 777
    assert resp.headers["X-blogApp-alert"] == f"An entry is updated with identifier {new_id}"
    assert _row(app, 777) is None
    assert _row(app, new_id)["title"] == "Upserted"
    assert set(es_repo.docs) == {new_id}


def test_create_after_update_with_unknown_id_gets_a_distinct_id(client, auth_headers, seed):
    updated = client.put(
        "/api/entries",
        json={"id": 2, "title": "Ahead", "blog": {"id": seed["alice_blog"]}},
        headers=auth_headers,
    ).get_json()

    ids = {updated["id"]}
    for title in ("next", "after"):
        resp = _create(client, auth_headers, title=title, blog={"id": seed["alice_blog"]})
        assert resp.status_code == 201
        ids.add(resp.get_json()["id"])

    assert len(ids) == 3


def test_dates_with_an_offset_are_stored_in_utc(client, auth_headers, seed, app):
    created = _create(
        client, auth_headers, title="Local time", date="2026-01-01T10:00:00+02:00",
        blog={"id": seed["alice_blog"]},
    ).get_json()

    assert created["date"].startswith("2026-01-01T08:00:00")
    assert _row(app, created["id"])["date"].startswith("2026-01-01T08:00:00")


def test_dates_with_an_offset_sort_by_instant(client, auth_headers, seed):
    _create(client, auth_headers, title="earlier", date="2026-01-01T10:00:00+05:00",
            blog={"id": seed["alice_blog"]})
    _create(client, auth_headers, title="later", date="2026-01-01T07:00:00Z",
            blog={"id": seed["alice_blog"]})

    titles = [e["title"] for e in client.get("/api/entries", headers=auth_headers).get_json()]

    assert titles == ["later", "earlier"]


# --- read ---

def test_get_entry_returns_blog_and_tags(client, auth_headers, seed):
    created = _create(
        client, auth_headers, title="One", blog={"id": seed["alice_blog"]},
        tags=[{"id": seed["python"]}],
    ).get_json()

    resp = client.get(f"/api/entries/{created['id']}", headers=auth_headers)

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["blog"]["handle"] == "alice"
    assert body["tags"] == [{"id": seed["python"], "name": "python"}]


def test_get_missing_entry_is_404_with_empty_body(client, auth_headers):
    resp = client.get("/api/entries/12345", headers=auth_headers)

    assert resp.status_code == 404
    assert resp.data == b""


def test_get_entry_of_another_user_is_visible(client, auth_headers, bob_headers, seed):
    created = _create(client, bob_headers, title="Bob's", blog={"id": seed["bob_blog"]}).get_json()

    resp = client.get(f"/api/entries/{created['id']}", headers=auth_headers)

    assert resp.status_code == 200
    assert resp.get_json()["title"] == "Bob's"


def test_list_entries_only_returns_current_users_newest_first(client, auth_headers, bob_headers, seed):
    for title, date in [("old", "2026-01-01T00:00:00Z"), ("new", "2026-03-01T00:00:00Z"),
                        ("mid", "2026-02-01T00:00:00Z")]:
        _create(client, auth_headers, title=title, date=date, blog={"id": seed["alice_blog"]})
    _create(client, bob_headers, title="bob", blog={"id": seed["bob_blog"]})

    resp = client.get("/api/entries", headers=auth_headers)

    assert resp.status_code == 200
    assert [e["title"] for e in resp.get_json()] == ["new", "mid", "old"]
    assert resp.headers["X-Total-Count"] == "3"
    assert resp.headers["Link"] == (
        '</api/entries?page=0&size=20>; rel="last",'
        '</api/entries?page=0&size=20>; rel="first"'
    )


def test_list_entries_paginates_with_link_header(client, auth_headers, seed):
    for day in range(1, 6):
        _create(client, auth_headers, title=f"day {day}", date=f"2026-01-0{day}T00:00:00Z",
                blog={"id": seed["alice_blog"]})

    resp = client.get("/api/entries?page=1&size=2", headers=auth_headers)

    assert [e["title"] for e in resp.get_json()] == ["day 3", "day 2"]
    assert resp.headers["X-Total-Count"] == "5"
    assert resp.headers["Link"] == (
        '</api/entries?page=2&size=2>; rel="next",'
        '</api/entries?page=0&size=2>; rel="prev",'
        '</api/entries?page=2&size=2>; rel="last",'
        '</api/entries?page=0&size=2>; rel="first"'
    )


def test_list_entries_for_user_without_blog_is_empty(client, app, seed):
    with app.app_context():
        User(login="dave", password="dave-pass").save()

    resp = client.get("/api/entries", headers=bearer_headers(app, "dave"))

    assert resp.status_code == 200
    assert resp.get_json() == []
    assert resp.headers["X-Total-Count"] == "0"


# --- delete ---

def test_delete_entry_removes_from_store_and_index(client, auth_headers, seed, es_repo, app):
    created = _create(client, auth_headers, title="Doomed", blog={"id": seed["alice_blog"]}).get_json()

    resp = client.delete(f"/api/entries/{created['id']}", headers=auth_headers)

    assert resp.status_code == 200
    assert resp.headers["X-blogApp-alert"] == f"An entry is deleted with identifier {created['id']}"
    assert _row(app, created["id"]) is None
    assert created["id"] not in es_repo.docs
    assert client.get(f"/api/entries/{created['id']}", headers=auth_headers).status_code == 404


def test_delete_missing_entry_still_succeeds(client, auth_headers, seed, es_repo):
    resp = client.delete("/api/entries/31337", headers=auth_headers)

    assert resp.status_code == 200
    assert es_repo.deleted == [31337]


# --- search ---

def test_search_returns_matching_entries_with_query_in_links(client, auth_headers, seed, es_repo):
    _create(client, auth_headers, title="Flask tips", blog={"id": seed["alice_blog"]})
    _create(client, auth_headers, title="Gardening", blog={"id": seed["alice_blog"]})

    resp = client.get("/api/_search/entries?query=flask&size=5", headers=auth_headers)

    assert resp.status_code == 200
    assert [e["title"] for e in resp.get_json()] == ["Flask tips"]
    assert resp.headers["X-Total-Count"] == "1"
    assert "query=flask" in resp.headers["Link"]
    query, page_request = es_repo.queries[-1]
    assert query == "flask"
    assert page_request.size == 5


def test_search_encodes_query_in_links(client, auth_headers, seed):
    resp = client.get("/api/_search/entries", query_string={"query": "title:a b"}, headers=auth_headers)

    assert resp.status_code == 200
    assert "query=title%3Aa%20b" in resp.headers["Link"]


def test_search_without_query_is_400(client, auth_headers, seed):
    resp = client.get("/api/_search/entries", headers=auth_headers)

    assert resp.status_code == 400
    assert resp.get_json()["resultCode"] == "MISSING_QUERY"


# --- security ---

def test_entry_endpoints_require_a_token(client, seed):
    for method, url in [("get", "/api/entries"), ("post", "/api/entries"), ("put", "/api/entries"),
                        ("get", "/api/entries/1"), ("delete", "/api/entries/1"),
                        ("get", "/api/_search/entries?query=x")]:
        resp = getattr(client, method)(url)
        assert resp.status_code == 401, url
        assert resp.get_json()["resultCode"] == "NO_TOKEN"


def test_invalid_token_is_rejected(client, seed):
    resp = client.get("/api/entries", headers={"Authorization": "Bearer not-a-jwt"})

    assert resp.status_code == 401
    assert resp.get_json()["resultCode"] == "INVALID_TOKEN"


def test_token_of_deactivated_user_is_rejected(client, app, seed):
    resp = client.get("/api/entries", headers=bearer_headers(app, "carol"))

    assert resp.status_code == 401


# --- end to end ---

def test_create_read_update_search_delete_flow(client, auth_headers, seed, es_repo):
    created = _create(
        client, auth_headers, title="Hello world", content="first",
        date="2026-05-05T12:00:00Z", blog={"id": seed["alice_blog"]},
    ).get_json()
    entry_id = created["id"]

    assert client.get(f"/api/entries/{entry_id}", headers=auth_headers).get_json()["title"] == "Hello world"

    client.put("/api/entries", json={
        "id": entry_id, "title": "Hello again", "content": "second",
        "date": "2026-05-05T12:00:00Z", "blog": {"id": seed["alice_blog"]},
    }, headers=auth_headers)

    hits = client.get("/api/_search/entries?query=again", headers=auth_headers).get_json()
    assert [h["id"] for h in hits] == [entry_id]

    client.delete(f"/api/entries/{entry_id}", headers=auth_headers)

    assert client.get("/api/entries", headers=auth_headers).get_json() == []
    assert client.get("/api/_search/entries?query=again", headers=auth_headers).get_json() == []


def test_list_entries_accepts_secondary_sort_and_ignores_unknown_properties(client, auth_headers, seed):
    for title in ("b", "a", "c"):
        _create(client, auth_headers, title=title, date="2026-04-04T00:00:00Z", blog={"id": seed["alice_blog"]})

    resp = client.get("/api/entries?sort=bogus,desc&sort=title,asc", headers=auth_headers)

    assert resp.status_code == 200
    assert [e["title"] for e in resp.get_json()] == ["a", "b", "c"]


def test_update_performs_exactly_one_store_and_one_index_save(client, auth_headers, seed, es_repo, entry_repo):
    created = _create(client, auth_headers, title="Once", blog={"id": seed["alice_blog"]}).get_json()
    entry_repo.save_calls.clear()
    es_repo.saved.clear()

    client.put("/api/entries", json={"id": created["id"], "title": "Twice"}, headers=auth_headers)

    assert entry_repo.save_calls == [{"id": created["id"], "title": "Twice"}]
    assert [doc["id"] for doc in es_repo.saved] == [created["id"]]


def test_create_get_delete_get_scenario(client, auth_headers, seed):
    created = client.post("/api/entries", json={"title": "A"}, headers=auth_headers)
    assert created.status_code == 201
    assert created.get_json()["id"] == 1
    assert created.get_json()["blog"] is None

    fetched = client.get("/api/entries/1", headers=auth_headers)
    assert fetched.status_code == 200
    assert fetched.get_json()["title"] == "A"

    assert client.delete("/api/entries/1", headers=auth_headers).status_code == 200
    assert client.get("/api/entries/1", headers=auth_headers).status_code == 404
