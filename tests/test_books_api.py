import pytest

from book_store_api.app.core.config import Settings
from book_store_api.app.main import create_app
from fastapi.testclient import TestClient


DUNE = {"title": "Dune", "author": "Herbert", "publishedYear": 1965}


def test_list_books_returns_seeded_books(client):
    resp = client.get("/books")
    assert resp.status_code == 200
    assert [b["id"] for b in resp.json()] == ["1", "2", "3"]


def test_get_book(client):
    resp = client.get("/books/3")
    assert resp.status_code == 200
    assert resp.json() == {"id": "3", "title": "1984", "author": "George Orwell", "publishedYear": 1949}


def test_get_book_is_repeatable(client):
    first = client.get("/books/1").json()
    assert client.get("/books/1").json() == first


def test_get_missing_book(client):
    resp = client.get("/books/42")
    assert resp.status_code == 404
    assert resp.json() == {"message": "Book not found"}


def test_create_book_then_get(client):
    resp = client.post("/books", json={**DUNE, "isbn": "978-0441013593"})
    assert resp.status_code == 201
    created = resp.json()
    assert created == {**DUNE, "isbn": "978-0441013593", "id": "4"}

    resp = client.get(f"/books/{created['id']}")
    assert resp.status_code == 200
    assert resp.json() == created


def test_create_book_ignores_client_id(client):
    resp = client.post("/books", json={**DUNE, "id": "abc"})
    assert resp.status_code == 201
    assert resp.json()["id"] == "4"


@pytest.mark.parametrize(
    "body",
    [
        {"author": "Herbert", "publishedYear": 1965},
        {"title": "", "author": "Herbert", "publishedYear": 1965},
        {"title": "Dune", "author": "Herbert"},
        {},
    ],
)
def test_create_book_missing_fields(client, body):
    resp = client.post("/books", json=body)
    assert resp.status_code == 400
    assert resp.json() == {"message": "Title, author, and publishedYear are required"}
    assert len(client.get("/books").json()) == 3


def test_create_book_without_body(client):
    resp = client.post("/books")
    assert resp.status_code == 400
    assert resp.json() == {"message": "Title, author, and publishedYear are required"}


def test_create_book_rejects_non_object_body(client):
    resp = client.post("/books", json=[DUNE])
    assert resp.status_code == 400
    assert resp.json() == {"message": "Request body must be a JSON object"}


def test_create_book_rejects_malformed_json(client):
    resp = client.post("/books", content=b"{not json", headers={"Content-Type": "application/json"})
    assert resp.status_code == 400
    assert resp.json() == {"message": "Request body must be a JSON object"}
    assert len(client.get("/books").json()) == 3


def test_update_book_merges_fields(client):
    resp = client.put("/books/2", json={"title": "X", "id": "99"})
    assert resp.status_code == 200
    assert resp.json() == {"id": "2", "title": "X", "author": "Jane Austen", "publishedYear": 1813}
    assert client.get("/books/2").json()["title"] == "X"
    assert client.get("/books/99").status_code == 404


def test_update_missing_book(client):
    before = client.get("/books").json()
    resp = client.put("/books/42", json={"title": "X"})
    assert resp.status_code == 404
    assert resp.json() == {"message": "Book not found"}
    assert client.get("/books").json() == before


def test_delete_book(client):
    resp = client.delete("/books/1")
    assert resp.status_code == 204
    assert resp.content == b""
    assert [b["id"] for b in client.get("/books").json()] == ["2", "3"]


def test_delete_missing_book(client):
    resp = client.delete("/books/42")
    assert resp.status_code == 404
    assert resp.json() == {"message": "Book not found"}
    assert len(client.get("/books").json()) == 3


def test_versioned_prefix_serves_same_store(client):
    resp = client.post("/api/v1/books", json=DUNE)
    assert resp.status_code == 201
    assert client.get(f"/books/{resp.json()['id']}").status_code == 200


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok", "books": 3}


def test_unseeded_app_starts_empty():
    app = create_app(settings=Settings(seed_books=False))
    with TestClient(app) as tc:
        assert tc.get("/books").json() == []
        resp = tc.post("/books", json=DUNE)
        assert resp.json()["id"] == "1"


def test_apps_do_not_share_state():
    first = TestClient(create_app())
    second = TestClient(create_app())
    first.delete("/books/1")
    assert second.get("/books/1").status_code == 200


def test_end_to_end_scenario(client):
    resp = client.post("/books", json=DUNE)
    assert resp.status_code == 201
    assert resp.json()["id"] == "4"

    resp = client.get("/books/4")
    assert resp.status_code == 200
    assert resp.json() == {**DUNE, "id": "4"}

    resp = client.put("/books/4", json={"publishedYear": 1966})
    assert resp.status_code == 200
    assert resp.json()["publishedYear"] == 1966
    assert resp.json()["title"] == "Dune"

    resp = client.delete("/books/2")
    assert resp.status_code == 204

    resp = client.get("/books/2")
    assert resp.status_code == 404
    assert resp.json() == {"message": "Book not found"}


def test_create_book_rejects_overflowing_year(client):
    body = b'{"title": "Dune", "author": "Herbert", "publishedYear": 1e400}'
    resp = client.post("/books", content=body, headers={"Content-Type": "application/json"})
    assert resp.status_code == 400
    assert resp.json() == {"message": "Title, author, and publishedYear are required"}
    assert len(client.get("/books").json()) == 3
