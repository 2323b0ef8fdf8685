def _create_author(client, firstname="Ursula", lastname="Le Guin"):
    response = client.post(
        "/api/authors",
        json={"firstname": firstname, "lastname": lastname},
    )
    assert response.status_code == 201
    return response.json()


def test_get_authors_empty(client):
    response = client.get("/api/authors")
    assert response.status_code == 200
    assert response.json() == []


def test_create_author(client):
    author = _create_author(client)
    assert author["id"] >= 1
    assert author["firstname"] == "Ursula"
    assert author["books"] == []

    response = client.get(f"/api/authors/{author['id']}")
    assert response.status_code == 200
    assert response.json() == author


def test_create_author_sets_location(client):
    response = client.post("/api/authors", json={"firstname": "Octavia", "lastname": "Butler"})
    assert response.headers["location"] == f"/api/authors/{response.json()['id']}"


def test_create_author_without_body(client):
    response = client.post("/api/authors")
    assert response.status_code == 400
    assert client.get("/api/authors").json() == []


def test_create_author_incomplete(client):
    response = client.post("/api/authors", json={"firstname": "Ursula"})
    assert response.status_code == 400

    response = client.post("/api/authors", json={"firstname": "", "lastname": "Le Guin"})
    assert response.status_code == 400
    assert client.get("/api/authors").json() == []


def test_create_author_blank_names(client):
    response = client.post("/api/authors", json={"firstname": "   ", "lastname": " "})
    assert response.status_code == 400
    assert client.get("/api/authors").json() == []


def test_create_author_trims_names(client):
    author = _create_author(client, firstname="  Ursula ", lastname="Le Guin  ")
    assert author["firstname"] == "Ursula"
    assert author["lastname"] == "Le Guin"


def test_get_author_not_found(client):
    response = client.get("/api/authors/999")
    assert response.status_code == 404


def test_update_author(client):
    author = _create_author(client)

    response = client.put(
        f"/api/authors/{author['id']}",
        json={"id": author["id"], "firstname": "Ursula K.", "lastname": "Le Guin"},
    )
    assert response.status_code == 204
    assert response.content == b""

    updated = client.get(f"/api/authors/{author['id']}").json()
    assert updated["firstname"] == "Ursula K."


def test_update_author_id_mismatch(client):
    author = _create_author(client)

    response = client.put(
        f"/api/authors/{author['id']}",
        json={"id": author["id"] + 1, "firstname": "X", "lastname": "Y"},
    )
    assert response.status_code == 400
    assert client.get(f"/api/authors/{author['id']}").json()["firstname"] == "Ursula"


def test_update_author_invalid_id(client):
    response = client.put("/api/authors/0", json={"id": 0, "firstname": "X", "lastname": "Y"})
    assert response.status_code == 400


def test_update_author_without_body(client):
    author = _create_author(client)

    response = client.put(f"/api/authors/{author['id']}")
    assert response.status_code == 400

    response = client.put(
        f"/api/authors/{author['id']}",
        content="null",
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 400
    assert client.get(f"/api/authors/{author['id']}").json() == author


def test_update_author_not_found(client):
    response = client.put("/api/authors/999", json={"id": 999, "firstname": "X", "lastname": "Y"})
    assert response.status_code == 404


def test_delete_author(client):
    author = _create_author(client)

    response = client.delete(f"/api/authors/{author['id']}")
    assert response.status_code == 204

    response = client.get(f"/api/authors/{author['id']}")
    assert response.status_code == 404


def test_delete_author_invalid_id(client):
    response = client.delete("/api/authors/0")
    assert response.status_code == 400


def test_delete_author_not_found(client):
    response = client.delete("/api/authors/999")
    assert response.status_code == 404


def test_author_lists_books(client):
    author = _create_author(client)
    client.post(
        "/api/books",
        json={"title": "The Dispossessed", "isbn": "9780061054884", "author_id": author["id"]},
    )

    response = client.get(f"/api/authors/{author['id']}")
    books = response.json()["books"]
    assert [book["title"] for book in books] == ["The Dispossessed"]


def test_writes_do_not_need_a_token(client):
    response = client.post("/api/authors", json={"firstname": "A", "lastname": "B"})
    assert response.status_code == 201

    response = client.post("/api/authors", json={"firstname": "A"})
    assert response.status_code == 400
