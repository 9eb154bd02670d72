"""End-to-end tests for the riddle actions."""
import pytest


@pytest.fixture
def headers_a(user_a, auth_headers):
    return auth_headers(user_a)


@pytest.fixture
def logic(client, headers_a):
    response = client.post("/collections/create", json={"name": "Logic", "isDefault": True}, headers=headers_a)
    return response.json()["data"]["collection"]


def _create_riddle(client, headers, **body):
    response = client.post("/riddles/create", json=body, headers=headers)
    assert response.status_code == 200, response.text
    return response.json()["data"]["riddle"]


def test_create_and_filter_by_collection(client, headers_a, logic):
    piano = _create_riddle(
        client,
        headers_a,
        question="What has keys but no locks?",
        answer="A piano",
        collectionId=logic["id"],
    )
    _create_riddle(client, headers_a, question="Loose", answer="Riddle")

    data = client.post("/riddles/list", json={"collectionId": logic["id"]}, headers=headers_a).json()["data"]

    assert [r["id"] for r in data["items"]] == [piano["id"]]
    assert data["total"] == 1
    assert piano["isFavorite"] is False
    assert piano["isPublic"] is False


def test_invalid_difficulty_is_rejected(client, headers_a):
    response = client.post(
        "/riddles/create",
        json={"question": "Q", "answer": "A", "difficulty": "impossible"},
        headers=headers_a,
    )

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "BAD_REQUEST"


def test_missing_answer_is_rejected(client, headers_a):
    response = client.post("/riddles/create", json={"question": "Q"}, headers=headers_a)

    assert response.status_code == 400


def test_foreign_collection_is_forbidden(client, user_b, auth_headers, logic):
    response = client.post(
        "/riddles/create",
        json={"question": "Q", "answer": "A", "collectionId": logic["id"]},
        headers=auth_headers(user_b),
    )

    assert response.status_code == 403
    assert response.json()["error"] == {"code": "FORBIDDEN", "message": "Collection not found for this user."}
    listing = client.post("/riddles/list", json={}, headers=auth_headers(user_b)).json()["data"]
    assert listing["items"] == []


def test_update_hint_leaves_other_fields(client, headers_a, logic):
    riddle = _create_riddle(
        client,
        headers_a,
        question="Q",
        answer="A",
        difficulty="medium",
        category="logic",
        collectionId=logic["id"],
    )

    response = client.post("/riddles/update", json={"id": riddle["id"], "hint": "Look closer"}, headers=headers_a)

    updated = response.json()["data"]["riddle"]
    assert updated["hint"] == "Look closer"
    for field in ("question", "answer", "difficulty", "category", "collectionId", "createdAt"):
        assert updated[field] == riddle[field]
    assert updated["updatedAt"] > riddle["updatedAt"]


def test_update_with_null_collection_detaches(client, headers_a, logic):
    riddle = _create_riddle(client, headers_a, question="Q", answer="A", collectionId=logic["id"])

    response = client.post("/riddles/update", json={"id": riddle["id"], "collectionId": None}, headers=headers_a)

    assert response.json()["data"]["riddle"]["collectionId"] is None


def test_update_with_null_question_is_rejected(client, headers_a):
    riddle = _create_riddle(client, headers_a, question="Q", answer="A")

    response = client.post("/riddles/update", json={"id": riddle["id"], "question": None}, headers=headers_a)

    assert response.status_code == 400


def test_other_user_cannot_touch_riddle(client, headers_a, user_b, auth_headers):
    riddle = _create_riddle(client, headers_a, question="Q", answer="A")
    headers_b = auth_headers(user_b)

    update = client.post("/riddles/update", json={"id": riddle["id"], "answer": "B"}, headers=headers_b)
    delete = client.post("/riddles/delete", json={"id": riddle["id"]}, headers=headers_b)

    assert update.status_code == 404
    assert update.json()["error"]["code"] == "NOT_FOUND"
    assert delete.status_code == 404
    items = client.post("/riddles/list", json={}, headers=headers_a).json()["data"]["items"]
    assert items[0]["answer"] == "A"


def test_delete_riddle(client, headers_a):
    riddle = _create_riddle(client, headers_a, question="Q", answer="A")

    response = client.post("/riddles/delete", json={"id": riddle["id"]}, headers=headers_a)
    again = client.post("/riddles/delete", json={"id": riddle["id"]}, headers=headers_a)

    assert response.json() == {"success": True}
    assert again.status_code == 404


def test_list_filters_and_pagination(client, headers_a):
    for i in range(4):
        _create_riddle(
            client,
            headers_a,
            question=f"Q{i}",
            answer="A",
            difficulty="easy" if i % 2 == 0 else "hard",
            category="math",
            isFavorite=i < 3,
        )

    favorites_easy = client.post(
        "/riddles/list",
        json={"favoritesOnly": True, "difficulty": "easy", "category": "math"},
        headers=headers_a,
    ).json()["data"]
    paged = client.post("/riddles/list", json={"page": 2, "pageSize": 3}, headers=headers_a).json()["data"]

    assert sorted(r["question"] for r in favorites_easy["items"]) == ["Q0", "Q2"]
    assert favorites_easy["total"] == 2
    assert paged["total"] == 1


def test_list_accepts_snake_case_fields(client, headers_a):
    _create_riddle(client, headers_a, question="Q", answer="A", is_favorite=True)

    data = client.post("/riddles/list", json={"favorites_only": True, "page_size": 5}, headers=headers_a).json()["data"]

    assert data["total"] == 1
