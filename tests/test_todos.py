from datetime import datetime, timezone

from sqlmodel import select

from app.db.models.checklist_items import TodoChecklistItem


def utc_now():
    return datetime.now(timezone.utc)


def parse_utc(value):
    # fromisoformat ne lit le suffixe "Z" qu'à partir de Python 3.11
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


def create_todo(client, headers, **fields):
    resp = client.post("/api/todos", json=fields, headers=headers)
    assert resp.status_code == 201, resp.text
    return resp.json()


def assert_completion_invariant(todo):
    assert todo["completed"] == (todo["completedAt"] is not None)


def test_create_minimal_todo(client, alice):
    todo = create_todo(client, alice["headers"], title="Buy milk")

    assert todo["title"] == "Buy milk"
    assert todo["difficulty"] == "MEDIUM"
    assert todo["completed"] is False
    assert todo["completedAt"] is None
    assert todo["checklistItems"] == []
    assert todo["category"] is None
    assert todo["userId"] == alice["id"]


def test_create_requires_title(client, alice):
    resp = client.post("/api/todos", json={"notes": "no title"}, headers=alice["headers"])
    assert resp.status_code == 400
    assert resp.json() == {"error": "Title is required"}


def test_create_rejects_unknown_difficulty(client, alice):
    resp = client.post("/api/todos", json={"title": "X", "difficulty": "EXTREME"}, headers=alice["headers"])
    assert resp.status_code == 400


def test_create_with_checklist_seeds_keeps_input_order(client, alice):
    todo = create_todo(
        client,
        alice["headers"],
        title="Groceries",
        difficulty="HARD",
        dueDate="2030-01-15T09:00:00",
        checklistItems=[{"text": "Milk"}, {"text": "Eggs"}, {"text": "Bread"}],
    )

    assert todo["difficulty"] == "HARD"
    assert todo["dueDate"] == "2030-01-15T09:00:00Z"
    items = todo["checklistItems"]
    assert [i["text"] for i in items] == ["Milk", "Eggs", "Bread"]
    assert [i["orderIndex"] for i in items] == [0, 1, 2]
    assert all(i["completed"] is False for i in items)


def test_due_date_with_offset_is_stored_in_utc(client, alice):
    todo = create_todo(client, alice["headers"], title="Call", dueDate="2030-01-15T09:00:00+02:00")
    assert todo["dueDate"] == "2030-01-15T07:00:00Z"

    fetched = client.get(f"/api/todos/{todo['id']}", headers=alice["headers"]).json()
    assert fetched["dueDate"] == "2030-01-15T07:00:00Z"
    assert parse_utc(fetched["createdAt"]).tzinfo is not None


def test_update_due_date_converts_to_utc(client, alice):
    todo = create_todo(client, alice["headers"], title="Call")
    resp = client.put(
        f"/api/todos/{todo['id']}", json={"dueDate": "2030-06-01T20:30:00-04:00"}, headers=alice["headers"]
    )
    assert resp.json()["dueDate"] == "2030-06-02T00:30:00Z"


def test_checklist_seeds_are_stripped(client, alice):
    todo = create_todo(client, alice["headers"], title="Shop", checklistItems=[{"text": "  Eggs  "}])
    assert [i["text"] for i in todo["checklistItems"]] == ["Eggs"]


def test_blank_checklist_seed_is_rejected(client, alice, session):
    resp = client.post(
        "/api/todos",
        json={"title": "Shop", "checklistItems": [{"text": "   "}, {"text": "Eggs"}]},
        headers=alice["headers"],
    )
    assert resp.status_code == 400
    assert resp.json() == {"error": "Text is required"}
    assert session.exec(select(TodoChecklistItem)).all() == []
    assert client.get("/api/todos", headers=alice["headers"]).json() == []


def test_create_with_foreign_category_is_rejected(client, alice, bob):
    category = client.post("/api/categories", json={"name": "Bob's"}, headers=bob["headers"]).json()
    resp = client.post("/api/todos", json={"title": "X", "categoryId": category["id"]}, headers=alice["headers"])
    assert resp.status_code == 404
    assert resp.json() == {"error": "Category not found"}


def test_list_hides_completed_and_is_newest_first(client, alice, bob):
    first = create_todo(client, alice["headers"], title="First")
    second = create_todo(client, alice["headers"], title="Second")
    done = create_todo(client, alice["headers"], title="Done")
    create_todo(client, bob["headers"], title="Bob's")
    client.patch(f"/api/todos/{done['id']}/toggle", headers=alice["headers"])

    titles = [t["title"] for t in client.get("/api/todos", headers=alice["headers"]).json()]
    assert titles == ["Second", "First"]

    resp = client.get("/api/todos", params={"includeCompleted": "true"}, headers=alice["headers"])
    assert [t["id"] for t in resp.json()] == [done["id"], second["id"], first["id"]]


def test_list_filters_by_category(client, alice):
    category = client.post("/api/categories", json={"name": "Health"}, headers=alice["headers"]).json()
    create_todo(client, alice["headers"], title="Run", categoryId=category["id"])
    create_todo(client, alice["headers"], title="Taxes")

    resp = client.get("/api/todos", params={"categoryId": category["id"]}, headers=alice["headers"])
    assert [t["title"] for t in resp.json()] == ["Run"]


def test_toggle_sets_completed_at(client, alice):
    todo = create_todo(client, alice["headers"], title="Toggle me")

    resp = client.patch(f"/api/todos/{todo['id']}/toggle", headers=alice["headers"])
    assert resp.status_code == 200
    toggled = resp.json()
    assert toggled["completed"] is True
    assert toggled["completedAt"].endswith("Z")
    completed_at = parse_utc(toggled["completedAt"])
    assert abs((utc_now() - completed_at).total_seconds()) < 60
    assert "checklistItems" in toggled


def test_toggle_twice_restores_state(client, alice):
    todo = create_todo(client, alice["headers"], title="Twice")
    client.patch(f"/api/todos/{todo['id']}/toggle", headers=alice["headers"])
    back = client.patch(f"/api/todos/{todo['id']}/toggle", headers=alice["headers"]).json()

    assert back["completed"] is False
    assert back["completedAt"] is None


def test_update_is_partial(client, alice):
    todo = create_todo(client, alice["headers"], title="Write", notes="draft first", difficulty="EASY")

    resp = client.put(f"/api/todos/{todo['id']}", json={"title": "Write report"}, headers=alice["headers"])
    assert resp.status_code == 200
    updated = resp.json()
    assert updated["title"] == "Write report"
    assert updated["notes"] == "draft first"
    assert updated["difficulty"] == "EASY"


def test_update_explicit_null_clears_nullable_field(client, alice):
    todo = create_todo(client, alice["headers"], title="Write", notes="draft first")
    updated = client.put(f"/api/todos/{todo['id']}", json={"notes": None}, headers=alice["headers"]).json()
    assert updated["notes"] is None


def test_update_rejects_null_title(client, alice):
    todo = create_todo(client, alice["headers"], title="Write")
    resp = client.put(f"/api/todos/{todo['id']}", json={"title": None}, headers=alice["headers"])
    assert resp.status_code == 400


def test_update_completed_keeps_invariant(client, alice):
    todo = create_todo(client, alice["headers"], title="Finish")

    done = client.put(f"/api/todos/{todo['id']}", json={"completed": True}, headers=alice["headers"]).json()
    assert done["completed"] is True
    assert done["completedAt"] is not None
    assert_completion_invariant(done)

    # une autre mise à jour ne décale pas la date de complétion
    again = client.put(
        f"/api/todos/{todo['id']}", json={"completed": True, "notes": "x"}, headers=alice["headers"]
    ).json()
    assert again["completedAt"] == done["completedAt"]

    undone = client.put(f"/api/todos/{todo['id']}", json={"completed": False}, headers=alice["headers"]).json()
    assert undone["completedAt"] is None
    assert_completion_invariant(undone)


def test_update_with_foreign_category_is_rejected(client, alice, bob):
    category = client.post("/api/categories", json={"name": "Bob's"}, headers=bob["headers"]).json()
    todo = create_todo(client, alice["headers"], title="Mine")

    resp = client.put(f"/api/todos/{todo['id']}", json={"categoryId": category["id"]}, headers=alice["headers"])
    assert resp.status_code == 404


def test_other_users_todo_is_not_found(client, alice, bob):
    todo = create_todo(client, alice["headers"], title="Private")
    url = f"/api/todos/{todo['id']}"

    assert client.get(url, headers=bob["headers"]).status_code == 404
    assert client.put(url, json={"title": "Hacked"}, headers=bob["headers"]).status_code == 404
    assert client.patch(f"{url}/toggle", headers=bob["headers"]).status_code == 404
    assert client.delete(url, headers=bob["headers"]).status_code == 404

    untouched = client.get(url, headers=alice["headers"]).json()
    assert untouched["title"] == "Private"
    assert untouched["completed"] is False


def test_missing_todo_is_not_found(client, alice):
    resp = client.get("/api/todos/12345", headers=alice["headers"])
    assert resp.status_code == 404
    assert resp.json() == {"error": "Todo not found"}


def test_delete_cascades_to_checklist_items(client, session, alice):
    todo = create_todo(client, alice["headers"], title="Trip", checklistItems=[{"text": "Tickets"}, {"text": "Bags"}])

    resp = client.delete(f"/api/todos/{todo['id']}", headers=alice["headers"])
    assert resp.status_code == 204
    assert client.get(f"/api/todos/{todo['id']}", headers=alice["headers"]).status_code == 404

    leftovers = session.exec(select(TodoChecklistItem).where(TodoChecklistItem.todo_id == todo["id"])).all()
    assert leftovers == []


def test_snake_case_input_is_accepted(client, alice):
    category = client.post("/api/categories", json={"name": "Work"}, headers=alice["headers"]).json()
    todo = create_todo(client, alice["headers"], title="Snake", category_id=category["id"])
    assert todo["categoryId"] == category["id"]
