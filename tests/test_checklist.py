def create_todo(client, headers, **fields):
    resp = client.post("/api/todos", json=fields, headers=headers)
    assert resp.status_code == 201, resp.text
    return resp.json()


def add_item(client, headers, todo_id, text):
    return client.post(f"/api/todos/{todo_id}/checklist", json={"text": text}, headers=headers)


def test_first_item_starts_at_zero(client, alice):
    todo = create_todo(client, alice["headers"], title="Empty")
    resp = add_item(client, alice["headers"], todo["id"], "Step one")

    assert resp.status_code == 201
    item = resp.json()
    assert item["text"] == "Step one"
    assert item["orderIndex"] == 0
    assert item["completed"] is False
    assert item["todoId"] == todo["id"]


def test_item_appends_after_seeds(client, alice):
    todo = create_todo(client, alice["headers"], title="Seeded", checklistItems=[{"text": "a"}, {"text": "b"}])
    item = add_item(client, alice["headers"], todo["id"], "c").json()
    assert item["orderIndex"] == 2

    listed = client.get(f"/api/todos/{todo['id']}", headers=alice["headers"]).json()
    assert [i["text"] for i in listed["checklistItems"]] == ["a", "b", "c"]


def test_append_uses_max_index_after_delete(client, alice):
    todo = create_todo(client, alice["headers"], title="Gaps", checklistItems=[{"text": "a"}, {"text": "b"}])
    first = todo["checklistItems"][0]
    assert client.delete(f"/api/checklist/{first['id']}", headers=alice["headers"]).status_code == 204

    item = add_item(client, alice["headers"], todo["id"], "c").json()
    assert item["orderIndex"] == 2


def test_add_requires_text(client, alice):
    todo = create_todo(client, alice["headers"], title="T")
    resp = client.post(f"/api/todos/{todo['id']}/checklist", json={}, headers=alice["headers"])
    assert resp.status_code == 400
    assert resp.json() == {"error": "Text is required"}


def test_add_to_other_users_todo_is_not_found(client, alice, bob):
    todo = create_todo(client, alice["headers"], title="Private")
    resp = add_item(client, bob["headers"], todo["id"], "intrusion")
    assert resp.status_code == 404
    assert resp.json() == {"error": "Todo not found"}


def test_update_item(client, alice):
    todo = create_todo(client, alice["headers"], title="T", checklistItems=[{"text": "old"}])
    item = todo["checklistItems"][0]

    resp = client.put(f"/api/checklist/{item['id']}", json={"text": "new"}, headers=alice["headers"])
    assert resp.status_code == 200
    assert resp.json()["text"] == "new"
    assert resp.json()["completed"] is False

    resp = client.put(f"/api/checklist/{item['id']}", json={"completed": True}, headers=alice["headers"])
    assert resp.json()["text"] == "new"
    assert resp.json()["completed"] is True


def test_toggle_item_twice(client, alice):
    todo = create_todo(client, alice["headers"], title="T", checklistItems=[{"text": "x"}])
    item_id = todo["checklistItems"][0]["id"]

    first = client.patch(f"/api/checklist/{item_id}/toggle", headers=alice["headers"])
    assert first.status_code == 200
    assert first.json()["completed"] is True
    second = client.patch(f"/api/checklist/{item_id}/toggle", headers=alice["headers"])
    assert second.json()["completed"] is False


def test_other_users_item_is_not_found(client, alice, bob):
    todo = create_todo(client, alice["headers"], title="T", checklistItems=[{"text": "mine"}])
    item_id = todo["checklistItems"][0]["id"]

    assert client.put(f"/api/checklist/{item_id}", json={"text": "x"}, headers=bob["headers"]).status_code == 404
    assert client.patch(f"/api/checklist/{item_id}/toggle", headers=bob["headers"]).status_code == 404
    assert client.delete(f"/api/checklist/{item_id}", headers=bob["headers"]).status_code == 404

    listed = client.get(f"/api/todos/{todo['id']}", headers=alice["headers"]).json()
    assert listed["checklistItems"][0]["text"] == "mine"
    assert listed["checklistItems"][0]["completed"] is False


def test_delete_item(client, alice):
    todo = create_todo(client, alice["headers"], title="T", checklistItems=[{"text": "a"}, {"text": "b"}])
    item_id = todo["checklistItems"][0]["id"]

    assert client.delete(f"/api/checklist/{item_id}", headers=alice["headers"]).status_code == 204
    assert client.delete(f"/api/checklist/{item_id}", headers=alice["headers"]).status_code == 404

    listed = client.get(f"/api/todos/{todo['id']}", headers=alice["headers"]).json()
    assert [i["text"] for i in listed["checklistItems"]] == ["b"]
