from todosphere.models.comment import Comment


def comment(client, headers, todo_id, content, **extra):
    return client.post("/comments", headers=headers, json={"todoId": todo_id, "content": content, **extra})


def test_create_comment(client, auth_headers, todo):
    response = comment(client, auth_headers, todo["id"], "Looks good")
    assert response.status_code == 201
    data = response.json()
    assert data["content"] == "Looks good"
    assert data["todoId"] == todo["id"]
    assert data["userId"] == todo["userId"]
    assert data["userName"] == "Alice"
    assert data["type"] == "comment"


def test_create_activity_comment(client, auth_headers, todo):
    response = comment(client, auth_headers, todo["id"], "Status changed", type="activity")
    assert response.json()["type"] == "activity"


def test_create_comment_missing_content(client, auth_headers, todo):
    response = client.post("/comments", headers=auth_headers, json={"todoId": todo["id"]})
    assert response.status_code == 400
    assert response.json()["detail"] == "Please provide content and todoId"


def test_create_comment_missing_todo_id(client, auth_headers):
    response = client.post("/comments", headers=auth_headers, json={"content": "hello"})
    assert response.status_code == 400


def test_create_comment_invalid_type(client, auth_headers, todo):
    assert comment(client, auth_headers, todo["id"], "x", type="note").status_code == 400


def test_create_comment_on_foreign_todo(client, todo, other_headers):
    assert comment(client, other_headers, todo["id"], "hi").status_code == 401


def test_create_comment_unknown_todo(client, auth_headers):
    assert comment(client, auth_headers, 9999, "hi").status_code == 404


def test_list_comments_newest_first(client, auth_headers, todo):
    comment(client, auth_headers, todo["id"], "first")
    comment(client, auth_headers, todo["id"], "second")

    response = client.get(f"/comments/{todo['id']}", headers=auth_headers)
    assert response.status_code == 200
    data = response.json()
    assert [c["content"] for c in data] == ["second", "first"]
    assert all(c["userName"] == "Alice" for c in data)


def test_list_comments_not_found_vs_not_owned(client, todo, auth_headers, other_headers):
    assert client.get("/comments/9999", headers=auth_headers).status_code == 404
    assert client.get(f"/comments/{todo['id']}", headers=other_headers).status_code == 401


def test_delete_comment(client, auth_headers, todo):
    comment_id = comment(client, auth_headers, todo["id"], "temp").json()["id"]

    response = client.delete(f"/comments/item/{comment_id}", headers=auth_headers)
    assert response.status_code == 200
    assert response.json() == {"message": "Comment deleted successfully"}
    assert client.get(f"/comments/{todo['id']}", headers=auth_headers).json() == []


def test_delete_comment_not_found(client, auth_headers):
    response = client.delete("/comments/item/9999", headers=auth_headers)
    assert response.status_code == 404
    assert response.json()["detail"] == "Comment not found"


def test_delete_comment_checked_against_todo_owner(client, todo, auth_headers, other_headers):
    comment_id = comment(client, auth_headers, todo["id"], "mine").json()["id"]
    assert client.delete(f"/comments/item/{comment_id}", headers=other_headers).status_code == 401


def test_delete_todo_removes_its_comments(client, auth_headers, todo, db):
    comment(client, auth_headers, todo["id"], "one")
    comment(client, auth_headers, todo["id"], "two")

    client.delete(f"/todos/item/{todo['id']}", headers=auth_headers)
    assert db.query(Comment).filter(Comment.todo_id == todo["id"]).count() == 0
