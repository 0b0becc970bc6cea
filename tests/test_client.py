import pytest
import requests
from todosphere.client import TodoSphereClient, ApiError


@pytest.fixture
def api(client):
    # le TestClient FastAPI expose la même méthode request() qu'une requests.Session
    return TodoSphereClient(base_url="http://testserver", session=client)


def test_signup_stores_token(api):
    data = api.signup("Alice", "alice@example.com", "password123")
    assert api.token == data["token"]
    assert api.get_me()["name"] == "Alice"


def test_full_board_flow(api):
    api.signup("Alice", "alice@example.com", "password123")

    board = api.create_board("Sprint 1")
    todo = api.create_todo("Write spec", board["id"], priority="high")
    assert todo["priority"] == "high"

    todo = api.add_subtask(todo["id"], "Outline")
    subtask_id = todo["subtasks"][0]["id"]
    todo = api.toggle_subtask(todo["id"], subtask_id)
    assert todo["subtasks"][0]["completed"] is True
    todo = api.delete_subtask(todo["id"], subtask_id)
    assert todo["subtasks"] == []

    assert api.update_todo_status(todo["id"], "completed")["status"] == "completed"

    api.create_comment(todo["id"], "done!")
    assert [c["content"] for c in api.get_comments(todo["id"])] == ["done!"]

    kanban = api.get_board_view(board["id"], "kanban")
    assert [t["id"] for t in kanban["data"][3]["todos"]] == [todo["id"]]

    api.delete_board(board["id"])
    assert api.get_boards() == []


def test_error_carries_server_message(api):
    api.signup("Alice", "alice@example.com", "password123")
    with pytest.raises(ApiError) as exc:
        api.get_board(9999)
    assert exc.value.status_code == 404
    assert exc.value.message == "Board not found"


def test_missing_token_raises(api):
    with pytest.raises(ApiError) as exc:
        api.get_boards()
    assert exc.value.status_code == 401
    assert exc.value.message == "Missing token"


def test_network_failure_is_generic():
    class BrokenSession:
        def request(self, *args, **kwargs):
            raise requests.ConnectionError("connection refused")

    api = TodoSphereClient(base_url="http://localhost:1", token="t", session=BrokenSession())
    with pytest.raises(ApiError) as exc:
        api.get_boards()
    assert exc.value.message == "Network error"
    assert exc.value.status_code is None


def test_bearer_header_attached():
    captured = {}

    class Response:
        status_code = 200

        def json(self):
            return []

    class RecordingSession:
        def request(self, method, url, **kwargs):
            captured.update(kwargs, method=method, url=url)
            return Response()

    api = TodoSphereClient(base_url="http://api.local/", token="abc", session=RecordingSession())
    assert api.get_todos(3) == []
    assert captured["url"] == "http://api.local/todos/3"
    assert captured["headers"]["Authorization"] == "Bearer abc"


def test_deletes_return_server_message(api):
    api.signup("Alice", "alice@example.com", "password123")
    board = api.create_board("Sprint 1")
    todo = api.create_todo("Write spec", board["id"])
    comment = api.create_comment(todo["id"], "hi")

    assert api.delete_comment(comment["id"]) == {"message": "Comment deleted successfully"}
    assert api.delete_todo(todo["id"]) == {"message": "Todo deleted successfully"}
    assert api.delete_board(board["id"]) == {"message": "Board deleted successfully"}
