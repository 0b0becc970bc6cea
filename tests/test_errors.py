import pytest
from fastapi.testclient import TestClient
from todosphere.core.errors import ValidationError, NotFoundError, ForbiddenError
from todosphere.main import app
from todosphere.services import board_service
from todosphere.services.ownership import ensure_owner


class Resource:
    def __init__(self, id, user_id):
        self.id = id
        self.user_id = user_id


def test_error_status_codes():
    assert ValidationError("x").status_code == 400
    assert NotFoundError("x").status_code == 404
    assert ForbiddenError("x").status_code == 401


def test_ensure_owner_returns_resource():
    resource = Resource(1, 7)
    assert ensure_owner(resource, 7, "Board") is resource


def test_ensure_owner_missing_resource():
    with pytest.raises(NotFoundError) as exc:
        ensure_owner(None, 7, "Todo")
    assert exc.value.message == "Todo not found"


def test_ensure_owner_other_user():
    with pytest.raises(ForbiddenError):
        ensure_owner(Resource(1, 8), 7, "Board")


def test_unexpected_error_returns_generic_500(monkeypatch, auth_headers):
    def boom(db, requester):
        raise RuntimeError("database exploded")

    monkeypatch.setattr(board_service, "list_boards", boom)
    client = TestClient(app, raise_server_exceptions=False)

    response = client.get("/boards", headers=auth_headers)
    assert response.status_code == 500
    assert response.json() == {"detail": "Server error"}
    assert "exploded" not in response.text


def test_malformed_path_param_is_400(client, auth_headers):
    assert client.get("/todos/item/abc", headers=auth_headers).status_code == 400
