"""
Client HTTP de l'API TodoSphere.

Une méthode par route: le token bearer est ajouté s'il est connu, le JSON est
décodé, et toute réponse hors 2xx lève ApiError avec le message du serveur.
"""

import logging
from typing import Any, Optional
import requests
from todosphere.core.config import settings

logger = logging.getLogger(__name__)

REQUEST_TIMEOUT = 10


class ApiError(Exception):
    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class TodoSphereClient:
    def __init__(self, base_url: str = None, token: str = None, session=None):
        self.base_url = (base_url or settings.API_BASE_URL).rstrip("/")
        self.token = token
        # requests.Session par défaut; n'importe quel objet avec .request() convient
        self.session = session or requests.Session()

    def _headers(self) -> dict:
        headers = {"Content-Type": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def _request(self, method: str, path: str, json: Any = None, params: dict = None) -> Any:
        url = f"{self.base_url}{path}"
        try:
            response = self.session.request(
                method,
                url,
                json=json,
                params=params,
                headers=self._headers(),
                timeout=REQUEST_TIMEOUT
            )
        except requests.RequestException as e:
            logger.warning(f"{method} {url} failed: {e}")
            raise ApiError("Network error") from e

        try:
            data = response.json()
        except ValueError:
            data = None

        if not 200 <= response.status_code < 300:
            message = "Something went wrong"
            if isinstance(data, dict) and isinstance(data.get("detail"), str):
                message = data["detail"]
            raise ApiError(message, response.status_code)

        return data

    # --- AUTH ---
    def _store_token(self, data: dict) -> dict:
        self.token = data["token"]
        return data

    def signup(self, name: str, email: str, password: str) -> dict:
        data = self._request("POST", "/auth/signup", json={"name": name, "email": email, "password": password})
        return self._store_token(data)

    def login(self, email: str, password: str) -> dict:
        data = self._request("POST", "/auth/login", json={"email": email, "password": password})
        return self._store_token(data)

    def get_me(self) -> dict:
        return self._request("GET", "/auth/me")

    # --- BOARDS ---
    def get_boards(self) -> list:
        return self._request("GET", "/boards")

    def get_board(self, board_id: int) -> dict:
        return self._request("GET", f"/boards/{board_id}")

    def create_board(self, title: str) -> dict:
        return self._request("POST", "/boards", json={"title": title})

    def update_board(self, board_id: int, title: str) -> dict:
        return self._request("PUT", f"/boards/{board_id}", json={"title": title})

    def delete_board(self, board_id: int) -> dict:
        return self._request("DELETE", f"/boards/{board_id}")

    def get_board_view(self, board_id: int, view: str, **params) -> dict:
        return self._request("GET", f"/boards/{board_id}/views/{view}", params=params or None)

    # --- TODOS ---
    def get_todos(self, board_id: int) -> list:
        return self._request("GET", f"/todos/{board_id}")

    def get_todo(self, todo_id: int) -> dict:
        return self._request("GET", f"/todos/item/{todo_id}")

    def create_todo(self, title: str, board_id: int, **options) -> dict:
        """options: description, priority, dueDate, recurrence"""
        return self._request("POST", "/todos", json={"title": title, "boardId": board_id, **options})

    def update_todo(self, todo_id: int, updates: dict) -> dict:
        return self._request("PUT", f"/todos/item/{todo_id}", json=updates)

    def update_todo_status(self, todo_id: int, status: str) -> dict:
        return self.update_todo(todo_id, {"status": status})

    def delete_todo(self, todo_id: int) -> dict:
        return self._request("DELETE", f"/todos/item/{todo_id}")

    # --- SUBTASKS ---
    def add_subtask(self, todo_id: int, title: str) -> dict:
        return self._request("POST", f"/todos/item/{todo_id}/subtask", json={"title": title})

    def toggle_subtask(self, todo_id: int, subtask_id: str) -> dict:
        return self._request("PUT", f"/todos/item/{todo_id}/subtask/{subtask_id}")

    def delete_subtask(self, todo_id: int, subtask_id: str) -> dict:
        return self._request("DELETE", f"/todos/item/{todo_id}/subtask/{subtask_id}")

    # --- COMMENTS ---
    def get_comments(self, todo_id: int) -> list:
        return self._request("GET", f"/comments/{todo_id}")

    def create_comment(self, todo_id: int, content: str, comment_type: str = "comment") -> dict:
        return self._request("POST", "/comments", json={"todoId": todo_id, "content": content, "type": comment_type})

    def delete_comment(self, comment_id: int) -> dict:
        return self._request("DELETE", f"/comments/item/{comment_id}")
