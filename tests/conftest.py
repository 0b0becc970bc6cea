import sys
from pathlib import Path

# Ajoute la racine du projet au PYTHONPATH EN PREMIER
sys.path.insert(0, str(Path(__file__).parent.parent))

import uuid
import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

# Engine SQLite pour tests AVANT d'importer l'app
SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///./test.db"
test_engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL,
    connect_args={"check_same_thread": False}
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)

# PATCH: remplacer engine et SessionLocal de core.database AVANT d'importer l'app
import todosphere.core.database
todosphere.core.database.engine = test_engine
todosphere.core.database.SessionLocal = TestingSessionLocal

from todosphere.core.database import Base, get_db
from todosphere.core.security import create_access_token
from todosphere.main import app
from todosphere.models.user import User


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


app.dependency_overrides[get_db] = override_get_db


@pytest.fixture(autouse=True)
def setup_teardown():
    """Crée et nettoie la DB avant/après chaque test"""
    Base.metadata.drop_all(bind=test_engine)
    Base.metadata.create_all(bind=test_engine)
    yield
    Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def client():
    """Client de test FastAPI"""
    from fastapi.testclient import TestClient
    return TestClient(app)


@pytest.fixture
def db():
    """Session DB pour les tests"""
    db = TestingSessionLocal()
    yield db
    db.close()


def create_user_and_get_token(name="Test User"):
    """Crée un user directement en BD et génère son token JWT."""
    unique_id = str(uuid.uuid4())[:8]
    db = TestingSessionLocal()
    user = User(name=name, email=f"user{unique_id}@test.com")
    user.set_password("password123")
    db.add(user)
    db.commit()
    db.refresh(user)
    token = create_access_token(user.id, user.email)
    user_id = user.id
    db.close()
    return user_id, token


@pytest.fixture
def auth_headers():
    _, token = create_user_and_get_token("Alice")
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def other_headers():
    """Un deuxième utilisateur, pour les tests de propriété"""
    _, token = create_user_and_get_token("Bob")
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def board(client, auth_headers):
    response = client.post("/boards", headers=auth_headers, json={"title": "Sprint 1"})
    return response.json()


@pytest.fixture
def todo(client, auth_headers, board):
    response = client.post(
        "/todos",
        headers=auth_headers,
        json={"title": "Write spec", "boardId": board["id"]}
    )
    return response.json()
