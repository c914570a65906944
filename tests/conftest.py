import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SECRET_KEY"] = "test-secret"
os.environ["ACCESS_TOKEN_EXPIRE_MINUTES"] = "30"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.database.index import Base, get_db
from app.main import app
from app.services.auth_service import pwd_context

# fast hashing, the tests only need round-trips
pwd_context.update(bcrypt__rounds=4)

test_engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


@pytest.fixture
def db_session():
    Base.metadata.create_all(bind=test_engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def client(db_session):
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def register_user(client):
    def register(email="janesmith@example.com", name="Jane Smith", password="secret123"):
        response = client.post("/auth/register", json={"name": name, "email": email, "password": password})
        assert response.status_code == 201, response.text
        return response.json()

    return register


@pytest.fixture
def auth_headers(register_user):
    token = register_user()["accessToken"]
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def other_auth_headers(register_user):
    token = register_user(email="john@example.com", name="John Doe")["accessToken"]
    return {"Authorization": f"Bearer {token}"}
