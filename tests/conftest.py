import pytest

from app import create_app
from models import db as _db


@pytest.fixture
def app():
    """Fresh app and empty in-memory database for every test."""
    app = create_app("testing")
    with app.app_context():
        _db.create_all()
        yield app
        _db.session.remove()
        _db.drop_all()


@pytest.fixture
def client(app):
    """A test client for the app."""
    return app.test_client()


@pytest.fixture
def session(app):
    return _db.session


@pytest.fixture
def register(client):
    def _register(email="alice@example.com", username="alice", password="secret1", **extra):
        payload = {"email": email, "username": username, "password": password, **extra}
        return client.post("/api/auth/register", json=payload)
    return _register


@pytest.fixture
def login(client):
    def _login(email="alice@example.com", password="secret1"):
        return client.post("/api/auth/login", json={"email": email, "password": password})
    return _login


@pytest.fixture
def auth_headers(register, login):
    """Register and log in an account, returning its Authorization header."""
    def _auth_headers(email="alice@example.com", username="alice", password="secret1"):
        register(email=email, username=username, password=password)
        token = login(email=email, password=password).get_json()["token"]
        return {"Authorization": f"Bearer {token}"}
    return _auth_headers


@pytest.fixture
def make_account(session):
    from classes.account_store import AccountStore

    def _make_account(email="owner@example.com", username="owner", password="secret1"):
        return AccountStore(session).register(email, username, password)
    return _make_account
