def test_register_returns_public_fields(register):
    response = register(role="instructor")
    assert response.status_code == 201
    user = response.get_json()["user"]
    assert user["email"] == "alice@example.com"
    assert user["username"] == "alice"
    assert user["role"] == "instructor"
    assert "password_hash" not in user and "password" not in user


def test_register_missing_fields(client):
    response = client.post("/api/auth/register", json={"email": "a@example.com"})
    assert response.status_code == 400
    assert response.get_json()["error"] == "Email, username, and password are required"


def test_register_invalid_email_and_short_password(register):
    assert register(email="not-an-email").status_code == 400
    assert register(password="123").status_code == 400


def test_register_same_email_twice_conflicts(register):
    assert register().status_code == 201
    response = register(email="ALICE@example.com", username="alice2")
    assert response.status_code == 409
    assert "error" in response.get_json()


def test_login_sets_cookie_and_returns_token(register, login):
    register()
    response = login()
    assert response.status_code == 200
    body = response.get_json()
    assert body["token"]
    assert body["user"]["username"] == "alice"

    cookie = response.headers["Set-Cookie"]
    assert cookie.startswith("token=")
    assert "HttpOnly" in cookie
    assert "Max-Age=604800" in cookie


def test_login_wrong_password(register, login):
    register()
    response = login(password="wrong-one")
    assert response.status_code == 401
    assert response.get_json()["error"] == "Invalid email or password"


def test_login_unknown_account(login):
    assert login(email="ghost@example.com").status_code == 401


def test_logout_clears_cookie(client):
    response = client.post("/api/auth/logout")
    assert response.status_code == 200
    assert "token=;" in response.headers["Set-Cookie"]


def test_me_with_header_and_cookie(client, register, login):
    register()
    token = login().get_json()["token"]

    response = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 200
    assert response.get_json()["user"]["email"] == "alice@example.com"

    client.set_cookie("token", token)
    assert client.get("/api/auth/me").status_code == 200


def test_protected_route_without_credential(client):
    response = client.get("/api/quizzes")
    assert response.status_code == 401
    assert response.get_json() == {"error": "no credential"}


def test_protected_route_with_invalid_credential(client):
    response = client.get("/api/quizzes", headers={"Authorization": "Bearer not.a.token"})
    assert response.status_code == 401
    assert response.get_json() == {"error": "invalid credential"}


def test_login_with_non_string_password_is_401(register, client):
    register(password="123456")
    response = client.post("/api/auth/login", json={"email": "alice@example.com", "password": 123456})
    assert response.status_code == 401
    assert response.get_json()["error"] == "Invalid email or password"
