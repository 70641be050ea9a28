from conftest import PASSWORD


def test_login_sets_http_only_cookie(anon, alice):
    r = anon.post("/auth/login", json={"email": "ALICE@example.com", "password": PASSWORD})
    assert r.status_code == 200
    body = r.json()
    assert body["success"] is True
    assert body["user"]["id"] == alice.id
    assert body["user"]["email"] == "alice@example.com"
    assert "passwordHash" not in body["user"]

    set_cookie = r.headers["set-cookie"]
    assert set_cookie.startswith("auth-token=")
    assert "HttpOnly" in set_cookie
    assert "Path=/" in set_cookie
    assert "Max-Age=604800" in set_cookie
    assert "samesite=lax" in set_cookie.lower()
    assert "; secure" not in set_cookie.lower()

    r = anon.get("/auth/verify")
    assert r.status_code == 200
    assert r.json() == {
        "authenticated": True,
        "user": {"id": alice.id, "email": "alice@example.com", "name": "Alice", "role": "user"},
    }


def test_login_bad_password(anon, alice):
    r = anon.post("/auth/login", json={"email": "alice@example.com", "password": "wrong-one"})
    assert r.status_code == 401
    assert r.json() == {"error": "Invalid email or password"}
    assert "set-cookie" not in r.headers


def test_login_unknown_email(anon):
    r = anon.post("/auth/login", json={"email": "nobody@example.com", "password": PASSWORD})
    assert r.status_code == 401


def test_login_validation(anon):
    r = anon.post("/auth/login", json={"password": PASSWORD})
    assert r.status_code == 400
    assert r.json() == {"error": "email is required"}

    r = anon.post("/auth/login", json={"email": "not-an-email", "password": PASSWORD})
    assert r.status_code == 400
    assert r.json() == {"error": "Invalid email format"}

    r = anon.post("/auth/login", json={"email": "a@b.co", "password": ""})
    assert r.status_code == 400


def test_verify_without_cookie(anon):
    r = anon.get("/auth/verify")
    assert r.status_code == 401
    assert r.json()["authenticated"] is False


def test_verify_with_garbage_cookie(client_for, app):
    c = client_for()
    c.cookies.set(app.state.settings.auth_cookie_name, "garbage")
    r = c.get("/auth/verify")
    assert r.status_code == 401
    assert r.json() == {"error": "Invalid token", "authenticated": False}


def test_logout_clears_cookie(anon, alice):
    anon.post("/auth/login", json={"email": "alice@example.com", "password": PASSWORD})
    r = anon.post("/auth/logout")
    assert r.status_code == 200
    assert r.json()["success"] is True
    assert anon.get("/auth/verify").status_code == 401


def test_register_requires_session(anon):
    r = anon.post("/auth/register", json={"email": "new@example.com", "password": "secret1", "name": "New"})
    assert r.status_code == 401
    assert r.json() == {"error": "Authentication required"}


def test_register_by_authenticated_user(client_for, alice):
    c = client_for(alice)
    r = c.post("/auth/register", json={"email": "New@Example.com", "password": "secret1", "name": " New "})
    assert r.status_code == 201
    body = r.json()
    assert body["user"]["email"] == "new@example.com"
    assert body["user"]["name"] == "New"
    assert body["user"]["role"] == "user"
    assert body["registeredBy"]["id"] == alice.id

    login = client_for().post("/auth/login", json={"email": "new@example.com", "password": "secret1"})
    assert login.status_code == 200


def test_register_duplicate_email(client_for, alice):
    r = client_for(alice).post(
        "/auth/register",
        json={"email": "ALICE@example.com", "password": "secret1", "name": "Dup"},
    )
    assert r.status_code == 409
    assert r.json() == {"error": "User with this email already exists"}


def test_register_validation(client_for, alice):
    c = client_for(alice)
    r = c.post("/auth/register", json={"email": "x@example.com", "password": "12345", "name": "X"})
    assert r.status_code == 400
    assert r.json() == {"error": "Password must be at least 6 characters long"}

    r = c.post("/auth/register", json={"email": "x@example", "password": "123456", "name": "X"})
    assert r.status_code == 400
    assert r.json() == {"error": "Invalid email format"}

    r = c.post("/auth/register", json={"email": "x@example.com", "password": "123456"})
    assert r.status_code == 400
    assert r.json() == {"error": "name is required"}

    r = c.post("/auth/register", json={"email": "x@example.com", "password": "123456", "name": "X", "role": "root"})
    assert r.status_code == 400


def test_register_admin_role(client_for, admin):
    r = client_for(admin).post(
        "/auth/register",
        json={"email": "ops@example.com", "password": "secret1", "name": "Ops", "role": "ADMIN"},
    )
    assert r.status_code == 201
    assert r.json()["user"]["role"] == "admin"


def test_email_length_cap(client_for, alice):
    long_email = "a" * 250 + "@example.com"
    r = client_for(alice).post("/auth/register", json={"email": long_email, "password": "123456", "name": "X"})
    assert r.status_code == 400
    assert r.json() == {"error": "Email is too long"}

    r = client_for().post("/auth/login", json={"email": long_email, "password": PASSWORD})
    assert r.status_code == 400
    assert r.json() == {"error": "Email is too long"}
