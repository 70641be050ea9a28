from conftest import new_charge, new_vehicle


def test_admin_only(client_for, alice):
    c = client_for(alice)
    assert c.get("/users").status_code == 403
    assert c.patch(f"/users/{alice.id}", json={"role": "admin"}).status_code == 403
    assert c.delete(f"/users/{alice.id}").status_code == 403
    assert client_for().get("/users").status_code == 401


def test_list_users(client_for, admin, alice):
    rows = client_for(admin).get("/users").json()
    assert {r["email"] for r in rows} == {"admin@example.com", "alice@example.com"}
    assert all("passwordHash" not in r for r in rows)


def test_update_user(client_for, admin, alice):
    adm = client_for(admin)
    r = adm.patch(f"/users/{alice.id}", json={"name": "Alice B", "email": "ALICE.B@example.com", "role": "admin"})
    assert r.status_code == 200
    body = r.json()
    assert (body["name"], body["email"], body["role"]) == ("Alice B", "alice.b@example.com", "admin")


def test_update_password(client_for, admin, alice):
    r = client_for(admin).patch(f"/users/{alice.id}", json={"password": "brand-new"})
    assert r.status_code == 200
    login = client_for().post("/auth/login", json={"email": "alice@example.com", "password": "brand-new"})
    assert login.status_code == 200


def test_update_conflict_and_missing(client_for, admin, alice, bob):
    adm = client_for(admin)
    assert adm.patch(f"/users/{alice.id}", json={"email": "bob@example.com"}).status_code == 409
    assert adm.patch("/users/9999", json={"name": "x"}).status_code == 404
    assert adm.patch(f"/users/{alice.id}", json={"password": "123"}).status_code == 400


def test_delete_user_cascades(client_for, admin, alice):
    a = client_for(alice)
    vid = new_vehicle(a)["id"]
    new_charge(a, vid)

    adm = client_for(admin)
    r = adm.delete(f"/users/{alice.id}")
    assert r.status_code == 200
    assert r.json()["success"] is True
    assert adm.get(f"/vehicles/{vid}").status_code == 404
    assert adm.delete(f"/users/{alice.id}").status_code == 404


def test_cannot_delete_self(client_for, admin):
    r = client_for(admin).delete(f"/users/{admin.id}")
    assert r.status_code == 409


def test_update_email_too_long(client_for, admin, alice):
    r = client_for(admin).patch(f"/users/{alice.id}", json={"email": "a" * 250 + "@example.com"})
    assert r.status_code == 400
    assert r.json() == {"error": "Email is too long"}


def test_out_of_range_user_id(client_for, admin):
    r = client_for(admin).delete("/users/99999999999999999999")
    assert r.status_code == 400
    assert r.json() == {"error": "Invalid user ID"}
