class TestRegisterAndLogin:
    def test_register_gives_view_only_role(self, client):
        r = client.post("/api/auth/register", json={"username": " mpho ", "password": "secret123"})

        assert r.status_code == 201
        assert r.json()["data"]["username"] == "mpho"
        assert r.json()["data"]["role"] == "user"

    def test_short_password(self, client):
        r = client.post("/api/auth/register", json={"username": "mpho", "password": "abc"})

        assert r.status_code == 400
        assert "at least 6" in r.json()["message"]

    def test_duplicate_username(self, client):
        client.post("/api/auth/register", json={"username": "mpho", "password": "secret123"})

        r = client.post("/api/auth/register", json={"username": "mpho", "password": "other123"})

        assert r.status_code == 400
        assert r.json()["message"] == "Username already exists"

    def test_login_token_opens_protected_routes(self, client):
        client.post("/api/auth/register", json={"username": "mpho", "password": "secret123"})

        r = client.post("/api/auth/login", json={"username": "mpho", "password": "secret123"})

        assert r.status_code == 200
        body = r.json()
        assert body["status"] == "success"
        assert body["user"]["role"] == "user"
        headers = {"Authorization": f"Bearer {body['token']}"}
        assert client.get("/api/members", headers=headers).status_code == 200
        assert client.post("/api/members", json={"first_name": "A", "surname": "B"}, headers=headers).status_code == 403

    def test_wrong_password(self, client):
        client.post("/api/auth/register", json={"username": "mpho", "password": "secret123"})

        r = client.post("/api/auth/login", json={"username": "mpho", "password": "wrong-one"})

        assert r.status_code == 401
        assert r.json()["message"] == "Invalid username or password"

    def test_unknown_user(self, client):
        r = client.post("/api/auth/login", json={"username": "nobody", "password": "secret123"})
        assert r.status_code == 401


class TestAdmin:
    def test_users_listing(self, client, make_user):
        _, headers = make_user("admin", username="root")
        make_user("secretary", username="clerk")

        r = client.get("/api/admin/users", headers=headers)

        assert r.status_code == 200
        assert sorted(u["username"] for u in r.json()["data"]) == ["clerk", "root"]
        assert all("password" not in u for u in r.json()["data"])

    def test_action_log_with_usernames(self, client, make_user, secretary_headers, add_members):
        _, admin_headers = make_user("pastor", username="rev")
        add_members(("Thabo", "Mokoena"), ("Lerato", "Nkosi"))
        client.put("/api/members/1/archive", json={"status": "Moved"}, headers=secretary_headers)
        client.put("/api/members/1", json={"first_name": "Lerato", "surname": "Dlamini"}, headers=secretary_headers)

        r = client.get("/api/admin/action_logs", params={"limit": 1}, headers=admin_headers)

        assert r.status_code == 200
        [entry] = r.json()["data"]
        assert entry["action"] == "update_member"
        assert entry["username"].startswith("secretary")

    def test_roles_with_permissions(self, client, make_user):
        _, headers = make_user("admin")

        roles = {role["role_name"]: role for role in client.get("/api/admin/roles", headers=headers).json()["data"]}

        assert set(roles) == {"admin", "pastor", "secretary", "board_member", "user"}
        assert roles["secretary"]["permissions"] == ["add", "archive", "update", "view"]
        assert roles["board_member"]["permissions"] == ["view"]

    def test_secretary_is_not_admin(self, client, secretary_headers):
        for path in ("/api/admin/users", "/api/admin/action_logs", "/api/admin/roles"):
            r = client.get(path, headers=secretary_headers)
            assert r.status_code == 403
            assert r.json()["message"] == "Insufficient permissions"


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json()["status"] == "healthy"
    assert "schema_revision" in r.json()
