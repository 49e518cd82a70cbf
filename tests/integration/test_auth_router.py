"""Integration tests for registration, login and session handling."""

PASSWORD = "s3cret-pass"


class TestRegister:
    async def test_register(self, client, tenants):
        resp = await client.post(
            "/api/auth/register",
            json={"email": "Alice@Acme.test", "password": PASSWORD, "name": "Alice"},
            headers={"X-Tenant-ID": "acme"},
        )
        assert resp.status_code == 201
        data = resp.json()
        assert data["user"]["email"] == "alice@acme.test"
        assert data["user"]["role"] == "member"
        assert "password_hash" not in data["user"]
        assert data["token"]

    async def test_register_sets_cookie(self, client, tenants):
        resp = await client.post(
            "/api/auth/register",
            json={"email": "a@acme.test", "password": PASSWORD, "name": "A"},
            headers={"X-Tenant-ID": "acme"},
        )
        cookie = resp.headers["set-cookie"].lower()
        assert cookie.startswith("token=")
        assert "httponly" in cookie
        assert "samesite=lax" in cookie

    async def test_register_missing_fields(self, client, tenants):
        resp = await client.post(
            "/api/auth/register",
            json={"email": "a@acme.test"},
            headers={"X-Tenant-ID": "acme"},
        )
        assert resp.status_code == 400
        assert resp.json()["code"] == "VALIDATION_ERROR"

    async def test_register_duplicate(self, client, tenants, register):
        await register("acme", "dup@acme.test")
        resp = await client.post(
            "/api/auth/register",
            json={"email": "DUP@acme.test", "password": PASSWORD, "name": "Again"},
            headers={"X-Tenant-ID": "acme"},
        )
        assert resp.status_code == 400
        assert resp.json()["code"] == "USER_EXISTS"

    async def test_same_email_in_two_tenants(self, client, tenants, register):
        acme_user, _ = await register("acme", "shared@example.test")
        globex_user, _ = await register("globex", "shared@example.test")
        assert acme_user["id"] != globex_user["id"]

    async def test_register_requires_tenant(self, client, tenants):
        resp = await client.post(
            "/api/auth/register",
            json={"email": "a@acme.test", "password": PASSWORD, "name": "A"},
        )
        assert resp.status_code == 400
        assert resp.json()["code"] == "TENANT_REQUIRED"


class TestLogin:
    async def test_login(self, client, tenants, register):
        user, _ = await register("acme", "alice@acme.test", name="Alice")
        resp = await client.post(
            "/api/auth/login",
            json={"email": "alice@acme.test", "password": PASSWORD},
            headers={"X-Tenant-ID": "acme"},
        )
        assert resp.status_code == 200
        assert resp.json()["user"]["id"] == user["id"]
        assert resp.json()["token"]

    async def test_bad_password_and_unknown_user_look_the_same(
        self, client, tenants, register
    ):
        await register("acme", "alice@acme.test")
        wrong_password = await client.post(
            "/api/auth/login",
            json={"email": "alice@acme.test", "password": "nope"},
            headers={"X-Tenant-ID": "acme"},
        )
        unknown_user = await client.post(
            "/api/auth/login",
            json={"email": "nobody@acme.test", "password": PASSWORD},
            headers={"X-Tenant-ID": "acme"},
        )
        assert wrong_password.status_code == unknown_user.status_code == 401
        assert wrong_password.json() == unknown_user.json()
        assert wrong_password.json()["code"] == "INVALID_CREDENTIALS"

    async def test_login_in_other_tenant_fails(self, client, tenants, register):
        await register("acme", "alice@acme.test")
        resp = await client.post(
            "/api/auth/login",
            json={"email": "alice@acme.test", "password": PASSWORD},
            headers={"X-Tenant-ID": "globex"},
        )
        assert resp.status_code == 401
        assert resp.json()["code"] == "INVALID_CREDENTIALS"

    async def test_login_missing_fields(self, client, tenants):
        resp = await client.post(
            "/api/auth/login", json={}, headers={"X-Tenant-ID": "acme"}
        )
        assert resp.status_code == 400
        assert resp.json()["code"] == "VALIDATION_ERROR"


class TestSession:
    async def test_me_with_bearer(self, client, tenants, register, auth_headers):
        user, token = await register("acme", "alice@acme.test", name="Alice")
        resp = await client.get("/api/auth/me", headers=auth_headers("acme", token))
        assert resp.status_code == 200
        assert resp.json()["user"] == user

    async def test_me_without_token(self, client, tenants):
        resp = await client.get("/api/auth/me", headers={"X-Tenant-ID": "acme"})
        assert resp.status_code == 401
        assert resp.json()["code"] == "AUTH_REQUIRED"

    async def test_me_with_garbage_token(self, client, tenants, auth_headers):
        resp = await client.get("/api/auth/me", headers=auth_headers("acme", "garbage"))
        assert resp.status_code == 401
        assert resp.json()["code"] == "INVALID_TOKEN"

    async def test_token_from_other_tenant(self, client, tenants, register, auth_headers):
        _, token = await register("acme", "alice@acme.test")
        resp = await client.get("/api/auth/me", headers=auth_headers("globex", token))
        assert resp.status_code == 403
        assert resp.json()["code"] == "TENANT_MISMATCH"

    async def test_cookie_session_and_logout(self, client, tenants, register):
        await register("acme", "alice@acme.test")
        login = await client.post(
            "/api/auth/login",
            json={"email": "alice@acme.test", "password": PASSWORD},
            headers={"X-Tenant-ID": "acme"},
        )
        assert login.status_code == 200

        me = await client.get("/api/auth/me", headers={"X-Tenant-ID": "acme"})
        assert me.status_code == 200
        assert me.json()["user"]["email"] == "alice@acme.test"

        logout = await client.post("/api/auth/logout")
        assert logout.status_code == 200
        assert logout.json()["message"] == "Logged out successfully"

        after = await client.get("/api/auth/me", headers={"X-Tenant-ID": "acme"})
        assert after.status_code == 401

    async def test_me_without_tenant_signal(self, client, tenants, register):
        user, token = await register("acme", "pat@acme.test")
        resp = await client.get(
            "/api/auth/me", headers={"Authorization": f"Bearer {token}"}
        )
        assert resp.status_code == 200
        assert resp.json()["user"]["id"] == user["id"]

    async def test_me_without_tenant_or_token(self, client, tenants):
        resp = await client.get("/api/auth/me")
        assert resp.status_code == 401
        assert resp.json()["code"] == "AUTH_REQUIRED"
