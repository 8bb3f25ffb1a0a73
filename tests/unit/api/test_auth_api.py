"""HTTP tests for /api/auth."""

REGISTER = {
    "email": "ada@example.com",
    "password": "correct-horse-1",
    "confirm_password": "correct-horse-1",
    "name": "Ada",
}


async def test_register_login_me_logout(async_client):
    resp = await async_client.post("/api/auth/register", json=REGISTER)
    assert resp.status_code == 201
    user_id = resp.json()["id"]

    resp = await async_client.post(
        "/api/auth/login", json={"email": "ada@example.com", "password": "correct-horse-1"}
    )
    assert resp.status_code == 200
    tokens = resp.json()
    headers = {"Authorization": f"Bearer {tokens['access_token']}"}

    me = await async_client.get("/api/auth/me", headers=headers)
    assert me.status_code == 200
    assert me.json()["id"] == user_id
    assert me.json()["email"] == "ada@example.com"

    resp = await async_client.post("/api/auth/logout", headers=headers)
    assert resp.status_code == 200
    assert resp.json() == {"message": "Logged out successfully"}

    resp = await async_client.post("/api/auth/refresh", json={"refresh_token": tokens["refresh_token"]})
    assert resp.status_code == 401


async def test_register_validation(async_client):
    bad = dict(REGISTER, confirm_password="something-else")
    assert (await async_client.post("/api/auth/register", json=bad)).status_code == 422

    assert (await async_client.post("/api/auth/register", json=REGISTER)).status_code == 201
    dup = await async_client.post("/api/auth/register", json=dict(REGISTER, email="ADA@example.com"))
    assert dup.status_code == 400


async def test_login_failure(async_client):
    resp = await async_client.post(
        "/api/auth/login", json={"email": "nobody@example.com", "password": "whatever"}
    )
    assert resp.status_code == 401
    assert resp.json() == {"detail": "Invalid credentials"}


async def test_refresh_issues_new_pair(async_client):
    await async_client.post("/api/auth/register", json=REGISTER)
    login = (
        await async_client.post(
            "/api/auth/login", json={"email": "ada@example.com", "password": "correct-horse-1"}
        )
    ).json()

    resp = await async_client.post("/api/auth/refresh", json={"refresh_token": login["refresh_token"]})
    assert resp.status_code == 200
    assert resp.json()["refresh_token"] != login["refresh_token"]


async def test_me_requires_token(async_client):
    assert (await async_client.get("/api/auth/me")).status_code == 401
    resp = await async_client.get("/api/auth/me", headers={"Authorization": "Bearer not-a-jwt"})
    assert resp.status_code == 401


async def test_health_and_root(async_client):
    resp = await async_client.get("/api/health/")
    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "healthy"
    assert body["checks"]["redis"]["status"] == "disabled"

    assert (await async_client.get("/api/health/database")).json()["connected"] is True
    assert (await async_client.get("/")).json() == {"message": "NoteShare API"}
