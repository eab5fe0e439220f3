"""
Noteful API — registro de usuarios, login y refresh.
"""
import pytest
from bson import ObjectId

from app.core.config import settings
from app.infrastructure.security.passwords import verify_password
from app.infrastructure.security.token_service import verify_access_token


def _claims(token):
    return verify_access_token(token, secret=settings.jwt_secret, algorithm=settings.jwt_algorithm)


class TestRegister:

    @pytest.mark.asyncio
    async def test_creates_user(self, client, db):
        payload = {"username": "exampleuser", "password": "examplepass", "fullname": "  Example User  "}
        res = await client.post("/api/users", json=payload)

        assert res.status_code == 201
        body = res.json()
        assert set(body) == {"id", "username", "fullname"}
        assert body["username"] == "exampleuser"
        assert body["fullname"] == "Example User"
        assert res.headers["location"] == f"/api/users/{body['id']}"

        stored = await db["user"].find_one({"_id": ObjectId(body["id"])})
        assert stored["password"] != "examplepass"
        assert verify_password("examplepass", stored["password"])

    @pytest.mark.asyncio
    async def test_fullname_is_optional(self, client):
        res = await client.post("/api/users", json={"username": "nofull", "password": "examplepass"})

        assert res.status_code == 201
        assert "fullname" not in res.json()

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "payload, message, location",
        [
            ({"password": "examplepass"}, "Missing field", "username"),
            ({"username": "exampleuser"}, "Missing field", "password"),
            ({"username": 1234, "password": "examplepass"}, "Incorrect field type: expected string", "username"),
            ({"username": "exampleuser", "password": "examplepass", "fullname": 7},
             "Incorrect field type: expected string", "fullname"),
            ({"username": " exampleuser", "password": "examplepass"}, "Cannot start or end with whitespace", "username"),
            ({"username": "exampleuser", "password": "examplepass "}, "Cannot start or end with whitespace", "password"),
            ({"username": "", "password": "examplepass"}, "Must be at least 1 characters long", "username"),
            ({"username": "exampleuser", "password": "short"}, "Must be at least 8 characters long", "password"),
            ({"username": "exampleuser", "password": "x" * 73}, "Must be at most 72 characters long", "password"),
        ],
    )
    async def test_validation(self, client, payload, message, location):
        res = await client.post("/api/users", json=payload)

        assert res.status_code == 400
        assert res.json()["message"] == message
        assert res.json()["location"] == location

    @pytest.mark.asyncio
    async def test_duplicate_username(self, client):
        res = await client.post("/api/users", json={"username": "bobuser", "password": "examplepass"})

        assert res.status_code == 400
        assert res.json()["message"] == "The username already exists"


class TestLogin:

    @pytest.mark.asyncio
    async def test_returns_valid_token(self, client, user):
        res = await client.post("/api/login", json={"username": "bobuser", "password": "password"})

        assert res.status_code == 200
        claims = _claims(res.json()["authToken"])
        assert claims["sub"] == "bobuser"
        assert claims["user"] == {"id": str(user["_id"]), "username": "bobuser", "fullname": "Bob User"}
        assert "password" not in claims["user"]

    @pytest.mark.asyncio
    async def test_token_works_against_notes(self, client):
        res = await client.post("/api/login", json={"username": "janeuser", "password": "password"})
        token = res.json()["authToken"]

        res = await client.get("/api/notes", headers={"Authorization": f"Bearer {token}"})
        assert res.status_code == 200
        assert len(res.json()) == 2

    @pytest.mark.asyncio
    @pytest.mark.parametrize("username, password", [("bobuser", "wrongpassword"), ("nobody", "password")])
    async def test_invalid_credentials(self, client, username, password):
        res = await client.post("/api/login", json={"username": username, "password": password})

        assert res.status_code == 401
        assert res.json()["message"] == "Invalid credentials"

    @pytest.mark.asyncio
    async def test_rate_limited(self, client, monkeypatch):
        monkeypatch.setattr(settings, "login_rate_per_min", 2)
        codes = []
        for _ in range(3):
            res = await client.post("/api/login", json={"username": "bobuser", "password": "wrongpassword"})
            codes.append(res.status_code)

        assert codes == [401, 401, 429]

    @pytest.mark.asyncio
    async def test_without_jwt_secret_is_401(self, client, monkeypatch):
        monkeypatch.setattr(settings, "jwt_secret", None)
        res = await client.post("/api/login", json={"username": "bobuser", "password": "password"})

        assert res.status_code == 401
        assert res.json()["message"] == "Unauthorized"
        assert "authToken" not in res.json()


class TestRefresh:

    @pytest.mark.asyncio
    async def test_issues_fresh_token(self, client, auth_headers):
        res = await client.post("/api/refresh", headers=auth_headers)

        assert res.status_code == 200
        assert _claims(res.json()["authToken"])["sub"] == "bobuser"

    @pytest.mark.asyncio
    async def test_requires_auth(self, client):
        res = await client.post("/api/refresh")

        assert res.status_code == 401


class TestHealth:

    @pytest.mark.asyncio
    async def test_ping(self, client):
        res = await client.get("/api/ping")

        assert res.status_code == 200
        assert res.json() == {"message": "pong"}
        assert res.headers["x-request-id"]
