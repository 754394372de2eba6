"""Tests for the auth router (src/noteshare/api/auth.py)."""

import uuid

import pytest


def _signup_payload(username="alice"):
    return {"username": username, "password": "Password123!", "email": f"{username}@example.com"}


@pytest.mark.asyncio
async def test_signup(async_client):
    resp = await async_client.post("/api/auth/signup", json=_signup_payload())

    assert resp.status_code == 200
    body = resp.json()
    assert body["message"] == "User created successfully!"
    assert uuid.UUID(body["userId"])
    assert "password" not in resp.text


@pytest.mark.asyncio
async def test_signup_missing_fields(async_client):
    resp = await async_client.post("/api/auth/signup", json={"username": "alice"})

    assert resp.status_code == 400
    fields = {err["field"] for err in resp.json()["errors"]}
    assert fields == {"password", "email"}


@pytest.mark.asyncio
async def test_signup_invalid_email(async_client):
    payload = _signup_payload()
    payload["email"] = "not-an-email"
    resp = await async_client.post("/api/auth/signup", json=payload)

    assert resp.status_code == 400
    assert resp.json()["errors"][0]["field"] == "email"


@pytest.mark.asyncio
async def test_signup_duplicate_username(async_client):
    await async_client.post("/api/auth/signup", json=_signup_payload())
    resp = await async_client.post("/api/auth/signup", json=_signup_payload())

    assert resp.status_code == 400
    assert resp.json() == {"message": "Username already exists."}


@pytest.mark.asyncio
async def test_login_returns_tokens_and_cookie(async_client, test_user, test_password, token_service):
    resp = await async_client.post(
        "/api/auth/login", json={"username": test_user.username, "password": test_password}
    )

    assert resp.status_code == 200
    body = resp.json()
    assert token_service.verify_access_token(body["accessToken"]) == test_user.id
    assert token_service.verify_refresh_token(body["refreshToken"]) == test_user.id

    cookie = resp.headers["set-cookie"]
    assert cookie.startswith(f"refreshToken={body['refreshToken']}")
    assert "HttpOnly" in cookie
    assert "Secure" in cookie


@pytest.mark.asyncio
@pytest.mark.parametrize("which", ["wrong_password", "unknown_user"])
async def test_login_failures_are_indistinguishable(async_client, test_user, test_password, which):
    payload = {"username": test_user.username, "password": "nope"}
    if which == "unknown_user":
        payload = {"username": "ghost", "password": test_password}

    resp = await async_client.post("/api/auth/login", json=payload)

    assert resp.status_code == 401
    assert resp.json() == {"message": "Unauthorized - Wrong username or password"}


@pytest.mark.asyncio
async def test_login_missing_fields(async_client):
    resp = await async_client.post("/api/auth/login", json={})

    assert resp.status_code == 400
    assert {err["field"] for err in resp.json()["errors"]} == {"username", "password"}


@pytest.mark.asyncio
async def test_refresh_from_body(async_client, test_user, token_service):
    refresh = token_service.issue_refresh_token(test_user.id)

    resp = await async_client.post("/api/auth/refresh-token", json={"refreshToken": refresh})

    assert resp.status_code == 200
    assert token_service.verify_access_token(resp.json()["accessToken"]) == test_user.id


@pytest.mark.asyncio
async def test_refresh_from_cookie(async_client, test_user, token_service):
    refresh = token_service.issue_refresh_token(test_user.id)

    resp = await async_client.post(
        "/api/auth/refresh-token", headers={"Cookie": f"refreshToken={refresh}"}
    )

    assert resp.status_code == 200
    assert token_service.verify_access_token(resp.json()["accessToken"]) == test_user.id


@pytest.mark.asyncio
async def test_refresh_without_token(async_client):
    resp = await async_client.post("/api/auth/refresh-token")

    assert resp.status_code == 401
    assert resp.json() == {"message": "Refresh token is required."}


@pytest.mark.asyncio
async def test_refresh_rejects_access_token(async_client, test_user, token_service):
    access = token_service.issue_access_token(test_user.id)

    resp = await async_client.post("/api/auth/refresh-token", json={"refreshToken": access})

    assert resp.status_code == 401


@pytest.mark.asyncio
async def test_refresh_for_deleted_user(async_client, token_service):
    refresh = token_service.issue_refresh_token(uuid.uuid4())

    resp = await async_client.post("/api/auth/refresh-token", json={"refreshToken": refresh})

    assert resp.status_code == 401
    assert resp.json() == {"message": "Invalid refresh token."}
