"""Auth Routes: signup and login over HTTP."""

from uuid import UUID

from sqlalchemy import func, select

from qrdesk.models.user import User


async def test_signup_returns_201_and_token(client, signup_user, token_service):
    res = await signup_user(client)
    assert res.status_code == 201
    body = res.json()
    assert body["message"] == "User registered successfully"
    claims = token_service.verify_token(body["token"])
    assert claims.email == "ada@example.com"


async def test_duplicate_signup_conflicts_and_keeps_one_user(client, signup_user, test_db):
    first = await signup_user(client)
    second = await signup_user(client, first="Impostor")
    assert first.status_code == 201
    assert second.status_code == 400
    assert second.json() == {"message": "User already exists", "error": "USER_EXISTS"}

    count = await test_db.execute(
        select(func.count()).select_from(User).where(User.email == "ada@example.com"),
    )
    assert count.scalar_one() == 1


async def test_signup_missing_field_is_validation_error(client):
    res = await client.post("/signup", json={"email": "ada@example.com", "password": "pw"})
    assert res.status_code == 400
    body = res.json()
    assert body["error"] == "VALIDATION_ERROR"
    fields = {d["field"] for d in body["details"]}
    assert "body.firstName" in fields


async def test_login_returns_token_for_same_user(client, signup_user, token_service):
    signup_res = await signup_user(client)
    signup_claims = token_service.verify_token(signup_res.json()["token"])

    res = await client.post("/login", json={"email": "ada@example.com", "password": "s3cret!"})
    assert res.status_code == 200
    assert res.json()["message"] == "Login successful!"
    login_claims = token_service.verify_token(res.json()["token"])
    assert login_claims.user_id == signup_claims.user_id
    assert isinstance(login_claims.user_id, UUID)


async def test_login_wrong_password_is_401(client, signup_user):
    await signup_user(client)
    res = await client.post("/login", json={"email": "ada@example.com", "password": "nope"})
    assert res.status_code == 401
    assert res.json()["message"] == "Invalid credentials."


async def test_login_unknown_email_is_404(client):
    res = await client.post("/login", json={"email": "ghost@example.com", "password": "x"})
    assert res.status_code == 404
    assert res.json()["message"] == "User not found."


async def test_responses_never_echo_password(client, signup_user):
    res = await signup_user(client, password="very-secret-pw")
    assert "very-secret-pw" not in res.text
