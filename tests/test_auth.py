import logging
from datetime import timedelta

from cinelog.core.auth import create_access_token, decode_access_token
from tests.conftest import login, register


def test_register_returns_user_id(client):
    response = register(client, "alice@example.com")

    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "User registered successfully"
    assert isinstance(body["user_id"], int)


def test_register_duplicate_email_fails_every_time(client):
    assert register(client, "alice@example.com").status_code == 201

    for _ in range(2):
        response = register(client, "alice@example.com")
        assert response.status_code == 400
        assert response.json()["message"] == "This email is already in use"


def test_register_email_is_case_insensitive(client):
    assert register(client, "Alice@Example.com").status_code == 201

    response = register(client, "  alice@example.COM ")
    assert response.status_code == 400


def test_register_validation(client):
    assert client.post("/api/auth/register", json={"email": "a@b.com"}).status_code == 400
    assert register(client, "a@b.com", password="123").status_code == 400

    response = register(client, "not-an-email")
    assert response.status_code == 400
    assert "valid email" in response.json()["message"]


def test_login_issues_token_for_user(client):
    register(client, "bob@example.com")

    response = login(client, "BOB@example.com")

    assert response.status_code == 200
    body = response.json()
    assert body["token_type"] == "bearer"
    assert body["user"]["email"] == "bob@example.com"
    assert decode_access_token(body["access_token"]) == body["user"]["user_id"]


def test_login_rejects_bad_credentials(client):
    register(client, "bob@example.com")

    wrong_password = login(client, "bob@example.com", password="nope-nope")
    unknown_email = login(client, "carol@example.com")

    assert wrong_password.status_code == 401
    assert unknown_email.status_code == 401
    assert wrong_password.json()["message"] == unknown_email.json()["message"]


def test_missing_token_is_rejected(client):
    response = client.get("/api/lists")

    assert response.status_code == 401
    assert response.json()["message"] == "Not authorized, no token provided"


def test_expired_and_malformed_tokens_have_distinct_errors(client, make_user):
    user_id, _ = make_user()
    expired = create_access_token({"sub": str(user_id)}, expires_delta=timedelta(minutes=-5))

    expired_response = client.get("/api/lists", headers={"Authorization": f"Bearer {expired}"})
    malformed_response = client.get("/api/lists", headers={"Authorization": "Bearer not.a.jwt"})

    assert expired_response.status_code == 401
    assert malformed_response.status_code == 401
    assert expired_response.json()["message"] == "Token expired"
    assert malformed_response.json()["message"] == "Invalid token"


def test_token_without_subject_is_invalid(client):
    token = create_access_token({"email": "ghost@example.com"})

    response = client.get("/api/lists", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 401
    assert response.json()["message"] == "Invalid token"


def test_token_for_deleted_user_is_rejected(client):
    token = create_access_token({"sub": "424242"})

    response = client.get("/api/lists", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 401
    assert response.json()["message"] == "User not found for this token"


def test_register_rejects_malformed_domains(client):
    for email in ["a@b..com", "a@-b.com", '"x"@b.com', "a@@b.com"]:
        response = register(client, email)
        assert response.status_code == 400, email
        assert "valid email" in response.json()["message"]


def test_register_stores_normalized_email(client):
    register(client, "  Carol@Example.COM ")

    response = login(client, "carol@example.com")

    assert response.status_code == 200
    assert response.json()["user"]["email"] == "carol@example.com"


def test_failed_login_log_masks_email(client, caplog):
    register(client, "dave@example.com")

    with caplog.at_level(logging.WARNING, logger="cinelog.services.user_service"):
        login(client, "dave@example.com", password="wrong-password")

    assert "d***@example.com" in caplog.text
    assert "dave@example.com" not in caplog.text
