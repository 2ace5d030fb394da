from datetime import datetime, timedelta, timezone

import jwt
import pytest
from bson import ObjectId

from tripmate.services import auth

SIGNUP = {
    "username": "meera",
    "password": "s3cret-pass",
    "email": "meera@example.com",
    "state": "Kerala",
    "phone": "9876543210",
    "dob": "1995-04-12",
}


def register(client, **overrides):
    return client.post("/api/auth/signup", json={**SIGNUP, **overrides})


def login(client, username="meera", password="s3cret-pass"):
    return client.post("/api/auth/login", json={"username": username, "password": password})


def test_hash_and_verify_password():
    hashed = auth.hash_password("hunter22")
    assert hashed != "hunter22"
    assert auth.verify_password("hunter22", hashed)
    assert not auth.verify_password("hunter23", hashed)


def test_verify_password_rejects_non_bcrypt_value():
    assert not auth.verify_password("hunter22", "plain-text")


def test_token_round_trip():
    token = auth.create_access_token("abc123")
    assert auth.decode_access_token(token) == {"id": "abc123"}


def test_expired_token_is_rejected():
    past = datetime.now(timezone.utc) - timedelta(hours=1)
    token = jwt.encode({"user": {"id": "abc123"}, "exp": past}, "test-secret", algorithm="HS256")
    with pytest.raises(auth.InvalidTokenError):
        auth.decode_access_token(token)


def test_signup_stores_hashed_password(client, users):
    response = register(client)

    assert response.status_code == 201
    assert response.json() == {"message": "User registered successfully! Please log in."}
    stored = users.documents[0]
    assert stored["username"] == "meera"
    assert stored["password"] != SIGNUP["password"]
    assert auth.verify_password(SIGNUP["password"], stored["password"])
    assert stored["dob"] == datetime(1995, 4, 12)


def test_signup_without_phone_omits_field(client, users):
    assert register(client, phone="").status_code == 201
    assert "phone" not in users.documents[0]


@pytest.mark.parametrize("missing", ["username", "password", "email", "state", "dob"])
def test_signup_requires_fields(client, users, missing):
    response = register(client, **{missing: ""})
    assert response.status_code == 400
    assert response.json()["detail"] == "Please fill in all required fields."
    assert users.documents == []


def test_signup_rejects_invalid_dob(client, users):
    assert register(client, dob="not-a-date").status_code == 400


def test_signup_rejects_duplicate_username_or_email(client, users):
    assert register(client).status_code == 201

    same_email = register(client, username="someone-else")
    assert same_email.status_code == 400
    assert same_email.json()["detail"] == "Username or email already exists"
    assert register(client, email="other@example.com").status_code == 400
    assert len(users.documents) == 1


def test_login_returns_token_for_user(client, users):
    register(client)

    response = login(client)

    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Login successful!"
    user_id = str(users.documents[0]["_id"])
    assert auth.decode_access_token(body["token"]) == {"id": user_id}


@pytest.mark.parametrize("username,password", [
    ("meera", "wrong-password"),
    ("nobody", "s3cret-pass"),
])
def test_login_invalid_credentials(client, users, username, password):
    register(client)
    response = login(client, username, password)
    assert response.status_code == 400
    assert response.json()["detail"] == "Invalid credentials"


def test_login_requires_username_and_password(client, users):
    response = client.post("/api/auth/login", json={"username": "meera"})
    assert response.status_code == 400


def test_profile_returns_user_without_password(client, users):
    register(client)
    token = login(client).json()["token"]

    response = client.get("/api/auth/profile", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 200
    profile = response.json()
    assert profile["username"] == "meera"
    assert profile["email"] == "meera@example.com"
    assert profile["dob"].startswith("1995-04-12")
    assert profile["id"] == str(users.documents[0]["_id"])
    assert "password" not in profile


def test_profile_requires_token(client, users):
    response = client.get("/api/auth/profile")
    assert response.status_code == 401
    assert response.json()["detail"] == "No token, authorization denied"


def test_profile_rejects_bad_token(client, users):
    response = client.get("/api/auth/profile", headers={"Authorization": "Bearer not-a-jwt"})
    assert response.status_code == 401
    assert response.json()["detail"] == "Token is not valid"


def test_profile_for_deleted_user(client, users):
    token = auth.create_access_token(str(ObjectId()))
    response = client.get("/api/auth/profile", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 404
