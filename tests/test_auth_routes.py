from sqlalchemy import select

from app.core.security import hash_password, verify_password
from app.models.user import User


def test_register_returns_usable_token(client, db_session):
    r = client.post(
        "/auth/register",
        json={"name": "Carla", "email": "carla@example.com", "password": "secret123"},
    )
    assert r.status_code == 200
    body = r.json()
    assert body["token_type"] == "bearer"

    me = client.get("/auth/me", headers={"Authorization": f"Bearer {body['access_token']}"})
    assert me.status_code == 200
    assert me.json()["email"] == "carla@example.com"
    assert me.json()["name"] == "Carla"

    user = db_session.execute(select(User).where(User.email == "carla@example.com")).scalar_one()
    assert user.hashed_password != "secret123"


def test_register_duplicate_email(client, owner):
    r = client.post(
        "/auth/register",
        json={"name": "Otra", "email": owner.email, "password": "secret123"},
    )
    assert r.status_code == 400
    assert r.json() == {"error": "Email already registered"}


def test_register_rejects_password_over_72_bytes(client):
    r = client.post(
        "/auth/register",
        json={"name": "Long", "email": "long@example.com", "password": "x" * 73},
    )
    assert r.status_code == 400
    assert r.json() == {"error": "Validations fails"}


def test_login(client, db_session):
    db_session.add(User(name="Dani", email="dani@example.com", hashed_password=hash_password("pw123456")))
    db_session.commit()

    ok = client.post("/auth/login", json={"email": "dani@example.com", "password": "pw123456"})
    assert ok.status_code == 200
    assert ok.json()["access_token"]

    bad = client.post("/auth/login", json={"email": "dani@example.com", "password": "wrong"})
    assert bad.status_code == 401
    assert bad.json() == {"error": "Invalid credentials"}


def test_verify_password_rejects_long_input():
    hashed = hash_password("short-pw")
    assert verify_password("short-pw", hashed)
    assert not verify_password("y" * 100, hashed)
