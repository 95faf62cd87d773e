from datetime import timedelta

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.database import Base, get_db
from app.core.dates import utc_now_naive
from app.core.security import create_access_token
from app.main import app
from app.models.file import File
from app.models.meetup import Meetup
from app.models.user import User


@pytest.fixture
def db_session():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    session = TestingSession()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def client(db_session):
    def _get_db():
        yield db_session

    app.dependency_overrides[get_db] = _get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


def _make_user(db, name: str, email: str) -> User:
    user = User(name=name, email=email, hashed_password="not-a-real-hash")
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture
def owner(db_session) -> User:
    return _make_user(db_session, "Ana", "ana@example.com")


@pytest.fixture
def stranger(db_session) -> User:
    return _make_user(db_session, "Bruno", "bruno@example.com")


def _auth_headers(user_id: int) -> dict:
    return {"Authorization": f"Bearer {create_access_token(str(user_id))}"}


@pytest.fixture
def headers_for():
    return _auth_headers


@pytest.fixture
def owner_headers(owner) -> dict:
    return _auth_headers(owner.id)


@pytest.fixture
def stranger_headers(stranger) -> dict:
    return _auth_headers(stranger.id)


@pytest.fixture
def banner(db_session) -> File:
    f = File(name="launch.png", path="abc123.png")
    db_session.add(f)
    db_session.commit()
    db_session.refresh(f)
    return f


@pytest.fixture
def make_meetup(db_session, owner, banner):
    def _make(date=None, **overrides) -> Meetup:
        fields = dict(
            user_id=owner.id,
            banner_id=banner.id,
            title="Launch",
            description="desc",
            address="Main St",
            date=date or (utc_now_naive() + timedelta(days=10)),
        )
        fields.update(overrides)
        meetup = Meetup(**fields)
        db_session.add(meetup)
        db_session.commit()
        db_session.refresh(meetup)
        return meetup

    return _make
