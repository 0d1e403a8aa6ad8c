"""
Shared fixtures: an in-memory SQLite database per test, a TestClient wired
to it, and bearer tokens for users of each role.
"""
import os

os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from database import Base, configure_sqlite_transactions, json_serializer
from deps import get_db
from main import app
from Auth_module.Auth_model import User
from Auth_module import security
from Common_module.bootstrap import seed_reference_data
from Member_module.Member_model import Member
from Archive_module.Archive_model import Archive
from Audit_module.Action_log_model import ActionLog


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        json_serializer=json_serializer,
    )
    configure_sqlite_transactions(engine)
    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    factory = sessionmaker(bind=engine, autocommit=False, autoflush=False)
    with factory() as session:
        seed_reference_data(session)
    return factory


@pytest.fixture
def client(session_factory):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(session_factory):
    """Create a user with ``role`` and return (user_id, auth headers)."""
    counter = {"n": 0}

    def _make(role="secretary", username=None):
        counter["n"] += 1
        with session_factory() as session:
            user = User(
                username=username or f"{role}{counter['n']}",
                password=security.hash_password("secret123"),
                role=role,
            )
            session.add(user)
            session.commit()
            user_id = user.id
            token = security.create_access_token({"sub": str(user.id), "username": user.username, "role": role})
        return user_id, {"Authorization": f"Bearer {token}"}

    return _make


@pytest.fixture
def secretary(make_user):
    return make_user("secretary")


@pytest.fixture
def secretary_headers(secretary):
    return secretary[1]


@pytest.fixture
def add_members(session_factory):
    """Insert members directly with palo 1..n in the given order."""

    def _add(*names):
        with session_factory() as session:
            start = session.query(Member).count()
            for offset, (first_name, surname) in enumerate(names, start=1):
                session.add(Member(palo=start + offset, first_name=first_name, surname=surname, receipts={}))
            session.commit()

    return _add


@pytest.fixture
def add_archive(session_factory):
    def _add(record_type, details, palo=None):
        with session_factory() as session:
            archive = Archive(record_type=record_type, details=details, palo=palo)
            session.add(archive)
            session.commit()
            return archive.id

    return _add


@pytest.fixture
def register(session_factory):
    """Current register as [(palo, first_name, surname)] in palo order."""

    def _read():
        with session_factory() as session:
            return [
                (m.palo, m.first_name, m.surname)
                for m in session.query(Member).order_by(Member.palo).all()
            ]

    return _read


@pytest.fixture
def archives(session_factory):
    def _read():
        with session_factory() as session:
            return [
                (a.id, a.record_type, a.palo, dict(a.details))
                for a in session.query(Archive).order_by(Archive.id).all()
            ]

    return _read


@pytest.fixture
def action_logs(session_factory):
    def _read():
        with session_factory() as session:
            return [
                (log.user_id, log.action, log.details)
                for log in session.query(ActionLog).order_by(ActionLog.id).all()
            ]

    return _read
