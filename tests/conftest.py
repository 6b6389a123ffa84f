"""
Shared fixtures: a throwaway SQLite database per test, the FastAPI app wired
to it, and a logged-in admin.
"""
import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")

from datetime import datetime, timedelta

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from app.database import Base, get_db
from app.main import app
from app.models import Admin, Article, Country, Program, University
from app.routers.auth import get_password_hash

ADMIN_EMAIL = "admin@example.com"
ADMIN_PASSWORD = "correct horse battery staple"


@pytest.fixture
def engine(tmp_path):
    engine = create_engine(
        f"sqlite:///{tmp_path / 'test.db'}",
        connect_args={"check_same_thread": False},
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def count_rows(session_factory):
    """Count rows of a model with a fresh session"""
    def _count(model, *criteria):
        session = session_factory()
        try:
            return session.query(model).filter(*criteria).count()
        finally:
            session.close()
    return _count


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def admin(db):
    admin = Admin(
        email=ADMIN_EMAIL,
        name="Site Admin",
        hashed_password=get_password_hash(ADMIN_PASSWORD),
    )
    db.add(admin)
    db.commit()
    db.refresh(admin)
    return admin


@pytest.fixture
def auth_headers(client, admin):
    response = client.post(
        "/api/auth/login",
        data={"username": ADMIN_EMAIL, "password": ADMIN_PASSWORD},
    )
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


class Seeder:
    """Insert rows directly and hand back their ids"""

    def __init__(self, db):
        self.db = db
        self._clock = datetime(2024, 1, 1, 12, 0, 0)

    def _tick(self):
        self._clock += timedelta(minutes=1)
        return self._clock

    def _add(self, row):
        self.db.add(row)
        self.db.commit()
        return row.id

    def country(self, name_en="Germany", name_ar="ألمانيا", **kwargs):
        return self._add(Country(name_en=name_en, name_ar=name_ar, **kwargs))

    def university(self, name_en="TU Munich", name_ar="جامعة ميونخ التقنية", **kwargs):
        return self._add(University(name_en=name_en, name_ar=name_ar, **kwargs))

    def program(self, name_en="Computer Science", name_ar="علوم الحاسوب", **kwargs):
        return self._add(Program(name_en=name_en, name_ar=name_ar, **kwargs))

    def article(self, title_en="Studying in Europe", title_ar="الدراسة في أوروبا", **kwargs):
        kwargs.setdefault("created_at", self._tick())
        return self._add(Article(title_en=title_en, title_ar=title_ar, **kwargs))


@pytest.fixture
def seed(db):
    return Seeder(db)
