import pytest
from datetime import date
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from app.config import settings
from app.database import Base, get_db
from app.main import app
from app.models.skill import Skill, Sosmed
from app.models.work_experience import WorkExperience

TEST_DB_URL = "sqlite:///./test_portfolio.db"

engine = create_engine(TEST_DB_URL, connect_args={"check_same_thread": False})
TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)

PNG_BYTES = b"\x89PNG\r\n\x1a\n"


def override_get_db():
    db = TestingSession()
    try:
        yield db
    finally:
        db.close()


app.dependency_overrides[get_db] = override_get_db


@pytest.fixture(autouse=True)
def setup_db():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(autouse=True)
def upload_root(tmp_path, monkeypatch):
    root = tmp_path / "uploads"
    root.mkdir()
    monkeypatch.setattr(settings, "UPLOAD_DIR", str(root))
    return root


@pytest.fixture
def db():
    db = TestingSession()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def admin_headers(client):
    return auth_headers(client)


@pytest.fixture
def seed_skills(db):
    skills = [
        Skill(name="Python", icon="python"),
        Skill(name="FastAPI", icon="fastapi"),
        Skill(name="React", icon="react"),
    ]
    db.add_all(skills)
    db.commit()
    for s in skills:
        db.refresh(s)
    return skills


@pytest.fixture
def seed_sosmed(db):
    rows = [
        Sosmed(name="GitHub", url="https://github.com/example"),
        Sosmed(name="LinkedIn", url="https://linkedin.com/in/example"),
    ]
    db.add_all(rows)
    db.commit()
    for r in rows:
        db.refresh(r)
    return rows


@pytest.fixture
def seed_work_experience(db, seed_skills):
    row = WorkExperience(
        position="Backend Engineer",
        employment_type="full_time",
        company="Example Corp",
        description=["Built APIs"],
        start_date=date(2023, 1, 1),
        skills=[seed_skills[0]],
    )
    db.add(row)
    db.commit()
    db.refresh(row)
    return row


def get_token(client, username: str | None = None, password: str | None = None) -> str:
    resp = client.post(
        "/api/auth/login",
        json={
            "username": username or settings.ADMIN_USERNAME,
            "password": password or settings.ADMIN_PASSWORD,
        },
    )
    assert resp.status_code == 200, resp.text
    return resp.json()["access_token"]


def auth_headers(client, username: str | None = None, password: str | None = None) -> dict:
    return {"Authorization": f"Bearer {get_token(client, username, password)}"}


def image(name: str, content: bytes = PNG_BYTES, content_type: str = "image/png"):
    return (name, content, content_type)


def stored_file(upload_root, url: str):
    return upload_root / url.replace("/uploads/", "", 1)
