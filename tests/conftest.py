"""
Shared fixtures for the board tests.

These fixtures handle:
- An isolated in-memory SQLite database per test
- An attachment store rooted in a temporary directory
- Seeded members and upload factories
- A TestClient wired to both through dependency overrides
"""

import io
import os
from datetime import datetime, timedelta

# Settings are read at import time
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret-key")

import pytest
from fastapi import UploadFile
from fastapi.testclient import TestClient
from jose import jwt
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from starlette.datastructures import Headers

from libboard.config import settings
from libboard.core.security import ALGORITHM
from libboard.crud import crud_member
from libboard.database import Base
from libboard.services.attachment_store import AttachmentStore
from libboard.services.board_service import BoardService
import libboard.models  # noqa: F401  registers tables


FIXED_NOW = datetime(2024, 3, 5, 14, 30, 0)

ALLOWED = ["jpg", "jpeg", "png", "gif", "pdf", "txt", "docx", "zip"]


# ============================================================================
# Database
# ============================================================================

@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
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


# ============================================================================
# Storage
# ============================================================================

@pytest.fixture
def upload_root(tmp_path):
    return tmp_path / "uploads"


@pytest.fixture
def store(upload_root):
    return AttachmentStore(
        str(upload_root),
        max_upload_bytes=1024,
        allowed_extensions=ALLOWED,
        clock=lambda: FIXED_NOW,
    )


@pytest.fixture
def board_service(store):
    return BoardService(store)


@pytest.fixture
def make_upload():
    """Factory for starlette UploadFile objects backed by memory."""

    def _make(filename, data=b"hello world", content_type="text/plain"):
        headers = Headers({"content-type": content_type}) if content_type else Headers({})
        return UploadFile(file=io.BytesIO(data), filename=filename, headers=headers)

    return _make


def stored_files(root):
    """Every regular file under the upload root."""
    if not root.exists():
        return []
    return sorted(p for p in root.rglob("*") if p.is_file())


# ============================================================================
# Members
# ============================================================================

@pytest.fixture
def alice(db):
    member = crud_member.create_member(db, email="alice@example.com", name="Alice")
    db.commit()
    return member


@pytest.fixture
def bob(db):
    member = crud_member.create_member(db, email="bob@example.com", name="Bob")
    db.commit()
    return member


# ============================================================================
# HTTP
# ============================================================================

@pytest.fixture
def client(session_factory, store):
    from libboard.api.deps import get_attachment_store
    from libboard.database import get_db
    from libboard.main import app

    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_attachment_store] = lambda: store
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def issue_token(email, expires_delta=timedelta(hours=1)):
    """Token as the member service would issue it."""
    claims = {"sub": email, "exp": datetime.utcnow() + expires_delta}
    return jwt.encode(claims, settings.SECRET_KEY, algorithm=ALGORITHM)


def auth_header(email):
    return {"Authorization": f"Bearer {issue_token(email)}"}
