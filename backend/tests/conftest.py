from __future__ import annotations

import sys
import threading
from pathlib import Path
from typing import Dict, Optional

import pytest
from fastapi.testclient import TestClient

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from cookbook_auth.application import create_app
from cookbook_auth.core.config import Settings
from cookbook_auth.core.database import build_engine
from cookbook_auth.core.errors import DuplicateIdentifier
from cookbook_auth.core.security import PasswordHasher
from cookbook_auth.models import User
from cookbook_auth.store import SQLCredentialStore


class MemoryCredentialStore:
    """Dict-backed stand-in for the SQL store."""

    def __init__(self) -> None:
        self._users: Dict[str, User] = {}
        self._lock = threading.Lock()
        self._next_id = 1

    def insert(self, full_name: str, email: str, password_hash: str) -> int:
        with self._lock:
            if email in self._users:
                raise DuplicateIdentifier(email)
            user = User(id=self._next_id, full_name=full_name, email=email, password_hash=password_hash)
            self._users[email] = user
            self._next_id += 1
            return user.id

    def find_by_email(self, email: str) -> Optional[User]:
        return self._users.get(email)

    def count(self) -> int:
        return len(self._users)


@pytest.fixture()
def hasher() -> PasswordHasher:
    # Minimal argon2 cost keeps the suite fast.
    return PasswordHasher(rounds=1, memory_cost=1024, parallelism=1)


@pytest.fixture()
def memory_store() -> MemoryCredentialStore:
    return MemoryCredentialStore()


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    static_dir = tmp_path / "public"
    static_dir.mkdir()
    for name in ("home.html", "login.html", "index.html"):
        (static_dir / name).write_text(f"<html><body>{name}</body></html>", encoding="utf-8")
    return Settings(
        database_url=f"sqlite:///{tmp_path / 'users.sqlite3'}",
        static_dir=str(static_dir),
        cors_origins=["*"],
    )


@pytest.fixture()
def sql_store(settings: Settings) -> SQLCredentialStore:
    store = SQLCredentialStore(build_engine(settings))
    store.create_schema()
    return store


@pytest.fixture()
def client(settings: Settings, sql_store: SQLCredentialStore, hasher: PasswordHasher):
    app = create_app(settings=settings, store=sql_store, hasher=hasher)
    with TestClient(app) as test_client:
        yield test_client
