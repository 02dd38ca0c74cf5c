from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

import pytest

from cookbook_auth.core.config import Settings
from cookbook_auth.core.database import build_engine
from cookbook_auth.core.errors import DuplicateIdentifier, InternalFailure
from cookbook_auth.core.security import PasswordHasher
from cookbook_auth.services.auth import OutcomeKind, SignupInput, register
from cookbook_auth.store import SQLCredentialStore


def test_insert_returns_generated_id(sql_store: SQLCredentialStore) -> None:
    first = sql_store.insert("Ada Lovelace", "ada@example.com", "hash-a")
    second = sql_store.insert("Grace Hopper", "grace@example.com", "hash-b")

    assert isinstance(first, int)
    assert second != first


def test_find_by_email_returns_stored_record(sql_store: SQLCredentialStore) -> None:
    user_id = sql_store.insert("Ada Lovelace", "ada@example.com", "hash-a")

    record = sql_store.find_by_email("ada@example.com")

    assert record is not None
    assert record.id == user_id
    assert record.full_name == "Ada Lovelace"
    assert record.password_hash == "hash-a"
    assert record.created_at is not None


def test_find_by_email_missing_returns_none(sql_store: SQLCredentialStore) -> None:
    assert sql_store.find_by_email("nobody@example.com") is None


def test_find_by_email_is_exact_match(sql_store: SQLCredentialStore) -> None:
    sql_store.insert("Ada Lovelace", "ada@example.com", "hash-a")

    assert sql_store.find_by_email("ADA@example.com") is None
    assert sql_store.find_by_email("ada@example.co") is None


def test_duplicate_email_rejected_without_mutation(sql_store: SQLCredentialStore) -> None:
    sql_store.insert("Ada Lovelace", "ada@example.com", "hash-a")

    with pytest.raises(DuplicateIdentifier):
        sql_store.insert("Someone Else", "ada@example.com", "hash-b")

    assert sql_store.count() == 1
    record = sql_store.find_by_email("ada@example.com")
    assert record is not None
    assert record.full_name == "Ada Lovelace"
    assert record.password_hash == "hash-a"


def test_same_full_name_allowed(sql_store: SQLCredentialStore) -> None:
    sql_store.insert("Sam", "sam1@example.com", "h1")
    sql_store.insert("Sam", "sam2@example.com", "h2")

    assert sql_store.count() == 2


def test_concurrent_inserts_admit_one_record(sql_store: SQLCredentialStore) -> None:
    def attempt(n: int) -> str:
        try:
            sql_store.insert(f"Racer {n}", "race@example.com", f"hash-{n}")
        except DuplicateIdentifier:
            return "duplicate"
        return "inserted"

    with ThreadPoolExecutor(max_workers=4) as pool:
        results = list(pool.map(attempt, range(4)))

    assert results.count("inserted") == 1
    assert results.count("duplicate") == 3
    assert sql_store.count() == 1


def test_create_schema_is_idempotent(sql_store: SQLCredentialStore) -> None:
    sql_store.insert("Ada Lovelace", "ada@example.com", "hash-a")
    sql_store.create_schema()

    assert sql_store.count() == 1


def test_database_faults_surface_as_internal_failure(tmp_path: Path) -> None:
    # No create_schema(): the users table does not exist.
    store = SQLCredentialStore(build_engine(Settings(database_url=f"sqlite:///{tmp_path / 'empty.db'}")))

    with pytest.raises(InternalFailure):
        store.find_by_email("ada@example.com")
    with pytest.raises(InternalFailure):
        store.insert("Ada Lovelace", "ada@example.com", "hash-a")


def test_database_fault_logs_no_password_hash(tmp_path: Path, hasher: PasswordHasher, caplog) -> None:
    store = SQLCredentialStore(build_engine(Settings(database_url=f"sqlite:///{tmp_path / 'empty.db'}")))

    with caplog.at_level(logging.INFO):
        outcome = register(SignupInput("Ada Lovelace", "ada@example.com", "pw-secret"), store, hasher)

    assert outcome.kind is OutcomeKind.INTERNAL
    assert "Signup failed" in caplog.text
    assert "$argon2" not in caplog.text
    assert "pw-secret" not in caplog.text


def test_non_unique_constraint_violation_is_not_a_duplicate(sql_store: SQLCredentialStore) -> None:
    with pytest.raises(InternalFailure):
        sql_store.insert(None, "ada@example.com", "hash-a")

    assert sql_store.count() == 0
