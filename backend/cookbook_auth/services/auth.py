"""
Registration and authentication handlers.

Both handlers take an explicit input struct plus the store and hasher
they should use, and return an :class:`AuthOutcome`.  They never raise:
the HTTP layer only has to map ``outcome.kind`` to a status code.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from cookbook_auth.core.errors import (
    DuplicateIdentifier,
    InvalidCredentials,
    ValidationError,
)
from cookbook_auth.core.security import PasswordHasher
from cookbook_auth.store import CredentialStore

logger = logging.getLogger(__name__)

MISSING_FIELDS_MESSAGE = "All fields are required"
DUPLICATE_EMAIL_MESSAGE = "Email already exists"
INVALID_CREDENTIALS_MESSAGE = "Invalid email or password"
SERVER_ERROR_MESSAGE = "Server error"
REGISTERED_MESSAGE = "registered"


class OutcomeKind(str, Enum):
    SUCCESS = "success"
    VALIDATION = "validation"
    DUPLICATE = "duplicate"
    INVALID_CREDENTIALS = "invalid_credentials"
    INTERNAL = "internal"


@dataclass(frozen=True)
class AuthOutcome:
    kind: OutcomeKind
    message: str
    full_name: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.kind is OutcomeKind.SUCCESS


@dataclass(frozen=True)
class SignupInput:
    full_name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


@dataclass(frozen=True)
class LoginInput:
    email: Optional[str] = None
    password: Optional[str] = None


def require_fields(**fields: Optional[str]) -> None:
    """Raise :class:`ValidationError` naming every missing or empty field."""
    missing = [name for name, value in fields.items() if not value]
    if missing:
        raise ValidationError(missing)


def register(data: SignupInput, store: CredentialStore, hasher: PasswordHasher) -> AuthOutcome:
    try:
        require_fields(full_name=data.full_name, email=data.email, password=data.password)
    except ValidationError as exc:
        logger.info("Signup rejected: %s", exc)
        return AuthOutcome(OutcomeKind.VALIDATION, MISSING_FIELDS_MESSAGE)

    try:
        password_hash = hasher.hash(data.password)
        user_id = store.insert(data.full_name, data.email, password_hash)
    except DuplicateIdentifier:
        logger.info("Signup rejected: %s already registered", data.email)
        return AuthOutcome(OutcomeKind.DUPLICATE, DUPLICATE_EMAIL_MESSAGE)
    except Exception:
        logger.exception("Signup failed for %s", data.email)
        return AuthOutcome(OutcomeKind.INTERNAL, SERVER_ERROR_MESSAGE)

    logger.info("Registered user %s (%s)", data.email, user_id)
    return AuthOutcome(OutcomeKind.SUCCESS, REGISTERED_MESSAGE)


def _check_credentials(data: LoginInput, store: CredentialStore, hasher: PasswordHasher):
    record = store.find_by_email(data.email)
    if record is None or not hasher.verify(data.password, record.password_hash):
        raise InvalidCredentials()
    return record


def authenticate(data: LoginInput, store: CredentialStore, hasher: PasswordHasher) -> AuthOutcome:
    try:
        require_fields(email=data.email, password=data.password)
    except ValidationError as exc:
        logger.info("Login rejected: %s", exc)
        return AuthOutcome(OutcomeKind.VALIDATION, MISSING_FIELDS_MESSAGE)

    try:
        record = _check_credentials(data, store, hasher)
    except InvalidCredentials:
        logger.info("Login failed for %s", data.email)
        return AuthOutcome(OutcomeKind.INVALID_CREDENTIALS, INVALID_CREDENTIALS_MESSAGE)
    except Exception:
        logger.exception("Login errored for %s", data.email)
        return AuthOutcome(OutcomeKind.INTERNAL, SERVER_ERROR_MESSAGE)

    logger.info("Login: %s (%s)", record.full_name, record.id)
    return AuthOutcome(OutcomeKind.SUCCESS, f"welcome, {record.full_name}", full_name=record.full_name)
