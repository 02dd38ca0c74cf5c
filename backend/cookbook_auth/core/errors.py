"""Failure taxonomy shared by the store and the auth handlers."""
from __future__ import annotations


class AuthError(Exception):
    """Base class for every failure the auth flow knows how to name."""


class ValidationError(AuthError):
    """Caller-supplied input is missing or empty."""

    def __init__(self, missing: list[str]):
        self.missing = missing
        super().__init__(f"Missing required fields: {', '.join(missing)}")


class DuplicateIdentifier(AuthError):
    """The email is already registered."""

    def __init__(self, email: str):
        self.email = email
        super().__init__(f"Email already registered: {email}")


class InvalidCredentials(AuthError):
    """Unknown email or wrong password. The two causes are never told apart."""


class InternalFailure(AuthError):
    """Unexpected store or hasher fault."""


__all__ = [
    "AuthError",
    "ValidationError",
    "DuplicateIdentifier",
    "InvalidCredentials",
    "InternalFailure",
]
