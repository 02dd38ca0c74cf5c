"""Contract every credential store implements."""
from __future__ import annotations

from typing import Optional, Protocol

from cookbook_auth.models import User


class CredentialStore(Protocol):
    """Insert-only persistence for user records."""

    def insert(self, full_name: str, email: str, password_hash: str) -> int:
        """Create a record and return its id; raise ``DuplicateIdentifier`` on a taken email."""

    def find_by_email(self, email: str) -> Optional[User]:
        """Return the record with exactly this email, or ``None``."""
