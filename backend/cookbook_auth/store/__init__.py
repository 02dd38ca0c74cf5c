from .base import CredentialStore
from .sql import SQLCredentialStore

__all__ = ["CredentialStore", "SQLCredentialStore"]
