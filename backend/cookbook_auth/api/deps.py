from fastapi import Request

from cookbook_auth.core.security import PasswordHasher
from cookbook_auth.store import CredentialStore

def get_store(request: Request) -> CredentialStore:
    return request.app.state.store

def get_hasher(request: Request) -> PasswordHasher:
    return request.app.state.hasher
