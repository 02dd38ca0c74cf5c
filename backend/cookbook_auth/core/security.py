from passlib.context import CryptContext

from .config import settings


class PasswordHasher:
    """Salted argon2 hashing with a tunable work factor."""

    def __init__(self, rounds: int = 3, memory_cost: int = 65536, parallelism: int = 4):
        self._context = CryptContext(
            schemes=["argon2"],
            deprecated="auto",
            argon2__rounds=rounds,
            argon2__memory_cost=memory_cost,
            argon2__parallelism=parallelism,
        )

    def hash(self, password: str) -> str:
        return self._context.hash(password)

    def verify(self, password: str, hashed: str) -> bool:
        # Unknown or malformed hashes count as a mismatch.
        try:
            return self._context.verify(password, hashed)
        except (ValueError, TypeError):
            return False


def hasher_from_settings(config=None) -> PasswordHasher:
    config = config or settings
    return PasswordHasher(
        rounds=config.hash_rounds,
        memory_cost=config.hash_memory_cost,
        parallelism=config.hash_parallelism,
    )

