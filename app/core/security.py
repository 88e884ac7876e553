"""Password hashing.

Plaintext passwords never reach the database; the user service hashes them
through ``PasswordHasher`` before persisting a record.
"""

from functools import lru_cache

from passlib.context import CryptContext

DEFAULT_SCHEME = "pbkdf2_sha256"


class PasswordHasher:
    """Thin wrapper around a passlib ``CryptContext``.

    Args:
        rounds: Optional work factor override (tests use a low value)
    """

    def __init__(self, scheme: str = DEFAULT_SCHEME, rounds: int | None = None):
        options: dict[str, int] = {}
        if rounds is not None:
            options[f"{scheme}__default_rounds"] = rounds
        self._context = CryptContext(schemes=[scheme], deprecated="auto", **options)

    def hash(self, password: str) -> str:
        return self._context.hash(password)

    def verify(self, password: str, password_hash: str) -> bool:
        """Check a plaintext password against a stored digest.

        Malformed or unknown digests count as a mismatch.
        """
        try:
            return self._context.verify(password, password_hash)
        except ValueError:
            return False


@lru_cache
def get_password_hasher() -> PasswordHasher:
    """Get the process-wide hasher (a CryptContext is immutable and thread-safe)."""
    return PasswordHasher()
