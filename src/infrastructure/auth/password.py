"""Password hashing with bcrypt."""

import bcrypt

from core.config import settings

# bcrypt only looks at the first 72 bytes of input.
_BCRYPT_MAX_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:_BCRYPT_MAX_BYTES]


class BcryptPasswordHasher:
    """Salted bcrypt hashes; verification uses bcrypt's constant-time compare."""

    def __init__(self, rounds: int = settings.bcrypt_rounds) -> None:
        self._rounds = rounds

    def hash(self, password: str) -> str:
        """Hash a raw password with a fresh salt."""
        salt = bcrypt.gensalt(rounds=self._rounds)
        return bcrypt.hashpw(_encode(password), salt).decode("utf-8")

    def verify(self, password: str, hashed: str) -> bool:
        """Return True if ``password`` matches ``hashed``."""
        try:
            return bcrypt.checkpw(_encode(password), hashed.encode("utf-8"))
        except ValueError:
            # Stored value is not a bcrypt hash.
            return False
