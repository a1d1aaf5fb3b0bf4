"""User domain entity."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Protocol
from uuid import UUID, uuid4


class PasswordHasher(Protocol):
    """Capability for one-way password hashing."""

    def hash(self, password: str) -> str:
        ...

    def verify(self, password: str, hashed: str) -> bool:
        ...


@dataclass
class User:
    """Domain entity for a registered user.

    ``password_hash`` is only populated when the user was loaded for
    credential checks; lookups by id leave it unset.
    """

    name: str
    email: str
    id: UUID = field(default_factory=uuid4)
    password_hash: str | None = field(default=None, repr=False)
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)

    def set_password(self, password: str, hasher: PasswordHasher) -> None:
        """Hash and store a new password. The raw value is not kept."""
        self.password_hash = hasher.hash(password)
        self.updated_at = datetime.utcnow()

    def check_password(self, password: str, hasher: PasswordHasher) -> bool:
        """Return True if ``password`` matches the stored hash."""
        if not self.password_hash:
            return False
        return hasher.verify(password, self.password_hash)

    def __post_init__(self) -> None:
        """Normalise email and keep timestamps ordered."""
        self.email = self.email.strip().lower()
        if self.updated_at < self.created_at:
            self.updated_at = self.created_at
