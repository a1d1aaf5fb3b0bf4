"""Authentication provider protocol."""

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol
from uuid import UUID


@dataclass
class TokenPayload:
    """Decoded contents of a verified access token."""

    user_id: UUID
    expires_at: datetime


class IAuthProvider(Protocol):
    """Protocol for authentication providers."""

    def create_token(self, user_id: UUID) -> str:
        """
        Create a signed access token for a user.

        Args:
            user_id: The user the token identifies

        Returns:
            The generated token string
        """
        ...

    def verify_token(self, token: str) -> TokenPayload:
        """
        Verify an access token.

        Args:
            token: The bearer token to verify

        Returns:
            The decoded payload

        Raises:
            AuthenticationError: If the token is malformed, badly signed or expired
        """
        ...
