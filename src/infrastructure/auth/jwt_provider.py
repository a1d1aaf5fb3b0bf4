"""JWT authentication provider implementation.

Tokens are HS256-signed with the process-wide secret and carry:
    {
        "sub": "user-uuid",
        "iat": 1234567000,
        "exp": 1234567890
    }

Sessions are stateless: rotating the secret invalidates every issued token.
"""

import logging
from datetime import datetime, timedelta, timezone
from uuid import UUID

from jose import ExpiredSignatureError, JWTError, jwt

from core.config import settings
from core.exceptions import AuthenticationError, ErrorCode
from infrastructure.auth.provider import TokenPayload

logger = logging.getLogger(__name__)


class JWTAuthProvider:
    """JWT-based authentication provider."""

    def __init__(
        self,
        secret_key: str = settings.jwt_secret_key,
        algorithm: str = settings.jwt_algorithm,
        expire_minutes: int = settings.jwt_expire_minutes,
    ) -> None:
        self._secret_key = secret_key
        self._algorithm = algorithm
        self._expire_minutes = expire_minutes

    def create_token(self, user_id: UUID) -> str:
        """
        Create a signed JWT for a user.

        Args:
            user_id: The user to create a token for

        Returns:
            The generated JWT string
        """
        now = datetime.now(timezone.utc)
        payload: dict = {
            "sub": str(user_id),
            "iat": now,
            "exp": now + timedelta(minutes=self._expire_minutes),
        }

        return jwt.encode(payload, self._secret_key, algorithm=self._algorithm)

    def verify_token(self, token: str) -> TokenPayload:
        """
        Verify a JWT and extract its payload.

        Args:
            token: The JWT to verify

        Returns:
            TokenPayload with the user id and expiry

        Raises:
            AuthenticationError: TOKEN_EXPIRED when expired, INVALID_TOKEN otherwise
        """
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={"verify_aud": False},
            )
        except ExpiredSignatureError:
            raise AuthenticationError(
                message="Not authorized, token expired",
                error_code=ErrorCode.TOKEN_EXPIRED,
            ) from None
        except JWTError as e:
            logger.debug("Rejected token: %s", e)
            raise AuthenticationError(
                message="Not authorized, token failed",
                error_code=ErrorCode.INVALID_TOKEN,
            ) from None

        subject = payload.get("sub")
        exp = payload.get("exp")
        try:
            user_id = UUID(str(subject))
        except ValueError:
            user_id = None

        if not subject or user_id is None or exp is None:
            raise AuthenticationError(
                message="Not authorized, token failed",
                error_code=ErrorCode.INVALID_TOKEN,
            )

        return TokenPayload(
            user_id=user_id,
            expires_at=datetime.fromtimestamp(exp, tz=timezone.utc),
        )
