import time
from typing import Any

from authlib.common.security import generate_token
from authlib.jose import JoseError, jwt
from loguru import logger

from bookshelf.app.core.errors import InternalError
from bookshelf.app.runtime.config.config_data import ConfigData
from bookshelf.app.runtime.context import get_config

_RESERVED_CLAIMS = {"iss", "sub", "exp", "iat", "nbf", "jti"}


class JwtGeneratorService:
    """Service for issuing signed session tokens."""

    def generate_jwt(
        self,
        subject: str,
        claims: dict[str, Any] | None = None,
        expires_in_seconds: int | None = None,
        secret: str | None = None,
        include_jti: bool = True,
    ) -> str:
        """Generate a signed JWT using authlib.

        Args:
            subject: Subject (sub) claim
            claims: Additional claims to include in the token
            expires_in_seconds: Token lifetime (defaults to ``jwt.token_lifetime_seconds``)
            secret: Signing secret (defaults to ``app.session_jwt_secret``)
            include_jti: Whether to include a unique JWT ID claim

        Returns:
            Signed JWT token string

        Raises:
            InternalError: If the signing secret is missing or signing fails
        """
        config: ConfigData = get_config()
        secret = secret or config.app.session_jwt_secret
        if not secret:
            logger.error("JWT signing secret not configured")
            raise InternalError("Failed to generate authentication token")

        algorithm = config.jwt.algorithm
        if algorithm not in config.jwt.allowed_algorithms:
            logger.error("Configured algorithm {} is not allowed", algorithm)
            raise InternalError("Failed to generate authentication token")

        if expires_in_seconds is None:
            expires_in_seconds = config.jwt.token_lifetime_seconds

        now = int(time.time())
        payload: dict[str, Any] = {
            "iss": config.jwt.gen_issuer,
            "sub": subject,
            "iat": now,
            "nbf": now,
            "exp": now + expires_in_seconds,
        }
        if include_jti:
            payload["jti"] = generate_token(16)
        if claims:
            payload.update({k: v for k, v in claims.items() if k not in _RESERVED_CLAIMS})

        try:
            token = jwt.encode({"alg": algorithm, "typ": "JWT"}, payload, secret)
        except JoseError as e:
            logger.error("JWT encoding failed: {}", e)
            raise InternalError("Failed to generate authentication token") from e

        return token.decode() if isinstance(token, bytes) else token

    def generate_session_token(self, account_id: str) -> str:
        """Issue the token returned by a successful login."""
        return self.generate_jwt(subject=account_id, claims={"user": {"id": account_id}})
