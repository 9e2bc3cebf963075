"""Session token verification service."""

from authlib.jose import JoseError, jwt
from loguru import logger

from bookshelf.app.core.errors import AuthenticationError, InternalError
from bookshelf.app.core.models.token import SessionTokenClaims
from bookshelf.app.runtime.context import get_config


class JwtVerificationService:
    def verify_session_token(
        self, token: str, *, secret: str | None = None
    ) -> SessionTokenClaims:
        """Verify signature, issuer and expiry of a token issued at login.

        Raises:
            AuthenticationError: If the token is malformed, forged or expired
        """
        cfg = get_config()
        key = secret or cfg.app.session_jwt_secret
        if not key:
            raise InternalError("JWT signing secret not configured")

        claims_options = {
            "iss": {"essential": True, "values": [cfg.jwt.gen_issuer]},
            "sub": {"essential": True},
            "exp": {"essential": True},
        }
        try:
            claims = jwt.decode(token, key, claims_options=claims_options)
            if claims.header.get("alg") not in cfg.jwt.allowed_algorithms:
                raise AuthenticationError("Invalid or expired token")
            claims.validate(leeway=cfg.jwt.clock_skew)
        except (JoseError, ValueError) as exc:
            logger.debug("Session token rejected: {}", exc)
            raise AuthenticationError("Invalid or expired token") from exc

        return SessionTokenClaims(
            raw_token=token,
            issuer=claims["iss"],
            account_id=claims["sub"],
            issued_at=claims["iat"],
            expires_at=claims["exp"],
            jti=claims.get("jti"),
        )
