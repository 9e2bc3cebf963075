"""Typed view of ``config.yaml``.

Every section has defaults, so ``ConfigData()`` is a usable development
configuration on its own.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

Environment = Literal["development", "production", "test"]


class CORSConfig(BaseModel):
    origins: list[str] = Field(default_factory=lambda: ["*"])
    allow_credentials: bool = False
    allow_methods: list[str] = Field(
        default_factory=lambda: ["GET", "POST", "PUT", "DELETE", "OPTIONS"]
    )
    allow_headers: list[str] = Field(default_factory=lambda: ["*"])


class JWTConfig(BaseModel):
    """Session token signing and validation."""

    algorithm: str = "HS256"
    allowed_algorithms: list[str] = Field(default_factory=lambda: ["HS256"])
    gen_issuer: str = Field(
        default="bookshelf-api", description="iss claim written into issued tokens"
    )
    token_lifetime_seconds: int = Field(default=3600, gt=0)
    clock_skew: int = Field(default=0, ge=0, description="Leeway in seconds")


class LoggingConfig(BaseModel):
    level: str = "INFO"
    format: Literal["json", "plain"] = "plain"
    file: str | None = Field(
        default=None, description="Optional rotating log file; console only when unset"
    )
    max_size_mb: int = 10
    backup_count: int = 5


class DatabaseConfig(BaseModel):
    """SQLAlchemy connection settings.

    Pool settings only apply to server databases; SQLite uses the default
    pool of its dialect.
    """

    url: str = "sqlite:///./bookshelf.db"
    pool_size: int = 20
    max_overflow: int = 10
    pool_timeout: int = 30
    pool_recycle: int = Field(default=1800, description="Seconds before a connection is recycled")

    @property
    def is_sqlite(self) -> bool:
        return self.url.startswith("sqlite")

    @property
    def connection_string(self) -> str:
        return self.url


class AppConfig(BaseModel):
    name: str = "Bookshelf API"
    version: str = "1.0.0"
    environment: Environment = "development"
    host: str = "0.0.0.0"
    port: int = 5000
    session_jwt_secret: str | None = Field(
        default=None, description="HS256 key for session tokens (JWT_SECRET)"
    )
    cors: CORSConfig = Field(default_factory=CORSConfig)


class SecurityConfig(BaseModel):
    """Credential policy."""

    bcrypt_rounds: int = Field(
        default=10, ge=4, le=31, description="bcrypt work factor for password hashes"
    )
    min_password_length: int = Field(
        default=6, ge=1, description="Minimum plaintext password length at registration"
    )


class ConfigData(BaseModel):
    """Root of the ``config:`` mapping in ``config.yaml``."""

    app: AppConfig = Field(default_factory=AppConfig)
    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    jwt: JWTConfig = Field(default_factory=JWTConfig)
    security: SecurityConfig = Field(default_factory=SecurityConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
