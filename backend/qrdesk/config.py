"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - database_url, jwt_secret and stripe_secret_key have no defaults: a missing
      value fails Settings() and the process never starts serving
    - get_settings() is cached (lru_cache), one instance per process
    - bcrypt_rounds is never below 10

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for all non-secret settings (port 5000, local frontend)
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosting providers hand out postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 5
    database_max_overflow: int = 10

    # Session tokens
    jwt_secret: str = Field(min_length=1)
    jwt_algorithm: str = "HS256"
    jwt_expiry_hours: int = Field(24, gt=0)

    # Password hashing
    bcrypt_rounds: int = Field(10, ge=10, le=31)

    # Stripe donations
    stripe_secret_key: str = Field(min_length=1)
    donation_currency: str = "usd"
    donation_amount_cents: int = Field(500, gt=0)
    donation_product_name: str = "Support Our Project"
    donation_product_description: str = "Donate and support our work!"
    frontend_url: str = "http://localhost:3000"

    @field_validator("frontend_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    # API
    host: str = "0.0.0.0"
    port: int = 5000
    cors_origins: list[str] = [
        "https://createqr.d1nfh4ldjnk0ad.amplifyapp.com",
        "http://localhost:3000",
    ]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
