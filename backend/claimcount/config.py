"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All connection strings come from environment variables (never hardcoded for production)
    - get_settings() is cached (lru_cache) — single instance per process
    - Classification constants reach the engine only through classification_codes()

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for all settings: works out-of-the-box against a local database
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from claimcount.core.domain_types import ClassificationCodes


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = (
        "postgresql+asyncpg://claims:claims@db:5432/claims"
    )

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosting providers hand out postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10

    # Classification
    chargeable_code: int = 100
    overridden_application_code: int = 1
    automatic_application_code: int = 4
    deleted_charge_status: str = "D"
    default_charge_status: str = "N"

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    def classification_codes(self) -> ClassificationCodes:
        return ClassificationCodes(
            chargeable=self.chargeable_code,
            applied=frozenset({
                self.overridden_application_code,
                self.automatic_application_code,
            }),
            deleted_charge_status=self.deleted_charge_status,
            default_charge_status=self.default_charge_status,
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()
