"""Application configuration with environment variable support.

All settings can be overridden via environment variables prefixed with ``VOTEHUB_``,
or via a ``.env`` file in the project root.

Examples::

    VOTEHUB_PORT=9000 votehub start
    VOTEHUB_SEED_SAMPLE_DATA=false votehub start
    VOTEHUB_LOG_LEVEL=DEBUG votehub start
"""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from backend.app.models.feature import FeatureStatus

# Project root: two levels up from this file (backend/app/config.py -> votehub/)
_BASE_DIR = Path(__file__).resolve().parent.parent.parent


class Settings(BaseSettings):
    """VoteHub configuration — all values overridable via env vars."""

    model_config = SettingsConfigDict(
        env_prefix="VOTEHUB_",
        env_file=str(_BASE_DIR / ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    # Logging
    log_level: str = "INFO"

    # Identity of the single implicit user (author of new requests)
    user_name: str = "You"

    # Board
    seed_sample_data: bool = True
    default_status: FeatureStatus = FeatureStatus.UNDER_REVIEW

    # Widget submission form
    form_categories: list[str] = [
        "Features",
        "UI/UX",
        "Integration",
        "Productivity",
        "Platform",
        "Security",
    ]
    default_category: str = "Features"
    widget_limit: int = 5


# Singleton instance — import this everywhere
settings = Settings()
