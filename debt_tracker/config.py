"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Database (account schedule configuration store)
    database_url: str = "sqlite:///./debt_tracker.db"

    # External Services
    ledger_api_base: str = "https://api.ynab.com/v1"
    ledger_access_token: str = ""
    ledger_budget_id: str = "last-used"

    # Service
    service_name: str = "debt-tracker"
    log_level: str = "INFO"
    timezone: str = "America/Panama"

    # Tracking
    history_window: int = 20  # Most recent ledger entries kept for reconciliation
    finish_cadence_days: int = 15  # Days assumed between payments when projecting

    # HTTP Client
    http_timeout_seconds: float = 5.0
    ledger_max_retries: int = 3
    ledger_backoff_base: float = 0.5  # Exponential backoff base in seconds


settings = Settings()
