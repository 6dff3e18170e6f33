"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "budget-engine"
    log_level: str = "INFO"

    # Display
    currency_symbol: str = "R$"
    recent_transactions_limit: int = 10


settings = Settings()
