from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # App settings
    PROJECT_NAME: str = "TransactionAnalyzer"
    API_PREFIX: str = "/api"
    DEBUG: bool = Field(default=False)
    LOG_LEVEL: str = Field(default="INFO")

    # Transaction source (JSON array of raw records)
    TRANSACTIONS_JSON: str = Field(default="transactions.json")

    # Random activity poller
    ACTIVITY_API_URL: str = Field(default="https://www.boredapi.com/api/activity/")
    ACTIVITY_POLL_ENABLED: bool = Field(default=False)
    ACTIVITY_POLL_SECONDS: int = 60
    ACTIVITY_REQUEST_TIMEOUT: float = 10.0

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True)


settings = Settings()
