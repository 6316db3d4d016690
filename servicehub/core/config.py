from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    APP_NAME: str = "Maintenance Service Hub"
    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    CATALOG_DATA_DIR: str | None = None

    SUPABASE_URL: str | None = None
    SUPABASE_SERVICE_KEY: str | None = None
    LEADS_TABLE: str = "leads"
    LEAD_STORE_TIMEOUT_SECONDS: float = 10.0


settings = Settings()
