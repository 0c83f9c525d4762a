from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(case_sensitive=True)

    ENVIRONMENT: str = "development"

    # Database settings
    # Production deployments point this at postgresql+asyncpg://...
    DATABASE_URL: str = "sqlite+aiosqlite:///./roster.db"
    DB_ECHO: bool = False
    DB_POOL_PRE_PING: bool = True

    # Pagination defaults
    DEFAULT_PAGE_SIZE: int = 20

    # Logging settings
    LOG_LEVEL: str = "INFO"
    LOG_FILE_PATH: str = "logs/logging_errors.log"
    LOG_JSON: bool = False


app_settings = Settings()
