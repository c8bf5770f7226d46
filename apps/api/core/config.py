import os
from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = os.path.dirname(os.path.dirname(os.path.dirname(os.path.dirname(__file__))))
DEFAULT_DB_PATH = os.path.join(BASE_DIR, "biztime_data", "biztime.db")


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # SQLite file by default; any SQLAlchemy URL works (e.g. postgresql+psycopg://...)
    DATABASE_URL: str = f"sqlite:///{DEFAULT_DB_PATH}"

    # Echo every statement to the log
    SQL_ECHO: bool = False

    LOG_LEVEL: str = "INFO"

    # Comma-separated list, "*" for any origin
    CORS_ORIGINS: str = "*"

    @property
    def cors_origins(self) -> list[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]


settings = Settings()
