import os

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_CDT_CSV_PATH = os.path.join(os.path.dirname(__file__), "..", "data", "cdt_codes.csv")


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Database
    DATABASE_URL: str | None = None

    @property
    def database_url(self):
        return self.DATABASE_URL or "sqlite:///./local.db"

    # App
    PROJECT_NAME: str = "DentalAI Clinical Coding"
    APP_ENV: str = "development"
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: list[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]

    # CDT reference table: "csv" reads the bundled file, "database" reads the cdt_codes table
    CDT_SOURCE: str = "csv"
    CDT_CSV_PATH: str = Field(
        DEFAULT_CDT_CSV_PATH,
        validation_alias=AliasChoices("CDT_CSV_PATH", "CDT_CODES_CSV"),
    )
    CDT_SEARCH_LIMIT: int = 20
    CDT_SUGGESTION_LIMIT: int = 5


settings = Settings()
