from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    APP_NAME: str = "CraftRuv"
    CURRENCY: str = "RUB"
    LOG_LEVEL: str = "INFO"

    # Optional JSON file with {"materials": {...}, "furniture_types": {...}}.
    # Built-in tables are used when unset or when the file is missing.
    CATALOG_PATH: str = ""

    CORS_ORIGINS: List[str] = ["*"]

    class Config:
        env_file = ".env"


settings = Settings()
