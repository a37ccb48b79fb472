# nc_news/core/config.py

import json
from typing import Annotated, List, Union

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    PROJECT_NAME: str = "NC News"
    ENVIRONMENT: str = Field(default="development")
    LOG_LEVEL: str = Field(default="INFO")
    ENABLE_DOCS: bool = False

    DATABASE_URL: str = "sqlite:///./nc_news.db"
    SEED_ON_STARTUP: bool = False

    BACKEND_CORS_ORIGINS: Annotated[List[str], NoDecode] = []
    PORT: int = Field(default=8080)

    @field_validator("BACKEND_CORS_ORIGINS", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v: Union[str, List[str]]) -> List[str]:
        if isinstance(v, str):
            try:
                return json.loads(v)
            except json.JSONDecodeError:
                return [i.strip() for i in v.split(",") if i.strip()]
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def normalise_log_level(cls, v: str) -> str:
        return v.upper()


def get_settings() -> Settings:
    return Settings()


settings = get_settings()
