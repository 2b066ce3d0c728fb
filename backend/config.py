"""Configuration settings for the backend.

Values come from environment variables, with a local ``.env`` file loaded
first for development.
"""

from typing import Annotated, List, Literal

from dotenv import find_dotenv, load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

load_dotenv(find_dotenv(".env", usecwd=True))


class Settings(BaseSettings):
    """Configuration settings for the Flask backend."""

    model_config = SettingsConfigDict(extra="ignore")

    # Dev server
    DEBUG: bool = Field(default=False, validation_alias="FLASK_DEBUG")
    HOST: str = "127.0.0.1"
    PORT: int = 5000

    # Comma separated; set to the Vercel domain in production
    CORS_ORIGINS: Annotated[List[str], NoDecode] = ["*"]

    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    DATA_MESSAGE: str = "Hello from Flask!"

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def split_origins(cls, value):
        if isinstance(value, str):
            return [item.strip() for item in value.split(",") if item.strip()]
        return value

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def upper_log_level(cls, value):
        if isinstance(value, str):
            return value.strip().upper()
        return value
