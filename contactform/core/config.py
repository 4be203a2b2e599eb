from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict
from functools import lru_cache
from typing import Annotated, Optional
import json


class Settings(BaseSettings):
    app_name: str = "Contact Form Backend"
    app_version: str = "1.0.0"

    # Bind address for the uvicorn server
    host: str = "127.0.0.1"
    port: int = 8080

    # MongoDB URI - when neither is set the in-memory store is used
    mongo_uri: Optional[str] = None
    mongodb_url: Optional[str] = None  # Alternative environment variable name
    mongo_server_selection_timeout_ms: int = 5000

    # Fixed namespace/database pair, selected once at startup
    namespace: str = "form_ns"
    database: str = "form_db"

    # CORS settings (development only, restrict origins in production)
    # Accepts "https://a.com,https://b.com" or a JSON list
    allowed_origins: Annotated[list[str], NoDecode] = ["*"]

    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @field_validator("port")
    @classmethod
    def validate_port(cls, v: int) -> int:
        if not 0 < v < 65536:
            raise ValueError(f"port must be between 1 and 65535, got: {v}")
        return v

    @field_validator("allowed_origins", mode="before")
    @classmethod
    def split_allowed_origins(cls, v):
        if isinstance(v, str):
            v = v.strip()
            if v.startswith("["):
                return json.loads(v)
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        allowed = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        level = v.upper()
        if level not in allowed:
            raise ValueError(f"log_level must be one of {allowed}, got: {v}")
        return level

    @property
    def effective_mongo_uri(self) -> Optional[str]:
        """Get the effective MongoDB URI from available sources"""
        return self.mongodb_url or self.mongo_uri

    @property
    def storage_backend(self) -> str:
        return "mongo" if self.effective_mongo_uri else "memory"


@lru_cache
def get_settings():
    return Settings()
