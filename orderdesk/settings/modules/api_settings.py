from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings


class ApiSettings(BaseSettings):
    """
    HTTP layer settings.
    Loaded from .env file with exact variable name matching.
    """

    title: str = Field("OrderDesk - Order Management API", alias="APP_TITLE")
    version: str = Field("1.0.0", alias="APP_VERSION")
    cors_origins: str = Field(
        "http://localhost:3000,http://127.0.0.1:3000", alias="CORS_ORIGINS"
    )
    log_level: str = Field("INFO", alias="LOG_LEVEL")

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    @property
    def cors_origin_list(self) -> List[str]:
        """CORS_ORIGINS is comma-separated."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]
