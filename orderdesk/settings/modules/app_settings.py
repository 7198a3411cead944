from __future__ import annotations

from functools import lru_cache

from pydantic import BaseModel, ConfigDict

from orderdesk.settings.modules.api_settings import ApiSettings
from orderdesk.settings.modules.auth_settings import AuthSettings
from orderdesk.settings.modules.database_settings import DatabaseSettings


class AppSettings(BaseModel):
    """Application settings aggregator."""

    model_config = ConfigDict(arbitrary_types_allowed=True, extra="ignore")

    api: ApiSettings
    auth: AuthSettings
    database: DatabaseSettings


@lru_cache()
def get_app_settings() -> AppSettings:
    return AppSettings(
        api=ApiSettings(),
        auth=AuthSettings(),
        database=DatabaseSettings(),
    )
