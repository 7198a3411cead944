# Settings modules
from .api_settings import ApiSettings
from .app_settings import AppSettings, get_app_settings
from .auth_settings import AuthSettings
from .database_settings import DatabaseSettings

__all__ = [
    "ApiSettings",
    "AppSettings",
    "AuthSettings",
    "DatabaseSettings",
    "get_app_settings",
]
