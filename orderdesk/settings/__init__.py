# Settings package
from orderdesk.settings.modules import (
    ApiSettings,
    AppSettings,
    AuthSettings,
    DatabaseSettings,
    get_app_settings,
)

__all__ = ["get_app_settings", "AppSettings", "ApiSettings", "AuthSettings", "DatabaseSettings"]
