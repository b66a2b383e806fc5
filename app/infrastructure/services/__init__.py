"""
Dependency injection services.

Provides type aliases and provider functions for FastAPI dependency injection.
"""

from infrastructure.services.dependencies import (
    I18nServiceDep,
    RequestLocaleDep,
    SettingsDep,
    get_request_locale,
)
from infrastructure.services.providers import (
    get_i18n_service,
    get_settings,
    get_translator,
)

__all__ = [
    "SettingsDep",
    "I18nServiceDep",
    "RequestLocaleDep",
    "get_request_locale",
    "get_settings",
    "get_translator",
    "get_i18n_service",
]
