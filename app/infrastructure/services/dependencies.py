"""
Type aliases for FastAPI dependency injection.

Provides annotated type hints for the settings and i18n dependencies.
"""

from typing import Annotated, Optional

from fastapi import Depends, Header
from core.config import Settings
from infrastructure.i18n import Locale
from infrastructure.i18n.service import I18nService
from infrastructure.services.providers import get_i18n_service, get_settings

# Settings dependency
SettingsDep = Annotated[Settings, Depends(get_settings)]

# I18n facade dependency
I18nServiceDep = Annotated[I18nService, Depends(get_i18n_service)]


def get_request_locale(
    i18n: I18nServiceDep,
    accept_language: Annotated[Optional[str], Header()] = None,
) -> Locale:
    """Locale chosen from the request's Accept-Language header."""
    return i18n.detect_locale(accept_language)


# Locale detected for the current request
RequestLocaleDep = Annotated[Locale, Depends(get_request_locale)]

__all__ = [
    "SettingsDep",
    "I18nServiceDep",
    "RequestLocaleDep",
    "get_request_locale",
]
