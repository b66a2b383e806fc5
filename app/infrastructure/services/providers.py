"""
Factory functions for dependency injection.

Provides application-scoped singleton providers for the i18n services.
"""

from functools import lru_cache

from core.config import Settings
from infrastructure.i18n import LocaleResolver, RoutePathTranslator, Translator
from infrastructure.i18n.factory import create_translator
from infrastructure.i18n.service import I18nService


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    Application code should use the DI type alias for testability:
        from infrastructure.services import SettingsDep
        @router.get("/config")
        def get_config(settings: SettingsDep):
            return settings.model_dump()

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


@lru_cache
def get_translator() -> Translator:
    """
    Get application-scoped translator singleton.

    Translations are read from disk once, on first use, and shared by every
    request afterwards.

    Returns:
        Translator: Cached translator over the configured translations directory.
    """
    settings = get_settings()
    return create_translator(translations_dir=settings.i18n.TRANSLATIONS_DIR)


@lru_cache
def get_i18n_service() -> I18nService:
    """
    Get application-scoped i18n service singleton.

    Usage:
        @router.get("/projets/{slug}")
        def project(slug: str, i18n: I18nServiceDep, locale: RequestLocaleDep):
            return {"title": i18n.translate("projects.title", locale)}

    Returns:
        I18nService: Cached service sharing the translator singleton.
    """
    settings = get_settings()
    return I18nService(
        translator=get_translator(),
        resolver=LocaleResolver(),
        route_translator=RoutePathTranslator(),
        site_url=settings.i18n.SITE_URL,
    )
