"""I18n service for dependency injection.

Bundles translation, locale detection, path translation and date formatting
behind one object that page handlers can receive and tests can replace.
"""

import datetime
from typing import Dict, Optional, Union

from core.config import settings
from infrastructure.i18n.dates import format_date
from infrastructure.i18n.factory import create_translator
from infrastructure.i18n.models import Locale, TranslationKey
from infrastructure.i18n.resolvers import LocaleResolver
from infrastructure.i18n.routing import RoutePathTranslator
from infrastructure.i18n.translator import BoundTranslator, Translator


class I18nService:
    """Class-based i18n facade.

    Thin wrapper: all work is delegated to the translator, resolver and
    route translator it is built with.

    Usage:
        service = I18nService()
        locale = service.detect_locale(request.headers.get("accept-language"))
        title = service.translate("home.hero.title", locale)
        switch_to = service.translate_path(request.url.path, locale.alternate)
    """

    def __init__(
        self,
        translator: Optional[Translator] = None,
        resolver: Optional[LocaleResolver] = None,
        route_translator: Optional[RoutePathTranslator] = None,
        site_url: Optional[str] = None,
    ):
        """Initialize the service.

        Args:
            translator: Pre-configured Translator; created via factory if omitted.
            resolver: LocaleResolver; a default one is built if omitted.
            route_translator: RoutePathTranslator; uses the default route table.
            site_url: Site origin for absolute URLs (default: settings).
        """
        self._translator = translator or create_translator()
        self._resolver = resolver or LocaleResolver()
        self._routes = route_translator or RoutePathTranslator()
        self.site_url = site_url or settings.i18n.SITE_URL

    def translate(self, key: Union[str, TranslationKey], locale: Locale) -> str:
        """Resolve a dot-separated key; returns the key itself when missing."""
        return self._translator.translate(key, locale)

    def bind(self, locale: Locale) -> BoundTranslator:
        return self._translator.bind(locale)

    def detect_locale(self, accept_language: Optional[str]) -> Locale:
        return self._resolver.resolve_from_header(accept_language)

    def locale_for_path(self, path: str) -> Locale:
        return self._resolver.resolve_from_path(path)

    def translate_path(self, path: str, target_locale: Locale) -> str:
        return self._routes.translate(path, target_locale)

    def alternate_links(self, path: str, absolute: bool = False) -> Dict[Locale, str]:
        """Render ``path`` in both locales, optionally as absolute URLs."""
        if absolute:
            return {
                locale: self._routes.absolute_url(path, locale, self.site_url)
                for locale in Locale
            }
        return self._routes.alternate_links(path)

    def format_date(self, value: datetime.date, locale: Locale) -> str:
        return format_date(value, locale)

    @property
    def translator(self) -> Translator:
        """Access underlying Translator instance."""
        return self._translator
