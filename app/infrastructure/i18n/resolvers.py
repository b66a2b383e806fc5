"""Locale resolution logic for determining the visitor's language.

Provides strategies for resolving the locale from the Accept-Language header,
the URL path, or an explicit query/cookie value.
"""

from typing import List, Optional

import structlog
from infrastructure.i18n.models import ALTERNATE_LOCALE, DEFAULT_LOCALE, Locale

logger = structlog.get_logger().bind(component="i18n.resolver")


def parse_accept_language(accept_language: Optional[str]) -> List[str]:
    """Parse an Accept-Language header into lowercase language codes.

    Quality weights and regions are dropped and header order is kept:
    "en-US,fr;q=0.8" -> ["en", "fr"]. Empty or malformed entries become "".

    Args:
        accept_language: Raw header value.

    Returns:
        Language codes, most preferred first.
    """
    if not accept_language:
        return []
    return [
        part.split(";")[0].split("-")[0].strip().lower()
        for part in accept_language.split(",")
    ]


class LocaleResolver:
    """Resolves the visitor locale from request context sources.

    Every fallback is the site's default locale, the one served without a
    URL prefix.
    """

    default_locale = DEFAULT_LOCALE

    def __init__(self):
        self.log = logger.bind(default_locale=self.default_locale.value)

    def resolve_from_header(self, accept_language: Optional[str]) -> Locale:
        """Resolve locale from HTTP Accept-Language header.

        The alternate locale wins when its language appears anywhere in the
        header, regardless of position or quality; otherwise the default
        locale is returned.

        Args:
            accept_language: Accept-Language header value.

        Returns:
            Resolved Locale.
        """
        if not accept_language:
            return self.default_locale

        preferences = parse_accept_language(accept_language)

        for locale in (ALTERNATE_LOCALE, DEFAULT_LOCALE):
            if locale.language in preferences:
                self.log.debug("resolved_from_header", locale=locale.value)
                return locale

        self.log.debug("no_matching_locale_in_header", header=accept_language)
        return self.default_locale

    def resolve_from_path(self, path: str) -> Locale:
        """Resolve locale from the URL prefix of ``path``.

        "/en" and "/en/..." belong to the alternate locale; every other path
        belongs to the default locale.
        """
        clean = (path or "").strip().strip("/")
        prefix = ALTERNATE_LOCALE.language
        if clean == prefix or clean.startswith(f"{prefix}/"):
            return ALTERNATE_LOCALE
        return self.default_locale

    def resolve_from_string(self, locale_str: Optional[str]) -> Locale:
        """Parse a locale from a query parameter or cookie value.

        Args:
            locale_str: Locale string (e.g., "en", "fr-FR").

        Returns:
            Parsed Locale, or the default locale if unsupported.
        """
        if not locale_str:
            return self.default_locale
        try:
            return Locale.from_string(locale_str)
        except ValueError:
            self.log.warning("invalid_locale_string", locale_str=locale_str)
            return self.default_locale
