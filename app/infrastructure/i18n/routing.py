"""Translate site paths between the default and alternate locale.

French pages live at the site root ("/projets/x"), English pages under the
"/en" prefix ("/en/projects/x"). Only the first path segment is a translated
slug; the rest of the path is kept as is.
"""

import re
from typing import Dict

from core.logging import get_module_logger
from infrastructure.i18n.models import (
    ALTERNATE_LOCALE,
    DEFAULT_ROUTE_TABLE,
    Locale,
    RouteSegmentTable,
)

logger = get_module_logger()

_SLASH_RUN = re.compile(r"/+")


def normalize_path(path: str) -> str:
    """Trim whitespace and strip one leading and one trailing slash."""
    clean = (path or "").strip()
    if clean.startswith("/"):
        clean = clean[1:]
    if clean.endswith("/"):
        clean = clean[:-1]
    return clean


class RoutePathTranslator:
    """Converts URL paths from one locale's slug convention to the other's.

    The source locale is sniffed from the path's own prefix, so callers only
    pass the target locale.

    Attributes:
        route_table: Slug table indexed under both locales' renderings.
        alternate_prefix: First segment marking alternate-locale paths ("en").
    """

    def __init__(self, route_table: RouteSegmentTable = DEFAULT_ROUTE_TABLE):
        self.route_table = route_table
        self.alternate_prefix = ALTERNATE_LOCALE.language

    def strip_locale_prefix(self, path: str) -> str:
        """Return the normalized path without its alternate-locale prefix.

        An empty string denotes the home page. Repeated prefixes ("en/en/x")
        are all stripped so a default-locale path never starts with "en".
        """
        clean = _SLASH_RUN.sub("/", normalize_path(path)).strip("/")
        prefix = f"{self.alternate_prefix}/"
        while clean == self.alternate_prefix or clean.startswith(prefix):
            clean = clean[len(prefix) :]
        return clean

    def home_path(self, locale: Locale) -> str:
        """Home page path: "/" for the default locale, "/en" otherwise."""
        return locale.path_prefix or "/"

    def translate(self, path: str, target_locale: Locale) -> str:
        """Convert ``path`` into the equivalent path for ``target_locale``.

        Args:
            path: Site path in either locale, with or without slashes.
            target_locale: Locale of the returned path.

        Returns:
            Absolute site path for ``target_locale``. Unknown first segments
            pass through untranslated.
        """
        remainder = self.strip_locale_prefix(path)
        if not remainder:
            return self.home_path(target_locale)

        segments = remainder.split("/")
        route = self.route_table.get(segments[0])
        if route is not None:
            segments[0] = route.for_locale(target_locale)
        else:
            logger.debug(
                "route_segment_untranslated",
                segment=segments[0],
                target_locale=target_locale.value,
            )

        translated = "/".join(segments)
        if target_locale.is_default:
            final_path = f"/{translated}"
        else:
            final_path = f"/{self.alternate_prefix}/{translated}"
        return _SLASH_RUN.sub("/", final_path)

    def alternate_links(self, path: str) -> Dict[Locale, str]:
        """Render ``path`` in every locale, e.g. for hreflang links."""
        return {locale: self.translate(path, locale) for locale in Locale}

    def absolute_url(self, path: str, locale: Locale, site_url: str) -> str:
        """Join the translated path to the site origin."""
        return f"{site_url.rstrip('/')}{self.translate(path, locale)}"
