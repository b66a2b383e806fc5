"""i18n system - bilingual translation and routing for the site.

Provides translation lookup, locale detection, path translation between the
French and English sites, and locale-aware date formatting.

Main components:
- models: Locale, TranslationKey, TranslationCatalog, translation tree, route table
- loader: TranslationLoader, YAMLTranslationLoader and MappingTranslationLoader
- store: TranslationStore holding one catalog per locale
- translator: Translator with key-as-fallback resolution
- resolvers: LocaleResolver for Accept-Language and URL prefix detection
- routing: RoutePathTranslator for cross-locale links
- dates: format_date and DateFormatter
"""

from infrastructure.i18n.dates import DateFormatter, format_date
from infrastructure.i18n.loader import (
    MappingTranslationLoader,
    TranslationLoader,
    YAMLTranslationLoader,
)
from infrastructure.i18n.models import (
    ALTERNATE_LOCALE,
    DEFAULT_LOCALE,
    DEFAULT_ROUTE_TABLE,
    Locale,
    RouteSegment,
    RouteSegmentTable,
    TranslationCatalog,
    TranslationFormatError,
    TranslationKey,
    TranslationLeaf,
    TranslationNode,
    build_tree,
)
from infrastructure.i18n.resolvers import LocaleResolver, parse_accept_language
from infrastructure.i18n.routing import RoutePathTranslator
from infrastructure.i18n.store import TranslationStore
from infrastructure.i18n.translator import BoundTranslator, Translator

__all__ = [
    "Locale",
    "DEFAULT_LOCALE",
    "ALTERNATE_LOCALE",
    "TranslationKey",
    "TranslationCatalog",
    "TranslationLeaf",
    "TranslationNode",
    "TranslationFormatError",
    "build_tree",
    "RouteSegment",
    "RouteSegmentTable",
    "DEFAULT_ROUTE_TABLE",
    "TranslationLoader",
    "YAMLTranslationLoader",
    "MappingTranslationLoader",
    "TranslationStore",
    "Translator",
    "BoundTranslator",
    "LocaleResolver",
    "parse_accept_language",
    "RoutePathTranslator",
    "format_date",
    "DateFormatter",
]
