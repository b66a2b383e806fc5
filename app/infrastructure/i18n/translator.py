"""Translation service resolving dot-path keys to display strings.

Missing keys never raise: the key itself is returned so untranslated text is
visible on the page while authors fix the catalog.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union

from core.logging import get_module_logger
from infrastructure.i18n.models import (
    Locale,
    TranslationCatalog,
    TranslationKey,
    TranslationLeaf,
)
from infrastructure.i18n.store import TranslationStore

logger = get_module_logger()

KeyLike = Union[str, TranslationKey]


class Translator:
    """Resolves translation keys against a TranslationStore.

    Attributes:
        store: Read-only store with one catalog per locale.
    """

    def __init__(self, store: TranslationStore):
        self.store = store
        logger.info(
            "initialized_translator",
            locales=[locale.value for locale in store.locales],
        )

    def translate(self, key: KeyLike, locale: Locale) -> str:
        """Resolve a dot-separated key for a locale.

        Args:
            key: Dot-separated key (e.g., "nav.home") or TranslationKey.
            locale: Locale to translate to.

        Returns:
            The translated string, or the key itself when the key is missing
            or points at a subtree rather than a string.
        """
        if isinstance(key, TranslationKey):
            translation_key, key_string = key, str(key)
        else:
            translation_key, key_string = TranslationKey.from_string(key), key

        value = self.store.load(locale).lookup(translation_key)

        if value is None:
            logger.warning(
                "translation_key_not_found", key=key_string, locale=locale.value
            )
            return key_string

        if not isinstance(value, TranslationLeaf):
            logger.warning(
                "translation_key_not_leaf", key=key_string, locale=locale.value
            )
            return key_string

        return value.value

    def has_message(self, key: KeyLike, locale: Locale) -> bool:
        """Check if a string translation exists for key in locale."""
        if not isinstance(key, TranslationKey):
            key = TranslationKey.from_string(key)
        return self.store.load(locale).has_message(key)

    def get_catalog(self, locale: Locale) -> TranslationCatalog:
        return self.store.load(locale)

    def get_available_locales(self) -> List[Locale]:
        return list(self.store.locales)

    def bind(self, locale: Locale) -> "BoundTranslator":
        """Return a translator fixed to one locale, for page templates."""
        return BoundTranslator(translator=self, locale=locale)


@dataclass(frozen=True)
class BoundTranslator:
    """Translator bound to a single locale.

    Usage:
        t = translator.bind(Locale.EN_US).t
        t("nav.home")  # "Home"
    """

    translator: Translator
    locale: Locale

    def t(self, key: KeyLike) -> str:
        return self.translator.translate(key, self.locale)

    __call__ = t

    @property
    def translations(self) -> Dict[str, Any]:
        """Full translation tree of the bound locale as a plain dict."""
        return self.translator.get_catalog(self.locale).to_dict()

    def get(self, key: KeyLike, default: Optional[str] = None) -> Optional[str]:
        """Return the translation, or ``default`` without logging when missing."""
        if not isinstance(key, TranslationKey):
            key = TranslationKey.from_string(key)
        message = self.translator.get_catalog(self.locale).get_message(key)
        return default if message is None else message
