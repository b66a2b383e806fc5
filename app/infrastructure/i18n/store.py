"""Read-only store holding one translation tree per supported locale."""

from types import MappingProxyType
from typing import Any, List, Mapping, Tuple

from core.logging import get_module_logger
from infrastructure.i18n.loader import MappingTranslationLoader, TranslationLoader
from infrastructure.i18n.models import Locale, TranslationCatalog

logger = get_module_logger()


class TranslationStore:
    """Holds the catalogs of both locales for the lifetime of the process.

    Built once from a loader or parsed data and never mutated, so it can be
    shared across threads and requests without locking.
    """

    def __init__(self, catalogs: Mapping[Locale, TranslationCatalog]):
        """Initialize the store.

        Args:
            catalogs: Catalog for each supported locale.

        Raises:
            ValueError: If a locale is missing or a catalog is filed under
                the wrong locale.
        """
        missing = [locale.value for locale in Locale if locale not in catalogs]
        if missing:
            raise ValueError(f"Missing translations for locale(s): {', '.join(missing)}")
        for locale, catalog in catalogs.items():
            if catalog.locale is not locale:
                raise ValueError(
                    f"Catalog for {catalog.locale.value} registered under {locale.value}"
                )

        self._catalogs = MappingProxyType(dict(catalogs))

        for locale in Locale:
            gaps = self.missing_keys(locale.alternate, locale)
            if gaps:
                logger.debug(
                    "translation_keys_missing",
                    locale=locale.value,
                    count=len(gaps),
                    keys=gaps,
                )

    @classmethod
    def from_loader(cls, loader: TranslationLoader) -> "TranslationStore":
        """Build the store by loading every supported locale once."""
        store = cls({locale: loader.load(locale) for locale in Locale})
        logger.info(
            "translation_store_loaded",
            locales=[locale.value for locale in store.locales],
        )
        return store

    @classmethod
    def from_mapping(
        cls, data: Mapping[Locale, Mapping[str, Any]]
    ) -> "TranslationStore":
        """Build the store from already-parsed translation data."""
        return cls.from_loader(MappingTranslationLoader(data))

    @property
    def locales(self) -> Tuple[Locale, ...]:
        return tuple(self._catalogs)

    def load(self, locale: Locale) -> TranslationCatalog:
        """Return the catalog for ``locale``."""
        return self._catalogs[locale]

    def missing_keys(self, source: Locale, target: Locale) -> List[str]:
        """List leaf keys present in ``source`` but absent from ``target``."""
        target_catalog = self._catalogs[target]
        target_keys = {key for key, _ in target_catalog.root.iter_leaves()}
        return sorted(
            key
            for key, _ in self._catalogs[source].root.iter_leaves()
            if key not in target_keys
        )
