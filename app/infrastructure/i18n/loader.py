"""Translation loading interface and implementations.

Defines the contract for loading translations and provides a YAML-based
loader plus an in-memory loader for already-parsed data.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Mapping

import yaml

import structlog
from infrastructure.i18n.models import Locale, TranslationCatalog, build_tree

logger = structlog.get_logger()


def deep_merge(target: Dict[str, Any], source: Mapping[str, Any]) -> Dict[str, Any]:
    """Recursively merge ``source`` into ``target``.

    Nested mappings are merged; any other value in ``source`` replaces the
    value in ``target``.
    """
    for key, value in source.items():
        existing = target.get(key)
        if isinstance(existing, dict) and isinstance(value, Mapping):
            deep_merge(existing, value)
        elif isinstance(value, Mapping):
            target[key] = deep_merge({}, value)
        else:
            target[key] = value
    return target


class TranslationLoader(ABC):
    """Abstract base for translation loaders.

    Implementations must define how to load and parse translation trees
    for the supported locales.
    """

    @abstractmethod
    def load(self, locale: Locale) -> TranslationCatalog:
        """Load translations for a specific locale.

        Args:
            locale: Locale to load translations for.

        Returns:
            TranslationCatalog with the locale's tree.

        Raises:
            FileNotFoundError: If translations are not found.
            ValueError: If translation format is invalid.
        """

    @abstractmethod
    def load_all(self) -> Dict[Locale, TranslationCatalog]:
        """Load translations for all available locales.

        Returns:
            Dict mapping Locale to TranslationCatalog.
        """


class MappingTranslationLoader(TranslationLoader):
    """Loader serving already-parsed translation data.

    Attributes:
        data: Mapping of locale to its nested translation data.
    """

    def __init__(self, data: Mapping[Locale, Mapping[str, Any]]):
        self.data = dict(data)

    def load(self, locale: Locale) -> TranslationCatalog:
        if locale not in self.data:
            raise FileNotFoundError(f"No translations supplied for {locale.value}")
        return TranslationCatalog(locale=locale, root=build_tree(self.data[locale]))

    def load_all(self) -> Dict[Locale, TranslationCatalog]:
        return {locale: self.load(locale) for locale in self.data}


class YAMLTranslationLoader(TranslationLoader):
    """Loader for YAML-based translation files.

    Expects files named ``<domain>.<locale>.yml`` (e.g. ``site.fr-FR.yml``)
    in the translations directory. All files for a locale are deep-merged in
    filename order.

    Attributes:
        translations_dir: Path to directory containing YAML files.
        cache: Cache of loaded catalogs (locale -> catalog).
    """

    def __init__(
        self,
        translations_dir: Path,
        use_cache: bool = True,
    ):
        """Initialize YAML translation loader.

        Args:
            translations_dir: Path to directory with YAML translation files.
            use_cache: Whether to cache loaded catalogs in memory.

        Raises:
            ValueError: If the directory does not exist.
        """
        self.translations_dir = Path(translations_dir)
        self.use_cache = use_cache
        self.cache: Dict[Locale, TranslationCatalog] = {}

        if not self.translations_dir.is_dir():
            raise ValueError(
                f"Translations directory not found: {self.translations_dir}"
            )

        logger.info(
            "initialized_yaml_loader",
            translations_dir=str(self.translations_dir),
            use_cache=use_cache,
        )

    def load(self, locale: Locale) -> TranslationCatalog:
        """Load translations for a locale from YAML files.

        Args:
            locale: Locale to load.

        Returns:
            TranslationCatalog with the merged tree.

        Raises:
            FileNotFoundError: If no YAML files found for locale.
            ValueError: If YAML parsing fails or the tree is malformed.
        """
        if self.use_cache and locale in self.cache:
            logger.debug("loaded_from_cache", locale=locale.value)
            return self.cache[locale]

        yaml_files = sorted(self.translations_dir.glob(f"*.{locale.value}.yml"))
        if not yaml_files:
            raise FileNotFoundError(
                f"No translation files found for locale {locale.value} in {self.translations_dir}"
            )

        merged: Dict[str, Any] = {}
        for yaml_file in yaml_files:
            try:
                with open(yaml_file, "r", encoding="utf-8") as f:
                    data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                logger.error("yaml_parse_error", file=str(yaml_file), error=str(e))
                raise ValueError(f"Failed to parse {yaml_file}: {e}") from e

            if data is None:
                continue
            if not isinstance(data, dict):
                logger.error(
                    "invalid_yaml_format", file=str(yaml_file), expected="dict"
                )
                raise ValueError(f"Top level of {yaml_file} must be a mapping")
            deep_merge(merged, data)

        catalog = TranslationCatalog(locale=locale, root=build_tree(merged))
        logger.info(
            "loaded_translations",
            locale=locale.value,
            file_count=len(yaml_files),
            namespace_count=len(catalog.root.children),
        )

        if self.use_cache:
            self.cache[locale] = catalog

        return catalog

    def load_all(self) -> Dict[Locale, TranslationCatalog]:
        """Load translations for every locale that has files.

        Raises:
            ValueError: If no translation files found at all.
        """
        locales_found = set()
        for yaml_file in self.translations_dir.glob("*.yml"):
            # "site.en-US.yml" -> "en-US"
            parts = yaml_file.stem.split(".")
            if len(parts) < 2:
                continue
            try:
                locales_found.add(Locale(parts[-1]))
            except ValueError:
                logger.debug("skipped_unrecognized_locale_file", file=yaml_file.name)

        if not locales_found:
            raise ValueError(f"No translation files found in {self.translations_dir}")

        return {locale: self.load(locale) for locale in sorted(locales_found)}

    def clear_cache(self) -> None:
        """Clear all cached translations."""
        self.cache.clear()
        logger.info("cleared_translation_cache")
