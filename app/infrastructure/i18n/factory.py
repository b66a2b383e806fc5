"""Factory functions for creating i18n components.

Provides convenience functions for initializing the translation store and
translator from the configured translations directory.
"""

from pathlib import Path
from typing import Optional

import structlog
from core.config import settings
from infrastructure.i18n.loader import YAMLTranslationLoader
from infrastructure.i18n.store import TranslationStore
from infrastructure.i18n.translator import Translator

logger = structlog.get_logger()


def default_translations_dir() -> Path:
    """Return the configured translations directory, or the packaged one."""
    if settings.i18n.TRANSLATIONS_DIR is not None:
        return Path(settings.i18n.TRANSLATIONS_DIR)
    # Shipped as package data next to this module
    return Path(__file__).resolve().parent / "locales"


def create_store(
    translations_dir: Optional[Path] = None,
    use_cache: bool = True,
) -> TranslationStore:
    """Load both locales from YAML into a TranslationStore.

    Raises:
        ValueError: If the directory is missing or a file is malformed.
        FileNotFoundError: If a locale has no translation files.
    """
    translations_dir = translations_dir or default_translations_dir()
    loader = YAMLTranslationLoader(translations_dir=translations_dir, use_cache=use_cache)
    return TranslationStore.from_loader(loader)


def create_translator(
    translations_dir: Optional[Path] = None,
    use_cache: bool = True,
) -> Translator:
    """Create and configure a Translator instance.

    Args:
        translations_dir: Path to YAML translation files (default: settings,
            then the packaged locales/ directory).
        use_cache: Whether the loader should cache parsed YAML.

    Returns:
        Translator: Configured translator instance.

    Usage:
        translator = create_translator()
        translator.translate("nav.home", Locale.EN_US)
    """
    translations_dir = translations_dir or default_translations_dir()
    store = create_store(translations_dir=translations_dir, use_cache=use_cache)
    translator = Translator(store)
    logger.info(
        "translator_created",
        translations_dir=str(translations_dir),
        locale_count=len(store.locales),
    )
    return translator
