"""Feature-level fixtures for i18n system tests.

Provides translation directories, stores and translators for locale
resolution, path translation and key lookup scenarios.
"""

import pytest
import yaml

from infrastructure.i18n import (
    Locale,
    RoutePathTranslator,
    Translator,
    YAMLTranslationLoader,
)
from tests.factories.i18n import make_translation_data, make_translation_store


@pytest.fixture
def temp_translations_dir(tmp_path):
    """Create temporary directory with sample YAML translation files.

    Returns a directory structure like:
    - site.fr-FR.yml
    - site.en-US.yml
    - forms.fr-FR.yml
    - forms.en-US.yml
    """
    files = {
        "site.fr-FR.yml": make_translation_data(Locale.FR_FR),
        "site.en-US.yml": make_translation_data(Locale.EN_US),
        "forms.fr-FR.yml": {
            "contact": {"form": {"submit": "Envoyer", "name": "Nom"}},
        },
        "forms.en-US.yml": {
            "contact": {"form": {"submit": "Send", "name": "Name"}},
        },
    }
    for name, data in files.items():
        with open(tmp_path / name, "w", encoding="utf-8") as f:
            yaml.safe_dump(data, f, allow_unicode=True)

    return tmp_path


@pytest.fixture
def yaml_loader(temp_translations_dir):
    """Create YAMLTranslationLoader for temporary translations directory."""
    return YAMLTranslationLoader(temp_translations_dir, use_cache=False)


@pytest.fixture
def yaml_loader_with_cache(temp_translations_dir):
    """Create YAMLTranslationLoader with caching enabled."""
    return YAMLTranslationLoader(temp_translations_dir, use_cache=True)


@pytest.fixture
def translation_store():
    """TranslationStore built from factory data."""
    return make_translation_store()


@pytest.fixture
def translator(translation_store):
    """Translator over the factory store."""
    return Translator(translation_store)


@pytest.fixture
def route_translator():
    """RoutePathTranslator with the site's route table."""
    return RoutePathTranslator()


@pytest.fixture
def sample_paths():
    """Paths in both locales, with and without slashes."""
    return [
        "",
        "/",
        "en",
        "/en/",
        "projets",
        "/projets/my-item",
        "/en/projects/my-item/",
        "a-propos",
        "/en/about",
        "services/web",
        "/contact",
        "unknown-route/x",
        "/en/unknown-route/x",
        "//projets//deep//item//",
        "  /en/projects  ",
        "/en/en/projects",
        "english/page",
    ]


@pytest.fixture
def accept_language_headers():
    """Collection of Accept-Language headers for testing."""
    return {
        "simple_en": "en",
        "specific_en_us": "en-US",
        "with_quality": "en-US,en;q=0.9,fr;q=0.8",
        "french_first": "fr-FR,fr;q=0.9,en-US;q=0.8,en;q=0.7",
        "wildcard": "de-DE,*;q=0.8",
        "malformed": ",;q=0.5,,-",
    }
