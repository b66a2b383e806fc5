"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    make_route_table,
    make_translation_catalog,
    make_translation_data,
    make_translation_key,
    make_translation_store,
)

__all__ = [
    "make_route_table",
    "make_translation_catalog",
    "make_translation_data",
    "make_translation_key",
    "make_translation_store",
]
