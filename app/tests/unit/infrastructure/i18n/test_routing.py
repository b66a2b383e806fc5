"""Tests for infrastructure.i18n.routing module."""

import pytest

from infrastructure.i18n import Locale, RoutePathTranslator
from infrastructure.i18n.routing import normalize_path
from tests.factories.i18n import make_route_table


class TestNormalizePath:
    """Tests for normalize_path()."""

    @pytest.mark.parametrize(
        "path,expected",
        [
            ("/projets/", "projets"),
            ("projets", "projets"),
            ("  /en/about/  ", "en/about"),
            ("//x//", "/x/"),
            ("/", ""),
            ("", ""),
        ],
    )
    def test_strips_one_slash_each_side(self, path, expected):
        """Exactly one leading and one trailing slash are removed."""
        assert normalize_path(path) == expected


class TestRoutePathTranslator:
    """Tests for RoutePathTranslator."""

    @pytest.mark.parametrize("path", ["", "/", "en", "/en", "/en/"])
    def test_home_to_alternate(self, route_translator, path):
        """Home paths translate to the alternate home."""
        assert route_translator.translate(path, Locale.EN_US) == "/en"

    @pytest.mark.parametrize("path", ["", "/", "/en", "en/"])
    def test_home_to_default(self, route_translator, path):
        """Home paths translate to the default home."""
        assert route_translator.translate(path, Locale.FR_FR) == "/"

    def test_home_path(self, route_translator):
        """home_path() gives each locale's root."""
        assert route_translator.home_path(Locale.FR_FR) == "/"
        assert route_translator.home_path(Locale.EN_US) == "/en"

    def test_mapped_segment_to_alternate(self, route_translator):
        """A French slug is replaced and the prefix added."""
        assert route_translator.translate("projets/my-item", Locale.EN_US) == (
            "/en/projects/my-item"
        )

    def test_mapped_segment_round_trip(self, route_translator):
        """Translating to English and back returns the normalized path."""
        english = route_translator.translate("/projets/my-item/", Locale.EN_US)
        assert route_translator.translate(english, Locale.FR_FR) == "/projets/my-item"

    @pytest.mark.parametrize(
        "french,english",
        [
            ("/projets", "/en/projects"),
            ("/a-propos", "/en/about"),
            ("/services/web", "/en/services/web"),
            ("/contact", "/en/contact"),
        ],
    )
    def test_default_table(self, route_translator, french, english):
        """Every routed section translates in both directions."""
        assert route_translator.translate(french, Locale.EN_US) == english
        assert route_translator.translate(english, Locale.FR_FR) == french

    def test_english_slug_to_default(self, route_translator):
        """An English slug without prefix is still translated to French."""
        assert route_translator.translate("about", Locale.FR_FR) == "/a-propos"

    def test_same_locale_keeps_path(self, route_translator):
        """Translating into the path's own locale only normalizes it."""
        assert route_translator.translate("/en/about/", Locale.EN_US) == "/en/about"
        assert route_translator.translate("a-propos/", Locale.FR_FR) == "/a-propos"

    def test_unknown_segment_passes_through(self, route_translator):
        """Unknown first segments are left unchanged."""
        assert route_translator.translate("unknown-route/x", Locale.EN_US) == (
            "/en/unknown-route/x"
        )
        assert route_translator.translate("/en/unknown-route/x", Locale.FR_FR) == (
            "/unknown-route/x"
        )

    def test_only_first_segment_translated(self, route_translator):
        """Deeper segments matching the table are kept."""
        assert route_translator.translate("projets/a-propos", Locale.EN_US) == (
            "/en/projects/a-propos"
        )

    def test_prefix_requires_separator(self, route_translator):
        """A segment merely starting with "en" is not the prefix."""
        assert route_translator.translate("english/page", Locale.FR_FR) == (
            "/english/page"
        )

    def test_collapses_slashes(self, route_translator):
        """Runs of slashes collapse to one."""
        assert route_translator.translate("//projets//deep//item//", Locale.EN_US) == (
            "/en/projects/deep/item"
        )

    def test_trims_whitespace(self, route_translator):
        """Surrounding whitespace is trimmed."""
        assert route_translator.translate("  /en/projects  ", Locale.FR_FR) == "/projets"

    def test_repeated_prefix(self, route_translator):
        """Repeated alternate prefixes are all stripped."""
        assert route_translator.translate("/en/en/projects", Locale.FR_FR) == "/projets"

    @pytest.mark.parametrize("locale", list(Locale))
    def test_idempotent(self, route_translator, sample_paths, locale):
        """Translating twice to the same locale changes nothing."""
        for path in sample_paths:
            once = route_translator.translate(path, locale)
            assert route_translator.translate(once, locale) == once, path

    def test_round_trip_for_every_table_entry(self, route_translator):
        """Each table entry survives a French -> English -> French trip."""
        for segment in set(route_translator.route_table.values()):
            path = f"/{segment.default}/item"
            english = route_translator.translate(path, Locale.EN_US)
            assert english == f"/en/{segment.alternate}/item"
            assert route_translator.translate(english, Locale.FR_FR) == path

    def test_substitute_table(self):
        """A custom route table can be injected."""
        translator = RoutePathTranslator(make_route_table(("blogue", "blog")))
        assert translator.translate("/blogue/post", Locale.EN_US) == "/en/blog/post"
        assert translator.translate("/projets", Locale.EN_US) == "/en/projets"

    def test_alternate_links(self, route_translator):
        """alternate_links() renders the path in both locales."""
        assert route_translator.alternate_links("/en/projects/x") == {
            Locale.FR_FR: "/projets/x",
            Locale.EN_US: "/en/projects/x",
        }

    def test_absolute_url(self, route_translator):
        """absolute_url() joins the translated path to the origin."""
        assert (
            route_translator.absolute_url("/a-propos", Locale.EN_US, "https://automx.fr/")
            == "https://automx.fr/en/about"
        )
        assert (
            route_translator.absolute_url("/en", Locale.FR_FR, "https://automx.fr")
            == "https://automx.fr/"
        )
