"""Translation models for i18n system.

Defines the two supported locales, the recursive translation tree, and the
route segment table used to translate URL slugs between locales.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Iterable, Iterator, Mapping, Optional, Tuple, Union


class TranslationFormatError(ValueError):
    """Raised when parsed translation data is not a valid translation tree."""


class Locale(str, Enum):
    """Supported locale identifiers.

    Uses IETF BCP 47 language tag format. French is the default locale and is
    served without a URL prefix; English is the alternate locale.
    """

    FR_FR = "fr-FR"
    EN_US = "en-US"

    @classmethod
    def from_string(cls, locale_str: str) -> "Locale":
        """Convert string to Locale enum.

        Accepts a full tag ("fr-FR") or a bare language code ("fr"),
        case-insensitively.

        Args:
            locale_str: Locale string.

        Returns:
            Matching Locale enum value.

        Raises:
            ValueError: If locale string is not supported.
        """
        normalized = (locale_str or "").strip().lower()
        for locale in cls:
            if normalized in (locale.value.lower(), locale.language):
                return locale
        raise ValueError(f"Unsupported locale: {locale_str}")

    @property
    def language(self) -> str:
        """Language part of locale (e.g., "en" from "en-US")."""
        return self.value.split("-")[0]

    @property
    def region(self) -> str:
        """Region part of locale (e.g., "US" from "en-US")."""
        parts = self.value.split("-")
        return parts[1] if len(parts) > 1 else ""

    @property
    def is_default(self) -> bool:
        return self is DEFAULT_LOCALE

    @property
    def alternate(self) -> "Locale":
        """The other supported locale."""
        return ALTERNATE_LOCALE if self.is_default else DEFAULT_LOCALE

    @property
    def display_name(self) -> str:
        """Name of the language, written in that language."""
        return _DISPLAY_NAMES[self]

    @property
    def path_prefix(self) -> str:
        """URL prefix for pages in this locale ("" or "/en")."""
        return "" if self.is_default else f"/{self.language}"

    @property
    def babel_code(self) -> str:
        """CLDR identifier (e.g., "fr_FR")."""
        return self.value.replace("-", "_")


DEFAULT_LOCALE = Locale.FR_FR
ALTERNATE_LOCALE = Locale.EN_US

_DISPLAY_NAMES = {
    Locale.FR_FR: "Français",
    Locale.EN_US: "English",
}


@dataclass(frozen=True)
class TranslationLeaf:
    """A translated display string."""

    value: str


@dataclass(frozen=True)
class TranslationNode:
    """A branch of the translation tree.

    Attributes:
        children: Read-only mapping of key segment to subtree or leaf.
    """

    children: Mapping[str, "TranslationTree"] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def get(self, segment: str) -> Optional["TranslationTree"]:
        return self.children.get(segment)

    def __contains__(self, segment: object) -> bool:
        return segment in self.children

    def to_dict(self) -> Dict[str, Any]:
        """Return a plain nested dict copy of this subtree."""
        result: Dict[str, Any] = {}
        for name, child in self.children.items():
            if isinstance(child, TranslationNode):
                result[name] = child.to_dict()
            else:
                result[name] = child.value
        return result

    def iter_leaves(self, prefix: str = "") -> Iterator[Tuple[str, str]]:
        """Yield (dot_key, message) for every leaf below this node."""
        for name, child in self.children.items():
            key = f"{prefix}.{name}" if prefix else name
            if isinstance(child, TranslationNode):
                yield from child.iter_leaves(key)
            else:
                yield key, child.value


TranslationTree = Union[TranslationLeaf, TranslationNode]


def build_tree(data: Mapping[str, Any], path: str = "") -> TranslationNode:
    """Convert parsed structured data into a TranslationNode.

    Args:
        data: Nested mapping of string keys to strings or mappings.
        path: Dot-path of ``data`` inside the full tree (for error messages).

    Returns:
        Immutable TranslationNode.

    Raises:
        TranslationFormatError: If a key is not a string or a value is
            neither a string nor a mapping.
    """
    if not isinstance(data, Mapping):
        raise TranslationFormatError(
            f"Expected a mapping at '{path or '<root>'}', got {type(data).__name__}"
        )

    children: Dict[str, TranslationTree] = {}
    for name, value in data.items():
        if not isinstance(name, str):
            raise TranslationFormatError(
                f"Translation keys must be strings: {name!r} at '{path or '<root>'}'"
            )
        child_path = f"{path}.{name}" if path else name
        if isinstance(value, str):
            children[name] = TranslationLeaf(value)
        elif isinstance(value, Mapping):
            children[name] = build_tree(value, child_path)
        else:
            raise TranslationFormatError(
                f"Translation value at '{child_path}' must be a string or mapping, "
                f"got {type(value).__name__}"
            )
    return TranslationNode(MappingProxyType(children))


@dataclass(frozen=True)
class TranslationKey:
    """Represents a translation key for accessing translated messages.

    Keys are dot-separated paths of arbitrary depth (e.g., "nav.home",
    "home.hero.title"). Frozen to ensure immutability and hashability.

    Attributes:
        segments: Ordered key segments.
    """

    segments: Tuple[str, ...]

    def __str__(self) -> str:
        return ".".join(self.segments)

    @classmethod
    def from_string(cls, key_string: str) -> "TranslationKey":
        """Create TranslationKey from dot-separated string.

        Args:
            key_string: Dot-separated key (e.g., "nav.home").

        Returns:
            TranslationKey instance.
        """
        return cls(segments=tuple(key_string.split(".")))


@dataclass(frozen=True)
class TranslationCatalog:
    """Container for translations in a specific locale.

    Attributes:
        locale: The Locale this catalog is for.
        root: Root node of the translation tree.
    """

    locale: Locale
    root: TranslationNode = field(default_factory=TranslationNode)

    def lookup(self, key: TranslationKey) -> Optional[TranslationTree]:
        """Descend the tree one segment at a time.

        Args:
            key: TranslationKey to look up.

        Returns:
            The leaf or subtree at ``key``, or None if any step is missing.
        """
        current: TranslationTree = self.root
        for segment in key.segments:
            if not isinstance(current, TranslationNode) or segment not in current:
                return None
            current = current.children[segment]
        return current

    def get_message(self, key: TranslationKey) -> Optional[str]:
        """Retrieve a translation message by key.

        Returns:
            Translated message string, or None if not found or not a leaf.
        """
        value = self.lookup(key)
        if isinstance(value, TranslationLeaf):
            return value.value
        return None

    def has_message(self, key: TranslationKey) -> bool:
        return self.get_message(key) is not None

    def get_namespace(self, namespace: str) -> Optional[TranslationNode]:
        """Get the subtree for a top-level namespace (e.g., "nav")."""
        value = self.root.get(namespace)
        return value if isinstance(value, TranslationNode) else None

    def to_dict(self) -> Dict[str, Any]:
        return self.root.to_dict()


@dataclass(frozen=True)
class RouteSegment:
    """A first path segment rendered in each locale.

    Attributes:
        default: Slug used by the default locale (e.g., "projets").
        alternate: Slug used by the alternate locale (e.g., "projects").
    """

    default: str
    alternate: str

    def for_locale(self, locale: Locale) -> str:
        return self.default if locale.is_default else self.alternate


class RouteSegmentTable(Mapping[str, RouteSegment]):
    """Immutable lookup from either locale's slug to its RouteSegment.

    Every registered segment is indexed under both renderings, so a slug can
    be translated whichever locale it came from.
    """

    def __init__(self, entries: Optional[Mapping[str, RouteSegment]] = None):
        self._entries: Mapping[str, RouteSegment] = MappingProxyType(
            dict(entries or {})
        )

    @classmethod
    def from_segments(cls, segments: Iterable[RouteSegment]) -> "RouteSegmentTable":
        """Build a table indexing each segment under both renderings.

        Raises:
            ValueError: If one slug is registered for two different segments.
        """
        entries: Dict[str, RouteSegment] = {}
        for segment in segments:
            for slug in (segment.default, segment.alternate):
                existing = entries.get(slug)
                if existing is not None and existing != segment:
                    raise ValueError(
                        f"Route slug '{slug}' maps to both {existing} and {segment}"
                    )
                entries[slug] = segment
        return cls(entries)

    def __getitem__(self, slug: str) -> RouteSegment:
        return self._entries[slug]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"RouteSegmentTable({dict(self._entries)!r})"


DEFAULT_ROUTE_SEGMENTS = (
    RouteSegment(default="projets", alternate="projects"),
    RouteSegment(default="a-propos", alternate="about"),
    RouteSegment(default="services", alternate="services"),
    RouteSegment(default="contact", alternate="contact"),
)

DEFAULT_ROUTE_TABLE = RouteSegmentTable.from_segments(DEFAULT_ROUTE_SEGMENTS)
