"""Translation models for the i18n system.

Defines the value types shared by the locator, parser, loader and cache.
"""

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Iterable, Iterator, Optional, Tuple

_SUBTAG = re.compile(r"^[A-Za-z0-9]{1,8}$")
_ROOT_ALIASES = {"", "c", "posix", "und", "iv", "invariant"}


class RecordState(str, Enum):
    """Review states used by translation record files.

    Records may carry states outside this enum; they are kept as plain
    strings and only served when listed in the accepted states.
    """

    NEW = "new"
    NEEDS_REVIEW = "needsReview"
    FINAL = "final"


DEFAULT_ACCEPTED_STATES = frozenset(
    {RecordState.NEEDS_REVIEW.value, RecordState.FINAL.value}
)


@dataclass(frozen=True)
class LanguageTag:
    """Hierarchical language identifier (e.g. "en-US").

    The parent of a tag is derived syntactically by dropping its last
    subtag; the parent of a single-subtag tag is the root tag "".

    Attributes:
        value: Canonical tag string, "" for the root.
    """

    value: str

    @classmethod
    def parse(cls, tag: str) -> "LanguageTag":
        """Create a canonical LanguageTag from a string.

        Accepts "-" or "_" separators and POSIX locale names
        ("de_DE.UTF-8@euro" -> "de-DE").

        Args:
            tag: Language tag or POSIX locale name.

        Returns:
            LanguageTag instance.

        Raises:
            ValueError: If the tag is not syntactically valid.
        """
        text = tag.strip().split(".", 1)[0].split("@", 1)[0]
        if text.lower() in _ROOT_ALIASES:
            return ROOT

        subtags = text.replace("_", "-").split("-")
        if not all(_SUBTAG.match(part) for part in subtags) or not subtags[0].isalpha():
            raise ValueError(f"Invalid language tag: {tag}")

        canonical = [subtags[0].lower()]
        for part in subtags[1:]:
            if len(part) == 4 and part.isalpha():
                canonical.append(part.title())
            elif len(part) == 2 and part.isalpha():
                canonical.append(part.upper())
            else:
                canonical.append(part.lower())
        return cls("-".join(canonical))

    @property
    def is_root(self) -> bool:
        return self.value == ""

    @property
    def language(self) -> str:
        """Primary language subtag ("en" for "en-US")."""
        return self.value.split("-")[0]

    @property
    def parent(self) -> "LanguageTag":
        """Next less specific tag; the root is its own parent."""
        if "-" not in self.value:
            return ROOT
        return LanguageTag(self.value.rsplit("-", 1)[0])

    def ancestors(self) -> Iterator["LanguageTag"]:
        """Yield this tag and its parents, most specific first, excluding root."""
        tag = self
        while not tag.is_root:
            yield tag
            tag = tag.parent

    def __str__(self) -> str:
        return self.value


ROOT = LanguageTag("")


@dataclass(frozen=True)
class TranslationRecord:
    """One entry of a translation file.

    Attributes:
        state: Review state (see RecordState).
        source: Invariant source text used as the lookup key.
        translated: Locale-specific text.
    """

    state: str
    source: str
    translated: str

    def is_usable(self, accepted_states: Iterable[str]) -> bool:
        return self.state in set(accepted_states)


class TranslationTable(Mapping):
    """Immutable mapping from source text to translated text.

    Attributes:
        language_tags: Tags the table was resolved from, most specific first.
        sources: Files that contributed, in merge order.
    """

    def __init__(
        self,
        entries: Optional[Dict[str, str]] = None,
        language_tags: Tuple[str, ...] = (),
        sources: Tuple[str, ...] = (),
    ):
        self._entries = MappingProxyType(dict(entries or {}))
        self.language_tags = tuple(language_tags)
        self.sources = tuple(sources)

    def __getitem__(self, source: str) -> str:
        return self._entries[source]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def lookup(self, text: str) -> str:
        """Return the translation of text, or text itself when there is none."""
        return self._entries.get(text, text)

    def __repr__(self) -> str:
        return (
            f"TranslationTable(entries={len(self)}, "
            f"language_tags={list(self.language_tags)})"
        )


@dataclass(frozen=True)
class TemplateKey:
    """Invariant format skeleton, e.g. "Hello {name}".

    The skeleton text is the lookup key regardless of argument values.
    """

    text: str

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class TemplateResult:
    """A template skeleton bound to its runtime arguments.

    Attributes:
        key: The invariant skeleton.
        args: Positional format arguments.
        kwargs: Keyword format arguments.
    """

    key: TemplateKey
    args: Tuple[Any, ...] = ()
    kwargs: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def create(cls, skeleton: str, *args: Any, **kwargs: Any) -> "TemplateResult":
        return cls(key=TemplateKey(skeleton), args=args, kwargs=kwargs)

    def format(self, skeleton: Optional[str] = None) -> str:
        """Render a skeleton with the bound arguments.

        Args:
            skeleton: Skeleton to render; defaults to the original key text.

        Returns:
            Formatted string.

        Raises:
            KeyError, IndexError, ValueError, TypeError, AttributeError: If the
                skeleton references arguments that were not bound, indexes or
                dereferences them wrongly, or is not a valid format string.
        """
        text = self.key.text if skeleton is None else skeleton
        return text.format(*self.args, **self.kwargs)

    def __str__(self) -> str:
        return self.format()
