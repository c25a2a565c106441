"""Food name canonicalization."""

import re
import unicodedata
from dataclasses import dataclass, field
from functools import lru_cache

from food_fusion.domain.vocabulary import FoodVocabulary, load_vocabulary

GENERIC_KEY = "food"

_TOKEN_SEPARATOR = re.compile(r"[^a-z0-9]+")
_MIN_STRIPPABLE_LENGTH = 4


def tokenize(raw: str) -> list[str]:
    """Lowercase, fold accents and split a name into word tokens."""
    folded = unicodedata.normalize("NFKD", raw).encode("ascii", "ignore").decode()
    return [token for token in _TOKEN_SEPARATOR.split(folded.lower()) if token]


@dataclass
class Canonicalizer:
    """Map raw food names to canonical keys using a static vocabulary.

    Canonicalization is pure and idempotent: every key it returns maps to
    itself when canonicalized again.
    """

    vocabulary: FoodVocabulary
    _compounds: dict[str, str] = field(init=False, repr=False)
    _synonyms: dict[str, str] = field(init=False, repr=False)
    _max_window: int = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._compounds = {
            self._singular_phrase(entry.split()): entry
            for entry in self.vocabulary.compounds
        }
        self._synonyms = {
            self._singular_phrase(key.split()): target
            for key, target in self.vocabulary.synonyms.items()
        }
        self._max_window = max(
            (len(entry.split()) for entry in self.vocabulary.compounds), default=0
        )

    def canonicalize(self, raw: str) -> str:
        """Return the canonical key for a raw food name."""
        if not isinstance(raw, str):
            raise TypeError(f"food name must be a string, got {type(raw).__name__}")
        tokens = tokenize(raw)

        compound = self._find_compound(tokens)
        if compound is not None:
            return compound

        content: list[str] = []
        for token in tokens:
            singular = self.singularize(token)
            if self._is_generic(token, singular) or self._is_modifier(token, singular):
                continue
            content.append(singular)

        if not content:
            # Modifiers alone ("fried", "white") name no specific food.
            return GENERIC_KEY

        compound = self._find_compound(content)
        if compound is not None:
            return compound

        phrase = " ".join(content)
        return self._synonyms.get(phrase, phrase)

    def singularize(self, token: str) -> str:
        """Return the singular form of a single token."""
        irregular = self.vocabulary.irregular_plurals.get(token)
        if irregular is not None:
            return irregular
        if token in self.vocabulary.invariant_words:
            return token
        if len(token) < _MIN_STRIPPABLE_LENGTH or token.endswith(("ss", "us", "is")):
            return token
        if token.endswith("ies") and len(token) > _MIN_STRIPPABLE_LENGTH:
            return token[:-3] + "y"
        if token.endswith(("sses", "ches", "shes", "xes", "oes")):
            return token[:-2]
        if token.endswith("s"):
            return token[:-1]
        return token

    def _singular_phrase(self, tokens: list[str]) -> str:
        return " ".join(self.singularize(token) for token in tokens)

    def _find_compound(self, tokens: list[str]) -> str | None:
        """Return the longest, leftmost compound identity found in tokens."""
        for size in range(min(self._max_window, len(tokens)), 1, -1):
            for start in range(len(tokens) - size + 1):
                window = self._singular_phrase(tokens[start : start + size])
                compound = self._compounds.get(window)
                if compound is not None:
                    return compound
        return None

    def _is_generic(self, token: str, singular: str) -> bool:
        terms = self.vocabulary.generic_terms
        return token in terms or singular in terms

    def _is_modifier(self, token: str, singular: str) -> bool:
        modifiers = self.vocabulary.modifiers
        return token in modifiers or singular in modifiers


@lru_cache(maxsize=1)
def default_canonicalizer() -> Canonicalizer:
    """Return a shared canonicalizer built from the bundled vocabulary."""
    return Canonicalizer(load_vocabulary())


def canonicalize(raw: str) -> str:
    """Canonicalize a name with the bundled vocabulary."""
    return default_canonicalizer().canonicalize(raw)
