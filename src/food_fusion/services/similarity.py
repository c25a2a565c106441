"""Similarity scoring between canonical food keys."""

from food_fusion.services.canonicalizer import (
    GENERIC_KEY,
    Canonicalizer,
    default_canonicalizer,
)

MATCH_THRESHOLD = 0.5


def similar(a: str, b: str, canonicalizer: Canonicalizer | None = None) -> float:
    """Score how likely two names refer to the same food, in [0, 1].

    Both names are canonicalized first. Equal keys score 1.0, the generic key
    never matches a specific food, and everything else takes the larger of
    token Jaccard overlap and a whole-word containment ratio.
    """
    resolved = canonicalizer or default_canonicalizer()
    key_a = resolved.canonicalize(a)
    key_b = resolved.canonicalize(b)
    if key_a == key_b:
        return 1.0
    if GENERIC_KEY in (key_a, key_b):
        return 0.0
    tokens_a = key_a.split()
    tokens_b = key_b.split()
    return max(
        _jaccard(tokens_a, tokens_b),
        _containment(key_a, key_b, tokens_a, tokens_b),
    )


def _jaccard(tokens_a: list[str], tokens_b: list[str]) -> float:
    set_a = set(tokens_a)
    set_b = set(tokens_b)
    union = set_a | set_b
    if not union:
        return 0.0
    return len(set_a & set_b) / len(union)


def _containment(
    key_a: str, key_b: str, tokens_a: list[str], tokens_b: list[str]
) -> float:
    """Score len(shorter)/len(longer) when the shorter key is a word-aligned run."""
    if len(key_a) <= len(key_b):
        shorter, longer, short_tokens, long_tokens = key_a, key_b, tokens_a, tokens_b
    else:
        shorter, longer, short_tokens, long_tokens = key_b, key_a, tokens_b, tokens_a
    if not short_tokens or not _is_contiguous_run(short_tokens, long_tokens):
        return 0.0
    return len(shorter) / len(longer)


def _is_contiguous_run(needle: list[str], haystack: list[str]) -> bool:
    size = len(needle)
    return any(
        haystack[start : start + size] == needle
        for start in range(len(haystack) - size + 1)
    )
