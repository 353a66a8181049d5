"""
Homoglyph substitution over every combination of pattern occurrences.

For a pattern that occurs n times in a name, each occurrence is either kept
or replaced, giving 2**n - 1 variants besides the name itself. Enumeration
is an explicit product over keep/replace decisions and stops once the
caller's limit is reached; the limit is a deliberate bound on output size
for names with many repeated patterns.
"""

import itertools
from typing import Iterator

# Visually confusable pairs; each is applied in both directions
HOMOGLYPH_PAIRS: tuple[tuple[str, str], ...] = (
    ("0", "o"),
    ("1", "l"),
    ("l", "i"),
    ("rn", "m"),
    ("cl", "d"),
    ("vv", "w"),
)


def directed_pairs(pairs: tuple[tuple[str, str], ...] = HOMOGLYPH_PAIRS) -> list[tuple[str, str]]:
    """Expand confusable pairs into (pattern, replacement) in both directions."""
    directed = []
    for left, right in pairs:
        for pattern, replacement in ((left, right), (right, left)):
            if (pattern, replacement) not in directed:
                directed.append((pattern, replacement))
    return directed


def _iter_permutations(text: str, pattern: str, replacement: str) -> Iterator[str]:
    segments = text.split(pattern)
    occurrences = len(segments) - 1
    for decisions in itertools.product((False, True), repeat=occurrences):
        if not any(decisions):
            continue
        pieces = [segments[0]]
        for replace, segment in zip(decisions, segments[1:]):
            pieces.append(replacement if replace else pattern)
            pieces.append(segment)
        yield "".join(pieces)


def replace_permutations(text: str, pattern: str, replacement: str, limit: int) -> list[str]:
    """
    Replace every subset of the non-overlapping occurrences of pattern.

    Args:
        text: String to mutate
        pattern: Substring to look for
        replacement: Substring put in place of a replaced occurrence
        limit: Maximum number of variants to return

    Returns:
        Distinct variants other than text, in enumeration order
    """
    if not pattern or pattern not in text or limit <= 0:
        return []

    variants: list[str] = []
    seen = {text}
    for variant in _iter_permutations(text, pattern, replacement):
        if variant in seen:
            continue
        seen.add(variant)
        variants.append(variant)
        if len(variants) >= limit:
            break
    return variants


def homoglyph_variants(text: str, limit: int) -> list[str]:
    """
    All homoglyph variants of text across every directed pair.

    At most `limit` variants are produced in total.
    """
    variants: list[str] = []
    for pattern, replacement in directed_pairs():
        remaining = limit - len(variants)
        if remaining <= 0:
            break
        variants.extend(replace_permutations(text, pattern, replacement, remaining))
    return variants
