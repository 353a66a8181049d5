"""
English singular/plural forms for the pluralisation strategy.

The rules come from the inflection package, a port of the Rails
ActiveSupport inflector. Only the trailing run of letters is inflected, so
"my-shop" becomes "my-shops" and a name ending in digits is left alone.
Words common in domain names that the package would still inflect are kept
as uncountable here.
"""

import re

import inflection

UNCOUNTABLE = frozenset({
    "police", "media", "data", "software", "hardware", "mail", "music",
    "art", "advice", "traffic", "staff", "news",
})

_TAIL = re.compile(r"[a-z]+$")


def _split_tail(word: str) -> tuple[str, str]:
    match = _TAIL.search(word)
    if not match:
        return word, ""
    return word[:match.start()], match.group(0)


def _inflect(word: str, transform) -> str:
    head, tail = _split_tail(word.lower())
    if not tail or tail in UNCOUNTABLE:
        return head + tail
    return head + transform(tail)


def pluralize(word: str) -> str:
    """Plural form of the last word in a name, e.g. 'company' -> 'companies'."""
    return _inflect(word, inflection.pluralize)


def singularize(word: str) -> str:
    """Singular form of the last word in a name, e.g. 'wolves' -> 'wolf'."""
    return _inflect(word, inflection.singularize)
