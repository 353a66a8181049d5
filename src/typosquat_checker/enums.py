"""
Enumeration types for the typosquat checker.

These enums provide type-safe constants for mutation strategies, keyboard
layouts, DNS record types, error codes and output options.
"""

from enum import Enum


class StrategyTag(Enum):
    """Mutation algorithm that produced a candidate, in generation order."""

    ORIGINAL = "Original"
    CHARACTER_OMISSION = "Character Omission"
    CHARACTER_REPEAT = "Character Repeat"
    CHARACTER_SWAP = "Character Swap"
    CHARACTER_REPLACEMENT = "Character Replacement"
    DOUBLE_REPLACEMENT = "Double Replacement"
    CHARACTER_INSERTION = "Character Insertion"
    MISSING_DOT = "Missing Dot"
    INSERT_DASH = "Insert Dash"
    STRIP_DASHES = "Strip Dashes"
    SINGULAR_OR_PLURALISE = "Singular or Pluralise"
    COMMON_MISSPELLING = "Common Misspelling"
    VOWEL_SWAP = "Vowel Swap"
    HOMOPHONES = "Homophones"
    BIT_FLIPPING = "Bit Flipping"
    HOMOGLYPHS = "Homoglyphs"
    WRONG_TLD = "Wrong TLD"
    WRONG_SLD = "Wrong SLD"
    ALL_SLD = "All SLD"
    DOMAIN_PREFIX = "Domain Prefix"
    DOMAIN_SUFFIX = "Domain Suffix"

    @classmethod
    def from_name(cls, name: str) -> "StrategyTag":
        """
        Look up a tag by member name or label, case-insensitively.

        Accepts 'wrong-tld', 'WRONG_TLD' and 'Wrong TLD' alike.

        Raises:
            ValueError: If no tag matches
        """
        key = name.strip().upper().replace("-", "_").replace(" ", "_")
        for tag in cls:
            if tag.name == key:
                return tag
        raise ValueError(f"Unknown strategy: {name}")


class KeyboardLayout(Enum):
    """Supported keyboard layouts for adjacency typos."""

    QWERTY = "qwerty"
    QWERTZ = "qwertz"
    AZERTY = "azerty"
    DVORAK = "dvorak"


class LogLevel(Enum):
    """Logging severity levels."""

    DEBUG = "debug"
    INFO = "info"
    WARN = "warn"
    ERROR = "error"

    @property
    def severity(self) -> int:
        """Numeric rank used for threshold filtering."""
        return _LOG_LEVEL_ORDER[self]


_LOG_LEVEL_ORDER = {
    LogLevel.DEBUG: 10,
    LogLevel.INFO: 20,
    LogLevel.WARN: 30,
    LogLevel.ERROR: 40,
}


class RecordType(Enum):
    """DNS record types queried per candidate."""

    A = "A"
    AAAA = "AAAA"
    NS = "NS"
    MX = "MX"


class ResolutionErrorCode(Enum):
    """Error codes for DNS lookups."""

    NXDOMAIN = "nxdomain"
    NO_ANSWER = "no_answer"
    NO_NAMESERVERS = "no_nameservers"
    TIMEOUT = "timeout"
    NETWORK_ERROR = "network_error"


class OutputFormat(Enum):
    """Presentation formats for scan reports."""

    HUMAN = "human"
    CSV = "csv"
    JSON = "json"
