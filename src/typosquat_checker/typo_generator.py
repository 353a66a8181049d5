"""
Typo Generator for the typosquat checker.

Expands one domain into an ordered catalog of strategy-tagged candidate
names. Each mutation algorithm works on the registered name alone and the
original extension is appended afterwards; wrong-TLD/SLD algorithms supply
their own suffix instead.

Catalog rules:
- The Original candidate is always first, even for invalid input
- Within one algorithm, results are sorted and deduplicated by name
- A candidate equal to the input domain is never emitted by an algorithm
- The same name may appear under several strategies
- Validity of every name is decided at generation time
"""

from collections import OrderedDict
from typing import Callable, Iterable, Optional

from .config import DEFAULT_HOMOGLYPH_LIMIT
from .dictionaries import MutationDictionaries
from .enums import LogLevel, StrategyTag
from .homoglyphs import homoglyph_variants
from .inflector import pluralize, singularize
from .keyboard import KeyboardModel
from .models import Candidate, Domain
from .registry_oracle import RegistryOracle
from .scan_logger import ScanLogger

VOWELS = "aeiou"

# Characters a flipped bit may produce
BIT_FLIP_CHARSET = frozenset("abcdefghijklmnopqrstuvwxyz0123456789-")


class TypoGenerator:
    """
    Deterministic typo catalog builder.

    All collaborators are read-only and passed in explicitly, so one
    generator can serve any number of domains.
    """

    def __init__(
        self,
        oracle: RegistryOracle,
        keyboard: KeyboardModel,
        dictionaries: MutationDictionaries,
        homoglyph_limit: int = DEFAULT_HOMOGLYPH_LIMIT,
        logger: Optional[ScanLogger] = None,
    ) -> None:
        """
        Initialize the generator.

        Args:
            oracle: Registry lookups for validity and TLD/SLD enumeration
            keyboard: Adjacency model for the chosen layout
            dictionaries: Misspelling, homophone and affix data
            homoglyph_limit: Cap on homoglyph candidates per domain
            logger: Optional logger
        """
        self._oracle = oracle
        self._keyboard = keyboard
        self._dictionaries = dictionaries
        self._homoglyph_limit = homoglyph_limit
        self._logger = logger

        # Fixed generation order
        self._algorithms: "OrderedDict[StrategyTag, Callable[[Domain], Iterable[str]]]" = OrderedDict([
            (StrategyTag.CHARACTER_OMISSION, self.character_omission),
            (StrategyTag.CHARACTER_REPEAT, self.character_repeat),
            (StrategyTag.CHARACTER_SWAP, self.character_swap),
            (StrategyTag.CHARACTER_REPLACEMENT, self.character_replacement),
            (StrategyTag.DOUBLE_REPLACEMENT, self.double_character_replacement),
            (StrategyTag.CHARACTER_INSERTION, self.character_insertion),
            (StrategyTag.MISSING_DOT, self.missing_dot),
            (StrategyTag.INSERT_DASH, self.insert_dash),
            (StrategyTag.STRIP_DASHES, self.strip_dashes),
            (StrategyTag.SINGULAR_OR_PLURALISE, self.singular_or_pluralise),
            (StrategyTag.COMMON_MISSPELLING, self.common_misspellings),
            (StrategyTag.VOWEL_SWAP, self.vowel_swap),
            (StrategyTag.HOMOPHONES, self.homophones),
            (StrategyTag.BIT_FLIPPING, self.bit_flipping),
            (StrategyTag.HOMOGLYPHS, self.homoglyphs),
            (StrategyTag.WRONG_TLD, self.wrong_tld),
            (StrategyTag.WRONG_SLD, self.wrong_sld),
            (StrategyTag.ALL_SLD, self.all_sld),
            (StrategyTag.DOMAIN_PREFIX, self.domain_prefix),
            (StrategyTag.DOMAIN_SUFFIX, self.domain_suffix),
        ])

    @property
    def strategies(self) -> list[StrategyTag]:
        """Mutation strategies in generation order (Original excluded)."""
        return list(self._algorithms)

    def generate(
        self,
        domain: Domain,
        strategies: Optional[Iterable[StrategyTag]] = None,
    ) -> list[Candidate]:
        """
        Build the candidate catalog for a domain.

        Args:
            domain: Subject domain
            strategies: Restrict to these strategies; None runs all of them.
                        Original is always included.

        Returns:
            Ordered candidates, Original first
        """
        catalog = [
            Candidate(
                strategy=StrategyTag.ORIGINAL,
                name=domain.raw,
                is_valid=self._oracle.is_valid_domain(domain.raw),
            )
        ]

        if not domain.is_valid:
            self._log(
                LogLevel.WARN,
                f"Domain is not valid, only the original is listed: {domain.raw}",
                {"domain": domain.raw},
            )
            return catalog

        selected = set(strategies) if strategies is not None else None

        for tag, algorithm in self._algorithms.items():
            if selected is not None and tag not in selected:
                continue
            names = sorted(set(algorithm(domain)))
            added = 0
            for name in names:
                if name == domain.raw:
                    continue
                catalog.append(Candidate(
                    strategy=tag,
                    name=name,
                    is_valid=self._oracle.is_valid_domain(name),
                ))
                added += 1
            self._log(
                LogLevel.DEBUG,
                f"{tag.value}: {added} candidate(s)",
                {"domain": domain.raw, "strategy": tag.value, "count": added},
            )

        self._log(
            LogLevel.INFO,
            f"Generated {len(catalog)} candidates for {domain.raw}",
            {"domain": domain.raw, "count": len(catalog)},
        )
        return catalog

    # ------------------------------------------------------------------
    # Positional algorithms
    # ------------------------------------------------------------------

    def character_omission(self, domain: Domain) -> list[str]:
        name = domain.registered_name
        return [
            self._join(name[:i] + name[i + 1:], domain)
            for i in range(len(name))
        ]

    def character_repeat(self, domain: Domain) -> list[str]:
        name = domain.registered_name
        return [
            self._join(name[:i] + name[i] + name[i] + name[i + 1:], domain)
            for i in range(len(name))
        ]

    def character_swap(self, domain: Domain) -> list[str]:
        name = domain.registered_name
        return [
            self._join(name[:i] + name[i + 1] + name[i] + name[i + 2:], domain)
            for i in range(len(name) - 1)
        ]

    def character_replacement(self, domain: Domain) -> list[str]:
        """Each character replaced by its left or right keyboard neighbour."""
        name = domain.registered_name
        variants = []
        for i, char in enumerate(name):
            for key in self._keyboard.neighbors(char):
                variants.append(self._join(name[:i] + key + name[i + 1:], domain))
        return variants

    def double_character_replacement(self, domain: Domain) -> list[str]:
        """Each character replaced by its neighbour typed twice."""
        name = domain.registered_name
        variants = []
        for i, char in enumerate(name):
            for key in self._keyboard.neighbors(char):
                variants.append(self._join(name[:i] + key + key + name[i + 1:], domain))
        return variants

    def character_insertion(self, domain: Domain) -> list[str]:
        """A neighbour key inserted in front of each character."""
        name = domain.registered_name
        variants = []
        for i, char in enumerate(name):
            for key in self._keyboard.neighbors(char):
                variants.append(self._join(name[:i] + key + name[i:], domain))
        return variants

    def missing_dot(self, domain: Domain) -> list[str]:
        name = domain.registered_name
        if "." not in name:
            return []
        return [self._join(name.replace(".", ""), domain)]

    def insert_dash(self, domain: Domain) -> list[str]:
        name = domain.registered_name
        return [
            self._join(name[:i] + "-" + name[i:], domain)
            for i in range(1, len(name))
        ]

    def strip_dashes(self, domain: Domain) -> list[str]:
        name = domain.registered_name
        if "-" not in name:
            return []
        return [self._join(name.replace("-", ""), domain)]

    def vowel_swap(self, domain: Domain) -> list[str]:
        """Every vowel replaced by each vowel in turn (five per position)."""
        name = domain.registered_name
        variants = []
        for i, char in enumerate(name):
            if char not in VOWELS:
                continue
            for vowel in VOWELS:
                variants.append(self._join(name[:i] + vowel + name[i + 1:], domain))
        return variants

    def bit_flipping(self, domain: Domain) -> list[str]:
        """
        Single-bit corruptions of each character.

        Only flips that land on a lowercase letter, digit or hyphen are kept;
        non-ASCII characters are skipped.
        """
        name = domain.registered_name
        variants = []
        for i, char in enumerate(name):
            code = ord(char)
            if code > 0x7F:
                continue
            for bit in range(8):
                flipped = chr(code ^ (1 << bit))
                if flipped in BIT_FLIP_CHARSET:
                    variants.append(self._join(name[:i] + flipped + name[i + 1:], domain))
        return variants

    # ------------------------------------------------------------------
    # Dictionary algorithms
    # ------------------------------------------------------------------

    def singular_or_pluralise(self, domain: Domain) -> list[str]:
        name = domain.registered_name
        return [
            self._join(singularize(name), domain),
            self._join(pluralize(name), domain),
        ]

    def common_misspellings(self, domain: Domain) -> list[str]:
        name = domain.registered_name
        return [
            self._join(name.replace(word, misspelling), domain)
            for word, misspelling in self._dictionaries.misspellings_containing(name).items()
        ]

    def homophones(self, domain: Domain) -> list[str]:
        name = domain.registered_name
        return [
            self._join(name.replace(word, homophone), domain)
            for word, replacements in self._dictionaries.homophones_containing(name).items()
            for homophone in replacements
        ]

    def homoglyphs(self, domain: Domain) -> list[str]:
        variants = homoglyph_variants(domain.registered_name, self._homoglyph_limit)
        if len(variants) >= self._homoglyph_limit:
            self._log(
                LogLevel.WARN,
                f"Homoglyph candidates capped at {self._homoglyph_limit}",
                {"domain": domain.raw, "limit": self._homoglyph_limit},
            )
        return [self._join(variant, domain) for variant in variants]

    def domain_prefix(self, domain: Domain) -> list[str]:
        return [
            self._join(f"{word}-{domain.registered_name}", domain)
            for word in self._dictionaries.prefixes
        ]

    def domain_suffix(self, domain: Domain) -> list[str]:
        return [
            self._join(f"{domain.registered_name}-{word}", domain)
            for word in self._dictionaries.suffixes
        ]

    # ------------------------------------------------------------------
    # Registry algorithms
    # ------------------------------------------------------------------

    def wrong_tld(self, domain: Domain) -> list[str]:
        return [
            f"{domain.registered_name}.{tld}"
            for tld in self._oracle.all_known_tlds()
        ]

    def wrong_sld(self, domain: Domain) -> list[str]:
        """The registered name under each SLD of the domain's own TLD."""
        tld = self._oracle.tld_of(domain.raw)
        if not self._oracle.has_registered_slds(tld):
            return []
        return [
            f"{domain.registered_name}.{sld}.{tld}"
            for sld in self._oracle.slds(tld)
        ]

    def all_sld(self, domain: Domain) -> list[str]:
        return [
            f"{domain.registered_name}.{suffix}"
            for suffix in self._oracle.all_slds()
        ]

    @staticmethod
    def _join(label: str, domain: Domain) -> str:
        return f"{label}.{domain.extension}"

    def _log(self, level: LogLevel, message: str, data: dict) -> None:
        if self._logger:
            self._logger.log(level, "TypoGenerator", message, data)


def catalog_by_strategy(candidates: Iterable[Candidate]) -> "OrderedDict[StrategyTag, list[Candidate]]":
    """Group a catalog by strategy, keeping first-seen strategy order."""
    grouped: "OrderedDict[StrategyTag, list[Candidate]]" = OrderedDict()
    for candidate in candidates:
        grouped.setdefault(candidate.strategy, []).append(candidate)
    return grouped
