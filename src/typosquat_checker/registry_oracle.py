"""
Registry oracle: domain validity and public-suffix lookups.

Answers the questions the typo generator needs about names: is a string a
syntactically valid domain under a known suffix, where does its extension
start, and which TLDs and SLDs exist. The oracle is built once from an
explicit, read-only TLD dataset and is safe to share between tasks.
"""

import re
from typing import Iterable, Optional

import idna

from typosquat_checker.tld_registry import DEFAULT_TLDS, TLDEntry


# A-label form: letters, digits and hyphen only
LABEL_PATTERN = re.compile(r"^[a-z0-9-]+$")

MAX_LABEL_LENGTH = 63
MAX_DOMAIN_LENGTH = 253


class RegistryOracle:
    """
    Stateless lookups over a fixed TLD/SLD dataset.

    Handles:
    - Syntactic validity (LDH labels, length limits, IDNA encodability)
    - Longest-match public suffix split (co.uk before uk)
    - TLD and SLD enumeration for the wrong-TLD/SLD strategies
    """

    def __init__(self, entries: Optional[Iterable[TLDEntry]] = None) -> None:
        """
        Initialize the oracle with a TLD dataset.

        Args:
            entries: TLD entries to use; defaults to the bundled registry.
                     Repeated TLDs have their SLD lists merged.
        """
        slds_by_tld: dict[str, list[str]] = {}
        for entry in DEFAULT_TLDS if entries is None else entries:
            tld = entry.tld.lower()
            known = slds_by_tld.setdefault(tld, [])
            for sld in entry.slds:
                sld = sld.lower()
                if sld not in known:
                    known.append(sld)

        self._tlds: tuple[str, ...] = tuple(slds_by_tld)
        self._slds: dict[str, tuple[str, ...]] = {
            tld: tuple(slds) for tld, slds in slds_by_tld.items()
        }
        self._suffixes = frozenset(self._tlds) | frozenset(
            f"{sld}.{tld}" for tld, slds in self._slds.items() for sld in slds
        )

    def is_valid_domain(self, name: str) -> bool:
        """
        Check whether a name is a syntactically valid domain.

        A valid name has only LDH labels of 1-63 characters that do not start
        or end with a hyphen, is at most 253 characters in ASCII form, and
        has at least one label in front of a known public suffix.
        """
        if not name:
            return False

        ascii_name = self._to_ascii(name.lower())
        if ascii_name is None or len(ascii_name) > MAX_DOMAIN_LENGTH:
            return False

        labels = ascii_name.split(".")
        for label in labels:
            if not label or len(label) > MAX_LABEL_LENGTH:
                return False
            if not LABEL_PATTERN.match(label):
                return False
            if label.startswith("-") or label.endswith("-"):
                return False

        suffix = self._match_suffix(name.lower().split("."))
        if suffix is None:
            return False
        return len(labels) > len(suffix.split("."))

    def extension_of(self, name: str) -> str:
        """
        Return the public suffix of a name.

        The longest known suffix wins; when none is known the last label is
        returned.
        """
        labels = name.lower().split(".")
        suffix = self._match_suffix(labels)
        if suffix is not None:
            return suffix
        return labels[-1]

    def registered_name_of(self, name: str) -> str:
        """Return everything in front of the extension (subdomains included)."""
        extension = self.extension_of(name)
        lowered = name.lower()
        if lowered == extension:
            return ""
        return lowered[: -(len(extension) + 1)]

    def tld_of(self, name: str) -> str:
        """Return the final label of a name."""
        return name.lower().rsplit(".", 1)[-1]

    def all_known_tlds(self) -> list[str]:
        """Return every known TLD in dataset order."""
        return list(self._tlds)

    def slds(self, tld: str) -> list[str]:
        """Return the registered second-level labels under a TLD."""
        return list(self._slds.get(tld.lower(), ()))

    def has_registered_slds(self, tld: str) -> bool:
        """Check whether any SLDs are registered under a TLD."""
        return bool(self._slds.get(tld.lower()))

    def all_slds(self) -> list[str]:
        """Return every 'sld.tld' suffix across all TLDs."""
        return [
            f"{sld}.{tld}"
            for tld in self._tlds
            for sld in self._slds[tld]
        ]

    def is_known_suffix(self, suffix: str) -> bool:
        """Check whether a string is a known TLD or sld.tld suffix."""
        return suffix.lower() in self._suffixes

    def _match_suffix(self, labels: list[str]) -> Optional[str]:
        # Two-label suffixes first so co.uk beats uk
        if len(labels) >= 2:
            candidate = f"{labels[-2]}.{labels[-1]}"
            if candidate in self._suffixes:
                return candidate
        if labels and labels[-1] in self._suffixes:
            return labels[-1]
        return None

    @staticmethod
    def _to_ascii(name: str) -> Optional[str]:
        if name.isascii():
            return name
        try:
            return idna.encode(name, uts46=True).decode("ascii")
        except idna.IDNAError:
            return None
