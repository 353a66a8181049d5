"""
Data models for the typosquat checker.

This module defines the subject domain, generated candidates, per-candidate
resolution records and the report handed to presentation layers.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

from .enums import StrategyTag

if TYPE_CHECKING:
    from .registry_oracle import RegistryOracle


@dataclass(frozen=True)
class Domain:
    """The validated subject of analysis."""

    raw: str  # Normalised input: stripped and lowercased
    extension: str  # Public suffix, e.g. 'com' or 'co.uk'
    registered_name: str  # Labels before the extension
    is_valid: bool

    @classmethod
    def from_string(cls, raw: str, oracle: RegistryOracle) -> Domain:
        """
        Build a Domain by asking the registry oracle for its split.

        registered_name and extension are only filled in when the oracle
        accepts the name.
        """
        name = (raw or "").strip().lower()
        if not oracle.is_valid_domain(name):
            return cls(raw=name, extension="", registered_name="", is_valid=False)
        return cls(
            raw=name,
            extension=oracle.extension_of(name),
            registered_name=oracle.registered_name_of(name),
            is_valid=True,
        )


@dataclass(frozen=True)
class Candidate:
    """One generated variant of the subject domain."""

    strategy: StrategyTag
    name: str
    is_valid: bool


@dataclass(frozen=True)
class ResolutionRecord:
    """Outcome of checking one candidate against DNS."""

    candidate: Candidate
    addresses: tuple[str, ...] = ()
    name_server: str = ""
    mail_exchange: str = ""

    @property
    def include_in_output(self) -> bool:
        """Valid name that resolved to at least one address."""
        return self.candidate.is_valid and bool(self.addresses)

    def to_dict(self) -> dict:
        """Row shape consumed by the output layers."""
        return {
            "type": self.candidate.strategy.value,
            "name": self.candidate.name,
            "ip": " ".join(self.addresses),
            "nameserver": self.name_server,
            "mailserver": self.mail_exchange,
        }


@dataclass
class ScanReport:
    """Ordered resolution records for one subject domain."""

    domain: Domain
    records: list[ResolutionRecord] = field(default_factory=list)
    interrupted: bool = False
    resolved: bool = True
    error: Optional[str] = None

    @property
    def results(self) -> list[ResolutionRecord]:
        """Records that pass the output filter, in generation order."""
        if not self.resolved:
            return list(self.records)
        return [record for record in self.records if record.include_in_output]

    def to_dict(self, show_invalid: bool = False) -> dict:
        """
        Convert the report to the output boundary document.

        Args:
            show_invalid: List every record instead of the filtered results
        """
        records = self.records if show_invalid else self.results
        return {
            "domain": self.domain.raw,
            "tld": self.domain.extension,
            "items": [record.to_dict() for record in records],
        }
