"""
Scan Orchestrator for the typosquat checker.

This module provides the orchestration layer that wires the components
together for one subject domain:
- Domain validation and splitting through the registry oracle
- Candidate generation with the configured keyboard layout and strategies
- Concurrent DNS resolution and output filtering

An invalid subject domain is not fatal: the scan reports the Original
candidate alone and records the error.
"""

from typing import Optional

from .config import SystemConfig
from .dictionaries import MutationDictionaries
from .dns_resolver import DNSResolver, Resolver
from .enums import LogLevel
from .exceptions import InputError
from .keyboard import KeyboardModel
from .models import Candidate, Domain, ResolutionRecord, ScanReport
from .pipeline import ResolutionPipeline
from .registry_oracle import RegistryOracle
from .scan_logger import ScanLogger
from .typo_generator import TypoGenerator


class ScanOrchestrator:
    """
    Main orchestrator for typosquat scans.

    Collaborators may be injected; anything not supplied is built from the
    configuration. The DNS resolver is only created when a scan actually
    resolves, so generation-only runs never touch resolver configuration.
    """

    async def __aenter__(self) -> "ScanOrchestrator":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit."""
        await self.close()

    def __init__(
        self,
        config: SystemConfig,
        oracle: Optional[RegistryOracle] = None,
        dictionaries: Optional[MutationDictionaries] = None,
        resolver: Optional[Resolver] = None,
        logger: Optional[ScanLogger] = None,
    ) -> None:
        """
        Initialize the scan orchestrator.

        Args:
            config: System configuration
            oracle: Optional registry oracle (defaults to the bundled TLD data)
            dictionaries: Optional mutation dictionaries (defaults to the bundled data)
            resolver: Optional resolver (defaults to DNSResolver)
            logger: Optional scan logger
        """
        self._config = config
        self._logger = logger

        self._oracle = oracle or RegistryOracle()
        self._dictionaries = dictionaries or MutationDictionaries.default(
            config.generator.affix_directory
        )
        self._keyboard = KeyboardModel(config.generator.keyboard_layout)
        self._generator = TypoGenerator(
            oracle=self._oracle,
            keyboard=self._keyboard,
            dictionaries=self._dictionaries,
            homoglyph_limit=config.generator.homoglyph_limit,
            logger=logger,
        )

        self._resolver = resolver
        self._owns_resolver = resolver is None
        self._pipeline: Optional[ResolutionPipeline] = None
        self._domain: Optional[Domain] = None

    def generate(self, raw_domain: str) -> tuple[Domain, list[Candidate]]:
        """
        Validate the subject domain and build its candidate catalog.

        Args:
            raw_domain: Domain as typed by the user

        Returns:
            Tuple of (Domain, ordered candidates)
        """
        domain = Domain.from_string(raw_domain, self._oracle)
        self._domain = domain

        if not domain.is_valid:
            error = InputError(
                code="invalid_domain",
                message=f"Not a valid registrable domain: {domain.raw!r}",
                details={"domain": domain.raw},
            )
            if self._logger:
                self._logger.log_error("ScanOrchestrator", error.message, error=error)
        else:
            self._log_info(
                "ScanOrchestrator",
                f"Starting scan for domain: {domain.raw}",
                {
                    "domain": domain.raw,
                    "registered_name": domain.registered_name,
                    "extension": domain.extension,
                    "layout": self._keyboard.layout.value,
                },
            )

        candidates = self._generator.generate(
            domain, strategies=self._config.generator.strategy_tags()
        )
        return domain, candidates

    async def scan(self, raw_domain: str, resolve: bool = True) -> ScanReport:
        """
        Perform a complete scan.

        Args:
            raw_domain: Domain as typed by the user
            resolve: Query DNS and filter; when False every candidate is
                     listed without DNS data

        Returns:
            ScanReport for the domain
        """
        domain, candidates = self.generate(raw_domain)
        error = None if domain.is_valid else f"Not a valid registrable domain: {domain.raw!r}"

        if not resolve:
            return ScanReport(
                domain=domain,
                records=[ResolutionRecord(candidate=candidate) for candidate in candidates],
                resolved=False,
                error=error,
            )

        pipeline = self._get_pipeline()
        records = await pipeline.run(candidates)

        report = ScanReport(
            domain=domain,
            records=records,
            interrupted=pipeline.interrupted,
            error=error,
        )
        self._log_info(
            "ScanOrchestrator",
            f"Scan finished for {domain.raw}: {len(report.results)} result(s)",
            {
                "domain": domain.raw,
                "candidates": len(records),
                "results": len(report.results),
                "interrupted": report.interrupted,
            },
        )
        return report

    def stop(self) -> None:
        """Ask a running resolution to stop issuing new lookups."""
        if self._pipeline is not None:
            self._pipeline.stop()

    def partial_report(self) -> Optional[ScanReport]:
        """
        Report built from whatever the pipeline has resolved so far.

        Used when a scan is torn down from outside before scan() returns.
        """
        if self._domain is None or self._pipeline is None:
            return None
        return ScanReport(
            domain=self._domain,
            records=self._pipeline.snapshot(),
            interrupted=True,
        )

    async def close(self) -> None:
        if self._resolver is not None and self._owns_resolver:
            await self._resolver.close()

    def _get_pipeline(self) -> ResolutionPipeline:
        if self._pipeline is None:
            if self._resolver is None:
                self._resolver = DNSResolver(self._config.resolver, logger=self._logger)
            self._pipeline = ResolutionPipeline(
                self._resolver,
                workers=self._config.resolver.workers,
                logger=self._logger,
            )
        return self._pipeline

    def _log_info(self, component: str, message: str, data: dict) -> None:
        """Log an info message if logger is available."""
        if self._logger:
            self._logger.log(LogLevel.INFO, component, message, data)

    @property
    def oracle(self) -> RegistryOracle:
        """Get the registry oracle instance."""
        return self._oracle

    @property
    def generator(self) -> TypoGenerator:
        """Get the typo generator instance."""
        return self._generator

    @property
    def config(self) -> SystemConfig:
        """Get the system configuration."""
        return self._config
