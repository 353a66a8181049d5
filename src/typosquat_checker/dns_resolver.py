"""
DNS Resolver for the typosquat checker.

This module provides async A, AAAA, NS and MX lookups through dnspython's
asyncio resolver. Lookup failures are reported as data on the returned
LookupResult and never raised, so a single bad candidate cannot abort a run.

Nameservers may be plain IP addresses or DNS-over-HTTPS URLs; the latter
require the dnspython 'doh' extra.
"""

import asyncio
from dataclasses import dataclass
from typing import Optional

import dns.asyncresolver
import dns.exception
import dns.resolver

from .config import ResolverConfig
from .enums import LogLevel, RecordType, ResolutionErrorCode
from .exceptions import ConfigError, ResolutionError, ResolutionTimeout
from .retry_manager import RetryManager
from .scan_logger import ScanLogger

# Address handed out by simulation mode (TEST-NET-1)
SIMULATED_ADDRESS = "192.0.2.1"
SIMULATED_PREFIX = "resolved-"


@dataclass(frozen=True)
class DNSLookupError:
    """Error information from a DNS lookup."""

    code: ResolutionErrorCode
    message: str


@dataclass(frozen=True)
class LookupResult:
    """Outcome of a single record lookup."""

    record_type: RecordType
    values: tuple[str, ...] = ()  # rdata in presentation format
    error: Optional[DNSLookupError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def ensure_trailing_dot(name: str) -> str:
    name = name.strip()
    if not name:
        return ""
    return name if name.endswith(".") else name + "."


class Resolver:
    """
    Base resolver.

    Subclasses implement lookup(); the record-specific helpers below shape
    its raw answers into what a ResolutionRecord holds. Transient failures
    go through the retry manager when one is configured.
    """

    def __init__(
        self,
        retry_manager: Optional[RetryManager] = None,
        logger: Optional[ScanLogger] = None,
    ) -> None:
        self._retry_manager = retry_manager or RetryManager()
        self._logger = logger

    async def __aenter__(self) -> "Resolver":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def lookup(self, name: str, record_type: RecordType) -> LookupResult:
        raise NotImplementedError

    async def close(self) -> None:
        pass

    async def lookup_with_retry(self, name: str, record_type: RecordType) -> LookupResult:
        result, attempts = await self._retry_manager.execute_lookup_with_retry(
            lambda: self.lookup(name, record_type)
        )
        if result.error is not None and result.error.code not in (
            ResolutionErrorCode.NXDOMAIN,
            ResolutionErrorCode.NO_ANSWER,
        ):
            self._log(
                LogLevel.DEBUG,
                f"{record_type.value} lookup failed for {name}: {result.error.message}",
                {
                    "name": name,
                    "record_type": record_type.value,
                    "error_code": result.error.code.value,
                    "attempts": attempts,
                },
            )
        return result

    async def resolve_addresses(self, name: str) -> tuple[str, ...]:
        """A then AAAA addresses, deduplicated in lookup order."""
        results = await asyncio.gather(
            self.lookup_with_retry(name, RecordType.A),
            self.lookup_with_retry(name, RecordType.AAAA),
        )
        addresses: list[str] = []
        for result in results:
            for value in result.values:
                if value not in addresses:
                    addresses.append(value)
        return tuple(addresses)

    async def resolve_name_server(self, name: str) -> str:
        """First NS host with a single trailing dot, or an empty string."""
        result = await self.lookup_with_retry(name, RecordType.NS)
        if not result.values:
            return ""
        return ensure_trailing_dot(result.values[0])

    async def resolve_mail_exchange(self, name: str) -> str:
        """
        Exchange host of the lowest-preference MX record, or an empty string.

        Ties keep the first record in lookup order.
        """
        result = await self.lookup_with_retry(name, RecordType.MX)
        best: Optional[tuple[int, str]] = None
        for value in result.values:
            parts = value.split()
            if len(parts) != 2:
                continue
            try:
                preference = int(parts[0])
            except ValueError:
                continue
            if best is None or preference < best[0]:
                best = (preference, parts[1])
        # "0 ." is a null MX: the domain accepts no mail
        if best is None or best[1] == ".":
            return ""
        return ensure_trailing_dot(best[1])

    def _log(self, level: LogLevel, message: str, data: dict) -> None:
        if self._logger:
            self._logger.log(level, "DNSResolver", message, data)


class DNSResolver(Resolver):
    """
    Resolver backed by dns.asyncresolver.

    The per-query lifetime equals the configured timeout and every call is
    additionally bounded by asyncio.wait_for.
    """

    def __init__(
        self,
        config: ResolverConfig,
        logger: Optional[ScanLogger] = None,
    ) -> None:
        """
        Initialize the DNS resolver.

        Args:
            config: Resolver settings (timeout, nameservers, retries)
            logger: Optional logger

        Raises:
            ConfigError: If no nameservers are given and the system resolver
                         configuration cannot be read
        """
        super().__init__(RetryManager.from_config(config), logger)
        self._timeout = config.timeout_seconds
        self._simulation_mode = config.simulation_mode
        self._resolver: Optional[dns.asyncresolver.Resolver] = None

        if self._simulation_mode:
            return

        if config.nameservers:
            resolver = dns.asyncresolver.Resolver(configure=False)
            try:
                resolver.nameservers = list(config.nameservers)
            except ValueError as e:
                raise ConfigError(
                    code="invalid_nameserver",
                    message=f"Invalid nameserver: {e}",
                    details={"nameservers": list(config.nameservers)},
                )
        else:
            try:
                resolver = dns.asyncresolver.Resolver()
            except dns.resolver.NoResolverConfiguration:
                raise ConfigError(
                    code="no_resolver_configuration",
                    message="System resolver configuration not found; specify nameservers explicitly",
                )
            resolver.search = []

        resolver.timeout = self._timeout
        resolver.lifetime = self._timeout
        self._resolver = resolver

    @property
    def simulation_mode(self) -> bool:
        return self._simulation_mode

    async def lookup(self, name: str, record_type: RecordType) -> LookupResult:
        """
        Query one record type for a name.

        Returns:
            LookupResult with the rdata as text, or with an error set
        """
        if self._simulation_mode:
            return self._create_simulation_result(name, record_type)

        try:
            values = await self._query(name, record_type)
        except ResolutionError as e:
            return self._error(record_type, ResolutionErrorCode(e.code), e.message)

        return LookupResult(record_type=record_type, values=values)

    async def _query(self, name: str, record_type: RecordType) -> tuple[str, ...]:
        """
        Run the dnspython query.

        Raises:
            ResolutionTimeout: If the query exceeds the configured timeout
            ResolutionError: On any other DNS or transport failure
        """
        assert self._resolver is not None

        details = {"name": name, "record_type": record_type.value}
        try:
            answer = await asyncio.wait_for(
                self._resolver.resolve(name, record_type.value, lifetime=self._timeout),
                timeout=self._timeout,
            )
        except dns.resolver.NXDOMAIN:
            raise ResolutionError(
                code=ResolutionErrorCode.NXDOMAIN.value,
                message=f"{name} does not exist",
                details=details,
            )
        except dns.resolver.NoAnswer:
            raise ResolutionError(
                code=ResolutionErrorCode.NO_ANSWER.value,
                message=f"No {record_type.value} records",
                details=details,
            )
        except dns.resolver.NoNameservers as e:
            raise ResolutionError(
                code=ResolutionErrorCode.NO_NAMESERVERS.value,
                message=str(e),
                details=details,
            )
        except (dns.exception.Timeout, asyncio.TimeoutError):
            raise ResolutionTimeout(
                code=ResolutionErrorCode.TIMEOUT.value,
                message=f"Lookup timed out after {self._timeout}s",
                details=details,
            )
        except dns.exception.DNSException as e:
            raise ResolutionError(
                code=ResolutionErrorCode.NETWORK_ERROR.value,
                message=f"DNS error: {e}",
                details=details,
            )
        except OSError as e:
            raise ResolutionError(
                code=ResolutionErrorCode.NETWORK_ERROR.value,
                message=f"Network error: {e}",
                details=details,
            )

        return tuple(rdata.to_text() for rdata in answer)

    @staticmethod
    def _error(record_type: RecordType, code: ResolutionErrorCode, message: str) -> LookupResult:
        return LookupResult(
            record_type=record_type,
            error=DNSLookupError(code=code, message=message),
        )

    def _create_simulation_result(self, name: str, record_type: RecordType) -> LookupResult:
        """Simulated answer without network access."""
        label = name.split(".", 1)[0]
        if not label.startswith(SIMULATED_PREFIX):
            return self._error(record_type, ResolutionErrorCode.NXDOMAIN, f"{name} does not exist")
        if record_type is RecordType.A:
            return LookupResult(record_type=record_type, values=(SIMULATED_ADDRESS,))
        return self._error(record_type, ResolutionErrorCode.NO_ANSWER, f"No {record_type.value} records")
