"""
Resolution Pipeline for the typosquat checker.

Resolves a candidate catalog concurrently and returns one ResolutionRecord
per candidate, in catalog order regardless of completion order.

A bounded asyncio.Queue of (index, candidate) pairs feeds a fixed number of
worker tasks. Each worker runs the address, name server and mail exchange
lookups for its candidate together and writes the record into the slot at
that index. Stopping is cooperative: once stop() is called no new lookups
start, and the slots that were never filled come back as empty records.
Cancelling run() also stops feeding the queue, waits for the lookups that
are already in flight, then re-raises the cancellation. The records
computed up to that point stay available through snapshot().
"""

import asyncio
from typing import Iterable, Optional

from .dns_resolver import Resolver
from .enums import LogLevel
from .models import Candidate, ResolutionRecord
from .scan_logger import ScanLogger

_SENTINEL = None


class ResolutionPipeline:
    """Fan-out/fan-in DNS resolution over a candidate catalog."""

    def __init__(
        self,
        resolver: Resolver,
        workers: int = 32,
        logger: Optional[ScanLogger] = None,
        resolve_invalid: bool = False,
    ) -> None:
        """
        Initialize the pipeline.

        Args:
            resolver: Resolver used for every candidate
            workers: Number of concurrent worker tasks
            logger: Optional logger
            resolve_invalid: Also query DNS for names the oracle rejected.
                             They are still excluded by filter_records().
        """
        if workers < 1:
            raise ValueError("workers must be at least 1")

        self._resolver = resolver
        self._workers = workers
        self._logger = logger
        self._resolve_invalid = resolve_invalid

        self._stopping = False
        self._interrupted = False
        self._candidates: list[Candidate] = []
        self._slots: list[Optional[ResolutionRecord]] = []

    @property
    def interrupted(self) -> bool:
        """True when the last run ended before every candidate was resolved."""
        return self._interrupted

    def stop(self) -> None:
        """Stop issuing new lookups; in-flight lookups are allowed to finish."""
        self._stopping = True

    async def run(self, candidates: Iterable[Candidate]) -> list[ResolutionRecord]:
        """
        Resolve every candidate.

        Args:
            candidates: Catalog to resolve

        Returns:
            One record per candidate in the same order. When the run was
            stopped, unresolved candidates carry no data and interrupted
            is set.

        Raises:
            asyncio.CancelledError: When run() itself is cancelled, after the
                in-flight lookups have finished. interrupted is set and
                snapshot() holds the partial records.
        """
        self._candidates = list(candidates)
        self._slots = [None] * len(self._candidates)
        self._stopping = False
        self._interrupted = False

        if not self._candidates:
            return []

        worker_count = min(self._workers, len(self._candidates))
        queue: asyncio.Queue = asyncio.Queue(maxsize=worker_count * 2)
        workers = [
            asyncio.create_task(self._worker(queue))
            for _ in range(worker_count)
        ]

        self._log(
            LogLevel.INFO,
            f"Resolving {len(self._candidates)} candidates with {worker_count} workers",
            {"candidates": len(self._candidates), "workers": worker_count},
        )

        sentinels = 0
        try:
            for index, candidate in enumerate(self._candidates):
                if self._stopping:
                    break
                await queue.put((index, candidate))
            for _ in workers:
                await queue.put(_SENTINEL)
                sentinels += 1
            await asyncio.wait(workers)
        except asyncio.CancelledError:
            self._stopping = True
            self._interrupted = True
            self._log(
                LogLevel.WARN,
                "Resolution cancelled, waiting for in-flight lookups",
                {"resolved": sum(slot is not None for slot in self._slots), "total": len(self._slots)},
            )
            await asyncio.shield(self._drain(queue, workers, len(workers) - sentinels))
            raise

        records = self.snapshot()
        if self._stopping or any(slot is None for slot in self._slots):
            self._interrupted = True
            self._log(
                LogLevel.WARN,
                "Resolution interrupted, returning partial results",
                {"resolved": sum(slot is not None for slot in self._slots), "total": len(records)},
            )
        else:
            self._log(
                LogLevel.INFO,
                f"Resolution finished: {len(self.filter_records(records))} candidate(s) with addresses",
                {"total": len(records)},
            )
        return records

    def snapshot(self) -> list[ResolutionRecord]:
        """Records computed so far, with empty records for unfilled slots."""
        return [
            slot if slot is not None else ResolutionRecord(candidate=candidate)
            for candidate, slot in zip(self._candidates, self._slots)
        ]

    @staticmethod
    def filter_records(records: Iterable[ResolutionRecord]) -> list[ResolutionRecord]:
        """Keep valid candidates with at least one address, in order."""
        return [record for record in records if record.include_in_output]

    async def _worker(self, queue: asyncio.Queue) -> None:
        while True:
            item = await queue.get()
            try:
                if item is _SENTINEL:
                    return
                if self._stopping:
                    continue
                index, candidate = item
                self._slots[index] = await self.resolve_candidate(candidate)
            finally:
                queue.task_done()

    async def _drain(self, queue: asyncio.Queue, workers: list, sentinels: int) -> None:
        # workers discard queued items once stopping
        for _ in range(sentinels):
            await queue.put(_SENTINEL)
        await asyncio.wait(workers)

    async def resolve_candidate(self, candidate: Candidate) -> ResolutionRecord:
        """
        Resolve one candidate.

        Lookup failures of any kind degrade the record to no data.
        """
        if not candidate.is_valid and not self._resolve_invalid:
            return ResolutionRecord(candidate=candidate)

        try:
            addresses, name_server, mail_exchange = await asyncio.gather(
                self._resolver.resolve_addresses(candidate.name),
                self._resolver.resolve_name_server(candidate.name),
                self._resolver.resolve_mail_exchange(candidate.name),
            )
        except Exception as e:
            if self._logger:
                self._logger.log_error(
                    "ResolutionPipeline",
                    f"Resolution failed for {candidate.name}",
                    error=e,
                    additional_data={"name": candidate.name, "strategy": candidate.strategy.value},
                )
            return ResolutionRecord(candidate=candidate)

        return ResolutionRecord(
            candidate=candidate,
            addresses=tuple(addresses),
            name_server=name_server,
            mail_exchange=mail_exchange,
        )

    def _log(self, level: LogLevel, message: str, data: dict) -> None:
        if self._logger:
            self._logger.log(level, "ResolutionPipeline", message, data)
