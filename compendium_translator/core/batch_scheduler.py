"""
Batch scheduler for document translation.

Documents are processed in fixed-size batches, in source order. The jobs of a
batch run concurrently and the batch completes only when every job has an
outcome; a failed job never cancels its siblings. A cooldown separates batches
to stay under provider rate limits.
"""

import asyncio
import math
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Awaitable, Callable, List, Optional, Sequence, TypeVar

from .events import (
    Event,
    EventBus,
    EventType,
    create_batch_completed_event,
    create_document_failed_event
)
from .models import Document
from .result import Err, Result, wrap_async_exception

logger = logging.getLogger(__name__)

T = TypeVar('T')

DEFAULT_BATCH_SIZE = 5
DEFAULT_COOLDOWN_MS = 1000


class SchedulerState(Enum):
    """Scheduler lifecycle"""
    IDLE = "idle"
    RUNNING = "running"
    COOLDOWN = "cooldown"
    DONE = "done"


@dataclass
class DocumentOutcome:
    """Outcome of one document job.

    Attributes:
        document: Source document
        result: Ok(job value) or Err(exception raised by the job)
    """
    document: Document
    result: Result

    @property
    def succeeded(self) -> bool:
        return self.result.is_ok()


@dataclass
class RunState:
    """Progress of a run: counts and outcomes in source order."""
    total: int
    processed: int = 0
    batches_run: int = 0
    outcomes: List[DocumentOutcome] = field(default_factory=list)

    @property
    def succeeded(self) -> int:
        return sum(1 for outcome in self.outcomes if outcome.succeeded)

    @property
    def failed(self) -> int:
        return len(self.outcomes) - self.succeeded

    @property
    def failed_names(self) -> List[str]:
        return [o.document.name for o in self.outcomes if not o.succeeded]

    @property
    def percent(self) -> int:
        # Half up: 1 of 8 reports 13
        return math.floor(self.processed * 100 / self.total + 0.5) if self.total else 100


def partition(documents: Sequence[T], batch_size: int) -> List[List[T]]:
    """
    Split documents into contiguous batches, keeping their order.

    Raises:
        ValueError: If batch_size is lower than 1
    """
    if batch_size < 1:
        raise ValueError(f"batch_size must be at least 1, got {batch_size}")
    return [list(documents[i:i + batch_size]) for i in range(0, len(documents), batch_size)]


class BatchScheduler:
    """Runs one async job per document, batch after batch."""

    def __init__(
        self,
        batch_size: int = DEFAULT_BATCH_SIZE,
        cooldown_ms: int = DEFAULT_COOLDOWN_MS,
        notifier=None,
        event_bus: Optional[EventBus] = None,
        cooldown_after_last: bool = False,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep
    ):
        """
        Args:
            batch_size: Documents per batch
            cooldown_ms: Pause after each batch, in milliseconds
            notifier: Optional Notifier receiving progress and per-document errors
            event_bus: Optional event bus for observability
            cooldown_after_last: Also pause after the final batch
            sleep: Coroutine used for the cooldown
        """
        if batch_size < 1:
            raise ValueError(f"batch_size must be at least 1, got {batch_size}")
        self.batch_size = batch_size
        self.cooldown_ms = cooldown_ms
        self.notifier = notifier
        self.event_bus = event_bus
        self.cooldown_after_last = cooldown_after_last
        self._sleep = sleep
        self.state = SchedulerState.IDLE

    def _publish(self, event: Event) -> None:
        if self.event_bus:
            self.event_bus.publish(event)

    def _report_failure(self, document: Document, error: Exception) -> None:
        logger.error("Translation failed for document '%s': %s", document.name, error)
        if self.notifier:
            self.notifier.error(f"Error on {document.name}: {error}")
        self._publish(create_document_failed_event(document.name, error))

    async def run(
        self,
        documents: Sequence[Document],
        job: Callable[[Document], Awaitable[T]]
    ) -> RunState:
        """
        Run the job for every document.

        Args:
            documents: Documents in source order
            job: Coroutine function translating and persisting one document

        Returns:
            Run state with one outcome per document, in source order
        """
        batches = partition(documents, self.batch_size)
        run_state = RunState(total=len(documents))
        safe_job = wrap_async_exception(job)

        self._publish(Event(
            type=EventType.RUN_STARTED,
            data={"total": run_state.total, "total_batches": len(batches)},
            source="batch_scheduler"
        ))

        for index, batch in enumerate(batches):
            self.state = SchedulerState.RUNNING
            logger.debug("Starting batch %d/%d (%d documents)", index + 1, len(batches), len(batch))
            self._publish(Event(
                type=EventType.BATCH_STARTED,
                data={"batch_index": index, "size": len(batch)},
                source="batch_scheduler"
            ))

            results = await asyncio.gather(*(safe_job(document) for document in batch))

            # Single writer: outcomes are aggregated once the whole batch resolved
            failed_in_batch = 0
            for document, result in zip(batch, results):
                run_state.outcomes.append(DocumentOutcome(document=document, result=result))
                if isinstance(result, Err):
                    failed_in_batch += 1
                    self._report_failure(document, result.error)
                else:
                    self._publish(Event(
                        type=EventType.DOCUMENT_TRANSLATED,
                        data={"name": document.name},
                        source="batch_scheduler"
                    ))

            run_state.processed += len(batch)
            run_state.batches_run += 1

            if self.notifier:
                self.notifier.progress(
                    f"Translating... ({run_state.processed}/{run_state.total})",
                    run_state.percent
                )
            self._publish(create_batch_completed_event(
                index, len(batches), run_state.processed, run_state.total, failed_in_batch
            ))

            is_last = index == len(batches) - 1
            if self.cooldown_ms > 0 and (self.cooldown_after_last or not is_last):
                self.state = SchedulerState.COOLDOWN
                await self._sleep(self.cooldown_ms / 1000)

        self.state = SchedulerState.DONE
        self._publish(Event(
            type=EventType.RUN_COMPLETED,
            data={
                "total": run_state.total,
                "succeeded": run_state.succeeded,
                "failed": run_state.failed,
                "batches": run_state.batches_run
            },
            source="batch_scheduler"
        ))
        return run_state
