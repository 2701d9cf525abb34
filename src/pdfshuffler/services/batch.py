"""
PDF Shuffler - Batch Coordinator

Fans a set of files out to one worker thread each and folds their results
into a single progress/summary state that a UI can poll once per frame.

Workers only talk to the coordinator through a multiple-producer,
single-consumer result queue. Each worker puts exactly one bool (succeeded
or failed) on it; error details stay in the log.
"""

import contextlib
import dataclasses
import os
import queue
import threading
import time
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import Enum, auto
from pathlib import Path

from pdfshuffler.constants import DEFAULT_MAX_WORKERS, SUMMARY_TIMEOUT_SECS
from pdfshuffler.services.pdf_operations import ShuffleOptions, process_pdf
from pdfshuffler.utils.exceptions import ShufflerError
from pdfshuffler.utils.i18n import _
from pdfshuffler.utils.logger import logger


class BatchPhase(Enum):
    """Coarse state of a coordinator."""

    IDLE = auto()
    PROCESSING = auto()
    SUMMARY_READY = auto()


@dataclass
class Job:
    """One input file and, once derived, the file written for it."""

    input_path: Path
    output_path: Path | None = None


@dataclass
class BatchState:
    """Aggregate progress of the current (or last) batch.

    Attributes:
        pending_count: Number of files submitted in the batch
        processed_count: Number of files that finished, either way
        successful_count: Files written successfully
        failed_count: Files that were rejected or failed
        summary: Final message, empty until the batch completes
        summary_expires_at: Clock value after which the summary is cleared
        is_processing: True while results are still outstanding
    """

    pending_count: int = 0
    processed_count: int = 0
    successful_count: int = 0
    failed_count: int = 0
    summary: str = ""
    summary_expires_at: float | None = None
    is_processing: bool = False

    @property
    def phase(self) -> BatchPhase:
        if self.is_processing:
            return BatchPhase.PROCESSING
        if self.summary:
            return BatchPhase.SUMMARY_READY
        return BatchPhase.IDLE

    @property
    def progress(self) -> float:
        """Fraction of submitted files that finished (0.0-1.0)."""
        if self.pending_count == 0:
            return 0.0
        return self.processed_count / self.pending_count

    def record(self, success: bool) -> None:
        """Count one job result."""
        self.processed_count += 1
        if success:
            self.successful_count += 1
        else:
            self.failed_count += 1


def _files(count: int) -> str:
    return _("file") if count == 1 else _("files")


def format_summary(successful: int, failed: int, pending: int) -> str:
    """Build the message shown once every job of a batch has finished."""
    if failed == 0:
        return _("Successfully processed {0} {1}").format(successful, _files(successful))
    if successful == 0:
        return _("Failed to process {0} {1}").format(failed, _files(failed))
    return _("Processed {0} {1}: {2} successful, {3} failed").format(
        pending, _files(pending), successful, failed
    )


def _run_job(
    job: Job,
    options: ShuffleOptions,
    results: queue.SimpleQueue,
    slots: threading.BoundedSemaphore | None,
) -> None:
    """Worker body: process one file and report exactly one result."""
    success = False
    try:
        with slots if slots is not None else contextlib.nullcontext():
            job.output_path = process_pdf(job.input_path, options)
        success = True
        logger.debug(f"Job finished: {job.input_path} -> {job.output_path}")
    except ShufflerError as e:
        logger.warning(_("Could not shuffle {0}: {1}").format(job.input_path, e))
    except Exception as e:
        logger.error(_("Unexpected error processing {0}: {1}").format(job.input_path, e))
    finally:
        results.put(success)


class BatchCoordinator:
    """Runs batches of shuffle jobs and aggregates their completion.

    The coordinator is owned by its caller (a window, a test). ``submit`` and
    ``poll`` are meant to be called from one thread only; ``poll`` never
    blocks.
    """

    def __init__(
        self,
        options: ShuffleOptions | None = None,
        *,
        summary_timeout: float = SUMMARY_TIMEOUT_SECS,
        max_workers: int = DEFAULT_MAX_WORKERS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize the coordinator.

        Args:
            options: Shuffle options applied to every job
            summary_timeout: Seconds the final summary stays in the state
            max_workers: Cap on concurrently running jobs (0 = no cap)
            clock: Monotonic time source used for the summary deadline
        """
        self.options = options or ShuffleOptions()
        self.summary_timeout = summary_timeout
        self.max_workers = max(0, max_workers)
        self._clock = clock

        self._state = BatchState()
        self._results: queue.SimpleQueue | None = None

    @property
    def state(self) -> BatchState:
        """Snapshot of the current state, without draining results."""
        return dataclasses.replace(self._state)

    def is_processing(self) -> bool:
        """Check if a batch is currently running."""
        return self._state.is_processing

    def submit(self, paths: Iterable[str | Path]) -> bool:
        """Start a batch with one job per submitted path.

        A path that names a file already in the batch (``a.pdf`` and
        ``./a.pdf``) is counted as a failed job and not processed again, so
        two workers never write the same output.

        Returns:
            True if the batch started; False while another batch is running
            or when no paths were given.
        """
        if self._state.is_processing:
            logger.warning(_("A batch is already being processed, ignoring new files"))
            return False

        jobs = [Job(input_path=Path(p)) for p in paths]
        if not jobs:
            logger.warning(_("No files to process"))
            return False

        results: queue.SimpleQueue = queue.SimpleQueue()
        slots = threading.BoundedSemaphore(self.max_workers) if self.max_workers else None

        self._state = BatchState(pending_count=len(jobs), is_processing=True)
        self._results = results

        seen: set[str] = set()
        for job in jobs:
            key = os.path.abspath(job.input_path)
            if key in seen:
                logger.warning(
                    _("{0} was submitted more than once, skipping").format(job.input_path)
                )
                results.put(False)
                continue
            seen.add(key)

            worker = threading.Thread(
                target=_run_job,
                args=(job, self.options, results, slots),
                name=f"shuffle-{job.input_path.name}",
                daemon=True,
            )
            worker.start()

        logger.info(_("Started shuffling {0} file(s)").format(len(jobs)))
        return True

    def poll(self) -> BatchState:
        """Drain available results and return a snapshot of the state."""
        now = self._clock()
        state = self._state

        if self._results is not None:
            while True:
                try:
                    success = self._results.get_nowait()
                except queue.Empty:
                    break
                state.record(success)

            if state.processed_count >= state.pending_count:
                self._finish(now)

        elif state.summary_expires_at is not None and now >= state.summary_expires_at:
            state.summary = ""
            state.summary_expires_at = None

        return self.state

    def _finish(self, now: float) -> None:
        """Leave the processing state and publish the summary."""
        state = self._state
        state.summary = format_summary(
            state.successful_count, state.failed_count, state.pending_count
        )
        state.summary_expires_at = now + self.summary_timeout
        state.is_processing = False
        self._results = None

        logger.info(state.summary)

    def wait(self, timeout: float | None = None, interval: float = 0.02) -> BatchState:
        """Poll until the running batch finishes or *timeout* elapses."""
        deadline = None if timeout is None else time.monotonic() + timeout
        state = self.poll()

        while state.is_processing:
            if deadline is not None and time.monotonic() >= deadline:
                break
            time.sleep(interval)
            state = self.poll()

        return state
