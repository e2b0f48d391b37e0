"""
Filter driver: apply the keep policy to a stream of lines.

Lines are classified one by one (or with a bounded number of classifications
in flight) and results are always emitted in input order. A failed
classification is logged and the line skipped; the run continues.
"""

import asyncio
from collections import deque
from typing import AsyncIterator, Deque, Iterable, Optional, Tuple

import structlog

from line_filter.classification.classifier import Classifier
from line_filter.llm.exceptions import InferenceError
from line_filter.models.enums import DisplayMode
from line_filter.models.filter_models import FilterOptions, FilterStats


logger = structlog.get_logger(__name__)

_END = object()


class FilterDriver:
    """
    Classify lines and yield the output lines for them.

    With ``options.concurrency == 1`` each line is fully resolved before the
    next one is read. Higher values keep up to that many classifications in
    flight; output is still re-serialised in input order, so line N (if
    emitted) always precedes anything derived from line N+1. A result is
    emitted as soon as every earlier line has been resolved.

    Attributes:
        classifier: Classifier used for every line
        options: Question, keep policy, display mode and concurrency
        stats: Counters for the current/last run
    """

    def __init__(self, classifier: Classifier, options: FilterOptions) -> None:
        self.classifier = classifier
        self.options = options
        self.stats = FilterStats()

    async def run(self, lines: Iterable[str]) -> AsyncIterator[str]:
        """
        Filter ``lines`` and yield output lines (without trailing newline).

        ``lines`` may be any lazy iterable, e.g. an open text stream. While
        classifications are in flight the next line is read in a worker
        thread, so a slow source neither stalls requests nor holds back
        results that are ready. Errors raised while reading propagate to the
        caller; lines already yielded stay yielded.
        """
        self.stats = FilterStats()
        source = iter(lines)
        window: Deque[Tuple[str, "asyncio.Task[Optional[bool]]"]] = deque()
        next_line: "Optional[asyncio.Task[object]]" = None

        try:
            while True:
                while window and window[0][1].done():
                    output = await self._resolve(*window.popleft())
                    if output is not None:
                        yield output

                if len(window) >= self.options.concurrency:
                    output = await self._resolve(*window.popleft())
                    if output is not None:
                        yield output
                    continue

                if window and next_line is None:
                    next_line = asyncio.create_task(asyncio.to_thread(next, source, _END))

                if next_line is not None:
                    if window:
                        await asyncio.wait(
                            {next_line, window[0][1]}, return_when=asyncio.FIRST_COMPLETED
                        )
                        if not next_line.done():
                            continue
                    raw_line = await next_line
                    next_line = None
                else:
                    # Nothing in flight, a blocking read holds nothing back
                    raw_line = next(source, _END)

                if raw_line is _END:
                    break

                self.stats.lines_read += 1
                line = raw_line.strip()
                if not line:
                    self.stats.skipped_empty += 1
                    continue

                window.append((line, asyncio.create_task(self._classify(line))))

            while window:
                output = await self._resolve(*window.popleft())
                if output is not None:
                    yield output
        finally:
            pending = [task for _, task in window]
            if next_line is not None:
                pending.append(next_line)
            for task in pending:
                task.cancel()
            if pending:
                await asyncio.gather(*pending, return_exceptions=True)

        logger.info("Filtering finished", **self.stats.model_dump())

    async def _classify(self, line: str) -> Optional[bool]:
        """Classify one line; None means the classification failed."""
        try:
            return await self.classifier.classify(self.options.question, line)
        except InferenceError as e:
            logger.error(
                "Error evaluating line",
                error=e.message,
                error_type=type(e).__name__,
                details=e.details,
                line=line[:80],
            )
            return None

    async def _resolve(
        self, line: str, task: "asyncio.Task[Optional[bool]]"
    ) -> Optional[str]:
        """Wait for a line's classification and render its output, if any."""
        classification = await task
        if classification is None:
            self.stats.failed += 1
            return None

        self.stats.classified += 1
        should_keep = self.options.keep_policy.should_keep(classification)
        if should_keep:
            self.stats.kept += 1
        else:
            self.stats.dropped += 1

        return render_line(line, should_keep, self.options.display_mode)


def render_line(line: str, should_keep: bool, display_mode: DisplayMode) -> Optional[str]:
    """
    Render the output for one classified line.

    Annotate mode always returns the line prefixed with "+" or "-"; filter
    mode returns the line only when it is kept.
    """
    if display_mode is DisplayMode.ANNOTATE:
        return ("+" if should_keep else "-") + line
    return line if should_keep else None
