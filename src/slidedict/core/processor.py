"""Parallel processing orchestration for dictionary builds.

Every word is independent: its slide parameters depend only on the word and
the read-only keyboard layout. Words are processed in chunks, inline or with
ProcessPoolExecutor, and results are re-sequenced to input order before they
reach the writer.

Key components:
- process_words: Top-level picklable function for parallel execution
- SlideDictionaryBuilder: Main orchestrator class for dictionary builds
"""

import heapq
import time
import traceback
from collections.abc import Callable, Iterator, Sequence
from concurrent.futures import Future, ProcessPoolExecutor, as_completed
from typing import Any, Protocol

import structlog

from slidedict.config import FeatureConfig, ResampleConfig, SlideDictSettings
from slidedict.core.extractor import SlideParameterExtractor
from slidedict.domain import FeatureVector, KeyLayout
from slidedict.exceptions import WordError
from slidedict.utils import ProcessingLogger, ProcessingStats, configure_logging


class RowWriter(Protocol):
    """Destination of computed dictionary rows."""

    def write(self, word: str, vector: FeatureVector) -> None: ...


def process_words(
    words: Sequence[str],
    layout_dict: dict[str, Any],
    config_dict: dict[str, Any],
) -> list[dict[str, Any]]:
    """Compute slide parameters for a chunk of words.

    Top-level function designed to be picklable for use with ProcessPoolExecutor.
    Per-word failures are captured in the result, never raised.

    Args:
        words: Words to process, in input order
        layout_dict: Serialized layout (from KeyLayout.to_dict())
        config_dict: Serialized settings (from SlideDictSettings.model_dump())

    Returns:
        One dictionary per word, in input order, containing either:
        - Success: {"word": str, "parameters": list[float]}
        - Skipped: {"word": str, "skipped": str}
        - Error: {"word": str, "error": str, "traceback": str}
    """
    if not structlog.is_configured():
        logging_config = config_dict.get("logging", {})
        configure_logging(
            log_file=None,
            console_level=logging_config.get("log_level", "WARNING"),
        )

    layout = KeyLayout.from_dict(layout_dict)
    extractor = SlideParameterExtractor(
        layout,
        features=FeatureConfig(**config_dict.get("features", {})),
        resampling=ResampleConfig(**config_dict.get("resample", {})),
    )

    results: list[dict[str, Any]] = []
    for word in words:
        try:
            vector = extractor.extract(word)
            results.append({"word": word, "parameters": vector.to_list()})
        except WordError as e:
            results.append({"word": word, "skipped": e.reason})
        except Exception as e:
            results.append(
                {"word": word, "error": str(e), "traceback": traceback.format_exc()}
            )
    return results


def _chunked(words: Sequence[str], size: int) -> Iterator[list[str]]:
    for start in range(0, len(words), size):
        yield list(words[start : start + size])


class SlideDictionaryBuilder:
    """Orchestrates slide dictionary builds.

    Manages the complete workflow:
    1. Split the word list into chunks
    2. Process chunks inline or in worker processes
    3. Re-sequence results to input order
    4. Hand computed rows to the writer, skipped words to the skip callback
    5. Collect statistics

    Example:
        settings = SlideDictSettings()
        builder = SlideDictionaryBuilder(settings)
        stats = builder.build(
            layout=layout,
            words=["hello", "world"],
            writer=SlideDictionaryWriter(sys.stdout),
        )
    """

    def __init__(self, config: SlideDictSettings) -> None:
        """Initialize dictionary builder with configuration.

        Args:
            config: Slidedict settings
        """
        self.config = config
        self.logger = configure_logging(
            log_file=config.logging.log_file,
            console_level=config.logging.log_level,
            file_level=config.logging.file_log_level,
        )

    def build(
        self,
        layout: KeyLayout,
        words: Sequence[str],
        writer: RowWriter,
        max_workers: int | None = None,
        progress_callback: Callable[[int, int], None] | None = None,
        skip_callback: Callable[[str, str], None] | None = None,
    ) -> ProcessingStats:
        """Compute and write slide parameters for every word.

        Args:
            layout: Keyboard layout shared by all words
            words: Words in output order
            writer: Receives (word, vector) for each computed word, in input order
            max_workers: Worker processes, 1 processes inline (None = config)
            progress_callback: Optional callback(completed_words, total_words)
            skip_callback: Optional callback(word, reason) for words without
                slide parameters

        Returns:
            ProcessingStats with counts, skipped words and errors

        Raises:
            KeyboardInterrupt: If processing is cancelled by user
        """
        # Use config default if max_workers not specified
        if max_workers is None:
            max_workers = self.config.processing.max_workers

        processing_logger = ProcessingLogger(self.logger)
        stats = processing_logger.stats
        stats.start_time = time.time()

        self.logger.info(
            "Starting dictionary build",
            words=len(words),
            keys=len(layout),
            max_workers=max_workers,
        )

        chunks = list(_chunked(words, self.config.processing.chunk_size))
        layout_dict = layout.to_dict()
        config_dict = self.config.model_dump(mode="json")

        total = len(words)
        completed = 0

        def emit(results: list[dict[str, Any]]) -> None:
            nonlocal completed
            for result in results:
                self._emit(result, writer, processing_logger, skip_callback)
            completed += len(results)
            if progress_callback is not None:
                progress_callback(completed, total)

        if max_workers == 1 or len(chunks) <= 1:
            for chunk in chunks:
                emit(process_words(chunk, layout_dict, config_dict))
        else:
            self._build_parallel(chunks, layout_dict, config_dict, max_workers, stats, emit)

        stats.end_time = time.time()

        self.logger.info(
            "Dictionary build complete",
            processed=stats.processed_count,
            skipped=stats.skipped_count,
            errors=stats.error_count,
            duration_seconds=round(stats.duration_seconds, 2),
        )

        return stats

    def _build_parallel(
        self,
        chunks: list[list[str]],
        layout_dict: dict[str, Any],
        config_dict: dict[str, Any],
        max_workers: int | None,
        stats: ProcessingStats,
        emit: Callable[[list[dict[str, Any]]], None],
    ) -> None:
        """Process chunks in worker processes, emitting them in input order."""
        pending_futures: dict[Future, int] = {}
        ready: list[tuple[int, list[dict[str, Any]]]] = []
        next_index = 0

        with ProcessPoolExecutor(max_workers=max_workers) as executor:
            for index, chunk in enumerate(chunks):
                future = executor.submit(process_words, chunk, layout_dict, config_dict)
                pending_futures[future] = index

            try:
                for future in as_completed(list(pending_futures)):
                    index = pending_futures.pop(future)
                    try:
                        results = future.result()
                    except Exception as e:
                        # Executor-level error; report every word of the chunk
                        tb = traceback.format_exc()
                        results = [
                            {"word": word, "error": str(e), "traceback": tb}
                            for word in chunks[index]
                        ]
                    heapq.heappush(ready, (index, results))

                    while ready and ready[0][0] == next_index:
                        emit(heapq.heappop(ready)[1])
                        next_index += 1

            except KeyboardInterrupt:
                self.logger.info("Cancellation requested by user")
                for f in pending_futures:
                    f.cancel()

                stats.was_cancelled = True
                stats.cancelled_count = sum(len(chunks[i]) for i in pending_futures.values())

                executor.shutdown(wait=True, cancel_futures=True)
                raise

    def _emit(
        self,
        result: dict[str, Any],
        writer: RowWriter,
        processing_logger: ProcessingLogger,
        skip_callback: Callable[[str, str], None] | None,
    ) -> None:
        word = result["word"]
        if "parameters" in result:
            writer.write(word, FeatureVector.from_iterable(result["parameters"]))
            processing_logger.log_word_complete(word)
        elif "skipped" in result:
            processing_logger.log_word_skipped(word, result["skipped"])
            if skip_callback is not None:
                skip_callback(word, result["skipped"])
        else:
            processing_logger.log_word_error(
                word=word,
                error=Exception(result["error"]),
                traceback=result.get("traceback"),
            )
            if skip_callback is not None:
                skip_callback(word, result["error"])
