"""Concurrent batch scheduling.

Fans the partitioned transaction set out to a thread pool, one task per
batch, waits for every task, and merges the per-batch result lists.

Each worker builds its own result list. Only the calling thread appends
to the combined collection, once per finished batch, so the merge is the
single serialized step and nothing is locked per transaction. Results
from one batch keep their relative order; batches are merged in
completion order, which can differ between runs.
"""

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Callable, Optional, Sequence

from app.detection.engine import evaluate_batch, validate_config
from app.detection.partition import partition
from app.errors import BatchFailedError
from app.models import (
    BatchError,
    DetectionConfig,
    DetectionReport,
    FlaggedResult,
    Transaction,
)

logger = logging.getLogger(__name__)

BatchEvaluator = Callable[[Sequence[Transaction], DetectionConfig], list[FlaggedResult]]


class BatchScheduler:
    """Runs the rule engine over every batch of a transaction set."""

    def __init__(
        self,
        config: DetectionConfig,
        evaluator: Optional[BatchEvaluator] = None,
    ) -> None:
        self.config = config
        self.evaluator = evaluator or evaluate_batch

    def run(self, transactions: Sequence[Transaction]) -> DetectionReport:
        """Evaluate all batches concurrently and return the merged report.

        Configuration errors are raised before any batch is submitted. A
        batch that raises is recorded in ``report.errors`` and does not
        affect results from the other batches.
        """
        validate_config(self.config)
        batches = partition(transactions, self.config.batch_size)

        results: list[FlaggedResult] = []
        errors: list[BatchError] = []

        if not batches:
            return DetectionReport(
                results=results,
                errors=errors,
                total_transactions=0,
                batch_count=0,
            )

        workers = self.config.max_workers or len(batches)
        logger.info(
            "Scanning %d transactions in %d batches with %d workers",
            len(transactions), len(batches), workers,
        )

        with ThreadPoolExecutor(max_workers=workers) as executor:
            futures = {
                executor.submit(self.evaluator, batch, self.config): index
                for index, batch in enumerate(batches)
            }
            for future in as_completed(futures):
                index = futures[future]
                try:
                    batch_results = future.result()
                except Exception as exc:
                    logger.exception("Batch %d failed", index)
                    errors.append(BatchError(batch_index=index, error=repr(exc)))
                    continue
                logger.debug(
                    "Batch %d finished with %d flags", index, len(batch_results)
                )
                results.extend(batch_results)

        errors.sort(key=lambda e: e.batch_index)
        return DetectionReport(
            results=results,
            errors=errors,
            total_transactions=len(transactions),
            batch_count=len(batches),
        )


def detect_fraud(
    transactions: Sequence[Transaction],
    config: DetectionConfig,
) -> list[FlaggedResult]:
    """Scan a transaction set and return every flagged result.

    Raises InvalidConfigurationError for a bad config and BatchFailedError
    if any batch raised during evaluation.
    """
    report = BatchScheduler(config).run(transactions)
    if report.errors:
        raise BatchFailedError(report)
    return report.results
