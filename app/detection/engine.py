"""Rule evaluation for a single batch.

Runs both detection rules over one batch, position by position:
  1. High amount for the transaction at position i
  2. Rapid succession between position i and every later position

evaluate_batch holds no state and does no I/O, so the scheduler can call
it from many threads at once with only the (frozen) config shared.
"""

from datetime import timedelta
from typing import Sequence

from app.detection.rules.high_amount import check_high_amount
from app.detection.rules.rapid_succession import check_rapid_succession
from app.errors import InvalidConfigurationError
from app.models import DetectionConfig, FlaggedResult, Transaction


def validate_config(config: DetectionConfig) -> None:
    """Reject configs the engine cannot run with.

    Raises InvalidConfigurationError for a non-positive batch size,
    time window or worker cap.
    """
    if config.batch_size <= 0:
        raise InvalidConfigurationError(
            f"batch_size must be positive, got {config.batch_size}"
        )
    if config.time_window <= timedelta(0):
        raise InvalidConfigurationError(
            f"time_window must be positive, got {config.time_window}"
        )
    if config.max_workers is not None and config.max_workers <= 0:
        raise InvalidConfigurationError(
            f"max_workers must be positive, got {config.max_workers}"
        )


def evaluate_batch(
    batch: Sequence[Transaction],
    config: DetectionConfig,
) -> list[FlaggedResult]:
    """Apply every rule to one batch and return results in encounter order."""
    results: list[FlaggedResult] = []

    for i, tx in enumerate(batch):
        results.extend(check_high_amount(tx, config.high_amount_threshold))
        results.extend(check_rapid_succession(batch, i, config.time_window))

    return results
