"""Splitting a transaction sequence into fixed-size batches.

Batches are the unit of concurrent dispatch. They are contiguous and keep
the original relative order, so the rapid-succession rule sees transactions
in the same order they were supplied.
"""

from typing import Sequence

from app.errors import InvalidConfigurationError
from app.models import Transaction


def partition(
    transactions: Sequence[Transaction],
    batch_size: int,
) -> list[list[Transaction]]:
    """Split transactions into ceil(len / batch_size) contiguous batches.

    The final batch may be shorter than batch_size. Empty input yields
    no batches.
    """
    if batch_size <= 0:
        raise InvalidConfigurationError(
            f"batch_size must be positive, got {batch_size}"
        )

    return [
        list(transactions[start:start + batch_size])
        for start in range(0, len(transactions), batch_size)
    ]
