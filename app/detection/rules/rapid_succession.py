"""Rapid succession rule.

Detects several transactions on the same account within a short window,
a pattern typical of card testing or of draining an account before the
owner notices.

The rule is pairwise over batch positions: the transaction at position i
is compared with every later position j in the same batch, not only the
next one, so a burst of three or more transactions yields overlapping
pairs. The elapsed time is ts[j] - ts[i]; if timestamps are out of order
the difference is non-positive and the pair is skipped. Transactions in
different batches are never compared.
"""

from datetime import timedelta
from typing import Sequence

from app.models import FlaggedResult, Transaction


def _trim_fraction(text: str) -> str:
    return text.rstrip("0").rstrip(".") if "." in text else text


def format_elapsed(elapsed: timedelta) -> str:
    """Render a positive duration compactly, e.g. 2m0s, 1h0m5s, 45s, 1.5s, 250ms."""
    micros = elapsed // timedelta(microseconds=1)

    if micros == 0:
        return "0s"
    if micros < 1000:
        return f"{micros}\u00b5s"
    if micros < 1_000_000:
        millis = _trim_fraction(f"{micros // 1000}.{micros % 1000:03d}")
        return f"{millis}ms"

    hours, rem = divmod(micros, 3_600_000_000)
    minutes, rem = divmod(rem, 60_000_000)
    seconds = _trim_fraction(f"{rem // 1_000_000}.{rem % 1_000_000:06d}")

    if hours:
        return f"{hours}h{minutes}m{seconds}s"
    if minutes:
        return f"{minutes}m{seconds}s"
    return f"{seconds}s"


def check_rapid_succession(
    batch: Sequence[Transaction],
    index: int,
    time_window: timedelta = timedelta(minutes=5),
) -> list[FlaggedResult]:
    """Pair the transaction at `index` with every later one on its account.

    For each qualifying pair (0 < elapsed < time_window, both bounds
    exclusive) two results are emitted: one for the earlier transaction
    and one for the later one.
    """
    tx = batch[index]
    results: list[FlaggedResult] = []

    for next_tx in batch[index + 1:]:
        if next_tx.account_id != tx.account_id:
            continue

        elapsed = next_tx.timestamp - tx.timestamp
        if timedelta(0) < elapsed < time_window:
            results.append(
                FlaggedResult(
                    transaction=tx,
                    reason=(
                        f"Rapid transaction: {format_elapsed(elapsed)} later with "
                        f"${next_tx.amount:.2f}"
                    ),
                    rule="RAPID_SUCCESSION",
                )
            )
            results.append(
                FlaggedResult(
                    transaction=next_tx,
                    reason=(
                        f"Rapid transaction: following ${tx.amount:.2f} "
                        f"after {format_elapsed(elapsed)}"
                    ),
                    rule="RAPID_SUCCESSION",
                )
            )

    return results
