"""High amount rule.

Flags transactions whose amount is strictly above a configurable
threshold. A single unusually large payment is the simplest fraud
signal: stolen credentials are often used for one big purchase before
the card is blocked.
"""

from app.models import FlaggedResult, Transaction


def check_high_amount(
    tx: Transaction,
    threshold: float = 1000.0,
) -> list[FlaggedResult]:
    """Return one HIGH_AMOUNT result if the amount exceeds the threshold.

    An amount equal to the threshold does not trigger. Zero and negative
    amounts are compared like any other value.
    """
    if tx.amount > threshold:
        return [
            FlaggedResult(
                transaction=tx,
                reason=f"High amount: ${tx.amount:.2f}",
                rule="HIGH_AMOUNT",
            )
        ]

    return []
