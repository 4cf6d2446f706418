"""Aggregate statistics over flagged results.

The summary depends only on the multiset of results, never on their
order, so two runs over the same input always summarize identically.
"""

from app.models import DetectionSummary, FlaggedResult


def summarize(results: list[FlaggedResult]) -> DetectionSummary:
    """Count flags per rule and the distinct transactions and accounts hit.

    Args:
        results: Flagged results from a detection run, in any order.

    Returns:
        DetectionSummary for the run.
    """
    high_amount = 0
    rapid_succession = 0

    for result in results:
        if result.rule == "HIGH_AMOUNT":
            high_amount += 1
        else:
            rapid_succession += 1

    # Transaction ids are not unique, so distinct transactions are counted by content
    flagged_transactions = {result.transaction for result in results}
    accounts = sorted({tx.account_id for tx in flagged_transactions})

    return DetectionSummary(
        total_flags=len(results),
        flagged_transactions=len(flagged_transactions),
        high_amount=high_amount,
        rapid_succession=rapid_succession,
        accounts=accounts,
    )
