"""Tests for summary aggregation over flagged results."""

from app.detection.summary import summarize
from app.models import FlaggedResult
from tests.conftest import make_tx


def _flag(tx, rule="HIGH_AMOUNT", reason="r"):
    return FlaggedResult(transaction=tx, reason=reason, rule=rule)


class TestSummarize:
    def test_no_results(self):
        summary = summarize([])
        assert summary.total_flags == 0
        assert summary.flagged_transactions == 0
        assert summary.high_amount == 0
        assert summary.rapid_succession == 0
        assert summary.accounts == []

    def test_counts_per_rule(self):
        a = make_tx("a", account="ACC-1")
        b = make_tx("b", timestamp="2026-02-22T10:01:00Z", account="ACC-1")
        results = [
            _flag(a),
            _flag(a, "RAPID_SUCCESSION"),
            _flag(b, "RAPID_SUCCESSION"),
        ]
        summary = summarize(results)
        assert summary.total_flags == 3
        assert summary.high_amount == 1
        assert summary.rapid_succession == 2
        assert summary.flagged_transactions == 2

    def test_accounts_sorted_and_distinct(self):
        results = [
            _flag(make_tx("a", account="ZED")),
            _flag(make_tx("b", account="ALPHA")),
            _flag(make_tx("c", account="ZED")),
        ]
        assert summarize(results).accounts == ["ALPHA", "ZED"]

    def test_order_independent(self):
        results = [
            _flag(make_tx("a", account="ACC-1")),
            _flag(make_tx("b", account="ACC-2"), "RAPID_SUCCESSION"),
            _flag(make_tx("c", account="ACC-3")),
        ]
        assert summarize(results) == summarize(list(reversed(results)))

    def test_same_id_different_content_counted_separately(self):
        """Ids are not unique; distinct transactions are compared by content."""
        results = [
            _flag(make_tx("dup", amount=1500.0)),
            _flag(make_tx("dup", amount=2500.0)),
        ]
        assert summarize(results).flagged_transactions == 2
