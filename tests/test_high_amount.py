"""Tests for the high amount rule."""

from app.detection.rules.high_amount import check_high_amount
from tests.conftest import make_tx


class TestCheckHighAmount:
    def test_above_threshold(self):
        """Scenario: $1500 against $1000 -> one flag mentioning 1500.00."""
        results = check_high_amount(make_tx(amount=1500.0), threshold=1000.0)
        assert len(results) == 1
        assert results[0].rule == "HIGH_AMOUNT"
        assert "1500.00" in results[0].reason

    def test_exactly_at_threshold(self):
        """$1000 is NOT > $1000, should not trigger."""
        assert check_high_amount(make_tx(amount=1000.0), threshold=1000.0) == []

    def test_just_above_threshold(self):
        assert len(check_high_amount(make_tx(amount=1000.01), threshold=1000.0)) == 1

    def test_below_threshold(self):
        assert check_high_amount(make_tx(amount=999.99), threshold=1000.0) == []

    def test_zero_amount(self):
        assert check_high_amount(make_tx(amount=0.0), threshold=1000.0) == []

    def test_negative_amount(self):
        assert check_high_amount(make_tx(amount=-5000.0), threshold=1000.0) == []

    def test_default_threshold(self):
        assert len(check_high_amount(make_tx(amount=1000.5))) == 1

    def test_reason_two_decimals(self):
        results = check_high_amount(make_tx(amount=2500.5), threshold=1000.0)
        assert results[0].reason == "High amount: $2500.50"

    def test_result_references_transaction(self):
        tx = make_tx(tx_id="big-one", amount=5000.0)
        results = check_high_amount(tx, threshold=1000.0)
        assert results[0].transaction == tx
