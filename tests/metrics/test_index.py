"""Tests for the geometric mean behind the All-Share Index"""

import math

import pytest

from ssm_app.metrics.index import calculate_geometric_mean


class TestGeometricMean:
    """Test calculate_geometric_mean"""

    def test_matches_direct_product(self):
        """Test result equals the nth root of the product"""
        prices = [10.0, 20.0, 30.0, 40.0, 50.0]
        expected = (10.0 * 20.0 * 30.0 * 40.0 * 50.0) ** 0.2

        assert calculate_geometric_mean(prices) == pytest.approx(expected, rel=1e-12)

    def test_single_price_is_exact(self):
        """Test a single price is returned unchanged"""
        assert calculate_geometric_mean([10.0]) == 10.0

    def test_empty(self):
        """Test None for no prices"""
        assert calculate_geometric_mean([]) is None

    def test_order_independent(self):
        """Test the order of prices does not matter"""
        prices = [3.5, 120.0, 0.25, 64.0]
        assert calculate_geometric_mean(prices) == pytest.approx(
            calculate_geometric_mean(list(reversed(prices))), rel=1e-12
        )

    def test_large_ledger_does_not_overflow(self):
        """Test many large prices stay finite where a raw product would overflow"""
        prices = [1e10] * 1000

        result = calculate_geometric_mean(prices)
        assert math.isfinite(result)
        assert result == pytest.approx(1e10, rel=1e-9)

    def test_non_positive_price_rejected(self):
        """Test logarithm domain is guarded"""
        with pytest.raises(ValueError):
            calculate_geometric_mean([10.0, 0.0])
