"""Tests for display formatting helpers."""

from __future__ import annotations

from storage_planner.storage_engine.formatting import format_cost, format_seats, format_storage


class TestFormatStorage:
    def test_gigabytes(self):
        assert format_storage(512) == "512.00 GB"

    def test_zero(self):
        assert format_storage(0) == "0.00 GB"

    def test_just_below_terabyte(self):
        assert format_storage(1023.5) == "1023.50 GB"

    def test_exactly_one_terabyte(self):
        assert format_storage(1024) == "1.00 TB"

    def test_business_capacity(self):
        assert format_storage(1228.8) == "1.20 TB"

    def test_large(self):
        assert format_storage(10240) == "10.00 TB"


class TestFormatCost:
    def test_two_decimals(self):
        assert format_cost(111.1875) == "$111.19"

    def test_thousands_separator(self):
        assert format_cost(1660.8) == "$1,660.80"


class TestFormatSeats:
    def test_single(self):
        assert format_seats(1) == "1 user"

    def test_plural(self):
        assert format_seats(2) == "2 users"

    def test_sentinel(self):
        assert format_seats("5+") == "5+ users"
