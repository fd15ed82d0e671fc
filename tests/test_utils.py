"""Tests for clipsplit.utils module."""

from __future__ import annotations

from clipsplit.utils import format_duration


class TestFormatDuration:
    def test_sub_second(self) -> None:
        assert format_duration(0.5) == "0.5s"

    def test_seconds(self) -> None:
        assert format_duration(12.34) == "12.3s"

    def test_minutes_and_seconds(self) -> None:
        assert format_duration(125.0) == "2:05"

    def test_hours_minutes_seconds(self) -> None:
        assert format_duration(3725.0) == "1:02:05"

    def test_exact_minute(self) -> None:
        assert format_duration(60.0) == "1:00"
