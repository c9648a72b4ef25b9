'''
testing core/progress.py
'''
from datetime import date, timedelta

import pytest

from src.student_dashboard_backend.core.progress import calculate_progress, get_week_number

START = date(2025, 1, 1)
END = date(2025, 1, 11)


class TestCalculateProgress:

    def test_midpoint_is_half_done(self):
        assert calculate_progress(START, END, date(2025, 1, 6)) == pytest.approx(50.0)

    def test_clamped_before_start_and_after_end(self):
        assert calculate_progress(START, END, date(2024, 12, 1)) == 0.0
        assert calculate_progress(START, END, date(2025, 3, 1)) == 100.0

    def test_boundaries(self):
        assert calculate_progress(START, END, START) == 0.0
        assert calculate_progress(START, END, END) == 100.0

    @pytest.mark.parametrize("end", [START, START - timedelta(days=3)])
    def test_degenerate_or_inverted_interval_is_zero(self, end):
        assert calculate_progress(START, end, date(2025, 1, 5)) == 0.0

    def test_monotonic_in_now(self):
        values = [calculate_progress(START, END, START + timedelta(days=offset)) for offset in range(-5, 20)]
        assert values == sorted(values)
        assert all(0.0 <= value <= 100.0 for value in values)


class TestWeekNumber:

    @pytest.mark.parametrize("offset, expected", [
        (0, 1),
        (6, 1),
        (7, 2),
        (13, 2),
        (14, 3),
        (44, 7),
    ])
    def test_week_number(self, offset, expected):
        assert get_week_number(START, START + timedelta(days=offset)) == expected

    def test_never_below_week_one(self):
        assert get_week_number(START, START - timedelta(days=30)) == 1
