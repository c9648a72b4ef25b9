'''
Date arithmetic for the semester progress widget.
'''
from datetime import date


def calculate_progress(start: date, end: date, now: date) -> float:
    """
    Percentage of [start, end] elapsed at 'now', clamped to [0, 100].
    A degenerate or inverted interval counts as 0% done.
    """
    if start >= end:
        return 0.0
    total_days = (end - start).days
    elapsed_days = (now - start).days
    return min(100.0, max(0.0, 100.0 * elapsed_days / total_days))


def get_week_number(start: date, now: date) -> int:
    """1-based teaching week of 'now'; never below week 1."""
    return max(1, (now - start).days // 7 + 1)
