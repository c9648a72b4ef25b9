'''
testing core/course_colors.py
'''
import pytest

from src.student_dashboard_backend.core.course_colors import (
    COURSE_COLORS,
    CUSTOM_TASK_COLOR,
    CourseColorRegistry,
)


def test_colors_follow_first_seen_order():
    registry = CourseColorRegistry()
    assert registry.color_for("CS101") == COURSE_COLORS[0]
    assert registry.color_for("MA201") == COURSE_COLORS[1]
    assert registry.color_for("CS101") == COURSE_COLORS[0]


def test_custom_tasks_share_one_color():
    registry = CourseColorRegistry()
    assert registry.color_for("", is_custom_task=True) == CUSTOM_TASK_COLOR
    # Custom tasks do not use up a palette slot
    assert registry.color_for("CS101") == COURSE_COLORS[0]


def test_palette_wraps_around():
    registry = CourseColorRegistry(palette=["red", "blue"])
    assert [registry.color_for(code) for code in ("A", "B", "C")] == ["red", "blue", "red"]


def test_empty_palette_is_rejected():
    with pytest.raises(ValueError):
        CourseColorRegistry(palette=[])


def test_seeded_registries_are_reproducible(weekly_timetable):
    first = CourseColorRegistry().seed(weekly_timetable).colors_for(weekly_timetable)
    second = CourseColorRegistry().seed(weekly_timetable).colors_for(weekly_timetable)
    assert first == second
    assert first["mon-1"] == first["tue-1"] == first["wed-2"]  # all CS101
    assert first["mon-task"] == CUSTOM_TASK_COLOR


def test_registries_are_independent():
    first, second = CourseColorRegistry(), CourseColorRegistry()
    first.color_for("CS101")
    assert second.color_for("MA201") == COURSE_COLORS[0]
