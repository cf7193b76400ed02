# tests/test_adaptation.py
from adaptive_learn.adaptation import (
    build_content_priority, calculate_best_learning_time, calculate_optimal_study_duration,
    determine_adaptive_layout, determine_layout_complexity, generate_adaptive_ui_hints,
    get_accessibility_recommendations, get_device_type, get_time_of_day, should_chunk_content,
)
from adaptive_learn.models import Accessibility, UserData, UserHabits, UserPerformance


def test_best_learning_time(user_data):
    assert calculate_best_learning_time(user_data.habits) == "evening"
    assert calculate_best_learning_time(UserHabits(preferred_study_time={"morning": 0.8, "night": 0.3})) == "morning"


def test_best_learning_time_defaults_to_evening():
    assert calculate_best_learning_time(None) == "evening"
    assert calculate_best_learning_time(UserHabits()) == "evening"
    assert calculate_best_learning_time(UserHabits(preferred_study_time={"morning": 0})) == "evening"


def test_time_of_day():
    assert get_time_of_day(5) == "morning"
    assert get_time_of_day(12) == "afternoon"
    assert get_time_of_day(17) == "evening"
    assert get_time_of_day(21) == "night"
    assert get_time_of_day(3) == "night"


def test_device_type():
    assert get_device_type(375) == "mobile"
    assert get_device_type(480) == "mobile"
    assert get_device_type(1024) == "tablet"
    assert get_device_type(1440) == "desktop"


def test_layout_complexity():
    assert determine_layout_complexity(None, "desktop") == "simple"
    strong = UserPerformance(average_score=90, completion_rate=0.8)
    assert determine_layout_complexity(strong, "mobile") == "simple"
    assert determine_layout_complexity(strong, "desktop") == "advanced"
    assert determine_layout_complexity(UserPerformance(average_score=70, completion_rate=0.6), "tablet") == "standard"
    assert determine_layout_complexity(UserPerformance(average_score=50, completion_rate=0.9), "desktop") == "guided"


def test_adaptive_layout(user_data):
    assert determine_adaptive_layout(user_data, "desktop", "evening", focus_mode=True) == "focused"
    assert determine_adaptive_layout(user_data, "mobile", "evening") == "compact"
    assert determine_adaptive_layout(user_data, "desktop", "evening") == "guided"
    assert determine_adaptive_layout(user_data, "desktop", "morning") == "standard"
    user_data.performance.average_score = 80
    assert determine_adaptive_layout(user_data, "desktop", "evening") == "advanced"


def test_optimal_study_duration(user_data):
    assert calculate_optimal_study_duration(None, user_data.performance) == 25
    habits = UserHabits(average_session_length=35)
    assert calculate_optimal_study_duration(habits, UserPerformance(average_score=75)) == 40
    assert calculate_optimal_study_duration(UserHabits(), UserPerformance(average_score=60)) == 25


def test_should_chunk_content():
    assert should_chunk_content(None, "reading") is True
    performance = UserPerformance(average_score=72)
    assert should_chunk_content(performance, "reading") is False
    assert should_chunk_content(performance, "quiz") is True
    assert should_chunk_content(performance, "video") is False
    assert should_chunk_content(performance, "podcast") is False


def test_accessibility_recommendations(user_data):
    assert get_accessibility_recommendations(None, "desktop") == Accessibility()
    user_data.accessibility = Accessibility(high_contrast=True)
    desktop = get_accessibility_recommendations(user_data, "desktop")
    assert desktop.high_contrast is True
    assert desktop.large_text is False
    assert get_accessibility_recommendations(user_data, "mobile").large_text is True
    assert user_data.accessibility.large_text is False


def test_large_text_for_long_low_scoring_sessions():
    user = UserData(
        performance=UserPerformance(average_score=60),
        habits=UserHabits(average_session_length=50),
    )
    assert get_accessibility_recommendations(user, "desktop").large_text is True


def test_ui_hints(user_data):
    hints = generate_adaptive_ui_hints(user_data, "mobile", "night", "standard")
    assert hints["simplify_navigation"] is True
    assert hints["use_compact_layout"] is True
    assert hints["use_visual_aids"] is False
    assert hints["use_step_by_step"] is True
    assert hints["emphasize_progress"] is True
    assert hints["suggest_more_breaks"] is False
    assert hints["highlight_key_info"] is False


def test_ui_hints_without_user_data():
    hints = generate_adaptive_ui_hints(None, "desktop", "morning", "focused")
    assert hints["highlight_key_info"] is True
    assert hints["use_compact_layout"] is True
    assert hints["use_visual_aids"] is False


def test_content_priority(user_data):
    assert build_content_priority(user_data.performance) == [
        {"id": "calculus", "priority": "high", "type": "weak-area"},
        {"id": "statistics", "priority": "medium", "type": "strong-area"},
    ]
    assert build_content_priority(None) == []
