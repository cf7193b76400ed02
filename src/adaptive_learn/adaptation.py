"""Adaptive UI heuristics driven by user performance, habits and device."""
from dataclasses import replace

from loguru import logger

from adaptive_learn.models import (
    Accessibility, ReminderSettings, UserData, UserHabits, UserPerformance,
)
from adaptive_learn.rounding import round_half_up

DEFAULT_STUDY_TIME = "evening"
DEFAULT_STUDY_DURATION = 25

CHUNK_THRESHOLDS = {
    "reading": 70,
    "video": 60,
    "practice": 75,
    "quiz": 80,
}

DEFAULT_REMINDER_SETTINGS = ReminderSettings()


def calculate_best_learning_time(habits: UserHabits | None) -> str:
    """Time period with the highest positive preference score."""
    if habits is None or not habits.preferred_study_time:
        return DEFAULT_STUDY_TIME
    best_time = DEFAULT_STUDY_TIME
    highest_score = 0
    for period, score in habits.preferred_study_time.items():
        if score > highest_score:
            highest_score = score
            best_time = period
    return best_time


def get_time_of_day(hour: int) -> str:
    if 5 <= hour < 12:
        return "morning"
    elif 12 <= hour < 17:
        return "afternoon"
    elif 17 <= hour < 21:
        return "evening"
    return "night"


def get_device_type(width: int) -> str:
    if width <= 480:
        return "mobile"
    elif width <= 1024:
        return "tablet"
    return "desktop"


def determine_layout_complexity(performance: UserPerformance | None, device_type: str) -> str:
    if performance is None or device_type == "mobile":
        return "simple"
    score = performance.average_score or 0
    completion = performance.completion_rate or 0
    if score > 80 and completion > 0.7:
        return "advanced"
    elif score > 60 and completion > 0.5:
        return "standard"
    return "guided"


def determine_adaptive_layout(
    user_data: UserData | None,
    device_type: str,
    time_of_day: str,
    focus_mode: bool = False,
) -> str:
    """Pick the page layout; focus mode and mobile devices take precedence."""
    if focus_mode:
        return "focused"
    if device_type == "mobile":
        return "compact"
    habits = user_data.habits if user_data else None
    preference_score = habits.preferred_study_time.get(time_of_day, 0) if habits else 0
    if preference_score > 0.7:
        performance = user_data.performance
        score = performance.average_score if performance else None
        return "advanced" if (score or 0) > 70 else "guided"
    return "standard"


def calculate_optimal_study_duration(
    habits: UserHabits | None,
    performance: UserPerformance | None,
) -> int:
    """Session length in minutes, rounded to the nearest 5."""
    if habits is None or performance is None:
        return DEFAULT_STUDY_DURATION
    base_time = habits.average_session_length or DEFAULT_STUDY_DURATION
    perf_factor = (performance.average_score or 0) / 100
    optimal = base_time * (0.7 + 0.5 * perf_factor)
    return round_half_up(optimal / 5) * 5


def should_chunk_content(performance: UserPerformance | None, content_type: str) -> bool:
    if performance is None:
        return True
    threshold = CHUNK_THRESHOLDS.get(content_type, 70)
    return (performance.average_score or 0) < threshold


def get_accessibility_recommendations(user_data: UserData | None, device_type: str) -> Accessibility:
    if user_data is None:
        return Accessibility()
    recommendations = replace(user_data.accessibility or Accessibility())
    if device_type == "mobile":
        recommendations.large_text = True
    performance, habits = user_data.performance, user_data.habits
    if performance and habits:
        if (performance.average_score or 0) < 65 and (habits.average_session_length or 0) > 45:
            recommendations.large_text = True
    return recommendations


def generate_adaptive_ui_hints(
    user_data: UserData | None,
    device_type: str,
    time_of_day: str,
    adaptive_layout: str,
) -> dict:
    performance = user_data.performance if user_data else None
    habits = user_data.habits if user_data else None
    score = performance.average_score if performance else None
    consistency = habits.consistency_score if habits else None
    session_length = (habits.average_session_length if habits else None) or 0
    distraction = habits.distraction_level if habits else None

    hints = {
        "simplify_navigation": time_of_day == "night" or device_type == "mobile",
        "use_visual_aids": score is not None and score < 70,
        "use_step_by_step": consistency is not None and consistency < 0.6,
        "suggest_more_breaks": session_length > 40,
        "highlight_key_info": time_of_day == "morning" or distraction == "high",
        "use_compact_layout": device_type == "mobile" or adaptive_layout == "focused",
        "emphasize_progress": consistency is not None and consistency < 0.7,
    }
    logger.debug(f"UI hints for {device_type}/{time_of_day}: {hints}")
    return hints


def build_content_priority(performance: UserPerformance | None) -> list[dict]:
    """Subject areas to surface first: weak areas, then strong areas."""
    if performance is None:
        return []
    return [
        {"id": area, "priority": "high", "type": "weak-area"} for area in performance.weak_areas
    ] + [
        {"id": area, "priority": "medium", "type": "strong-area"} for area in performance.strong_areas
    ]

