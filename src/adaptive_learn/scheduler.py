"""Adaptive multi-day study scheduling."""
import math
from dataclasses import replace
from datetime import datetime, timedelta

from loguru import logger

from adaptive_learn.adaptation import DEFAULT_STUDY_TIME, calculate_best_learning_time
from adaptive_learn.models import (
    ContentItem, PerformanceFeedback, Preferences, StudyPattern, StudySession, UserData,
    UserHabits, to_local_naive,
)
from adaptive_learn.rounding import round_half_up

# Start and end hour of each study window
STUDY_HOURS = {
    "morning": (9, 11),
    "afternoon": (14, 16),
    "evening": (19, 21),
}

DEFAULT_CONSISTENCY = 0.5
DEFAULT_AVERAGE_SCORE = 70
MAX_ITEMS_PER_DAY = 3
MAX_REINFORCEMENT_ITEMS = 2
REINFORCEMENT_MINUTES = 10
GOOD_SCORE_REDUCTION = 5
MIN_SESSION_DURATION = 15

PATTERN_RECOMMENDATIONS = {
    "unknown": "Start with short, regular study sessions to establish a pattern",
    "frequent-short": "You study frequently in short bursts. Try grouping sessions for deeper focus.",
    "daily-long": "You prefer longer daily sessions. Consider adding more breaks to maintain effectiveness.",
    "infrequent-intensive": "You study intensively but infrequently. Try adding shorter, more regular sessions.",
    "irregular": "Your study pattern is still developing. Aim for consistency with 25-minute focused sessions.",
}


def get_study_hours(period: str) -> tuple[int, int]:
    """Hour window for a time period; periods without a window use the evening one."""
    return STUDY_HOURS.get(period, STUDY_HOURS[DEFAULT_STUDY_TIME])


def sort_for_schedule(items: list[ContentItem], weak_areas: list) -> list[ContentItem]:
    """Weak-area items first, then hardest first."""
    return sorted(items, key=lambda i: (i.subject not in weak_areas, -i.difficulty))


def calc_items_per_day(item_count: int, days_to_schedule: int, consistency: float) -> int:
    return max(1, min(MAX_ITEMS_PER_DAY, math.ceil(item_count / (days_to_schedule * consistency))))


def calc_session_duration(base_duration: int, items: list[ContentItem], average_score: float) -> int:
    """Lengthen sessions for harder content and for weaker performance."""
    avg_difficulty = sum(i.difficulty for i in items) / len(items)
    return round_half_up(
        base_duration * (1 + (avg_difficulty - 3) * 0.1) * (1 + (70 - average_score) * 0.005)
    )


def generate_schedule(
    user_data: UserData | None,
    items: list[ContentItem] | None,
    start_date: datetime | None = None,
    days_to_schedule: int = 7,
) -> list[StudySession]:
    """Build one study session per day for days_to_schedule consecutive days.

    Items are spread cyclically, so content repeats once every item has
    been scheduled.
    """
    if user_data is None or not items or days_to_schedule <= 0:
        return []
    start_date = start_date or datetime.now()
    preferences = user_data.preferences or Preferences()
    performance = user_data.performance
    habits = user_data.habits

    base_duration = preferences.study_duration or 25
    base_break = preferences.break_duration or 5
    period = calculate_best_learning_time(habits)
    start_hour, _ = get_study_hours(period)

    weak_areas = performance.weak_areas if performance else []
    sorted_items = sort_for_schedule(items, weak_areas)
    consistency = (habits.consistency_score if habits else None) or DEFAULT_CONSISTENCY
    items_per_day = calc_items_per_day(len(sorted_items), days_to_schedule, consistency)
    average_score = (performance.average_score if performance else None) or DEFAULT_AVERAGE_SCORE

    schedule = []
    current = start_date
    for day in range(days_to_schedule):
        start_index = (day * items_per_day) % len(sorted_items)
        day_items = [
            sorted_items[(start_index + i) % len(sorted_items)] for i in range(items_per_day)
        ]
        schedule.append(StudySession(
            date=current.replace(hour=start_hour, minute=0, second=0, microsecond=0),
            items=day_items,
            duration=calc_session_duration(base_duration, day_items, average_score),
            break_duration=base_break,
        ))
        current = current + timedelta(days=1)

    logger.debug(
        f"Scheduled {days_to_schedule} days in the {period}, {items_per_day} items per day"
    )
    return schedule


def adjust_for_feedback(
    schedule: list[StudySession] | None,
    feedback: PerformanceFeedback | None,
    now: datetime | None = None,
) -> list[StudySession] | None:
    """Return a revised schedule after a round of performance feedback.

    Struggled items are prepended to the next upcoming session. A high
    average score trims every session after the first.
    """
    if schedule is None or feedback is None:
        return schedule
    now = to_local_naive(now or datetime.now())
    updated = list(schedule)

    struggled = feedback.struggled_items or []
    if struggled and updated:
        next_index = next((i for i, s in enumerate(updated) if to_local_naive(s.date) > now), None)
        if next_index is not None:
            session = updated[next_index]
            updated[next_index] = replace(
                session,
                items=list(struggled[:MAX_REINFORCEMENT_ITEMS]) + list(session.items),
                duration=session.duration + REINFORCEMENT_MINUTES,
            )
            logger.debug(f"Added reinforcement to session {next_index} on {session.date:%Y-%m-%d}")

    if feedback.average_score and feedback.average_score > 85:
        for index, session in enumerate(updated):
            if index > 0:
                updated[index] = replace(
                    session,
                    duration=max(MIN_SESSION_DURATION, session.duration - GOOD_SCORE_REDUCTION),
                )
        logger.debug(f"Shortened {max(0, len(updated) - 1)} sessions after strong score")

    return updated


def calculate_optimal_break_time(
    session_duration: int,
    fatigue_level: int = 5,
    difficulty: int = 3,
) -> int:
    """Break length in minutes, between 5 and 20."""
    base_break = max(5, round_half_up(session_duration / 5))
    fatigue_adjustment = (fatigue_level - 5) * 0.5
    difficulty_adjustment = (difficulty - 3) * 0.5
    break_time = round_half_up(base_break + fatigue_adjustment + difficulty_adjustment)
    return max(5, min(20, break_time))


def detect_study_pattern(habits: UserHabits | None) -> StudyPattern:
    if habits is None or not habits.completion_history:
        return StudyPattern("unknown", PATTERN_RECOMMENDATIONS["unknown"])

    history = habits.completion_history
    total_sessions = sum(r.sessions_completed for r in history)
    total_duration = sum(r.duration for r in history)
    average_sessions = total_sessions / len(history)
    average_duration = total_duration / total_sessions if total_sessions > 0 else 0

    if average_sessions >= 2.5:
        pattern = "frequent-short"
    elif average_sessions >= 1 and average_duration >= 45:
        pattern = "daily-long"
    elif average_sessions < 1 and average_duration >= 60:
        pattern = "infrequent-intensive"
    else:
        pattern = "irregular"
    return StudyPattern(
        pattern=pattern,
        recommendation=PATTERN_RECOMMENDATIONS[pattern],
        average_sessions=average_sessions,
        average_duration=average_duration,
    )
