"""Priority scoring for study content."""
from dataclasses import replace
from datetime import datetime

from loguru import logger

from adaptive_learn.models import (
    CRITICAL, HIGH, MEDIUM, LOW, OPTIONAL, ContentItem, UserData, to_local_naive,
)

BASE_SCORE = 5

PRIORITY_VALUES = {
    CRITICAL: 4,
    HIGH: 3,
    MEDIUM: 2,
    LOW: 1,
    OPTIONAL: 0,
}


def get_priority_value(priority: str | None) -> int:
    """Numeric rank of a tier label; unknown labels rank 0."""
    return PRIORITY_VALUES.get(priority, 0)


def get_priority_tier(score: int) -> str:
    if score >= 10:
        return CRITICAL
    elif score >= 8:
        return HIGH
    elif score >= 5:
        return MEDIUM
    elif score >= 3:
        return LOW
    return OPTIONAL


def _urgency_bonus(due_date: datetime | None, now: datetime) -> int:
    if due_date is None:
        return 0
    days_until_due = max(0.0, (to_local_naive(due_date) - now).total_seconds() / 86400)
    if days_until_due < 1:
        return 3
    elif days_until_due < 3:
        return 2
    elif days_until_due < 7:
        return 1
    return 0


def calc_priority_score(
    item: ContentItem,
    weak_areas: list,
    strong_areas: list,
    now: datetime,
) -> int:
    score = BASE_SCORE
    if item.subject in weak_areas:
        score += 3
    if item.subject in strong_areas:
        score -= 2
    score += min(2, max(0, item.difficulty - 3))
    score += _urgency_bonus(item.due_date, now)
    if item.previously_struggled:
        score += 2
    if not item.last_studied:
        score += 1
    return score


def prioritize_content(
    items: list[ContentItem] | None,
    user_data: UserData | None,
    now: datetime | None = None,
) -> list[ContentItem]:
    """Score every item and return copies sorted by priority score, highest first.

    Ties keep their input order. The caller's items are left untouched.
    """
    if not items or user_data is None:
        return []
    now = to_local_naive(now or datetime.now())
    performance = user_data.performance
    weak_areas = performance.weak_areas if performance else []
    strong_areas = performance.strong_areas if performance else []

    scored = []
    for item in items:
        score = calc_priority_score(item, weak_areas, strong_areas, now)
        scored.append(replace(item, priority_score=score, priority=get_priority_tier(score)))
    scored.sort(key=lambda i: i.priority_score, reverse=True)
    logger.debug(f"Prioritized {len(scored)} items, top score {scored[0].priority_score}")
    return scored
