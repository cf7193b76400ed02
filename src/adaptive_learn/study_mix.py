"""Balanced selection of weak-area, strong-area and new content."""
from dataclasses import replace

from loguru import logger

from adaptive_learn.models import (
    NEW_CONTENT, STRONG_AREA, WEAK_AREA, ContentItem, UserPerformance,
)
from adaptive_learn.rounding import round_half_up

MAX_MIX_ITEMS = 10


def get_mix_percentages(performance: UserPerformance | None) -> tuple[int, int, int]:
    """Return (weak, strong, new) percentages for the user's average score."""
    if performance is None:
        return 60, 20, 20
    avg_score = performance.average_score or 70
    if avg_score < 60:
        return 70, 15, 15
    elif avg_score > 85:
        return 40, 20, 40
    return 60, 20, 20


def generate_balanced_mix(
    items: list[ContentItem] | None,
    performance: UserPerformance | None,
) -> list[ContentItem]:
    """Pick up to MAX_MIX_ITEMS items, tagged with their category.

    Shortfalls in the weak and strong buckets are handed to new content.
    """
    if not items:
        return []
    weak_pct, strong_pct, new_pct = get_mix_percentages(performance)
    weak_areas = performance.weak_areas if performance else []
    strong_areas = performance.strong_areas if performance else []

    weak_items = [i for i in items if i.subject in weak_areas]
    strong_items = [i for i in items if i.subject in strong_areas]
    new_items = [i for i in items if i.subject not in weak_areas and i.subject not in strong_areas]

    total = min(len(items), MAX_MIX_ITEMS)
    weak_count = round_half_up(total * weak_pct / 100)
    strong_count = round_half_up(total * strong_pct / 100)
    new_count = round_half_up(total * new_pct / 100)
    if len(weak_items) < weak_count:
        new_count += weak_count - len(weak_items)
    if len(strong_items) < strong_count:
        new_count += strong_count - len(strong_items)

    mix = (
        [replace(i, category=WEAK_AREA) for i in weak_items[:weak_count]]
        + [replace(i, category=STRONG_AREA) for i in strong_items[:strong_count]]
        + [replace(i, category=NEW_CONTENT) for i in new_items[:new_count]]
    )
    logger.debug(f"Study mix {weak_pct}/{strong_pct}/{new_pct}: {len(mix)} of {len(items)} items")
    return mix
