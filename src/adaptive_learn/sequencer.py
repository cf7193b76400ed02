"""Order content across subjects by dependency, difficulty and interleaving."""
from functools import cmp_to_key

from loguru import logger

from adaptive_learn.models import ContentItem

DEFAULT_SUBJECT = "general"


def _compare(a: ContentItem, b: ContentItem) -> int:
    # Only direct dependencies are detected; chains are not resolved.
    if b.id in (a.depends_on or []):
        return 1
    if a.id in (b.depends_on or []):
        return -1
    return a.difficulty - b.difficulty


def group_by_subject(items: list[ContentItem]) -> dict[str, list[ContentItem]]:
    groups = {}
    for item in items:
        groups.setdefault(item.subject or DEFAULT_SUBJECT, []).append(item)
    return groups


def interleave(groups: dict[str, list]) -> list:
    """Round-robin over the groups in insertion order until all are drained."""
    result = []
    index = 0
    has_more = True
    while has_more:
        has_more = False
        for group in groups.values():
            if index < len(group):
                result.append(group[index])
                has_more = True
        index += 1
    return result


def recommend_sequence(items: list[ContentItem] | None) -> list[ContentItem]:
    if not items:
        return []
    groups = group_by_subject(items)
    for subject, group in groups.items():
        groups[subject] = sorted(group, key=cmp_to_key(_compare))
    result = interleave(groups)
    logger.debug(f"Sequenced {len(result)} items across {len(groups)} subjects")
    return result
