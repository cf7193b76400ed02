"""Pack prioritized content into focused study sessions."""
from loguru import logger

from adaptive_learn.models import LOW, ContentItem, Session
from adaptive_learn.prioritizer import get_priority_value

DEFAULT_SESSION_DURATION = 25


def _highest_priority(items: list[ContentItem]) -> str:
    # Starts from "low", so a session of optional items still reports "low"
    highest = LOW
    for item in items:
        if get_priority_value(item.priority) > get_priority_value(highest):
            highest = item.priority
    return highest


def group_into_sessions(
    prioritized_items: list[ContentItem] | None,
    session_duration: int = DEFAULT_SESSION_DURATION,
) -> list[Session]:
    """Group items, in order, into sessions of at most session_duration minutes.

    An item longer than the target on its own still gets a session to itself.
    """
    if not prioritized_items:
        return []
    sessions = []
    current = Session()
    for item in prioritized_items:
        item_duration = item.duration
        if current.items and current.estimated_duration + item_duration > session_duration:
            current.priority = _highest_priority(current.items)
            sessions.append(current)
            current = Session()
        current.items.append(item)
        current.estimated_duration += item_duration

    if current.items:
        current.priority = _highest_priority(current.items)
        sessions.append(current)

    logger.debug(f"Grouped {len(prioritized_items)} items into {len(sessions)} sessions")
    return sessions
