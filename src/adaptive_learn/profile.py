"""Load the user profile and content catalogue, and apply profile updates."""
import json
from dataclasses import fields, replace
from datetime import date
from pathlib import Path

from loguru import logger

from adaptive_learn.models import (
    Accessibility, CompletionRecord, ContentItem, Preferences, UserData, UserHabits,
    UserPerformance,
)

CONTENT_DIR = Path(__file__).parent / "content"
DEFAULT_USER_PATH = CONTENT_DIR / "user.json"
DEFAULT_ITEMS_PATH = CONTENT_DIR / "items.json"


class UserDataLoadError(Exception):
    """Raised when the user profile cannot be produced."""

    def __init__(self, message: str = "Failed to load user data"):
        super().__init__(message)


def load_user_data(path: str | Path | None = None) -> UserData:
    path = Path(path or DEFAULT_USER_PATH)
    try:
        data = json.loads(path.read_text())
        user = UserData.from_dict(data)
    except (OSError, ValueError, KeyError, TypeError, AttributeError) as e:
        logger.warning(f"Could not load user data from {path}: {e}")
        raise UserDataLoadError() from e
    logger.debug(f"Loaded user {user.id} from {path}")
    return user


def load_content_items(path: str | Path | None = None) -> list[ContentItem]:
    path = Path(path or DEFAULT_ITEMS_PATH)
    data = json.loads(path.read_text())
    return [ContentItem.from_dict(item) for item in data["items"]]


def _merge(record, record_cls, changes: dict):
    known = {f.name for f in fields(record_cls)}
    unknown = set(changes) - known
    if unknown:
        raise ValueError(f"Unknown {record_cls.__name__} fields: {', '.join(sorted(unknown))}")
    return replace(record or record_cls(), **changes)


def update_preferences(user_data: UserData, **changes) -> UserData:
    return replace(user_data, preferences=_merge(user_data.preferences, Preferences, changes))


def update_accessibility(user_data: UserData, **changes) -> UserData:
    return replace(user_data, accessibility=_merge(user_data.accessibility, Accessibility, changes))


def track_performance(user_data: UserData, metric: str, value) -> UserData:
    """Record a single performance metric, e.g. average_score."""
    return replace(
        user_data,
        performance=_merge(user_data.performance, UserPerformance, {metric: value}),
    )


def add_study_session(user_data: UserData, duration: int, today: date | None = None) -> UserData:
    """Count a finished session against today's entry in the completion history."""
    today_str = (today or date.today()).isoformat()
    habits = user_data.habits or UserHabits()
    history = list(habits.completion_history)
    for index, record in enumerate(history):
        if record.date == today_str:
            history[index] = replace(
                record,
                sessions_completed=record.sessions_completed + 1,
                duration=record.duration + duration,
            )
            break
    else:
        history.append(CompletionRecord(date=today_str, sessions_completed=1, duration=duration))
    return replace(user_data, habits=replace(habits, completion_history=history))
