from datetime import datetime

import pytest

from adaptive_learn.models import (
    CompletionRecord, ContentItem, Preferences, UserData, UserHabits, UserPerformance,
)


@pytest.fixture
def now():
    """Fixed clock so due dates and schedules are reproducible."""
    return datetime(2024, 3, 10, 12, 0)


@pytest.fixture
def user_data():
    return UserData(
        id="u1",
        name="Test Learner",
        preferences=Preferences(),
        performance=UserPerformance(
            average_score=70,
            completion_rate=0.6,
            weak_areas=["calculus"],
            strong_areas=["statistics"],
        ),
        habits=UserHabits(
            preferred_study_time={"morning": 0.2, "evening": 0.9},
            average_session_length=30,
            consistency_score=0.5,
            completion_history=[CompletionRecord("2024-03-08", 1, 30)],
        ),
    )


@pytest.fixture
def make_item():
    def _make(item_id, subject="general", difficulty=3, **kwargs):
        kwargs.setdefault("last_studied", datetime(2024, 3, 1))
        return ContentItem(id=item_id, subject=subject, difficulty=difficulty, **kwargs)
    return _make
