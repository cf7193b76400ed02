"""Data classes for the adaptive learning domain model."""
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional

# Priority tiers, highest first
CRITICAL = "critical"
HIGH = "high"
MEDIUM = "medium"
LOW = "low"
OPTIONAL = "optional"

# Study-mix categories
WEAK_AREA = "weak-area"
STRONG_AREA = "strong-area"
NEW_CONTENT = "new-content"

DEFAULT_ITEM_DURATION = 10


def to_local_naive(value: Optional[datetime]) -> Optional[datetime]:
    """Convert an aware datetime to naive local time; naive values pass through."""
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone().replace(tzinfo=None)


def _parse_date(value) -> Optional[datetime]:
    if value is None or isinstance(value, datetime):
        return to_local_naive(value)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    text = str(value)
    # fromisoformat only accepts a trailing "Z" from Python 3.11
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    return to_local_naive(datetime.fromisoformat(text))


@dataclass
class ContentItem:
    id: str
    subject: Optional[str] = None
    difficulty: int = 3
    title: str = ""
    due_date: Optional[datetime] = None
    estimated_duration: Optional[int] = None
    previously_struggled: bool = False
    last_studied: Optional[datetime] = None
    depends_on: list = field(default_factory=list)
    # Attached by the prioritizer and the study-mix generator
    priority_score: Optional[int] = None
    priority: Optional[str] = None
    category: Optional[str] = None

    @property
    def duration(self) -> int:
        return self.estimated_duration or DEFAULT_ITEM_DURATION

    @classmethod
    def from_dict(cls, data: dict) -> "ContentItem":
        return cls(
            id=data["id"],
            subject=data.get("subject"),
            difficulty=data.get("difficulty") or 3,
            title=data.get("title", ""),
            due_date=_parse_date(data.get("dueDate")),
            estimated_duration=data.get("estimatedDuration"),
            previously_struggled=bool(data.get("previouslyStruggled", False)),
            last_studied=_parse_date(data.get("lastStudied")),
            depends_on=list(data.get("dependsOn") or []),
        )


@dataclass
class UserPerformance:
    average_score: Optional[float] = None
    completion_rate: Optional[float] = None
    study_streak: int = 0
    weak_areas: list = field(default_factory=list)
    strong_areas: list = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> "UserPerformance":
        return cls(
            average_score=data.get("averageScore"),
            completion_rate=data.get("completionRate"),
            study_streak=data.get("studyStreak", 0),
            weak_areas=list(data.get("weakAreas") or []),
            strong_areas=list(data.get("strongAreas") or []),
        )


@dataclass
class CompletionRecord:
    date: str
    sessions_completed: int = 0
    duration: int = 0

    @classmethod
    def from_dict(cls, data: dict) -> "CompletionRecord":
        return cls(
            date=data["date"],
            sessions_completed=data.get("sessionsCompleted", 0),
            duration=data.get("duration", 0),
        )


@dataclass
class UserHabits:
    preferred_study_time: dict = field(default_factory=dict)
    average_session_length: Optional[int] = None
    consistency_score: Optional[float] = None
    distraction_level: Optional[str] = None
    completion_history: list = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> "UserHabits":
        return cls(
            preferred_study_time=dict(data.get("preferredStudyTime") or {}),
            average_session_length=data.get("averageSessionLength"),
            consistency_score=data.get("consistencyScore"),
            distraction_level=data.get("distractionLevel"),
            completion_history=[
                CompletionRecord.from_dict(r) for r in data.get("completionHistory") or []
            ],
        )


@dataclass
class Preferences:
    """Per-user study settings.

    study_duration and break_duration are in minutes and feed the scheduler.
    """
    color_scheme: str = "default"
    font_size: str = "medium"
    notifications: bool = True
    study_duration: int = 25
    break_duration: int = 5

    @classmethod
    def from_dict(cls, data: dict) -> "Preferences":
        defaults = cls()
        return cls(
            color_scheme=data.get("colorScheme", defaults.color_scheme),
            font_size=data.get("fontSize", defaults.font_size),
            notifications=data.get("notifications", defaults.notifications),
            study_duration=data.get("studyDuration", defaults.study_duration),
            break_duration=data.get("breakDuration", defaults.break_duration),
        )


@dataclass
class Accessibility:
    high_contrast: bool = False
    screen_reader: bool = False
    motion_reduced: bool = False
    large_text: bool = False

    @classmethod
    def from_dict(cls, data: dict) -> "Accessibility":
        return cls(
            high_contrast=bool(data.get("highContrast", False)),
            screen_reader=bool(data.get("screenReader", False)),
            motion_reduced=bool(data.get("motionReduced", False)),
            large_text=bool(data.get("largeText", False)),
        )


@dataclass
class UserData:
    id: str = ""
    name: str = ""
    preferences: Optional[Preferences] = None
    performance: Optional[UserPerformance] = None
    habits: Optional[UserHabits] = None
    accessibility: Optional[Accessibility] = None

    @classmethod
    def from_dict(cls, data: dict) -> "UserData":
        def _nested(key, record_cls):
            value = data.get(key)
            return record_cls.from_dict(value) if value is not None else None

        return cls(
            id=data.get("id", ""),
            name=data.get("name", ""),
            preferences=_nested("preferences", Preferences),
            performance=_nested("performance", UserPerformance),
            habits=_nested("habits", UserHabits),
            accessibility=_nested("accessibility", Accessibility),
        )


@dataclass
class Session:
    """A block of items packed by the session grouper."""
    items: list = field(default_factory=list)
    estimated_duration: int = 0
    priority: str = MEDIUM


@dataclass
class StudySession:
    """One calendar day of the adaptive schedule."""
    date: datetime
    items: list = field(default_factory=list)
    duration: int = 0
    break_duration: int = 5
    completed: bool = False


@dataclass
class PerformanceFeedback:
    completed_items: list = field(default_factory=list)
    struggled_items: list = field(default_factory=list)
    average_score: Optional[float] = None


@dataclass
class StudyPattern:
    pattern: str
    recommendation: str
    average_sessions: Optional[float] = None
    average_duration: Optional[float] = None


@dataclass
class ReminderSettings:
    enabled: bool = True
    frequency: str = "medium"
    smart_timing: bool = True
