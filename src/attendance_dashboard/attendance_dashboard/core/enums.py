from __future__ import annotations

from enum import Enum


class BackendKind(str, Enum):
    """Physical stores able to hold the dataset, highest priority first."""

    DATABASE = "database"
    FILE = "file"
    MEMORY = "memory"


class Trend(str, Enum):
    """Direction shown next to a dashboard figure."""

    UP = "up"
    NEUTRAL = "neutral"
    DOWN = "down"


class AttendanceBand(str, Enum):
    """Colour band of a single subject's attendance."""

    GOOD = "good"
    WARNING = "warning"
    POOR = "poor"
