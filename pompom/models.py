"""Pydantic models — single source of truth for all data types."""

from __future__ import annotations

import enum
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class UrgencyColor(str, enum.Enum):
    """Colour tier of the countdown, derived from the remaining time."""

    NORMAL = "normal"
    WARNING = "warning"
    CRITICAL = "critical"


class Urgency(BaseModel):
    """How the remaining time should look on screen."""

    model_config = ConfigDict(frozen=True)

    color: UrgencyColor
    blink: bool = False


class Snapshot(BaseModel):
    """Immutable view of a countdown handed to observers."""

    model_config = ConfigDict(frozen=True)

    remaining_seconds: int = Field(ge=0)
    message: Optional[str] = None


class SessionRecord(BaseModel):
    """A pomodoro session as stored in the work log."""

    id: int
    started_at: datetime = Field(default_factory=datetime.now)
    message: Optional[str] = None
    finished_early: bool = False


class SessionCreate(BaseModel):
    """Input model for starting a logged session."""

    message: Optional[str] = None


class TimerConfig(BaseModel):
    """Process-level settings for a single run."""

    seconds: int = Field(default=1500, ge=0)
    message: Optional[str] = None
    log_path: Optional[str] = None  # None = use configured / default path
    no_log: bool = False


class AppConfig(BaseModel):
    """Application configuration (persisted to ~/.pompom/config.json)."""

    db_path: Optional[str] = None  # None = use default (~/.pompom/worklog.db)
    sound_path: Optional[str] = None  # None = use default (~/.pompom/sound.wav)
    sound_command: list[str] = Field(default_factory=lambda: ["play", "-q"])
