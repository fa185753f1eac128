"""Configuration models for taskq."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, PositiveInt, model_validator


class PriorityConfig(BaseModel):
    """Bounds the front end enforces when collecting a priority."""

    minimum: int = 1
    maximum: int = 5
    default: int = 3

    @model_validator(mode="after")
    def _check_range(self) -> PriorityConfig:
        if self.minimum > self.maximum:
            raise ValueError(f"minimum ({self.minimum}) exceeds maximum ({self.maximum})")
        if not self.minimum <= self.default <= self.maximum:
            raise ValueError(
                f"default ({self.default}) outside {self.minimum}-{self.maximum}"
            )
        return self


class HistoryConfig(BaseModel):
    """Configuration for undo history."""

    max_entries: PositiveInt | None = None


class DisplayConfig(BaseModel):
    """Configuration for task listings in the shell."""

    show_completed: bool = True
    order: Literal["store", "priority"] = "store"


class LoggingConfig(BaseModel):
    """Configuration for log output."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    file: str | None = None


class TaskqConfig(BaseModel):
    """Main configuration for taskq."""

    priority: PriorityConfig = Field(default_factory=PriorityConfig)
    history: HistoryConfig = Field(default_factory=HistoryConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def load(cls, path: Path | None = None) -> TaskqConfig:
        """Load configuration from file or return defaults."""
        if path is None:
            path = CONFIG_FILE

        if not path.exists():
            return cls()

        with open(path, encoding="utf-8") as f:
            data = json.load(f)

        return cls.model_validate(data)

    def save(self, path: Path | None = None) -> None:
        """Save configuration to file."""
        if path is None:
            path = CONFIG_FILE

        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w", encoding="utf-8") as f:
            json.dump(self.model_dump(exclude_none=True), f, indent=2)


# Default config directory
TASKQ_DIR = Path(".taskq")
CONFIG_FILE = TASKQ_DIR / "config.json"
