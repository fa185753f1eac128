"""Shared fixtures for taskq tests."""

from __future__ import annotations

import json
import os
from collections.abc import Generator
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from taskq.engine import TaskEngine
from taskq.logging_setup import reset_logging

if TYPE_CHECKING:
    from taskq.config import TaskqConfig


@pytest.fixture(autouse=True)
def _reset_taskq_logging() -> Generator[None, None, None]:
    """Drop handlers the CLI installs so they never outlive a test."""
    yield
    reset_logging()


@pytest.fixture
def temp_project(tmp_path: Path) -> Generator[Path, None, None]:
    """Create a temporary project directory and change to it."""
    original_dir = os.getcwd()
    os.chdir(tmp_path)
    try:
        yield tmp_path
    finally:
        os.chdir(original_dir)


@pytest.fixture
def temp_taskq_dir(temp_project: Path) -> Path:
    """Create a temporary .taskq directory."""
    taskq_dir = temp_project / ".taskq"
    taskq_dir.mkdir()
    return taskq_dir


@pytest.fixture
def sample_config_data() -> dict:
    """Sample configuration data."""
    return {
        "priority": {"minimum": 1, "maximum": 5, "default": 2},
        "history": {"max_entries": 50},
        "display": {"show_completed": False, "order": "priority"},
        "logging": {"level": "INFO"},
    }


@pytest.fixture
def sample_config(temp_taskq_dir: Path, sample_config_data: dict) -> TaskqConfig:
    """Create a sample config file and return loaded config."""
    from taskq.config import TaskqConfig

    config_path = temp_taskq_dir / "config.json"
    with open(config_path, "w") as f:
        json.dump(sample_config_data, f)

    return TaskqConfig.load(config_path)


@pytest.fixture
def engine() -> TaskEngine:
    """A fresh, empty engine."""
    return TaskEngine()


@pytest.fixture
def populated_engine(engine: TaskEngine) -> TaskEngine:
    """Engine holding three tasks across two categories.

    #1 "Buy milk" (3, errand), #2 "Pay rent" (5, finance),
    #3 "Post letter" (3, errand).
    """
    engine.add_task("Buy milk", 3, "errand")
    engine.add_task("Pay rent", 5, "finance")
    engine.add_task("Post letter", 3, "errand")
    return engine
