from __future__ import annotations

import os

# Qt widgets require a platform plugin.  Offscreen avoids libGL dependencies
# inside the test container.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
import sys
from datetime import date
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))
from modules.hangar_schedule.models import GridConfig
from modules.hangar_schedule.services import ScheduleService, ScheduleState

START = date(2024, 1, 1)


@pytest.fixture()
def config() -> GridConfig:
    return GridConfig(hangar_count=4, day_count=7, start_date=START)


@pytest.fixture()
def service(config) -> ScheduleService:
    return ScheduleService(ScheduleState(config=config))


@pytest.fixture(autouse=True)
def clean_settings_env(monkeypatch, tmp_path):
    for name in (
        "HANGAR_SCHEDULE_HANGARS",
        "HANGAR_SCHEDULE_DAYS",
        "HANGAR_SCHEDULE_UNDO_DEPTH",
        "HANGAR_SCHEDULE_DEV",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("HANGAR_DATA_DIR", str(tmp_path))
    yield
