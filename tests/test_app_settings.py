from datetime import date

from modules.hangar_schedule.models import GridConfig
from utils.app_settings import load_settings


def test_defaults_without_ini_or_env():
    settings = load_settings()
    assert (settings.hangars, settings.days, settings.undo_depth) == (4, 7, 10)
    assert settings.dev_mode is False


def test_ini_values_are_read(tmp_path):
    (tmp_path / "app.ini").write_text(
        "[app]\ndev = yes\n\n[schedule]\nhangars = 6\ndays = 14\nundo_depth = 3\n",
        encoding="utf-8",
    )
    settings = load_settings()
    assert (settings.hangars, settings.days, settings.undo_depth) == (6, 14, 3)
    assert settings.dev_mode is True


def test_env_overrides_ini(tmp_path, monkeypatch):
    (tmp_path / "app.ini").write_text("[schedule]\nhangars = 6\n", encoding="utf-8")
    monkeypatch.setenv("HANGAR_SCHEDULE_HANGARS", "2")
    assert load_settings().hangars == 2


def test_invalid_values_fall_back(monkeypatch):
    monkeypatch.setenv("HANGAR_SCHEDULE_DAYS", "soon")
    monkeypatch.setenv("HANGAR_SCHEDULE_UNDO_DEPTH", "0")
    settings = load_settings()
    assert settings.days == 7
    assert settings.undo_depth == 10


def test_grid_config_clamps_counts():
    config = GridConfig.from_counts(0, -5, date(2024, 1, 1))
    assert (config.hangar_count, config.day_count) == (1, 1)
    config = GridConfig.from_counts(500, 1000, date(2024, 1, 1))
    assert (config.hangar_count, config.day_count) == (200, 365)
    assert GridConfig.from_counts("x", 3).hangar_count == 1


def test_grid_config_names_and_window():
    config = GridConfig(hangar_count=3, day_count=2, start_date=date(2024, 12, 31))
    assert config.hangar_names() == ["Hangar 1", "Hangar 2", "Hangar 3"]
    assert config.days() == [date(2024, 12, 31), date(2025, 1, 1)]
    assert config.end_date == date(2025, 1, 1)
    assert config.contains_day(date(2025, 1, 1))
    assert not config.contains_day(date(2025, 1, 2))
