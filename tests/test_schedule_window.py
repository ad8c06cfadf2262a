from __future__ import annotations

import os
from datetime import date

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

try:
    from PySide6.QtWidgets import QApplication, QDialog, QLabel
except ImportError as exc:  # pragma: no cover - environment-specific
    pytest.skip(f"PySide6 unavailable: {exc}", allow_module_level=True)

from modules.hangar_schedule import create_schedule_window  # noqa: E402
from modules.hangar_schedule.models import GridConfig, SlotKey  # noqa: E402
from modules.hangar_schedule.ui import schedule_window as sw  # noqa: E402
from modules.hangar_schedule.ui.booking_dialog import DELETE_RESULT, BookingDialog  # noqa: E402
from modules.hangar_schedule.ui.configure_dialog import ConfigureDialog  # noqa: E402
from modules.hangar_schedule.ui.range_dialog import DateRangeDialog  # noqa: E402
from styles.colors import HEADER_TEXT  # noqa: E402

D1 = date(2024, 1, 1)
D2 = date(2024, 1, 2)


def _ensure_app() -> QApplication:
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    return app


@pytest.fixture()
def window(monkeypatch):
    _ensure_app()
    notices: list[tuple[str, str, str]] = []
    for name in ("information", "warning", "critical"):
        monkeypatch.setattr(
            sw.QMessageBox,
            name,
            staticmethod(lambda parent, title, text, _n=name: notices.append((_n, title, text))),
        )
    win = create_schedule_window(config=GridConfig(hangar_count=3, day_count=5, start_date=D1))
    win.notices = notices
    monkeypatch.setattr(win, "_confirm", lambda message: True)
    yield win
    win.close()
    win.deleteLater()


class _FakeBookingDialog:
    result = QDialog.Accepted
    hangar = "Hangar 2"
    day = D2
    text = "Inspection"
    last_kwargs: dict = {}

    def __init__(self, hangars, days, **kwargs):
        type(self).last_kwargs = kwargs

    def exec(self):
        return type(self).result

    def selected_hangar(self):
        return type(self).hangar

    def selected_date(self):
        return type(self).day

    def description(self):
        return type(self).text


def test_grid_has_one_button_per_slot(window):
    assert len(window._slot_buttons) == 15
    button = window.slot_button(SlotKey("Hangar 3", date(2024, 1, 5)))
    assert button.property(sw.SLOT_KEY_PROPERTY) == "Hangar 3-2024-01-05"


def test_click_selects_slot(window):
    key = SlotKey("Hangar 1", D1)
    window.slot_button(key).click()
    assert window.service.selected == key
    assert "3px solid" in window.slot_button(key).styleSheet()


def test_add_without_selection_shows_notice(window):
    window._on_add()
    assert window.notices == [("information", "Add", "Please select a slot first.")]


def test_add_edit_and_undo_through_window(window, monkeypatch):
    monkeypatch.setattr(sw, "BookingDialog", _FakeBookingDialog)
    window.slot_button(SlotKey("Hangar 1", D1)).click()

    window._on_add()
    moved = SlotKey("Hangar 2", D2)
    assert window.slot_button(moved).text() == "Inspection"
    assert window.service.store.all_keys() == [moved]
    assert window.action_undo.isEnabled()

    window._on_edit()
    assert _FakeBookingDialog.last_kwargs["allow_delete"] is True
    assert _FakeBookingDialog.last_kwargs["description"] == "Inspection"

    window._on_undo()
    window._on_undo()
    assert window.slot_button(moved).text() == ""
    assert not window.action_undo.isEnabled()

    window._on_undo()
    assert window.notices[-1] == ("information", "Undo", "Nothing to undo.")


def test_edit_dialog_delete_path(window, monkeypatch):
    key = SlotKey("Hangar 1", D1)
    window.service.select(key)
    window.service.save_booking("Hangar 1", D1, "Wash")
    monkeypatch.setattr(sw, "BookingDialog", _FakeBookingDialog)
    monkeypatch.setattr(_FakeBookingDialog, "result", DELETE_RESULT)
    window._on_edit()
    assert key not in window.service.store


def test_multi_day_out_of_window_reports_warning(window, monkeypatch):
    class _FakeRange:
        def __init__(self, *args, **kwargs):
            pass

        def exec(self):
            return QDialog.Accepted

        def selected_hangar(self):
            return "Hangar 1"

        def date_range(self):
            return date(2024, 1, 4), date(2024, 1, 8)

        def description(self):
            return "Overhaul"

    monkeypatch.setattr(sw, "DateRangeDialog", _FakeRange)
    window._on_multi_day()
    assert len(window.service.store) == 0
    assert window.notices[-1][0] == "warning"

    window._on_block_range()
    assert window.slot_button(SlotKey("Hangar 1", date(2024, 1, 5))).text() == "Unavailable"


def test_reconfigure_rebuilds_grid(window, monkeypatch):
    window.service.block_range("Hangar 1", D1, D2)

    class _FakeConfigure:
        def __init__(self, *args, **kwargs):
            pass

        def exec(self):
            return QDialog.Accepted

        def grid_config(self):
            return GridConfig(hangar_count=2, day_count=2, start_date=D1)

    monkeypatch.setattr(sw, "ConfigureDialog", _FakeConfigure)
    window._on_reconfigure()
    assert len(window._slot_buttons) == 4
    assert len(window.service.store) == 0
    assert not window.action_undo.isEnabled()


def test_header_labels_use_header_colour(window):
    corner = next(lbl for lbl in window.findChildren(QLabel) if lbl.text() == "Hangar/Date")
    assert HEADER_TEXT.name() in corner.styleSheet()


def test_closed_window_stops_following_signals(window):
    key = SlotKey("Hangar 1", D1)
    window.show()
    window.close()
    window.service.block_range("Hangar 1", D1, D1)
    assert window.slot_button(key).text() == ""


def test_booking_dialog_preselects_and_reads_back():
    _ensure_app()
    dlg = BookingDialog(
        ["Hangar 1", "Hangar 2"],
        [D1, D2],
        hangar="Hangar 2",
        day=D2,
        description="Paint",
        allow_delete=True,
    )
    assert dlg.selected_hangar() == "Hangar 2"
    assert dlg.selected_date() == D2
    assert dlg.description() == "Paint"
    assert dlg.delete_button is not None


def test_range_and_configure_dialogs():
    _ensure_app()
    dlg = DateRangeDialog("Block Range", ["Hangar 1"], D1, D2, with_description=True)
    dlg.ed_description.setText(" C-check ")
    assert dlg.date_range() == (D1, D2)
    assert dlg.description() == "C-check"

    cfg = ConfigureDialog(0, 400)
    assert cfg.hangar_count == 1
    assert cfg.day_count == 365
    assert cfg.grid_config().day_count == 365
