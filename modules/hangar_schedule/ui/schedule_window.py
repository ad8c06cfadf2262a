"""Main window for the hangar schedule grid."""

from __future__ import annotations

import logging
from typing import Callable, Dict, Optional

from PySide6.QtCore import Qt
from PySide6.QtGui import QAction, QKeySequence
from PySide6.QtWidgets import (
    QDialog,
    QGridLayout,
    QInputDialog,
    QLabel,
    QMainWindow,
    QMessageBox,
    QPushButton,
    QScrollArea,
    QSizePolicy,
    QStatusBar,
    QToolBar,
    QWidget,
)

from styles.colors import HEADER_TEXT, SELECTED_BORDER, SLOT_BLOCKED, SLOT_BOOKED, SLOT_FREE
from utils.app_signals import app_signals
from utils.timefmt import header_label

from .. import slot_key
from ..exceptions import ScheduleError, Severity
from ..models import SlotKey, SlotStatus, SlotVisual
from ..services import ScheduleService
from .booking_dialog import DELETE_RESULT, BookingDialog
from .configure_dialog import ConfigureDialog
from .grid_sizing import (
    DAY_COLUMN_WIDTH,
    HANGAR_COLUMN_WIDTH,
    HANGAR_ROW_HEIGHT,
    HEADER_HEIGHT,
    compute_sizing,
)
from .range_dialog import DateRangeDialog

logger = logging.getLogger(__name__)

SLOT_KEY_PROPERTY = "slotKey"
HEADER_STYLE = f"font-weight: bold; color: {HEADER_TEXT.name()};"


def slot_stylesheet(visual: SlotVisual) -> str:
    if visual.status is SlotStatus.FREE:
        color = SLOT_FREE
    elif visual.blocked:
        color = SLOT_BLOCKED
    else:
        color = SLOT_BOOKED
    if visual.selected:
        border = f"3px solid {SELECTED_BORDER.name()}"
    else:
        border = "1px solid #8c959f"
    return f"QPushButton {{ background-color: {color.name()}; border: {border}; }}"


class ScheduleWindow(QMainWindow):
    """Hangar-by-day grid with the booking commands on a toolbar."""

    def __init__(self, service: ScheduleService, parent=None):
        super().__init__(parent)
        self.service = service
        self._slot_buttons: Dict[SlotKey, QPushButton] = {}
        self._grid_layout: Optional[QGridLayout] = None
        self._build_ui()
        self._build_grid()
        app_signals.scheduleChanged.connect(self._on_schedule_changed)
        app_signals.selectionChanged.connect(self._on_selection_changed)
        self._signals_connected = True

    # ------------------------------------------------------------------
    def _build_ui(self) -> None:
        self.setWindowTitle("Hangar Schedule")
        self.resize(1100, 700)

        toolbar = QToolBar("Schedule Toolbar")
        toolbar.setMovable(False)
        self.addToolBar(toolbar)

        def add_action(text: str, handler: Callable[[], None], shortcut: Optional[str] = None) -> QAction:
            action = QAction(text, self)
            if shortcut:
                action.setShortcut(QKeySequence(shortcut))
            action.triggered.connect(handler)
            toolbar.addAction(action)
            return action

        self.action_add = add_action("Add", self._on_add, "Ctrl+N")
        self.action_edit = add_action("Edit", self._on_edit, "Ctrl+E")
        self.action_delete = add_action("Delete", self._on_delete, "Del")
        toolbar.addSeparator()
        self.action_block = add_action("Block Range", self._on_block_range)
        self.action_multi_day = add_action("Multi-day Booking", self._on_multi_day)
        toolbar.addSeparator()
        self.action_clear_hangar = add_action("Clear Hangar", self._on_clear_hangar)
        self.action_clear_all = add_action("Clear All", self._on_clear_all)
        toolbar.addSeparator()
        self.action_undo = add_action("Undo", self._on_undo, "Ctrl+Z")
        self.action_reconfigure = add_action("Reconfigure", self._on_reconfigure)

        self.scroll = QScrollArea(self)
        self.scroll.setWidgetResizable(True)
        self.setCentralWidget(self.scroll)
        self.setStatusBar(QStatusBar())
        self._update_undo_state()

    def _build_grid(self) -> None:
        """(Re)create header labels and one button per configured slot."""
        self._slot_buttons.clear()
        container = QWidget()
        grid = QGridLayout(container)
        grid.setContentsMargins(0, 0, 0, 0)
        grid.setSpacing(0)

        corner = QLabel("Hangar/Date")
        corner.setAlignment(Qt.AlignCenter)
        corner.setStyleSheet(HEADER_STYLE)
        grid.addWidget(corner, 0, 0)

        days = self.service.days()
        for col, day in enumerate(days, start=1):
            label = QLabel(header_label(day))
            label.setAlignment(Qt.AlignCenter)
            label.setStyleSheet(HEADER_STYLE)
            grid.addWidget(label, 0, col)

        for row, hangar in enumerate(self.service.hangar_names(), start=1):
            hangar_label = QLabel(hangar)
            hangar_label.setAlignment(Qt.AlignVCenter | Qt.AlignLeft)
            hangar_label.setContentsMargins(8, 0, 0, 0)
            hangar_label.setStyleSheet(f"color: {HEADER_TEXT.name()};")
            grid.addWidget(hangar_label, row, 0)
            for col, day in enumerate(days, start=1):
                key = SlotKey(hangar, day)
                button = QPushButton("")
                button.setProperty(SLOT_KEY_PROPERTY, slot_key.encode_key(key))
                button.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)
                button.clicked.connect(lambda _checked=False, b=button: self._on_slot_clicked(b))
                grid.addWidget(button, row, col)
                self._slot_buttons[key] = button

        old = self.scroll.takeWidget()
        if old is not None:
            old.deleteLater()
        self.scroll.setWidget(container)
        self._grid_layout = grid
        self._update_sizing()
        self._refresh_slots()

    def _update_sizing(self) -> None:
        grid = self._grid_layout
        if grid is None:
            return
        config = self.service.config
        viewport = self.scroll.viewport().size()
        sizing = compute_sizing(viewport.width(), viewport.height(), config.hangar_count, config.day_count)

        grid.setColumnMinimumWidth(0, HANGAR_COLUMN_WIDTH)
        grid.setColumnStretch(0, 0)
        for col in range(1, config.day_count + 1):
            grid.setColumnMinimumWidth(col, 0 if sizing.stretch_columns else DAY_COLUMN_WIDTH)
            grid.setColumnStretch(col, 1 if sizing.stretch_columns else 0)

        grid.setRowMinimumHeight(0, HEADER_HEIGHT)
        grid.setRowStretch(0, 0)
        for row in range(1, config.hangar_count + 1):
            grid.setRowMinimumHeight(row, 0 if sizing.stretch_rows else HANGAR_ROW_HEIGHT)
            grid.setRowStretch(row, 1 if sizing.stretch_rows else 0)

        container = self.scroll.widget()
        if container is not None:
            container.setMinimumSize(
                0 if sizing.stretch_columns else sizing.natural_width,
                0 if sizing.stretch_rows else sizing.natural_height,
            )

    def resizeEvent(self, event) -> None:  # noqa: N802
        super().resizeEvent(event)
        self._update_sizing()

    def closeEvent(self, event) -> None:  # noqa: N802
        if self._signals_connected:
            app_signals.scheduleChanged.disconnect(self._on_schedule_changed)
            app_signals.selectionChanged.disconnect(self._on_selection_changed)
            self._signals_connected = False
        super().closeEvent(event)

    # ------------------------------------------------------------------
    def _refresh_slots(self) -> None:
        for key, visual in self.service.visuals().items():
            button = self._slot_buttons.get(key)
            if button is None:
                continue
            button.setText(visual.label)
            button.setToolTip(self._slot_tooltip(key))
            button.setStyleSheet(slot_stylesheet(visual))
        self._update_undo_state()

    def _slot_tooltip(self, key: SlotKey) -> str:
        booking = self.service.booking_at(key)
        text = f"{key.hangar} {key.day.isoformat()}"
        if booking is not None:
            text += f"\n{booking.display_text}"
        return text

    def _update_undo_state(self) -> None:
        can_undo = self.service.can_undo()
        self.action_undo.setEnabled(can_undo)
        label = self.service.undo_log.peek_label()
        self.action_undo.setToolTip(f"Undo {label}" if label else "Nothing to undo")

    def slot_button(self, key: SlotKey) -> Optional[QPushButton]:
        return self._slot_buttons.get(key)

    # ------------------------------------------------------------------
    # Notices and confirmation
    # ------------------------------------------------------------------
    def _confirm(self, message: str) -> bool:
        answer = QMessageBox.question(
            self,
            "Confirm",
            message,
            QMessageBox.Yes | QMessageBox.No,
            QMessageBox.No,
        )
        return answer == QMessageBox.Yes

    def _show_notice(self, exc: ScheduleError) -> None:
        if exc.severity is Severity.INFO:
            QMessageBox.information(self, exc.title, exc.message)
        elif exc.severity is Severity.WARNING:
            QMessageBox.warning(self, exc.title, exc.message)
        else:
            logger.error("[schedule] %s: %s", exc.title, exc.message)
            QMessageBox.critical(self, exc.title, exc.message)

    def _run(self, command: Callable, *args):
        try:
            return command(*args)
        except ScheduleError as exc:
            self._show_notice(exc)
            return None

    # ------------------------------------------------------------------
    # Slot and command handlers
    # ------------------------------------------------------------------
    def _on_slot_clicked(self, button: QPushButton) -> None:
        encoded = button.property(SLOT_KEY_PROPERTY)
        try:
            key = slot_key.decode(str(encoded or ""))
        except ScheduleError as exc:
            self._show_notice(exc)
            return
        self._run(self.service.select, key)

    def _on_add(self) -> None:
        self._open_booking_dialog(edit=False)

    def _on_edit(self) -> None:
        self._open_booking_dialog(edit=True)

    def _open_booking_dialog(self, *, edit: bool) -> None:
        title = "Edit" if edit else "Add"
        key = self._run(self.service.require_selection, title)
        if key is None:
            return
        existing = self.service.booking_at(key) if edit else None
        dlg = BookingDialog(
            self.service.hangar_names(),
            self.service.days(),
            hangar=existing.hangar if existing else key.hangar,
            day=existing.day if existing else key.day,
            description=existing.description if existing and not existing.is_blocked else "",
            allow_delete=existing is not None,
            parent=self,
        )
        result = dlg.exec()
        if result == DELETE_RESULT:
            self._run(self.service.delete_selected, self._confirm)
        elif result == QDialog.Accepted:
            day = dlg.selected_date()
            if day is None:
                return
            self._run(self.service.save_booking, dlg.selected_hangar(), day, dlg.description(), self._confirm)

    def _on_delete(self) -> None:
        self._run(self.service.delete_selected, self._confirm)

    def _range_dialog(self, title: str, *, with_description: bool) -> Optional[DateRangeDialog]:
        selected = self.service.selected
        config = self.service.config
        start = selected.day if selected else config.start_date
        dlg = DateRangeDialog(
            title,
            self.service.hangar_names(),
            start,
            start,
            hangar=selected.hangar if selected else None,
            with_description=with_description,
            parent=self,
        )
        if dlg.exec() != QDialog.Accepted:
            return None
        return dlg

    def _on_block_range(self) -> None:
        dlg = self._range_dialog("Block Range", with_description=False)
        if dlg is None:
            return
        start, end = dlg.date_range()
        self._run(self.service.block_range, dlg.selected_hangar(), start, end, self._confirm)

    def _on_multi_day(self) -> None:
        dlg = self._range_dialog("Multi-day Booking", with_description=True)
        if dlg is None:
            return
        start, end = dlg.date_range()
        self._run(
            self.service.create_range,
            dlg.selected_hangar(),
            start,
            end,
            dlg.description(),
            self._confirm,
        )

    def _on_clear_hangar(self) -> None:
        names = self.service.hangar_names()
        selected = self.service.selected
        current = names.index(selected.hangar) if selected and selected.hangar in names else 0
        hangar, ok = QInputDialog.getItem(self, "Clear Hangar", "Hangar:", names, current, False)
        if not ok or not hangar:
            return
        self._run(self.service.clear_hangar, hangar, self._confirm)

    def _on_clear_all(self) -> None:
        self._run(self.service.clear_all, self._confirm)

    def _on_undo(self) -> None:
        self._run(self.service.undo)

    def _on_reconfigure(self) -> None:
        config = self.service.config
        dlg = ConfigureDialog(config.hangar_count, config.day_count, parent=self)
        if dlg.exec() != QDialog.Accepted:
            return
        if len(self.service.store) and not self._confirm("Reconfiguring discards all bookings. Continue?"):
            return
        self.service.reconfigure(dlg.grid_config())
        self._build_grid()

    # ------------------------------------------------------------------
    def _on_schedule_changed(self, label: str) -> None:
        self._refresh_slots()
        if label:
            self.statusBar().showMessage(label, 3000)

    def _on_selection_changed(self, _encoded: str) -> None:
        self._refresh_slots()


__all__ = ["ScheduleWindow", "slot_stylesheet", "SLOT_KEY_PROPERTY"]
