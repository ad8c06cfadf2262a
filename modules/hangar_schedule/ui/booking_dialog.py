from __future__ import annotations

"""Modal dialog for picking hangar, date and description of a booking."""

from datetime import date
from typing import Optional, Sequence

from PySide6.QtWidgets import (
    QComboBox,
    QDialog,
    QDialogButtonBox,
    QFormLayout,
    QLineEdit,
    QVBoxLayout,
)

from utils.timefmt import choice_label, parse_choice_label

# ``exec()`` result when the user asks to delete the booking being edited
DELETE_RESULT = 2


class BookingDialog(QDialog):
    def __init__(
        self,
        hangars: Sequence[str],
        days: Sequence[date],
        *,
        hangar: Optional[str] = None,
        day: Optional[date] = None,
        description: str = "",
        allow_delete: bool = False,
        parent=None,
    ):
        super().__init__(parent)
        self.setWindowTitle("Booking")
        self.setModal(True)
        self.setMinimumWidth(420)

        layout = QVBoxLayout(self)
        form = QFormLayout()

        self.cb_hangar = QComboBox()
        self.cb_hangar.addItems(list(hangars))
        self.cb_date = QComboBox()
        for d in days:
            self.cb_date.addItem(choice_label(d), d.isoformat())
        self.ed_description = QLineEdit(description)
        self.ed_description.setPlaceholderText("e.g. A-check, engine wash")

        form.addRow("Hangar:", self.cb_hangar)
        form.addRow("Date:", self.cb_date)
        form.addRow("Description:", self.ed_description)
        layout.addLayout(form)

        self.buttons = QDialogButtonBox(
            QDialogButtonBox.Ok | QDialogButtonBox.Cancel, parent=self
        )
        self.buttons.accepted.connect(self.accept)
        self.buttons.rejected.connect(self.reject)
        self.delete_button = None
        if allow_delete:
            self.delete_button = self.buttons.addButton("Delete", QDialogButtonBox.DestructiveRole)
            self.delete_button.clicked.connect(lambda: self.done(DELETE_RESULT))
        layout.addWidget(self.buttons)

        # preselect
        if hangar is not None and self.cb_hangar.findText(hangar) >= 0:
            self.cb_hangar.setCurrentIndex(self.cb_hangar.findText(hangar))
        if day is not None:
            idx = self.cb_date.findData(day.isoformat())
            if idx >= 0:
                self.cb_date.setCurrentIndex(idx)

    def selected_hangar(self) -> str:
        return self.cb_hangar.currentText()

    def selected_date(self) -> Optional[date]:
        return parse_choice_label(self.cb_date.currentText())

    def description(self) -> str:
        return self.ed_description.text().strip()


__all__ = ["BookingDialog", "DELETE_RESULT"]
