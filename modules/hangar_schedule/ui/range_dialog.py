from __future__ import annotations

"""Modal dialog for a hangar plus an inclusive date range."""

from datetime import date
from typing import Optional, Sequence

from PySide6.QtCore import QDate
from PySide6.QtWidgets import (
    QComboBox,
    QDateEdit,
    QDialog,
    QDialogButtonBox,
    QFormLayout,
    QLineEdit,
    QVBoxLayout,
)


def _to_qdate(value: date) -> QDate:
    return QDate(value.year, value.month, value.day)


class DateRangeDialog(QDialog):
    """Used by both Block Range and Multi-day Booking.

    The description row is only shown when ``with_description`` is set.
    """

    def __init__(
        self,
        title: str,
        hangars: Sequence[str],
        start: date,
        end: date,
        *,
        hangar: Optional[str] = None,
        with_description: bool = False,
        parent=None,
    ):
        super().__init__(parent)
        self.setWindowTitle(title)
        self.setModal(True)

        layout = QVBoxLayout(self)
        form = QFormLayout()

        self.cb_hangar = QComboBox()
        self.cb_hangar.addItems(list(hangars))
        if hangar is not None and self.cb_hangar.findText(hangar) >= 0:
            self.cb_hangar.setCurrentIndex(self.cb_hangar.findText(hangar))

        self.start_date = QDateEdit(self)
        self.start_date.setCalendarPopup(True)
        self.start_date.setDisplayFormat("yyyy-MM-dd")
        self.start_date.setDate(_to_qdate(start))
        self.end_date = QDateEdit(self)
        self.end_date.setCalendarPopup(True)
        self.end_date.setDisplayFormat("yyyy-MM-dd")
        self.end_date.setDate(_to_qdate(end))

        form.addRow("Hangar:", self.cb_hangar)
        form.addRow("From:", self.start_date)
        form.addRow("To:", self.end_date)

        self.ed_description: Optional[QLineEdit] = None
        if with_description:
            self.ed_description = QLineEdit()
            form.addRow("Description:", self.ed_description)
        layout.addLayout(form)

        buttons = QDialogButtonBox(
            QDialogButtonBox.Ok | QDialogButtonBox.Cancel, parent=self
        )
        buttons.accepted.connect(self.accept)
        buttons.rejected.connect(self.reject)
        layout.addWidget(buttons)

    def selected_hangar(self) -> str:
        return self.cb_hangar.currentText()

    def date_range(self) -> tuple[date, date]:
        return self.start_date.date().toPython(), self.end_date.date().toPython()

    def description(self) -> str:
        if self.ed_description is None:
            return ""
        return self.ed_description.text().strip()


__all__ = ["DateRangeDialog"]
