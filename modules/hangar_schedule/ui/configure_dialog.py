from __future__ import annotations

"""Small dialog to choose hangar and day counts (shown on startup)."""

from PySide6.QtWidgets import (
    QDialog,
    QDialogButtonBox,
    QFormLayout,
    QSpinBox,
    QVBoxLayout,
)

from ..models import (
    DEFAULT_DAY_COUNT,
    DEFAULT_HANGAR_COUNT,
    MAX_DAY_COUNT,
    MAX_HANGAR_COUNT,
    GridConfig,
)


class ConfigureDialog(QDialog):
    def __init__(self, hangars: int = DEFAULT_HANGAR_COUNT, days: int = DEFAULT_DAY_COUNT, parent=None):
        super().__init__(parent)
        self.setWindowTitle("Configure Schedule Size")
        self.setModal(True)

        layout = QVBoxLayout(self)
        form = QFormLayout()

        self.sp_hangars = QSpinBox()
        self.sp_hangars.setRange(1, MAX_HANGAR_COUNT)
        self.sp_hangars.setValue(hangars)
        self.sp_days = QSpinBox()
        self.sp_days.setRange(1, MAX_DAY_COUNT)
        self.sp_days.setValue(days)

        form.addRow("Number of Hangars:", self.sp_hangars)
        form.addRow("Number of Days:", self.sp_days)
        layout.addLayout(form)

        buttons = QDialogButtonBox(
            QDialogButtonBox.Ok | QDialogButtonBox.Cancel, parent=self
        )
        buttons.accepted.connect(self.accept)
        buttons.rejected.connect(self.reject)
        layout.addWidget(buttons)

    @property
    def hangar_count(self) -> int:
        return self.sp_hangars.value()

    @property
    def day_count(self) -> int:
        return self.sp_days.value()

    def grid_config(self) -> GridConfig:
        return GridConfig.from_counts(self.hangar_count, self.day_count)


__all__ = ["ConfigureDialog"]
