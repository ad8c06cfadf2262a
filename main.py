# ===== Part 1: Imports & Logging ============================================
import sys
import logging

from PySide6.QtWidgets import QApplication, QDialog

from modules.hangar_schedule import GridConfig, create_schedule_window
from modules.hangar_schedule.ui.configure_dialog import ConfigureDialog
from utils.app_settings import load_settings

logger = logging.getLogger(__name__)


def configure_logging(dev_mode: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if dev_mode else logging.INFO,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
    )


# ===== Part 2: Startup configuration ========================================
def ask_grid_config(hangars: int, days: int) -> GridConfig:
    """Show the size dialog; fall back to the configured defaults on cancel."""
    dlg = ConfigureDialog(hangars, days)
    if dlg.exec() == QDialog.Accepted:
        return dlg.grid_config()
    logger.info("Configuration cancelled; using %d hangar(s) x %d day(s)", hangars, days)
    return GridConfig.from_counts(hangars, days)


# ===== Part 3: Entry point ==================================================
def main() -> int:
    settings = load_settings()
    configure_logging(settings.dev_mode)
    app = QApplication(sys.argv)
    config = ask_grid_config(settings.hangars, settings.days)
    window = create_schedule_window(config=config, undo_depth=settings.undo_depth)
    window.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
