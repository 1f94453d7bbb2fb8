from __future__ import annotations

import logging
import sys
from pathlib import Path

from PySide6.QtGui import QColor, QFont, QPalette
from PySide6.QtWidgets import QApplication, QMessageBox, QStyleFactory

from goalx.config import PROJECT_ROOT
from goalx.infra.db import init_db
from goalx.infra.logging import setup_logging
from goalx.ui.main_window import MainWindow

logger = logging.getLogger(__name__)


def _apply_palette(app: QApplication) -> None:
    palette = QPalette()
    palette.setColor(QPalette.Window, QColor("#1D4268"))
    palette.setColor(QPalette.WindowText, QColor("#FFFFFF"))
    palette.setColor(QPalette.Base, QColor("#FFFFFF"))
    palette.setColor(QPalette.AlternateBase, QColor("#D4DEE8"))
    palette.setColor(QPalette.Text, QColor("#0A243F"))
    palette.setColor(QPalette.Button, QColor("#276AA5"))
    palette.setColor(QPalette.ButtonText, QColor("#FFFFFF"))
    palette.setColor(QPalette.Highlight, QColor("#1295F5"))
    palette.setColor(QPalette.HighlightedText, QColor("#FFFFFF"))
    app.setPalette(palette)


def _find_qss_path() -> Path | None:
    candidates = [
        Path(__file__).resolve().parent / "ui" / "styles.qss",
        PROJECT_ROOT / "goalx" / "ui" / "styles.qss",
    ]
    if getattr(sys, "frozen", False):
        meipass = getattr(sys, "_MEIPASS", None)
        if meipass:
            candidates.append(Path(meipass) / "goalx" / "ui" / "styles.qss")

    for path in candidates:
        if path.exists():
            return path
    return None


def load_styles(app: QApplication) -> None:
    qss_path = _find_qss_path()
    if not qss_path:
        logger.warning("Stylesheet not found, using the default look")
        return
    app.setStyleSheet(qss_path.read_text(encoding="utf-8"))


def main() -> None:
    setup_logging()
    try:
        init_db()
    except Exception as exc:  # noqa: BLE001
        logger.exception("Preferences store unavailable")
        app = QApplication(sys.argv)
        QMessageBox.critical(None, "Storage error", str(exc))
        return

    app = QApplication(sys.argv)
    app.setApplicationName("Goalx")
    app.setStyle(QStyleFactory.create("Fusion"))
    _apply_palette(app)
    app.setFont(QFont("Helvetica", 11))
    load_styles(app)

    window = MainWindow()
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
