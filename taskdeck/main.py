from __future__ import annotations

import sys

from PySide6.QtGui import QFont
from PySide6.QtWidgets import QApplication, QMessageBox, QStyleFactory

from taskdeck.infra.db import init_db
from taskdeck.infra.logging import setup_logging
from taskdeck.ui.main_window import MainWindow


def main() -> None:
    setup_logging()
    app = QApplication(sys.argv)
    try:
        init_db()
        window = MainWindow()
    except Exception as exc:  # noqa: BLE001
        QMessageBox.critical(None, "DB error", str(exc))
        return

    app.setStyle(QStyleFactory.create("Fusion"))
    app.setFont(QFont("Segoe UI", 10))
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
