from PySide6.QtWidgets import QApplication
from PySide6.QtCore import QCoreApplication

import sys
import os

from sumcalculator.config import APP_ID, ORG_ID, VISIBLE_APP_NAME


def create_app(argv: list[str] | None = None) -> QApplication:
    """Create and configure the QApplication instance."""
    os.environ.setdefault("QT_ENABLE_HIGHDPI_SCALING", "1")
    os.environ.setdefault("QT_AUTO_SCREEN_SCALE_FACTOR", "1")

    QCoreApplication.setOrganizationName(ORG_ID)
    QCoreApplication.setApplicationName(APP_ID)

    # Qt allows a single application object per process
    app = QApplication.instance()
    if app is None:
        app = QApplication(sys.argv if argv is None else argv)

    visible_name = QCoreApplication.translate("App", VISIBLE_APP_NAME)
    app.setApplicationDisplayName(visible_name)

    return app
