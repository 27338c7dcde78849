"""
Application Initialization
==========================
This module wires the store, the window and the Qt event loop together.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Reads the runtime settings and configures logging.
2. Instantiates the store (the single owner of calculator state).
3. Instantiates the Main Window (View) and passes the store into it.
4. Prevents circular import errors by being the orchestrator.
"""
import logging

from sumcalculator.app.application import create_app
from sumcalculator.app.store import CalculatorStore
from sumcalculator.config import load_settings
from sumcalculator.logging_config import setup_logging
from sumcalculator.view.main_window import MainWindow

logger = logging.getLogger(__name__)


def main() -> int:
    # 1. Setup Logging (Console + Optional File)
    settings = load_settings()
    setup_logging(level=settings.log_level, log_file=settings.log_file)

    # 2. Create the Qt Application
    app = create_app()

    # 3. Initialize the store and the Main Window
    store = CalculatorStore()
    window = MainWindow(store)
    window.show()
    logger.info("Main window shown.")

    # 4. Start Event Loop
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
