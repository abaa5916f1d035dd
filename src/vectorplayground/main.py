"""
Application Initialization
==========================
This module constructs the MVC (Model-View-Controller) objects and starts
the Qt Event Loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Configures logging from config.py.
2. Instantiates the SceneSynchronizer (which owns the SceneState).
3. Passes it into the Main Window so the View can forward events.
"""
import sys

from vectorplayground.app import create_app
from vectorplayground.config import LOG_FILE, LOG_LEVEL
from vectorplayground.controller.synchronizer import SceneSynchronizer
from vectorplayground.logging_config import setup_logging
from vectorplayground.view.main_window import MainWindow


def main() -> None:
    # 1. Setup Logging (Console + Optional File)
    setup_logging(level=LOG_LEVEL, log_file=LOG_FILE)

    # 2. Create the Qt Application
    app = create_app()

    # 3. Initialize the controller (owns the SceneState)
    synchronizer = SceneSynchronizer()

    # 4. Initialize the Main Window, passing the controller
    window = MainWindow(synchronizer)
    window.show()

    # 5. Start Event Loop
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
