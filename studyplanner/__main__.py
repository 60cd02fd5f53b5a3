"""Allow running StudyPlanner as a module: python -m studyplanner."""

import logging
import os
import sys

from PyQt6.QtWidgets import QApplication

from .storage.db import SqlStore, init_db
from .app import StudyPlannerApp


def main() -> None:
    logging.basicConfig(
        level=os.environ.get("STUDYPLANNER_LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    init_db()

    app = QApplication(sys.argv)
    app.setApplicationName("StudyPlanner")
    app.setOrganizationName("StudyPlanner")

    window = StudyPlannerApp(SqlStore())
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
