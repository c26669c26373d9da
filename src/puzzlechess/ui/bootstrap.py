"""Qt application bootstrap helpers."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

_LOGGER = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _configure_application(app: QApplication) -> None:
    """Apply app-wide settings and theme."""
    from puzzlechess.ui.styles.theme import APP_STYLE

    app.setApplicationName("Puzzle Chess")
    app.setStyle("Fusion")
    app.setStyleSheet(APP_STYLE)


def run_application(argv: list[str] | None = None) -> int:
    """Create and run the viewer; ``--verbose`` turns on engine debug logs."""
    from PyQt6.QtWidgets import QApplication

    from puzzlechess.ui.main_window import MainWindow

    args = sys.argv if argv is None else argv
    _configure_logging("--verbose" in args)

    app = QApplication(args)
    _configure_application(app)

    window = MainWindow()
    window.show()
    _LOGGER.debug("Viewer started")

    return app.exec()
