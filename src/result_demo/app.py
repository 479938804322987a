from __future__ import annotations
import logging
import sys

from PySide6.QtWidgets import QApplication

from result_demo.config import AppConfig, load_app_config
from result_demo.errors import Err
from result_demo.ui.main_window import MainWindow

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

log = logging.getLogger("result_demo.app")


def _resolve_config() -> AppConfig:
    res = load_app_config()
    if isinstance(res, Err):
        log.warning("Config ignored, using defaults: %s", res.error)
        return AppConfig()
    return res.value


def _apply_log_level(config: AppConfig) -> None:
    logging.getLogger("result_demo").setLevel(config.log_level)


def _get_or_create_app() -> QApplication:
    """
    Return the existing QApplication if present; otherwise create one.
    Never create a second QApplication (avoids RuntimeError on rerun).
    """
    app = QApplication.instance()
    if app is None:
        logging.basicConfig(level=logging.INFO, format=LOG_FORMAT, datefmt=LOG_DATEFMT)
        app = QApplication(sys.argv)
    return app


def _find_existing_window(app: QApplication) -> MainWindow | None:
    """Return an existing MainWindow instance if one is already alive."""
    for w in app.topLevelWidgets():
        if isinstance(w, MainWindow):
            return w
    return None


def _show_window(win: MainWindow) -> None:
    """Show and bring the window to the front."""
    win.show()
    win.raise_()
    win.activateWindow()


def main() -> int:
    app = _get_or_create_app()
    config = _resolve_config()
    _apply_log_level(config)

    win = _find_existing_window(app)
    if win is None:
        win = MainWindow(config)

    _show_window(win)
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
