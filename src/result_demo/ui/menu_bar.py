"""Menu bar construction for the demo window."""
from __future__ import annotations
from PySide6.QtGui import QAction
from PySide6.QtWidgets import QMenuBar, QMainWindow

def build_menu_bar(window: QMainWindow) -> QMenuBar:
    """Create and return the application menu bar.
    Always shows menu actions; connects to window slots when available.
    """
    menu_bar: QMenuBar = window.menuBar()

    # ------------------------------------------------------------------
    # File menu
    # ------------------------------------------------------------------
    file_menu = menu_bar.addMenu("&File")

    exit_action = QAction("E&xit", window)
    exit_action.setStatusTip("Exit the application")
    exit_action.triggered.connect(window.close)
    file_menu.addAction(exit_action)

    # ------------------------------------------------------------------
    # Help menu
    # ------------------------------------------------------------------
    help_menu = menu_bar.addMenu("&Help")

    about_action = QAction("&About", window)
    about_action.setStatusTip("Show information about this demo")
    slot = getattr(window, "_on_about", None)
    if callable(slot):
        about_action.triggered.connect(slot)  # type: ignore[call-arg]
    else:
        about_action.setEnabled(False)
    help_menu.addAction(about_action)

    return menu_bar
