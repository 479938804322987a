"""Main window of the result demo: an icon over a text label.

When the window first appears it runs the division helper and logs the
outcome. There is no on-screen error surface; the log is the only observer.
"""

import logging
from typing import Optional

from PySide6.QtCore import Qt
from PySide6.QtGui import QIcon
from PySide6.QtWidgets import (
    QMainWindow, QWidget, QStatusBar, QVBoxLayout, QLabel,
    QMessageBox, QStyle
)

from result_demo.config import AppConfig
from result_demo.errors import AppError, Result
from result_demo.processors.divide import divide, log_result
from result_demo.ui.menu_bar import build_menu_bar

log = logging.getLogger("result_demo.ui")

ICON_SIZE = 48
CONTENT_MARGIN = 16


class MainWindow(QMainWindow):
    def __init__(self, config: Optional[AppConfig] = None) -> None:
        super().__init__()
        self._config = config or AppConfig()
        self._appeared = False
        self.last_result: Optional[Result[int, AppError]] = None
        self.setWindowTitle(self._config.window_title)
        self._init_ui()

    # ------------------------ UI wiring ---------------------------------
    def _init_ui(self) -> None:
        build_menu_bar(self)
        status = QStatusBar()
        status.showMessage("Ready")
        self.setStatusBar(status)

        central = QWidget(self)
        lay = QVBoxLayout(central)
        lay.setContentsMargins(CONTENT_MARGIN, CONTENT_MARGIN, CONTENT_MARGIN, CONTENT_MARGIN)
        lay.addStretch(1)

        self._icon_label = QLabel(self)
        self._icon_label.setObjectName("IconLabel")
        self._icon_label.setAlignment(Qt.AlignCenter)
        self._icon_label.setPixmap(self._resolve_icon().pixmap(ICON_SIZE, ICON_SIZE))
        lay.addWidget(self._icon_label)

        self._text_label = QLabel(self._config.label_text, self)
        self._text_label.setObjectName("TextLabel")
        self._text_label.setAlignment(Qt.AlignCenter)
        lay.addWidget(self._text_label)

        lay.addStretch(1)
        central.setLayout(lay)
        self.setCentralWidget(central)

    def _resolve_icon(self) -> QIcon:
        # Theme names differ per platform; "globe" has no freedesktop equivalent.
        names = [self._config.icon_name]
        if self._config.icon_name == "globe":
            names.append("applications-internet")
        for name in names:
            icon = QIcon.fromTheme(name)
            if not icon.isNull():
                return icon
        log.debug("Theme icon '%s' not found; using standard icon", self._config.icon_name)
        return self.style().standardIcon(QStyle.SP_DriveNetIcon)

    # ------------------------ Appearance --------------------------------
    def _on_appear(self) -> None:
        res = divide(self._config.dividend, self._config.divisor)
        self.last_result = res
        log_result(res)

    def _on_about(self) -> None:
        QMessageBox.information(
            self,
            "About",
            "Result demo: integer division reported as Ok or Err.",
        )

    # ------------------------ Qt events ----------------------------------
    def showEvent(self, event) -> None:  # noqa: N802 (Qt API)
        super().showEvent(event)
        if not self._appeared:
            self._appeared = True
            self._on_appear()

    @property
    def label_text(self) -> str:
        return self._text_label.text()
