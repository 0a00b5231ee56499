# SPDX-License-Identifier: GPL-3.0-or-later
#
# RunMenu - keyboard-driven command launcher
# Copyright (C) 2025 Tasteron
#
# This project is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program. If not, see <https://www.gnu.org/licenses/>.

import os
os.environ.setdefault("QT_AUTO_SCREEN_SCALE_FACTOR", "1")
os.environ.setdefault("QT_ENABLE_HIGHDPI_SCALING", "1")
os.environ.setdefault("QT_SCALE_FACTOR_ROUNDING_POLICY", "PassThrough")
import sys, logging
from PyQt5.QtCore import Qt, QEvent, QTimer, pyqtSignal
from PyQt5.QtGui import QFont, QGuiApplication
from PyQt5.QtWidgets import (
    QApplication, QDialog, QLabel, QLineEdit, QVBoxLayout
)
from .config.io import load_settings
from .core.state import (
    Session, MenuState, InputChanged, Move, Scroll, Commit, Cancel, Refresh
)
from .log import configure_logging

logger = logging.getLogger(__name__)

# Rows and search field (hover/selected highlight)
WINDOW_QSS = """
QDialog#Menu {
    background-color: #2E3440;
    border: 1px solid #4C566A;
}
QLineEdit {
    background-color: #2E3440;
    color: #ECEFF4;
    border: 1px solid #4C566A;
    padding: 12px;
}
QLineEdit:focus {
    border: 1px solid #ECEFF4;
}
QLabel#Status {
    color: #BF616A;
}
"""
ROW_QSS = "QLabel { padding: 8px; color: #ECEFF4; background-color: transparent; }"
ROW_SELECTED_QSS = "QLabel { padding: 8px; color: #FFFFFF; background-color: #5E81AC; }"

class SearchLineEdit(QLineEdit):
    """
    Search field that hands navigation keys to the menu instead of moving the cursor.
    """
    arrowDown = pyqtSignal(); arrowUp = pyqtSignal(); enterPressed = pyqtSignal()
    escapePressed = pyqtSignal(); refreshPressed = pyqtSignal()

    def keyPressEvent(self, e):
        k = e.key()
        if k == Qt.Key_Down:
            self.arrowDown.emit(); e.accept(); return
        if k == Qt.Key_Up:
            self.arrowUp.emit(); e.accept(); return
        if k in (Qt.Key_Return, Qt.Key_Enter):
            self.enterPressed.emit(); e.accept(); return
        if k == Qt.Key_Escape:
            self.escapePressed.emit(); e.accept(); return
        if k == Qt.Key_F5:
            self.refreshPressed.emit(); e.accept(); return
        super().keyPressEvent(e)

class EntryRow(QLabel):
    """
    One visible result slot; clicking it picks that slot.
    """
    picked = pyqtSignal(int)

    def __init__(self, slot: int, parent=None):
        super().__init__(parent)
        self.slot = slot
        self.setTextFormat(Qt.PlainText)
        self.setStyleSheet(ROW_QSS)

    def mousePressEvent(self, event):
        if event.button() == Qt.LeftButton and self.text():
            self.picked.emit(self.slot)
            event.accept(); return
        super().mousePressEvent(event)

class MenuWindow(QDialog):
    """
    Frameless search window. Translates Qt input into menu events and
    paints whatever state the session reports back.
    """
    def __init__(self, settings):
        super().__init__()
        self.setObjectName("Menu")
        self.setWindowTitle("RunMenu")
        self.setWindowFlags(Qt.FramelessWindowHint | Qt.WindowStaysOnTopHint)
        self.setFixedSize(settings.width, settings.height)
        self.setStyleSheet(WINDOW_QSS)
        self.hide_on_lose_focus = bool(settings.hide_on_lose_focus)
        font = QFont("Monospace")
        font.setStyleHint(QFont.TypeWriter)
        font.setPointSize(settings.font_size)
        self.setFont(font)

        self.search_bar = SearchLineEdit(self)
        self.search_bar.setPlaceholderText("Type to search...")
        self.rows = []
        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(2)
        layout.addWidget(self.search_bar)
        layout.addSpacing(6)
        for slot in range(settings.max_entries):
            row = EntryRow(slot, self)
            row.picked.connect(self._on_row_picked)
            layout.addWidget(row)
            self.rows.append(row)
        self.status = QLabel(self)
        self.status.setObjectName("Status")
        self.status.hide()
        layout.addWidget(self.status)
        layout.addStretch(1)

        self.session = Session.from_settings(
            settings,
            on_change=self.show_state,
            on_terminate=lambda: QTimer.singleShot(0, QApplication.instance().quit),
        )
        self.search_bar.textChanged.connect(lambda t: self.session.send(InputChanged(t)))
        self.search_bar.arrowDown.connect(lambda: self.session.send(Move(1)))
        self.search_bar.arrowUp.connect(lambda: self.session.send(Move(-1)))
        self.search_bar.enterPressed.connect(lambda: self.session.send(Commit()))
        self.search_bar.escapePressed.connect(lambda: self.session.send(Cancel()))
        self.search_bar.refreshPressed.connect(lambda: self.session.send(Refresh()))
        self.show_state(self.session.state)
        self.search_bar.setFocus()

    def _on_row_picked(self, slot: int):
        self.session.send(Commit(slot))

    def show_state(self, state: MenuState):
        """
        Paint the visible slots and the selection highlight.
        """
        selected = state.selected_slot()
        for slot, (row, text) in enumerate(zip(self.rows, state.visible())):
            row.setText(text)
            row.setStyleSheet(ROW_SELECTED_QSS if (text and slot == selected) else ROW_QSS)
        if state.error:
            self.status.setText(state.error)
            self.status.show()
        else:
            self.status.hide()

    def wheelEvent(self, e):
        dy = e.angleDelta().y() or e.pixelDelta().y()
        if dy:
            self.session.send(Scroll(-1 if dy > 0 else 1))
        e.accept()

    def changeEvent(self, e):
        if (e.type() == QEvent.ActivationChange and self.hide_on_lose_focus
                and not self.isActiveWindow() and self.isVisible()):
            logger.debug("Focus lost, closing")
            self.session.send(Cancel())
        super().changeEvent(e)

def main():
    configure_logging()
    QApplication.setAttribute(Qt.AA_EnableHighDpiScaling, True)
    QApplication.setAttribute(Qt.AA_UseHighDpiPixmaps, True)
    try:
        QGuiApplication.setHighDpiScaleFactorRoundingPolicy(
            Qt.HighDpiScaleFactorRoundingPolicy.PassThrough
        )
    except AttributeError:
        pass
    app = QApplication(sys.argv)
    settings = load_settings()
    window = MenuWindow(settings)
    window.show()
    window.raise_()
    window.activateWindow()
    sys.exit(app.exec_())


if __name__ == "__main__":
    main()
