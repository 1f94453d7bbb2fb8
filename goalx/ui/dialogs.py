from __future__ import annotations

from urllib.parse import quote

from PySide6.QtCore import QUrl
from PySide6.QtGui import QDesktopServices, QGuiApplication
from PySide6.QtWidgets import (
    QDialog,
    QHBoxLayout,
    QLabel,
    QMessageBox,
    QPlainTextEdit,
    QPushButton,
    QVBoxLayout,
)

from goalx.links import share_items


class ShareDialog(QDialog):
    def __init__(self, parent=None):
        super().__init__(parent)
        self.setWindowTitle("Share app")
        self.setObjectName("ShareDialog")
        self.resize(420, 260)
        self.message, self.app_url = share_items()

        text = QPlainTextEdit(self.message)
        text.setReadOnly(True)

        self.status = QLabel("")
        self.status.setProperty("class", "caption")

        copy_button = QPushButton("Copy")
        copy_button.clicked.connect(self.copy_to_clipboard)

        mail_button = QPushButton("Email")
        mail_button.setProperty("variant", "secondary")
        mail_button.clicked.connect(self.open_mail_draft)

        close_button = QPushButton("Close")
        close_button.setProperty("variant", "ghost")
        close_button.clicked.connect(self.accept)

        buttons = QHBoxLayout()
        buttons.addWidget(self.status, 1)
        buttons.addWidget(copy_button)
        buttons.addWidget(mail_button)
        buttons.addWidget(close_button)

        layout = QVBoxLayout(self)
        layout.addWidget(text)
        layout.addLayout(buttons)

    def copy_to_clipboard(self) -> None:
        QGuiApplication.clipboard().setText(self.message)
        self.status.setText("Copied.")

    def open_mail_draft(self) -> None:
        subject = quote("Goalx")
        body = quote(self.message)
        QDesktopServices.openUrl(QUrl(f"mailto:?subject={subject}&body={body}"))


def ask_tracking_consent(parent=None) -> bool:
    answer = QMessageBox.question(
        parent,
        "Allow tracking?",
        "Goalx would like to collect anonymous usage data to improve the app.",
        QMessageBox.Yes | QMessageBox.No,
        QMessageBox.No,
    )
    return answer == QMessageBox.Yes
