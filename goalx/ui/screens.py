from __future__ import annotations

from PySide6.QtCore import Qt, QTimer, QUrl
from PySide6.QtGui import QAction, QActionGroup, QDesktopServices
from PySide6.QtWidgets import (
    QFrame,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMenu,
    QPlainTextEdit,
    QPushButton,
    QScrollArea,
    QToolButton,
    QVBoxLayout,
    QWidget,
)

from goalx.domain.entities import TaskRecord
from goalx.domain.enums import Category
from goalx.domain.filters import SortChoice, SortMode
from goalx.links import PRIVACY_POLICY_URL, TERMS_OF_USE_URL
from goalx.services.router import AppRouter
from goalx.services.task_form import TaskFormModel
from goalx.services.task_list import TaskListModel
from goalx.services.task_store import TaskStore

from .dialogs import ShareDialog
from .widgets import CategoryBadge, CategoryPicker, HeaderBar, TaskSectionList, repolish

LOADING_DELAY_MS = 1200

SORT_OPTIONS = [
    ("Newest first", SortChoice(SortMode.NEWEST_FIRST)),
    ("Oldest first", SortChoice(SortMode.OLDEST_FIRST)),
    ("Only active", SortChoice(SortMode.ONLY_ACTIVE)),
    ("Only done", SortChoice(SortMode.ONLY_DONE)),
] + [(category.value, SortChoice.for_category(category)) for category in Category]

ONBOARDING_BULLETS = [
    ("Stay organized", "all tasks in one view."),
    ("Simple & fast", "manage tasks in one tap."),
    ("Smart categories", "separate your goals."),
]


def _divider() -> QFrame:
    line = QFrame()
    line.setObjectName("Divider")
    line.setFrameShape(QFrame.HLine)
    return line


def _open_url(url: str) -> None:
    QDesktopServices.openUrl(QUrl(url))


def _terms_footer() -> QLabel:
    footer = QLabel(
        "By proceeding you accept our "
        f'<a href="{TERMS_OF_USE_URL}">Terms of Use</a> and '
        f'<a href="{PRIVACY_POLICY_URL}">Privacy Policy</a>'
    )
    footer.setObjectName("TermsFooter")
    footer.setAlignment(Qt.AlignCenter)
    footer.setWordWrap(True)
    footer.setOpenExternalLinks(True)
    return footer


class LoadingScreen(QWidget):
    def __init__(self, on_finished, parent=None):
        super().__init__(parent)
        self.setObjectName("LoadingScreen")
        layout = QVBoxLayout(self)
        label = QLabel("Goalx")
        label.setObjectName("LoadingTitle")
        label.setAlignment(Qt.AlignCenter)
        layout.addStretch()
        layout.addWidget(label)
        layout.addStretch()
        QTimer.singleShot(LOADING_DELAY_MS, on_finished)


class OnboardingScreen(QWidget):
    def __init__(self, on_continue, parent=None):
        super().__init__(parent)
        self.setObjectName("OnboardingScreen")

        card = QFrame()
        card.setObjectName("OnboardingCard")
        card_layout = QVBoxLayout(card)
        card_layout.setContentsMargins(24, 24, 24, 24)
        card_layout.setSpacing(10)

        title = QLabel("What you get with the app")
        title.setObjectName("OnboardingTitle")
        title.setAlignment(Qt.AlignCenter)
        card_layout.addWidget(title)

        for heading, description in ONBOARDING_BULLETS:
            bullet = QLabel(f"• <b>{heading}</b> – {description}")
            bullet.setTextFormat(Qt.RichText)
            card_layout.addWidget(bullet)

        continue_button = QPushButton("Continue  ›")
        continue_button.setProperty("variant", "primary")
        continue_button.clicked.connect(on_continue)
        card_layout.addSpacing(8)
        card_layout.addWidget(continue_button)
        card_layout.addWidget(_terms_footer())

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addStretch()
        layout.addWidget(card)


class TaskListScreen(QWidget):
    def __init__(self, store: TaskStore, router: AppRouter, parent=None):
        super().__init__(parent)
        self.router = router
        self.model = TaskListModel(store)
        self.setObjectName("TaskListScreen")

        add_button = QToolButton()
        add_button.setText("+")
        add_button.setObjectName("AddButton")
        add_button.clicked.connect(router.open_add_task)

        self.sort_button = QToolButton()
        self.sort_button.setText("Sort")
        self.sort_button.setPopupMode(QToolButton.InstantPopup)
        self.sort_button.setMenu(self._build_sort_menu())

        settings_button = QToolButton()
        settings_button.setText("⚙")
        settings_button.clicked.connect(router.open_settings)

        header = QFrame()
        header.setObjectName("HeaderCard")
        header_layout = QHBoxLayout(header)
        header_layout.setContentsMargins(24, 16, 24, 16)
        title = QLabel("My tasks")
        title.setProperty("class", "panel-title")
        header_layout.addWidget(title)
        header_layout.addStretch()
        header_layout.addWidget(self.sort_button)
        header_layout.addWidget(settings_button)
        header_layout.addWidget(add_button)

        self.empty_label = QLabel("No tasks yet.\nTap + to add your first one.")
        self.empty_label.setObjectName("EmptyList")
        self.empty_label.setAlignment(Qt.AlignCenter)

        self.active_title = self._section_title("Active")
        self.active_list = TaskSectionList(
            on_move=lambda from_row, to_row: self._move(False, from_row, to_row),
            on_open=router.open_task_details,
        )
        self.active_list.customContextMenuRequested.connect(
            lambda pos: self._show_row_menu(self.active_list, pos)
        )

        self.done_title = self._section_title("Done")
        self.done_list = TaskSectionList(
            on_move=lambda from_row, to_row: self._move(True, from_row, to_row),
            on_open=router.open_task_details,
        )
        self.done_list.customContextMenuRequested.connect(
            lambda pos: self._show_row_menu(self.done_list, pos)
        )

        content = QWidget()
        content_layout = QVBoxLayout(content)
        content_layout.setContentsMargins(16, 8, 16, 8)
        content_layout.setSpacing(6)
        content_layout.addWidget(self.active_title)
        content_layout.addWidget(self.active_list)
        content_layout.addWidget(self.done_title)
        content_layout.addWidget(self.done_list)
        content_layout.addStretch()

        self.scroll = QScrollArea()
        self.scroll.setWidgetResizable(True)
        self.scroll.setFrameShape(QFrame.NoFrame)
        self.scroll.setHorizontalScrollBarPolicy(Qt.ScrollBarAlwaysOff)
        self.scroll.setWidget(content)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)
        layout.addWidget(header)
        layout.addWidget(self.empty_label, 1)
        layout.addWidget(self.scroll, 1)

        self.refresh()

    def _section_title(self, text: str) -> QLabel:
        label = QLabel(text)
        label.setProperty("class", "section-title")
        label.setAlignment(Qt.AlignCenter)
        return label

    def _build_sort_menu(self) -> QMenu:
        menu = QMenu(self)
        group = QActionGroup(menu)
        group.setExclusive(True)
        for label, choice in SORT_OPTIONS:
            action = QAction(label, menu)
            action.setCheckable(True)
            action.setChecked(choice == self.model.sort_choice)
            action.triggered.connect(lambda _checked, value=choice: self.set_sort_choice(value))
            group.addAction(action)
            menu.addAction(action)
        return menu

    def set_sort_choice(self, choice: SortChoice) -> None:
        self.model.sort_choice = choice
        self.refresh(reload=False)

    def refresh(self, reload: bool = True) -> None:
        if reload:
            self.model.reload()
        self.empty_label.setVisible(self.model.is_empty)
        self.scroll.setVisible(not self.model.is_empty)

        show_active = self.model.show_active_section
        self.active_title.setVisible(show_active)
        self.active_list.setVisible(show_active)
        self.active_list.set_tasks(self.model.displayed_active if show_active else [], self._toggle)

        show_done = self.model.show_done_section
        self.done_title.setVisible(show_done)
        self.done_list.setVisible(show_done)
        self.done_list.set_tasks(self.model.displayed_done if show_done else [], self._toggle)

    def _toggle(self, task: TaskRecord) -> None:
        self.model.toggle(task)
        # Rebuild after the checkbox signal returns.
        QTimer.singleShot(0, lambda: self.refresh(reload=False))

    def _move(self, in_done: bool, from_row: int, to_row: int) -> None:
        self.model.move(in_done, [from_row], to_row)
        QTimer.singleShot(0, lambda: self.refresh(reload=False))

    def _show_row_menu(self, section: TaskSectionList, pos) -> None:
        item = section.itemAt(pos)
        if item is None:
            return
        task = section.task_at(section.row(item))
        if task is None:
            return
        menu = QMenu(self)
        edit_action = menu.addAction("Edit")
        delete_action = menu.addAction("Delete")
        chosen = menu.exec(section.viewport().mapToGlobal(pos))
        if chosen is edit_action:
            self.router.open_edit_task(task)
        elif chosen is delete_action:
            self.model.delete(task)
            self.refresh(reload=False)


class TaskFormScreen(QWidget):
    def __init__(self, store: TaskStore, router: AppRouter, original: TaskRecord | None = None, parent=None):
        super().__init__(parent)
        self.model = TaskFormModel(store, router, original)
        self.setObjectName("TaskFormScreen")

        self.header = HeaderBar(self.model.title, on_back=router.open_menu)

        self.name_input = QLineEdit(self.model.name)
        self.name_input.setPlaceholderText("Enter the name")
        self.name_input.textChanged.connect(self._on_name_changed)

        self.note_input = QPlainTextEdit(self.model.note)
        self.note_input.setObjectName("NoteInput")
        self.note_input.setPlaceholderText("Enter the note")
        self.note_input.setMaximumHeight(140)
        self.note_input.textChanged.connect(self._on_note_changed)

        self.picker = CategoryPicker(self._on_category_changed)
        self.picker.set_selected(self.model.category)

        self.save_button = QPushButton("Save  ›")
        self.save_button.setProperty("variant", "primary")
        self.save_button.clicked.connect(self.model.save)

        cancel_button = QPushButton("Cancel")
        cancel_button.setProperty("variant", "secondary")
        cancel_button.clicked.connect(self.clear)

        form = QVBoxLayout()
        form.setContentsMargins(20, 0, 20, 12)
        form.setSpacing(8)
        form.addWidget(QLabel("Name of the task*"))
        form.addWidget(self.name_input)
        form.addWidget(QLabel("Note"))
        form.addWidget(self.note_input)
        type_label = QLabel("Select the type of the task*")
        type_label.setAlignment(Qt.AlignCenter)
        form.addWidget(type_label)
        form.addWidget(self.picker)
        form.addSpacing(8)
        form.addWidget(self.save_button)
        form.addWidget(cancel_button)
        form.addStretch()

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self.header)
        layout.addWidget(_divider())
        layout.addLayout(form)

        self._sync_save_button()

    def clear(self) -> None:
        self.model.clear()
        self.name_input.clear()
        self.note_input.clear()
        self.picker.set_selected(None)
        self._sync_save_button()

    def _on_name_changed(self, text: str) -> None:
        self.model.name = text
        self._sync_save_button()

    def _on_note_changed(self) -> None:
        self.model.note = self.note_input.toPlainText()

    def _on_category_changed(self, category: Category) -> None:
        self.model.category = category
        self._sync_save_button()

    def _sync_save_button(self) -> None:
        enabled = self.model.is_save_enabled
        self.save_button.setEnabled(enabled)
        self.save_button.setProperty("active", enabled)
        repolish(self.save_button)


class TaskDetailsScreen(QWidget):
    def __init__(self, store: TaskStore, router: AppRouter, task: TaskRecord, parent=None):
        super().__init__(parent)
        self.store = store
        self.router = router
        self.task = task
        self.setObjectName("TaskDetailsScreen")

        delete_button = QToolButton()
        delete_button.setText("🗑")
        delete_button.setToolTip("Delete")
        delete_button.clicked.connect(self.delete_task)

        edit_button = QToolButton()
        edit_button.setText("✎")
        edit_button.setToolTip("Edit")
        edit_button.clicked.connect(lambda: router.open_edit_task(self.task))

        header = HeaderBar("Task", on_back=router.open_menu, actions=[delete_button, edit_button])

        name = QLabel(task.name)
        name.setProperty("class", "task-title")
        name.setWordWrap(True)

        content = QVBoxLayout()
        content.setContentsMargins(20, 8, 20, 8)
        content.setSpacing(8)
        content.addWidget(CategoryBadge(task.category, 54), 0, Qt.AlignHCenter)
        content.addWidget(name)
        if task.note:
            note = QLabel(task.note)
            note.setProperty("class", "task-meta")
            note.setWordWrap(True)
            content.addWidget(note)
        content.addStretch()

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(header)
        layout.addWidget(_divider())
        layout.addLayout(content)

    def delete_task(self) -> None:
        self.store.delete(self.task)
        self.router.open_menu()


class SettingsScreen(QWidget):
    def __init__(self, router: AppRouter, parent=None):
        super().__init__(parent)
        self.setObjectName("SettingsScreen")

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(12)
        layout.addWidget(HeaderBar("Settings", on_back=router.open_menu))
        layout.addWidget(_divider())
        for title, action in [
            ("Terms and Conditions", lambda: _open_url(TERMS_OF_USE_URL)),
            ("Privacy", lambda: _open_url(PRIVACY_POLICY_URL)),
            ("Share app", self.share),
        ]:
            row = QPushButton(f"{title}")
            row.setProperty("variant", "row")
            row.clicked.connect(action)
            layout.addWidget(row)
            layout.addWidget(_divider())
        layout.addStretch()

    def share(self) -> None:
        ShareDialog(self).exec()
