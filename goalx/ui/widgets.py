from __future__ import annotations

from PySide6.QtCore import QSize, Qt
from PySide6.QtWidgets import (
    QAbstractItemView,
    QButtonGroup,
    QCheckBox,
    QFrame,
    QHBoxLayout,
    QLabel,
    QListWidget,
    QListWidgetItem,
    QPushButton,
    QSizePolicy,
    QToolButton,
    QVBoxLayout,
    QWidget,
)

from goalx.domain.entities import TaskRecord
from goalx.domain.enums import Category

CATEGORY_COLORS = {
    Category.IMPORTANT: "#E57B63",
    Category.URGENT: "#E0B25B",
    Category.SOMEDAY: "#7CC4A1",
    Category.GOALS: "#1295F5",
}


def repolish(widget: QWidget) -> None:
    widget.style().unpolish(widget)
    widget.style().polish(widget)


class CategoryBadge(QLabel):
    def __init__(self, category: Category, size: int = 36, parent=None):
        super().__init__(category.value[0], parent)
        self.setObjectName("CategoryBadge")
        self.setProperty("icon", category.icon)
        self.setAlignment(Qt.AlignCenter)
        self.setFixedSize(size, size)
        self.setStyleSheet(
            f"background-color: {CATEGORY_COLORS[category]}; border-radius: {size // 2}px;"
        )
        self.setToolTip(category.value)


class HeaderBar(QFrame):
    """Back chevron, centered title and optional trailing buttons."""

    def __init__(self, title: str, on_back=None, actions: list[QWidget] | None = None, parent=None):
        super().__init__(parent)
        self.setObjectName("HeaderBar")
        layout = QHBoxLayout(self)
        layout.setContentsMargins(24, 8, 24, 8)

        self.back_button = QToolButton()
        self.back_button.setText("‹")
        self.back_button.setObjectName("BackButton")
        self.back_button.setFixedWidth(60)
        if on_back is not None:
            self.back_button.clicked.connect(on_back)
        else:
            self.back_button.setEnabled(False)
            self.back_button.setText("")

        self.title = QLabel(title)
        self.title.setProperty("class", "panel-title")
        self.title.setAlignment(Qt.AlignCenter)

        trailing = QWidget()
        trailing.setFixedWidth(max(60, 44 * len(actions or [])))
        trailing_layout = QHBoxLayout(trailing)
        trailing_layout.setContentsMargins(0, 0, 0, 0)
        trailing_layout.addStretch()
        for action in actions or []:
            trailing_layout.addWidget(action)

        layout.addWidget(self.back_button)
        layout.addWidget(self.title, 1)
        layout.addWidget(trailing)


class TaskRowWidget(QWidget):
    def __init__(self, task: TaskRecord, on_toggle, parent=None):
        super().__init__(parent)
        self.task = task

        self.setObjectName("TaskRow")
        self.setAttribute(Qt.WA_StyledBackground, True)
        self.setProperty("done", task.is_done)
        self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Fixed)
        self.setMinimumHeight(56)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(12, 6, 12, 6)
        layout.setSpacing(12)

        self.done_check = QCheckBox()
        self.done_check.setChecked(task.is_done)
        self.done_check.toggled.connect(lambda _checked: on_toggle(self.task))

        name = QLabel(task.name)
        name.setProperty("class", "task-title")
        name.setWordWrap(True)
        if task.is_done:
            font = name.font()
            font.setStrikeOut(True)
            name.setFont(font)

        layout.addWidget(self.done_check)
        layout.addWidget(CategoryBadge(task.category, 32))
        layout.addWidget(name, 1)


class TaskSectionList(QListWidget):
    """One list section. Dragging a row reports ``on_move(from_row, to_row)``."""

    def __init__(self, on_move, on_open, parent=None):
        super().__init__(parent)
        self._on_move = on_move
        self._on_open = on_open
        self._drag_row: int | None = None
        self.setObjectName("TaskList")
        self.setDragEnabled(True)
        self.setAcceptDrops(True)
        self.setDropIndicatorShown(True)
        self.setDragDropMode(QAbstractItemView.InternalMove)
        self.setSelectionMode(QAbstractItemView.SingleSelection)
        self.setEditTriggers(QAbstractItemView.NoEditTriggers)
        self.setHorizontalScrollBarPolicy(Qt.ScrollBarAlwaysOff)
        self.setVerticalScrollBarPolicy(Qt.ScrollBarAlwaysOff)
        self.setContextMenuPolicy(Qt.CustomContextMenu)
        self.itemClicked.connect(self._handle_click)

    def set_tasks(self, tasks: list[TaskRecord], on_toggle) -> None:
        self.clear()
        for task in tasks:
            item = QListWidgetItem()
            item.setData(Qt.UserRole, str(task.id))
            widget = TaskRowWidget(task, on_toggle)
            self.addItem(item)
            self.setItemWidget(item, widget)
            item.setSizeHint(QSize(0, widget.sizeHint().height()))
        self._fit_height()

    def task_at(self, row: int) -> TaskRecord | None:
        item = self.item(row)
        widget = self.itemWidget(item) if item else None
        return widget.task if isinstance(widget, TaskRowWidget) else None

    def _fit_height(self) -> None:
        height = sum(self.sizeHintForRow(row) for row in range(self.count()))
        self.setFixedHeight(height + self.frameWidth() * 2)

    def _handle_click(self, item: QListWidgetItem) -> None:
        task = self.task_at(self.row(item))
        if task is not None:
            self._on_open(task)

    def startDrag(self, supportedActions) -> None:  # type: ignore[override]
        self._drag_row = self.currentRow()
        super().startDrag(supportedActions)

    def dropEvent(self, event) -> None:  # type: ignore[override]
        from_row = self._drag_row if self._drag_row is not None else self.currentRow()
        dragged = self.item(from_row)
        moved_id = dragged.data(Qt.UserRole) if dragged is not None else None
        super().dropEvent(event)
        self._drag_row = None
        if moved_id is None:
            return
        ids = [self.item(i).data(Qt.UserRole) for i in range(self.count())]
        if moved_id not in ids:
            return
        final_row = ids.index(moved_id)
        if final_row == from_row:
            return
        to_row = final_row + 1 if final_row > from_row else final_row
        self._on_move(from_row, to_row)


class CategoryPicker(QWidget):
    def __init__(self, on_change, parent=None):
        super().__init__(parent)
        self._on_change = on_change
        self.group = QButtonGroup(self)
        self.group.setExclusive(True)
        self.buttons: dict[Category, QPushButton] = {}

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(24)
        layout.addStretch()
        for category in Category:
            column = QVBoxLayout()
            column.setSpacing(2)
            button = QPushButton(category.value[0])
            button.setObjectName("CategoryButton")
            button.setProperty("icon", category.icon)
            button.setCheckable(True)
            button.setFixedSize(54, 54)
            button.clicked.connect(lambda _checked, value=category: self._on_change(value))
            self.group.addButton(button)
            self.buttons[category] = button
            caption = QLabel(category.value)
            caption.setAlignment(Qt.AlignCenter)
            caption.setProperty("class", "caption")
            column.addWidget(button, 0, Qt.AlignHCenter)
            column.addWidget(caption)
            layout.addLayout(column)
        layout.addStretch()

    def set_selected(self, category: Category | None) -> None:
        if category is None:
            self.group.setExclusive(False)
            for button in self.buttons.values():
                button.setChecked(False)
            self.group.setExclusive(True)
            return
        self.buttons[category].setChecked(True)
