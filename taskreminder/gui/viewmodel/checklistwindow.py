"""
Contains the ``ChecklistDocument`` and ``ChecklistWindow`` classes.
"""

from __future__ import annotations

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtGui import QAction, QCloseEvent, QKeySequence
from PyQt6.QtWidgets import QGroupBox, QLabel, QMainWindow, QScrollArea, QVBoxLayout, QWidget

from taskreminder.checklist.binder import ChecklistBinding, bind_tasks
from taskreminder.checklist.model.task import TASKS, tasks_for
from taskreminder.gui.viewmodel.taskcheckbox import TaskCheckbox, TaskContainer
from taskreminder.reminders.model.reminder import Category


class ChecklistDocument(QWidget):
    """
    The checklist document: one group box per reminder category, holding a ``TaskContainer`` and ``TaskCheckbox``
    for each of its tasks. Every task starts unchecked.
    """

    def __init__(self, parent: QWidget | None = None):
        super().__init__(parent)
        layout = QVBoxLayout(self)
        for category in Category:
            group = QGroupBox("{} Tasks".format(category.value.capitalize()), self)
            group_layout = QVBoxLayout(group)
            for task in tasks_for(category):
                container = TaskContainer(group)
                TaskCheckbox(task, container)
                group_layout.addWidget(container)
            layout.addWidget(group)
        layout.addStretch()

    def find(self, identifier: str) -> TaskCheckbox | None:
        """
        Find the checkbox of a task.

        :param identifier: the task identifier.

        :return: the checkbox, or None if the document has no such task.
        """
        return self.findChild(TaskCheckbox, identifier)


# noinspection PyUnresolvedReferences
class ChecklistWindow(QMainWindow):
    """
    The main window. Loads the checklist document and shows how many tasks are done in the status bar. The
    "Reload Checklist" action (Ctrl+R) clears every task.
    """

    #: Emitted when the window is closed.
    closed = pyqtSignal()

    def __init__(self, stylesheet: str = '', width: int = 800, height: int = 600, *args, **kwargs):
        """
        Initialise the window.

        :param stylesheet: Qt stylesheet applied to the window, which styles the task markers.
        :param width: fixed window width.
        :param height: fixed window height.
        """
        super().__init__(*args, **kwargs)
        self.setWindowTitle("Security Task Checklist")
        self.setFixedSize(width, height)
        self.setStyleSheet(stylesheet)
        self.document: ChecklistDocument | None = None
        self.binding: ChecklistBinding | None = None
        self.lbl_progress = QLabel(self)
        self.statusBar().addPermanentWidget(self.lbl_progress)

        self.act_reload = QAction("Reload Checklist", self)
        self.act_reload.setShortcut(QKeySequence("Ctrl+R"))
        self.act_reload.triggered.connect(self.reload)
        self.menuBar().addMenu("Checklist").addAction(self.act_reload)
        self.load_document()

    def load_document(self) -> None:
        """
        Build a fresh checklist document, bind its tasks and show it.

        :raises MissingTaskError: if the document lacks a task control.
        """
        document = ChecklistDocument()
        self.binding = bind_tasks(document, on_change=lambda task_id, checked: self.update_progress())
        self.document = document
        scroll = QScrollArea(self)
        scroll.setWidgetResizable(True)
        scroll.setWidget(document)
        self.setCentralWidget(scroll)
        self.update_progress()

    def reload(self) -> None:
        """
        Reload the checklist. All tasks are unchecked afterwards.
        """
        self.load_document()

    def update_progress(self) -> None:
        done = len(self.binding.done_tasks()) if self.binding else 0
        self.lbl_progress.setText("{0} of {1} tasks done".format(done, len(TASKS)))

    def show_status(self, message: str) -> None:
        """
        Show a transient message in the status bar.

        :param message: the message to display.
        """
        self.statusBar().showMessage(message, 5000)

    def closeEvent(self, event: QCloseEvent) -> None:
        self.closed.emit()
        super().closeEvent(event)
