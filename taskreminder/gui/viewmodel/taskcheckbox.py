"""
Contains the ``TaskCheckbox`` and ``TaskContainer`` classes.
"""

from __future__ import annotations

from typing import Callable, Set

from PyQt6.QtWidgets import QCheckBox, QFrame, QHBoxLayout, QWidget

from taskreminder.checklist.model.task import Task


def marker_property(marker: str) -> str:
    """
    Get the name of the dynamic Qt property used to style a marker, e.g. ``task-done`` becomes ``taskDone``.

    :param marker: the marker name.

    :return: the property name.
    """
    head, *rest = marker.split('-')
    return head + ''.join(part.capitalize() for part in rest)


class TaskContainer(QFrame):
    """
    The frame holding a task's checkbox. Markers are exposed to the stylesheet as boolean dynamic properties, so
    ``QFrame[taskDone="true"]`` matches a container marked ``task-done``.
    """

    def __init__(self, parent: QWidget | None = None):
        super().__init__(parent)
        self.markers: Set[str] = set()
        self.setLayout(QHBoxLayout())
        self.layout().setContentsMargins(6, 2, 6, 2)

    def add_marker(self, marker: str) -> None:
        self.markers.add(marker)
        self._apply_marker(marker)

    def remove_marker(self, marker: str) -> None:
        self.markers.discard(marker)
        self._apply_marker(marker)

    def has_marker(self, marker: str) -> bool:
        return marker in self.markers

    def _apply_marker(self, marker: str) -> None:
        """
        Update the marker's dynamic property and re-polish so the stylesheet picks up the change.
        """
        self.setProperty(marker_property(marker), marker in self.markers)
        for widget in [self] + self.findChildren(QWidget):
            widget.style().unpolish(widget)
            widget.style().polish(widget)


class TaskCheckbox(QCheckBox):
    """
    The checkbox of one checklist task. Its object name is the task identifier.
    """

    def __init__(self, task: Task, container: TaskContainer):
        """
        Initialises the task checkbox and places it inside its container.

        :param task: the task this checkbox represents.
        :param container: the frame which receives the task's markers.
        """
        super().__init__(task.label, container)
        self.task: Task = task
        self._container: TaskContainer = container
        self.setObjectName(task.identifier)
        container.layout().addWidget(self)

    def is_checked(self) -> bool:
        """
        Returns the check state of this checkbox.

        :return: True if this checkbox is checked.
        """
        return self.isChecked()

    def set_checked(self, checked: bool) -> None:
        self.setChecked(checked)

    def on_toggled(self, callback: Callable[[bool], None]) -> None:
        # noinspection PyUnresolvedReferences
        self.toggled.connect(callback)

    def container(self) -> TaskContainer:
        return self._container
