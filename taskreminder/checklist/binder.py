"""
Binds checklist task identifiers to their controls in a checklist document. Works with any document whose controls
provide the ``Checkable`` and ``Markable`` capabilities, so the Qt window and plain test doubles are handled alike.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, List, Protocol

from taskreminder.checklist.model.task import TASK_IDS
from taskreminder.helpers import MissingTaskError

#: Marker added to a task's container while its checkbox is checked.
DONE_MARKER: str = 'task-done'


class Markable(Protocol):
    """
    An element which can carry named markers.
    """

    def add_marker(self, marker: str) -> None:
        ...

    def remove_marker(self, marker: str) -> None:
        ...

    def has_marker(self, marker: str) -> bool:
        ...


class Checkable(Protocol):
    """
    A checkbox control which lives inside a markable container.
    """

    def is_checked(self) -> bool:
        ...

    def set_checked(self, checked: bool) -> None:
        ...

    def on_toggled(self, callback: Callable[[bool], None]) -> None:
        ...

    def container(self) -> Markable:
        ...


class Document(Protocol):
    """
    A loaded checklist document.
    """

    def find(self, identifier: str) -> Checkable | None:
        ...


class ChecklistBinding:
    """
    The result of binding a document: maps each task identifier to its control.
    """

    def __init__(self, controls: Dict[str, Checkable], on_change: Callable[[str, bool], None] | None = None):
        """
        :param controls: the bound controls, keyed by task identifier.
        :param on_change: called with the task identifier and new state after each toggle.
        """
        self.controls: Dict[str, Checkable] = controls
        self.on_change: Callable[[str, bool], None] | None = on_change

    def handle_toggle(self, task_id: str, checked: bool) -> None:
        """
        Reflect a checkbox toggle on the task's container.

        :param task_id: the identifier of the toggled task.
        :param checked: the new check state.
        """
        container = self.controls[task_id].container()
        if checked:
            container.add_marker(DONE_MARKER)
        else:
            container.remove_marker(DONE_MARKER)
        logging.debug('Task {0} marked {1}.'.format(task_id, 'done' if checked else 'not done'))
        if self.on_change is not None:
            self.on_change(task_id, checked)

    def is_done(self, task_id: str) -> bool:
        return self.controls[task_id].container().has_marker(DONE_MARKER)

    def done_tasks(self) -> List[str]:
        """
        :return: identifiers of the tasks currently marked done, in binding order.
        """
        return [task_id for task_id in self.controls if self.is_done(task_id)]


def bind_tasks(document: Document,
               task_ids: List[str] | None = None,
               on_change: Callable[[str, bool], None] | None = None) -> ChecklistBinding:
    """
    Attach a toggle listener to the checkbox of every task. Checking a box adds the done marker to its container;
    unchecking removes it.

    All identifiers are looked up before any listener is attached, so a document missing a control is left untouched.

    :param document: the loaded checklist document.
    :param task_ids: the task identifiers to bind. Defaults to every checklist task.
    :param on_change: optional function called with the task identifier and new state after each toggle.

    :raises MissingTaskError: if the document has no control for one of the identifiers.

    :return: the binding.
    """
    task_ids = TASK_IDS if task_ids is None else task_ids
    controls: Dict[str, Checkable] = {}
    for task_id in task_ids:
        control = document.find(task_id)
        if control is None:
            logging.critical('Checklist document has no control for task {}.'.format(task_id))
            raise MissingTaskError(task_id)
        controls[task_id] = control

    binding = ChecklistBinding(controls, on_change)
    for task_id, control in controls.items():
        control.on_toggled(lambda checked, tid=task_id: binding.handle_toggle(tid, checked))
    logging.debug('Bound {} checklist tasks.'.format(len(controls)))
    return binding
