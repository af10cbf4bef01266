from __future__ import annotations

from typing import Callable, Dict, List

import pytest

from taskreminder.checklist.binder import bind_tasks, DONE_MARKER
from taskreminder.checklist.model.task import TASKS, TASK_IDS, tasks_for
from taskreminder.helpers import MissingTaskError, TaskReminderError
from taskreminder.reminders.model.reminder import Category


class MockContainer:
    def __init__(self):
        self.markers: List[str] = []

    def add_marker(self, marker: str) -> None:
        if marker not in self.markers:
            self.markers.append(marker)

    def remove_marker(self, marker: str) -> None:
        if marker in self.markers:
            self.markers.remove(marker)

    def has_marker(self, marker: str) -> bool:
        return marker in self.markers


class MockCheckbox:
    def __init__(self):
        self.checked: bool = False
        self.listeners: List[Callable[[bool], None]] = []
        self.parent: MockContainer = MockContainer()

    def is_checked(self) -> bool:
        return self.checked

    def set_checked(self, checked: bool) -> None:
        if checked != self.checked:
            self.checked = checked
            for listener in self.listeners:
                listener(checked)

    def click(self) -> None:
        self.set_checked(not self.checked)

    def on_toggled(self, callback: Callable[[bool], None]) -> None:
        self.listeners.append(callback)

    def container(self) -> MockContainer:
        return self.parent


class MockDocument:
    def __init__(self, task_ids: List[str] | None = None):
        task_ids = TASK_IDS if task_ids is None else task_ids
        self.controls: Dict[str, MockCheckbox] = {task_id: MockCheckbox() for task_id in task_ids}

    def find(self, identifier: str) -> MockCheckbox | None:
        return self.controls.get(identifier)


class TestTask:

    def test_task_ids(self):
        assert len(TASK_IDS) == 16
        assert len(set(TASK_IDS)) == 16
        assert TASK_IDS == [
            'daily-backup', 'daily-updates', 'daily-antivirus', 'daily-logs',
            'weekly-backup', 'weekly-permissions', 'weekly-email', 'weekly-router', 'weekly-2fa',
            'monthly-ransomware', 'monthly-keychain', 'monthly-yubikey', 'monthly-physical', 'monthly-phishing',
            'monthly-ai', 'monthly-insurance'
        ]

    def test_tasks_for(self):
        assert len(tasks_for(Category.DAILY)) == 4
        assert len(tasks_for(Category.WEEKLY)) == 5
        assert len(tasks_for(Category.MONTHLY)) == 7
        for task in TASKS:
            assert task.identifier.startswith(task.category.value + '-')
            assert task.label


class TestBinder:

    def test_toggle_daily_backup(self):
        document = MockDocument()
        bind_tasks(document)
        checkbox = document.find('daily-backup')

        checkbox.click()
        assert checkbox.container().markers == [DONE_MARKER]
        assert DONE_MARKER == 'task-done'

        checkbox.click()
        assert checkbox.container().markers == []

    def test_toggle_every_task(self):
        document = MockDocument()
        binding = bind_tasks(document)

        for task_id in TASK_IDS:
            checkbox = document.find(task_id)
            checkbox.set_checked(True)
            assert checkbox.container().markers.count(DONE_MARKER) == 1
            assert binding.is_done(task_id)
            checkbox.set_checked(True)
            assert checkbox.container().markers.count(DONE_MARKER) == 1

        assert binding.done_tasks() == TASK_IDS

        for task_id in TASK_IDS:
            checkbox = document.find(task_id)
            checkbox.set_checked(False)
            assert not checkbox.container().has_marker(DONE_MARKER)
            assert not binding.is_done(task_id)

        assert binding.done_tasks() == []

    def test_toggles_are_independent(self):
        document = MockDocument()
        binding = bind_tasks(document)
        document.find('weekly-2fa').click()
        document.find('monthly-ai').click()
        document.find('weekly-2fa').click()
        assert binding.done_tasks() == ['monthly-ai']

    def test_on_change(self):
        changes = []
        document = MockDocument()
        bind_tasks(document, on_change=lambda task_id, checked: changes.append((task_id, checked)))
        document.find('daily-logs').click()
        document.find('daily-logs').click()
        assert changes == [('daily-logs', True), ('daily-logs', False)]

    def test_reload_resets_state(self):
        document = MockDocument()
        bind_tasks(document)
        for task_id in TASK_IDS:
            document.find(task_id).click()

        document = MockDocument()
        binding = bind_tasks(document)
        for task_id in TASK_IDS:
            assert not document.find(task_id).is_checked()
            assert document.find(task_id).container().markers == []
        assert binding.done_tasks() == []

    def test_missing_task(self):
        document = MockDocument([task_id for task_id in TASK_IDS if task_id != 'monthly-yubikey'])
        with pytest.raises(MissingTaskError) as e:
            bind_tasks(document)
        assert e.value.task_id == 'monthly-yubikey'
        assert isinstance(e.value, LookupError)
        assert isinstance(e.value, TaskReminderError)

        # Nothing was bound
        for checkbox in document.controls.values():
            assert checkbox.listeners == []

    def test_subset(self):
        document = MockDocument(['daily-backup'])
        binding = bind_tasks(document, ['daily-backup'])
        assert list(binding.controls) == ['daily-backup']
