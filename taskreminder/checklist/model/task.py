"""
Contains the ``Task`` class, which represents one checklist item, and the fixed ``TASKS`` list.
"""

from __future__ import annotations

from typing import List

from taskreminder.reminders.model.reminder import Category


class Task:
    """
    Represents a checklist item. Whether the task is done is not stored here; it lives in the checklist view only.
    """

    def __init__(self, identifier: str, category: Category, label: str):
        """
        Create a new task.

        :param identifier: the unique identifier of the task, also used as the name of its checkbox control.
        :param category: the reminder category this task belongs to.
        :param label: the text shown next to the checkbox.
        """
        self.identifier: str = identifier
        self.category: Category = category
        self.label: str = label

    def __repr__(self) -> str:
        return "Task({})".format(self.identifier)


#: The fixed checklist, in document order.
TASKS: List[Task] = [
    Task('daily-backup', Category.DAILY, 'Backup & organize important files'),
    Task('daily-updates', Category.DAILY, 'Install software and OS updates'),
    Task('daily-antivirus', Category.DAILY, 'Run an antivirus scan'),
    Task('daily-logs', Category.DAILY, 'Check system and security logs'),
    Task('weekly-backup', Category.WEEKLY, 'Make an offline backup'),
    Task('weekly-permissions', Category.WEEKLY, 'Review file and folder permissions'),
    Task('weekly-email', Category.WEEKLY, 'Review email security settings'),
    Task('weekly-router', Category.WEEKLY, 'Check for router firmware updates'),
    Task('weekly-2fa', Category.WEEKLY, 'Verify two-factor authentication'),
    Task('monthly-ransomware', Category.MONTHLY, 'Check anti-ransomware protection'),
    Task('monthly-keychain', Category.MONTHLY, 'Audit the password keychain'),
    Task('monthly-yubikey', Category.MONTHLY, 'Test your hardware security key'),
    Task('monthly-physical', Category.MONTHLY, 'Review physical security'),
    Task('monthly-phishing', Category.MONTHLY, 'Refresh phishing awareness'),
    Task('monthly-ai', Category.MONTHLY, 'Review AI monitoring alerts'),
    Task('monthly-insurance', Category.MONTHLY, 'Review cyber insurance coverage'),
]

#: Identifiers of all tasks, in document order.
TASK_IDS: List[str] = [task.identifier for task in TASKS]


def tasks_for(category: Category) -> List[Task]:
    """
    Get the tasks belonging to a category.

    :param category: the category to filter by.

    :return: the tasks of ``category``, in document order.
    """
    return [task for task in TASKS if task.category == category]
