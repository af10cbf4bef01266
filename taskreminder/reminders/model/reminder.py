"""
Contains the ``Reminder`` class, which represents one recurring reminder, and the fixed ``REMINDERS`` list.
"""

from __future__ import annotations

import datetime
from enum import Enum
from typing import List

#: Milliseconds in one day.
DAY_MS: int = 24 * 60 * 60 * 1000


class Category(Enum):
    """
    The reminder categories. Each category has exactly one reminder.
    """
    DAILY = 'daily'
    WEEKLY = 'weekly'
    MONTHLY = 'monthly'


class Reminder:
    """
    Represents a recurring reminder: a notification title and message shown once every ``period_ms``.
    Reminders are immutable once created.
    """

    __slots__ = ('_category', '_title', '_message', '_period_ms')

    def __init__(self, category: Category, title: str, message: str, period_ms: int):
        """
        Create a new reminder.

        :param category: the category of this reminder.
        :param title: the notification title.
        :param message: the notification message.
        :param period_ms: the interval between notifications, in milliseconds.
        """
        if period_ms <= 0:
            raise ValueError("Reminder period must be positive, got {}".format(period_ms))
        self._category: Category = category
        self._title: str = title
        self._message: str = message
        self._period_ms: int = period_ms

    @property
    def category(self) -> Category:
        return self._category

    @property
    def title(self) -> str:
        return self._title

    @property
    def message(self) -> str:
        return self._message

    @property
    def period_ms(self) -> int:
        return self._period_ms

    @property
    def period(self) -> datetime.timedelta:
        """
        The reminder period as a ``timedelta``.
        """
        return datetime.timedelta(milliseconds=self._period_ms)

    @property
    def period_seconds(self) -> int:
        return self._period_ms // 1000

    def __eq__(self, other) -> bool:
        if not isinstance(other, Reminder):
            return NotImplemented
        return (self.category, self.title, self.message, self.period_ms) == \
            (other.category, other.title, other.message, other.period_ms)

    def __hash__(self) -> int:
        return hash((self.category, self.title, self.message, self.period_ms))

    def __repr__(self) -> str:
        return "Reminder({0}, every {1} ms)".format(self.category.value, self.period_ms)


DAILY = Reminder(
    Category.DAILY,
    'Daily Task Reminder',
    'Backup & organize files, software updates, antivirus scan, check logs.',
    DAY_MS
)

WEEKLY = Reminder(
    Category.WEEKLY,
    'Weekly Task Reminder',
    'Offline backup, file permissions, email security, router updates, 2FA verification.',
    7 * DAY_MS
)

MONTHLY = Reminder(
    Category.MONTHLY,
    'Monthly Task Reminder',
    'Anti-ransomware, password keychain, Yubikey, physical security, avoid phishing, AI monitoring, cyber insurance.',
    30 * DAY_MS
)

#: The fixed reminders, one per category.
REMINDERS: List[Reminder] = [DAILY, WEEKLY, MONTHLY]


def reminder_for(category: Category) -> Reminder:
    """
    Get the reminder of the given category.

    :param category: the category to look up.

    :return: the reminder for ``category``.
    """
    for reminder in REMINDERS:
        if reminder.category == category:
            return reminder
    raise KeyError(category)
