"""
Contains the ``Notifier`` class, which shows native notifications through the system tray.
"""

from __future__ import annotations

import logging
from concurrent.futures import Future
from enum import Enum

from PyQt6.QtCore import QTimer
from PyQt6.QtGui import QIcon
from PyQt6.QtWidgets import QApplication, QSystemTrayIcon

from taskreminder.helpers import NotificationError


class NotificationResult(Enum):
    """
    How a notification ended.
    """
    SHOWN = 'shown'
    CLICKED = 'clicked'
    TIMED_OUT = 'timed_out'
    SUPERSEDED = 'superseded'


class Notifier:
    """
    Shows notifications as system tray messages. Only one tray message is visible at a time, so a new notification
    supersedes the one still waiting.
    """

    def __init__(self, tray: QSystemTrayIcon, icon: QIcon, sound: bool = True, wait: bool = True,
                 timeout_ms: int = 10000):
        """
        Initialise the notifier.

        :param tray: the system tray icon used to display messages.
        :param icon: the icon shown in every notification.
        :param sound: if True, the system beep is played with every notification.
        :param wait: if True, the future returned by :py:meth:`notify` completes only once the notification is clicked
        or times out.
        :param timeout_ms: how long a notification stays visible.
        """
        self.tray: QSystemTrayIcon = tray
        self.icon: QIcon = icon
        self.sound: bool = sound
        self.wait: bool = wait
        self.timeout_ms: int = timeout_ms
        self.pending: Future | None = None
        # noinspection PyUnresolvedReferences
        self.tray.messageClicked.connect(self._handle_clicked)

    def notify(self, title: str, message: str) -> Future:
        """
        Show a notification. Never blocks: with ``wait`` set, the returned future is completed later from the event
        loop.

        :param title: the notification title.
        :param message: the notification message.

        :raises NotificationError: if the platform cannot show tray messages.

        :return: a future resolving to a :py:class:`NotificationResult`.
        """
        if not QSystemTrayIcon.isSystemTrayAvailable():
            raise NotificationError("No system tray is available to show '{}'".format(title))
        if not QSystemTrayIcon.supportsMessages():
            raise NotificationError("The system tray cannot show messages, dropping '{}'".format(title))

        self._resolve(NotificationResult.SUPERSEDED)
        self.tray.showMessage(title, message, self.icon, self.timeout_ms)
        if self.sound:
            QApplication.beep()
        logging.info('Notification shown: {}'.format(title))

        future = Future()
        if not self.wait:
            future.set_result(NotificationResult.SHOWN)
            return future
        self.pending = future
        QTimer.singleShot(self.timeout_ms, lambda: self._handle_timeout(future))
        return future

    def _handle_clicked(self) -> None:
        self._resolve(NotificationResult.CLICKED)

    def _handle_timeout(self, future: Future) -> None:
        if future is self.pending:
            self._resolve(NotificationResult.TIMED_OUT)

    def _resolve(self, result: NotificationResult) -> None:
        """
        Complete the waiting notification, if any.

        :param result: how the notification ended.
        """
        if self.pending is None:
            return
        future, self.pending = self.pending, None
        logging.debug('Notification {}.'.format(result.value))
        future.set_result(result)
