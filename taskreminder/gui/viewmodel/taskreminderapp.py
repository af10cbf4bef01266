"""
Contains the ``TaskReminderApp`` class, which owns the checklist window and the application lifecycle.
"""

from __future__ import annotations

import logging
import sys
from typing import Callable

from PyQt6.QtCore import Qt

from taskreminder.gui.viewmodel.checklistwindow import ChecklistWindow
from taskreminder.reminders.scheduler import ReminderScheduler


class TaskReminderApp:
    """
    Application context. Holds the single checklist window (or None when it is closed) and reacts to the application
    lifecycle events. The :py:attr:`SETTINGS` dictionary holds the following keys:

    - ``log_level`` - the logging level. Can be 'debug', 'info', 'warning' or 'critical'.
    - ``notification_timeout`` - how long a notification stays visible, in milliseconds.
    - ``notification_sound`` - if True, a sound is played with every notification.
    - ``notification_wait`` - if True, each notification is tracked until it is clicked or times out.
    - ``poll_interval`` - how often due reminders are checked for, in milliseconds.
    - ``window_width`` - the fixed width of the checklist window.
    - ``window_height`` - the fixed height of the checklist window.

    """

    #: Application settings
    SETTINGS = {
        'log_level': 'info',
        'notification_timeout': 10000,
        'notification_sound': True,
        'notification_wait': True,
        'poll_interval': 1000,
        'window_width': 800,
        'window_height': 600
    }

    def __init__(self,
                 window_factory: Callable[[], ChecklistWindow],
                 scheduler: ReminderScheduler,
                 quit_app: Callable[[int], None],
                 poll_timer=None,
                 platform: str = sys.platform):
        """
        Initialise the application context.

        :param window_factory: builds a new checklist window.
        :param scheduler: the reminder scheduler, started once when the application is ready.
        :param quit_app: ends the event loop with the given exit code.
        :param poll_timer: a timer (``QTimer``) whose timeout runs due reminders. Started when the app is ready.
        :param platform: the platform name, as in ``sys.platform``.
        """
        self.window_factory: Callable[[], ChecklistWindow] = window_factory
        self.scheduler: ReminderScheduler = scheduler
        self.quit_app: Callable[[int], None] = quit_app
        self.poll_timer = poll_timer
        self.platform: str = platform
        self.window: ChecklistWindow | None = None
        self.ready: bool = False

    def on_ready(self) -> None:
        """
        Called once the application is ready. Creates the checklist window and starts the reminders.
        """
        if self.ready:
            logging.warning('Application already started, ignoring.')
            return
        try:
            self.create_window()
        except Exception as e:
            logging.critical('Could not create the checklist window: {}'.format(e))
            raise
        self.scheduler.start()
        if self.poll_timer is not None:
            self.poll_timer.start(TaskReminderApp.SETTINGS['poll_interval'])
        self.ready = True

    def create_window(self) -> ChecklistWindow:
        """
        Create and show a new checklist window.

        :return: the new window.
        """
        window = self.window_factory()
        window.setAttribute(Qt.WidgetAttribute.WA_DeleteOnClose)
        # noinspection PyUnresolvedReferences
        window.closed.connect(lambda: self.handle_window_closed(window))
        window.show()
        self.window = window
        logging.debug('Checklist window created.')
        return window

    def handle_window_closed(self, window: ChecklistWindow) -> None:
        """
        Forget the window once it has been closed.

        :param window: the window which was closed.
        """
        if self.window is window:
            self.window = None

    def on_activate(self) -> None:
        """
        Called when the application is activated. Creates a window if none is open.
        """
        if self.window is None:
            self.create_window()

    def show_window(self) -> None:
        """
        Bring the checklist window to the front, creating it if needed.
        """
        if self.window is None:
            self.create_window()
            return
        self.window.show()
        self.window.raise_()
        self.window.activateWindow()

    def on_all_windows_closed(self) -> None:
        """
        Called when the last window is closed. Quits, except on macOS where the application stays in the dock.
        """
        if self.platform == 'darwin':
            logging.debug('All windows closed, staying in the dock.')
            return
        self.quit_gracefully()

    def quit_gracefully(self) -> None:
        """
        Quits TaskReminder. Cancels the reminders and stops polling before quitting.
        """
        logging.info('Quitting TaskReminder.')
        self.scheduler.stop()
        if self.poll_timer is not None:
            self.poll_timer.stop()
        self.quit_app(0)

    def display_log(self, message: str) -> None:
        """
        Displays a log message in the checklist window, if open.

        :param message: the message to display.
        """
        if self.window is not None:
            self.window.show_status(message)
