"""
Contains the ``TaskReminderTray`` class which handles the system tray icon.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from PyQt6.QtGui import QIcon, QAction
from PyQt6.QtWidgets import QSystemTrayIcon, QMenu

if TYPE_CHECKING:
    from taskreminder.gui.viewmodel.taskreminderapp import TaskReminderApp


# noinspection PyUnresolvedReferences
class TaskReminderTray(QSystemTrayIcon):
    """
    Handles the system tray icon. Reminder notifications are shown as messages from this icon.
    """

    def __init__(self, icon: QIcon, *args, **kwargs):
        """
        Initialises the system tray icon.

        :param icon: the icon to be displayed.
        """

        super().__init__(*args, **kwargs)
        self.setIcon(icon)
        self.setToolTip("TaskReminder")
        self.show()

        self.menu = QMenu()
        self.mnu_show = QAction("Show Checklist")
        self.menu.addAction(self.mnu_show)
        self.mnu_quit = QAction("Quit TaskReminder")
        self.menu.addAction(self.mnu_quit)
        self.setContextMenu(self.menu)

    def attach(self, parent: TaskReminderApp) -> None:
        """
        Connects the tray menu to the application.

        :param parent: the application context.
        """
        self.mnu_show.triggered.connect(parent.show_window)
        self.mnu_quit.triggered.connect(parent.quit_gracefully)
