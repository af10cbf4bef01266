"""
Main application entry point. Creates the system tray icon, displays the checklist window and starts the reminders.
"""
import sys

from PyQt6.QtCore import QTimer, Qt
from PyQt6.QtGui import QIcon
from PyQt6.QtWidgets import QApplication
import darkdetect

from taskreminder import helpers
from taskreminder.gui.viewmodel.checklistwindow import ChecklistWindow
from taskreminder.gui.viewmodel.notifier import Notifier
from taskreminder.gui.viewmodel.taskreminderapp import TaskReminderApp
from taskreminder.gui.viewmodel.trayicon import TaskReminderTray
from taskreminder.reminders.scheduler import ReminderScheduler


def main() -> int:
    """
    Run TaskReminder until it is quit.

    :return: the exit code of the event loop.
    """
    settings = TaskReminderApp.SETTINGS
    assets_path = helpers.assets_folder()

    app = QApplication(sys.argv)
    app.setQuitOnLastWindowClosed(False)
    icon = QIcon(str(assets_path / "icon.svg"))
    app.setWindowIcon(icon)
    stylesheet = (assets_path / "checklist.qss").read_text()

    tray_path = assets_path / "tray_white.svg" if darkdetect.isDark() else assets_path / "tray_black.svg"
    tray_icon = TaskReminderTray(QIcon(str(tray_path)))
    notifier = Notifier(tray_icon, icon,
                        sound=settings['notification_sound'],
                        wait=settings['notification_wait'],
                        timeout_ms=settings['notification_timeout'])
    scheduler = ReminderScheduler(notifier.notify)
    poll_timer = QTimer()
    # noinspection PyUnresolvedReferences
    poll_timer.timeout.connect(scheduler.run_pending)

    tr = TaskReminderApp(lambda: ChecklistWindow(stylesheet, settings['window_width'], settings['window_height']),
                         scheduler, app.exit, poll_timer=poll_timer)
    helpers.setup_logging(settings['log_level'], log_stdout=True, log_gui=tr.display_log)
    tray_icon.attach(tr)

    # noinspection PyUnresolvedReferences
    app.lastWindowClosed.connect(tr.on_all_windows_closed)
    # noinspection PyUnresolvedReferences
    app.applicationStateChanged.connect(
        lambda state: tr.on_activate() if state == Qt.ApplicationState.ApplicationActive else None)

    tr.on_ready()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
