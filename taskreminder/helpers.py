"""
This is a helper file shared by the reminder, checklist and GUI parts of TaskReminder.
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Callable

#: Maps the level names used in settings to ``logging`` levels.
LOG_LEVELS = {
    'debug': logging.DEBUG,
    'info': logging.INFO,
    'warning': logging.WARNING,
    'critical': logging.CRITICAL
}

#: Format used for every log record.
LOG_FORMAT = '%(asctime)s %(levelname)s: %(message)s'


class TaskReminderError(Exception):
    """
    Base class for errors raised by TaskReminder.
    """


class MissingTaskError(TaskReminderError, LookupError):
    """
    Raised when a task identifier has no matching control in the checklist document.
    """

    def __init__(self, task_id: str):
        super().__init__("No checklist control found for task '{}'".format(task_id))
        self.task_id: str = task_id


class NotificationError(TaskReminderError):
    """
    Raised when the platform cannot display a notification.
    """


def assets_folder() -> Path:
    """
    Get the location of the GUI assets folder. Works both from source and from a frozen (PyInstaller) build.

    :return: path to the ``assets`` folder.
    """
    if getattr(sys, 'frozen', False):
        # noinspection PyProtectedMember
        return Path(sys._MEIPASS) / "taskreminder" / "gui" / "assets"
    return Path(os.path.dirname(os.path.abspath(__file__))) / "gui" / "assets"


def setup_logging(logging_level: str = 'info', log_stdout: bool = True,
                  log_gui: Callable[[str], None] | None = None) -> logging.Logger:
    """
    Sets up the logging system.

    :param logging_level: the logging level which can be `debug`, `info`, `warning` or `critical`.
    :param log_stdout: if True, logs are sent to standard out.
    :param log_gui: if given, formatted log messages are also passed to this function.

    :return: the root logger.
    """
    if logging_level not in LOG_LEVELS:
        raise ValueError("Unknown logging level '{}'".format(logging_level))

    logging.basicConfig(
        level=LOG_LEVELS[logging_level],
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout) if log_stdout else logging.NullHandler()],
        force=True
    )
    logger = logging.getLogger()
    if log_gui is not None:
        func_handler = FunctionHandler(log_gui)
        func_handler.setFormatter(logging.Formatter('%(message)s'))
        logger.addHandler(func_handler)
    return logger


class FunctionHandler(logging.Handler):
    def __init__(self, func: Callable):
        logging.Handler.__init__(self)
        self.func = func

    def emit(self, record):
        msg = self.format(record)
        self.func(msg)
