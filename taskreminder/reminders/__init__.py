"""
This is the reminder part of TaskReminder. Here, you'll find the following:

- ``model`` - Contains the ``Reminder`` class and the fixed reminder definitions.
- ``scheduler.py`` - Contains the ``ReminderScheduler`` class which fires a notification for each reminder on its
  period.

"""

from . import model
from . import scheduler

__all__ = ['model', 'scheduler', ]
