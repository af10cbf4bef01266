"""
This is the model of the reminder part of TaskReminder. Here, you'll find the following:

- ``reminder.py`` - Contains the ``Reminder`` class, the ``Category`` enum and the fixed daily, weekly and monthly
  reminders.

"""

from . import reminder

__all__ = ['reminder', ]
