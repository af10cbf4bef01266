"""
This is the model of the checklist part of TaskReminder. Here, you'll find the following:

- ``task.py`` - Contains the ``Task`` class and the fixed list of sixteen checklist tasks.

"""

from . import task

__all__ = ['task', ]
