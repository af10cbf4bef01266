"""
This is the checklist part of TaskReminder. Here, you'll find the following:

- ``model`` - Contains the ``Task`` class and the fixed checklist tasks.
- ``binder.py`` - Contains ``bind_tasks`` which connects each task's checkbox to the done marker on its container.

"""

from . import model
from . import binder

__all__ = ['model', 'binder', ]
