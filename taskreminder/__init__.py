"""
This is the main package for TaskReminder.

- ``reminders`` - the recurring daily, weekly and monthly reminders and their scheduler.
- ``checklist`` - the security task checklist and the binding of its checkboxes.
- ``gui`` - the TaskReminder GUI and related assets.
- ``helpers`` - logging set-up, errors and paths shared by the other packages.

"""

from . import helpers

__all__ = ['helpers', ]
