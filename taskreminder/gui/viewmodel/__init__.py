"""
This is the view model package for the GUI. Here, you'll find the following:

- ``checklistwindow.py`` - Contains the ``ChecklistWindow`` main window and the ``ChecklistDocument`` it loads.
- ``taskcheckbox.py`` - Contains the ``TaskCheckbox`` and ``TaskContainer`` widgets for each checklist task.
- ``taskreminderapp.py`` - Contains the ``TaskReminderApp`` class - the application context which owns the window.
- ``notifier.py`` - Contains the ``Notifier`` class which shows reminder notifications.
- ``trayicon.py`` - Contains the ``TaskReminderTray`` class which handles the system tray icon.
"""
