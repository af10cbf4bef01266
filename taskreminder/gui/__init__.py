"""
This is the GUI package for TaskReminder.

- ``app.py`` - The application entry point. Wires the tray icon, notifier, scheduler and checklist window together.
- ``viewmodel`` - The windows, widgets and controllers of the GUI.
- ``assets`` - The application icon and the checklist stylesheet.

"""
