"""
Contains the ``ReminderScheduler`` class, which shows a notification for every reminder once per reminder period.
"""

from __future__ import annotations

import logging
from typing import Callable, List

import schedule

from taskreminder.helpers import NotificationError
from taskreminder.reminders.model.reminder import Reminder, REMINDERS


class ReminderScheduler:
    """
    Registers one recurring ``schedule`` job per reminder. Jobs run whenever :py:meth:`run_pending` is called and the
    reminder period has elapsed, so the owner decides which thread the notifications are shown on.

    Jobs are independent. A job that is overdue runs once and is rescheduled a full period from then; missed periods
    are not replayed.

    Due times are naive local wall-clock times, as ``schedule`` computes them. A daylight saving change or a manual
    clock change therefore shifts the next firing: a daily reminder may come after 23 or 25 hours of elapsed time.
    """

    def __init__(self,
                 notify: Callable[[str, str], object],
                 reminders: List[Reminder] | None = None,
                 scheduler: schedule.Scheduler | None = None):
        """
        Initialise the scheduler.

        :param notify: called with the reminder title and message whenever a reminder is due.
        :param reminders: the reminders to schedule. Defaults to the fixed daily, weekly and monthly reminders.
        :param scheduler: the ``schedule.Scheduler`` to register jobs with. A private one is created if omitted.
        """
        self.notify: Callable[[str, str], object] = notify
        self.reminders: List[Reminder] = list(REMINDERS if reminders is None else reminders)
        self.scheduler: schedule.Scheduler = scheduler if scheduler is not None else schedule.Scheduler()
        self.jobs: List[schedule.Job] = []

    @property
    def is_armed(self) -> bool:
        """
        True once :py:meth:`start` has registered the reminder jobs, until :py:meth:`stop` is called.
        """
        return len(self.jobs) > 0

    def start(self) -> List[schedule.Job]:
        """
        Register a recurring job for every reminder. Calling this again while armed does nothing.

        :return: the job handles, one per reminder.
        """
        if self.is_armed:
            logging.warning('Reminder scheduler already started, ignoring.')
            return self.jobs

        for reminder in self.reminders:
            job = self.scheduler.every(reminder.period_seconds).seconds.do(self.fire, reminder)
            job.tag(reminder.category.value)
            self.jobs.append(job)
            logging.info('Scheduled {0} reminder every {1} ms, next at {2}.'.format(
                reminder.category.value, reminder.period_ms, job.next_run))
        return self.jobs

    def stop(self) -> None:
        """
        Cancel every reminder job.
        """
        for job in self.jobs:
            self.scheduler.cancel_job(job)
        if self.jobs:
            logging.info('Cancelled {} reminder jobs.'.format(len(self.jobs)))
        self.jobs.clear()

    def run_pending(self) -> None:
        """
        Run every reminder job that is due.
        """
        self.scheduler.run_pending()

    def fire(self, reminder: Reminder) -> None:
        """
        Show the notification for a reminder. A notification failure is logged and does not affect later firings.

        :param reminder: the reminder that is due.
        """
        logging.debug('{} reminder is due.'.format(reminder.category.value))
        try:
            self.notify(reminder.title, reminder.message)
        except NotificationError as e:
            logging.warning('Could not show {0} reminder: {1}'.format(reminder.category.value, e))
        except Exception as e:
            logging.exception('Notifier failed for {0} reminder: {1}'.format(reminder.category.value, e))
