import datetime

import pytest

from taskreminder.reminders.model.reminder import Reminder, Category, REMINDERS, DAILY, WEEKLY, MONTHLY, \
    reminder_for


class TestReminder:

    def test_periods(self):
        assert DAILY.period_ms == 86_400_000
        assert WEEKLY.period_ms == 604_800_000
        assert MONTHLY.period_ms == 2_592_000_000

        assert DAILY.period == datetime.timedelta(days=1)
        assert WEEKLY.period == datetime.timedelta(days=7)
        assert MONTHLY.period == datetime.timedelta(days=30)

        assert DAILY.period_seconds == 86_400
        assert WEEKLY.period_seconds == 604_800
        assert MONTHLY.period_seconds == 2_592_000

    def test_titles_and_messages(self):
        assert DAILY.title == 'Daily Task Reminder'
        assert DAILY.message == 'Backup & organize files, software updates, antivirus scan, check logs.'
        assert WEEKLY.title == 'Weekly Task Reminder'
        assert WEEKLY.message == ('Offline backup, file permissions, email security, router updates, '
                                  '2FA verification.')
        assert MONTHLY.title == 'Monthly Task Reminder'
        assert MONTHLY.message == ('Anti-ransomware, password keychain, Yubikey, physical security, avoid phishing, '
                                   'AI monitoring, cyber insurance.')

    def test_one_reminder_per_category(self):
        assert len(REMINDERS) == 3
        assert [r.category for r in REMINDERS] == [Category.DAILY, Category.WEEKLY, Category.MONTHLY]
        for category in Category:
            assert reminder_for(category).category == category

    def test_immutable(self):
        with pytest.raises(AttributeError):
            DAILY.title = 'Something else'
        with pytest.raises(AttributeError):
            DAILY.period_ms = 1
        with pytest.raises(AttributeError):
            DAILY.extra = True

    def test_invalid_period(self):
        with pytest.raises(ValueError):
            Reminder(Category.DAILY, 'Title', 'Message', 0)

    def test_equality(self):
        copy = Reminder(Category.DAILY, DAILY.title, DAILY.message, DAILY.period_ms)
        assert copy == DAILY
        assert hash(copy) == hash(DAILY)
        assert copy != WEEKLY
