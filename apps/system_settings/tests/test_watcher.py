from datetime import datetime

from django.test import TestCase

from apps.system_settings.management.commands.watch_registration_window import WindowMonitor
from apps.system_settings.services import WebsiteSettingsService
from apps.system_settings.signals import registration_window_changed


class WindowMonitorTest(TestCase):
    def setUp(self):
        WebsiteSettingsService.update({"autoSchedule": True, "openTime": "09:00", "closeTime": "17:00"})
        self.events = []
        registration_window_changed.connect(self._record)
        self.monitor = WindowMonitor()

    def tearDown(self):
        registration_window_changed.disconnect(self._record)

    def _record(self, sender, is_open, reason, **kwargs):
        self.events.append((is_open, reason))

    def test_first_tick_only_records_state(self):
        self.assertFalse(self.monitor.tick(datetime(2024, 5, 15, 8, 59)))
        self.assertEqual(self.events, [])
        self.assertFalse(self.monitor.last_is_open)

    def test_opening_is_announced_once(self):
        self.monitor.tick(datetime(2024, 5, 15, 8, 59, 58))
        self.monitor.tick(datetime(2024, 5, 15, 9, 0, 0))
        self.monitor.tick(datetime(2024, 5, 15, 9, 0, 2))
        self.monitor.tick(datetime(2024, 5, 15, 9, 0, 4))
        self.assertEqual(self.events, [(True, "schedule")])

    def test_open_then_close_announces_both(self):
        self.monitor.tick(datetime(2024, 5, 15, 8, 59))
        self.monitor.tick(datetime(2024, 5, 15, 9, 1))
        self.monitor.tick(datetime(2024, 5, 15, 16, 59))
        self.monitor.tick(datetime(2024, 5, 15, 17, 0))
        self.assertEqual(self.events, [(True, "schedule"), (False, "schedule")])

    def test_manual_flip_is_announced(self):
        WebsiteSettingsService.update({"autoSchedule": False, "isOpen": False})
        self.monitor.tick(datetime(2024, 5, 15, 12, 0))
        WebsiteSettingsService.update({"isOpen": True})
        self.monitor.tick(datetime(2024, 5, 15, 12, 0, 2))
        self.assertEqual(self.events, [(True, "manual")])

    def test_rescheduled_close_is_not_announced(self):
        self.monitor.tick(datetime(2024, 5, 15, 16, 58))
        WebsiteSettingsService.update({"closeTime": "20:00"})
        self.assertFalse(self.monitor.tick(datetime(2024, 5, 15, 17, 0, 1)))
        self.assertEqual(self.events, [])

    def test_rescheduled_close_announces_the_new_boundary(self):
        self.monitor.tick(datetime(2024, 5, 15, 16, 58))
        WebsiteSettingsService.update({"closeTime": "20:00"})
        self.monitor.tick(datetime(2024, 5, 15, 17, 0, 1))
        self.monitor.tick(datetime(2024, 5, 15, 19, 59, 59))
        self.monitor.tick(datetime(2024, 5, 15, 20, 0, 1))
        self.assertEqual(self.events, [(False, "schedule")])
