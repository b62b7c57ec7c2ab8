"""
Registration window watcher.

Polls the website settings, feeds the countdown into an ExpiryWatcher and
announces every open/close transition through the
registration_window_changed signal. Meant to run as a long-lived process
next to the web workers (systemd / supervisor), or once from cron.
"""

import logging
import time

from django.conf import settings
from django.core.management.base import BaseCommand
from django.utils import timezone

from apps.system_settings.models import WebsiteSettings
from apps.system_settings.schedule import ExpiryWatcher, evaluate
from apps.system_settings.services import WebsiteSettingsService
from apps.system_settings.signals import registration_window_changed

logger = logging.getLogger("apps.registration")


class WindowMonitor:
    """
    One tick = one read of the settings at an injected instant.

    The watcher observes the time left until the target captured on the
    previous tick, so a boundary crossed between two ticks shows up as a
    non-positive remaining time and fires exactly once. A settings change
    drops the captured target: a rescheduled boundary is not a transition.
    """

    def __init__(self):
        self.last_is_open = None
        self.target = None
        self.schedule = None
        self.watcher = ExpiryWatcher(self._on_countdown_expired)
        self._expired = False

    def _on_countdown_expired(self):
        self._expired = True

    def tick(self, now) -> bool:
        """Returns True when a transition was announced on this tick."""
        obj = WebsiteSettingsService.get()
        state = evaluate(obj, now)

        schedule = (obj.auto_schedule, obj.is_open, obj.open_time, obj.close_time)
        if self.schedule is not None and schedule != self.schedule:
            self.watcher.reset()
            self.target = None
        self.schedule = schedule

        self._expired = False
        self.watcher.observe(self.target - now if self.target else None)
        self.target = state.countdown.target if state.countdown else None

        flipped = self.last_is_open is not None and state.is_open != self.last_is_open
        announce = flipped or self._expired
        if announce:
            reason = "schedule" if state.schedule_active else "manual"
            registration_window_changed.send(
                sender=WebsiteSettings, is_open=state.is_open, reason=reason,
            )

        self.last_is_open = state.is_open
        return announce


class Command(BaseCommand):
    help = "Watch the registration window and announce open/close transitions"

    def add_arguments(self, parser):
        parser.add_argument(
            "--interval",
            type=int,
            default=None,
            help="Seconds between checks (default: REGISTRATION_POLL_INTERVAL)",
        )
        parser.add_argument(
            "--once",
            action="store_true",
            help="Check the window once and exit",
        )

    def handle(self, *args, **options):
        interval = options["interval"] or settings.REGISTRATION_POLL_INTERVAL
        monitor = WindowMonitor()

        if options["once"]:
            monitor.tick(timezone.localtime())
            state = "open" if monitor.last_is_open else "closed"
            self.stdout.write(self.style.SUCCESS(f"Registration is currently {state}."))
            return

        self.stdout.write(
            self.style.SUCCESS(f"Watching registration window every {interval}s (Ctrl+C to stop)")
        )
        logger.info(f"Registration window watcher started with {interval}s interval")

        try:
            while True:
                monitor.tick(timezone.localtime())
                time.sleep(interval)
        except KeyboardInterrupt:
            logger.info("Registration window watcher stopped by user")
