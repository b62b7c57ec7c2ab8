import logging

from django.dispatch import Signal, receiver

logger = logging.getLogger("apps.registration")

# sender=WebsiteSettings, kwargs: instance, actor
website_settings_changed = Signal()

# sender=WebsiteSettings, kwargs: is_open, reason ("schedule" | "manual")
registration_window_changed = Signal()


@receiver(website_settings_changed)
def log_settings_change(sender, instance=None, actor=None, **kwargs):
    logger.info(
        f"Website settings updated by {actor or 'system'} | "
        f"is_open={instance.is_open} auto_schedule={instance.auto_schedule} "
        f"window={instance.open_time or '--:--'}-{instance.close_time or '--:--'} "
        f"codes_active={instance.codes_active}"
    )


@receiver(registration_window_changed)
def log_window_change(sender, is_open=None, reason="", **kwargs):
    state = "OPEN" if is_open else "CLOSED"
    logger.warning(f"Registration window is now {state} ({reason or 'unknown'})")
