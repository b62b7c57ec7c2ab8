"""
apps/system_settings/schedule.py

Registration window arithmetic.

Everything here is a pure function of (settings, now): no database access,
no clock reads. The settings endpoint uses it to tell clients whether
registration is open and how long until the next change, and the
registration services call the very same functions to re-validate a
submission server-side, so both sides always agree.

Truth table for an active schedule (times compared to the second):
    same-day  (open <  close): open iff open <= now < close
    overnight (close <= open): open iff now >= open or now < close

A schedule is active only when auto_schedule is on AND both times parse
as HH:MM. Anything else falls back to the manual is_open flag, with no
countdown.
"""

from dataclasses import dataclass
from datetime import datetime, time, timedelta
from typing import Any, Callable, Optional

OPEN = "open"
CLOSE = "close"

# Slack the remaining time must exceed before an expired watcher re-arms
EXPIRY_REARM_SLACK = timedelta(seconds=5)


# ─────────────────────────────────────────────────────────────────────────────
# Parsing
# ─────────────────────────────────────────────────────────────────────────────

def parse_hhmm(value: Any) -> Optional[time]:
    """
    Parse "HH:MM" (or "HH:MM:SS") into a time. Returns None for empty or
    malformed values instead of raising.
    """
    if value is None:
        return None
    if isinstance(value, time):
        return value

    text = str(value).strip()
    if not text:
        return None

    parts = text.split(":")
    if len(parts) not in (2, 3):
        return None
    try:
        hours = int(parts[0])
        minutes = int(parts[1])
        seconds = int(parts[2]) if len(parts) == 3 else 0
    except ValueError:
        return None

    if not (0 <= hours < 24 and 0 <= minutes < 60 and 0 <= seconds < 60):
        return None
    return time(hours, minutes, seconds)


def _seconds_of_day(value: time) -> int:
    return value.hour * 3600 + value.minute * 60 + value.second


# ─────────────────────────────────────────────────────────────────────────────
# Window
# ─────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class ScheduleWindow:
    open_at: time
    close_at: time

    @property
    def overnight(self) -> bool:
        return _seconds_of_day(self.close_at) <= _seconds_of_day(self.open_at)

    def contains(self, moment: time) -> bool:
        now_s = _seconds_of_day(moment)
        open_s = _seconds_of_day(self.open_at)
        close_s = _seconds_of_day(self.close_at)
        if self.overnight:
            return now_s >= open_s or now_s < close_s
        return open_s <= now_s < close_s


def window_for(settings_obj) -> Optional[ScheduleWindow]:
    """The active schedule window, or None when the manual flag applies."""
    if not getattr(settings_obj, "auto_schedule", False):
        return None
    open_at = parse_hhmm(getattr(settings_obj, "open_time", None))
    close_at = parse_hhmm(getattr(settings_obj, "close_time", None))
    if open_at is None or close_at is None:
        return None
    return ScheduleWindow(open_at=open_at, close_at=close_at)


def schedule_is_active(settings_obj) -> bool:
    return window_for(settings_obj) is not None


def is_effectively_open(settings_obj, now: datetime) -> bool:
    window = window_for(settings_obj)
    if window is None:
        return bool(getattr(settings_obj, "is_open", False))
    return window.contains(now.time())


# ─────────────────────────────────────────────────────────────────────────────
# Countdown
# ─────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Countdown:
    target_type: str
    target: datetime
    remaining: timedelta

    @property
    def total_seconds(self) -> int:
        return max(0, int(self.remaining.total_seconds()))

    @property
    def total_minutes(self) -> int:
        return self.total_seconds // 60

    @property
    def hours(self) -> int:
        return self.total_seconds // 3600

    @property
    def minutes(self) -> int:
        return (self.total_seconds % 3600) // 60

    @property
    def seconds(self) -> int:
        return self.total_seconds % 60

    def as_dict(self) -> dict:
        return {
            "targetType": self.target_type,
            "target": self.target.isoformat(),
            "hours": self.hours,
            "minutes": self.minutes,
            "seconds": self.seconds,
            "totalMinutes": self.total_minutes,
            "totalSeconds": self.total_seconds,
        }


def next_occurrence(at: time, now: datetime) -> datetime:
    """Today at `at` if still ahead of `now`, otherwise tomorrow at `at`."""
    candidate = now.replace(hour=at.hour, minute=at.minute, second=at.second, microsecond=0)
    if candidate <= now:
        candidate += timedelta(days=1)
    return candidate


def next_transition(settings_obj, now: datetime) -> Optional[Countdown]:
    """
    Time until the gate flips. While open, counts down to the next close;
    while closed, to the next open. For both window shapes the next open
    is simply the next wall-clock occurrence of open_time, because a
    closed instant never lies inside [open, close).
    """
    window = window_for(settings_obj)
    if window is None:
        return None

    if window.contains(now.time()):
        target_type, target = CLOSE, next_occurrence(window.close_at, now)
    else:
        target_type, target = OPEN, next_occurrence(window.open_at, now)

    return Countdown(target_type=target_type, target=target, remaining=target - now)


@dataclass(frozen=True)
class GateState:
    is_open: bool
    schedule_active: bool
    countdown: Optional[Countdown]


def evaluate(settings_obj, now: datetime) -> GateState:
    return GateState(
        is_open=is_effectively_open(settings_obj, now),
        schedule_active=schedule_is_active(settings_obj),
        countdown=next_transition(settings_obj, now),
    )


# ─────────────────────────────────────────────────────────────────────────────
# Expiry watcher
# ─────────────────────────────────────────────────────────────────────────────

class ExpiryWatcher:
    """
    Edge-triggered countdown observer.

    Feed it the remaining time on every tick. The callback fires once when
    the remaining time reaches zero and the watcher stays silent until more
    than `rearm_after` is left again, so jitter around the boundary never
    re-triggers it.
    """

    def __init__(self, on_expired: Callable[[], None], rearm_after: timedelta = EXPIRY_REARM_SLACK):
        self._on_expired = on_expired
        self.rearm_after = rearm_after
        self._fired = False

    @property
    def fired(self) -> bool:
        return self._fired

    def reset(self) -> None:
        self._fired = False

    def observe(self, remaining: Optional[timedelta]) -> bool:
        """Returns True when this observation fired the callback."""
        if remaining is None:
            return False

        if remaining <= timedelta(0):
            if self._fired:
                return False
            self._fired = True
            self._on_expired()
            return True

        if self._fired and remaining > self.rearm_after:
            self._fired = False
        return False
