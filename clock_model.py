import math
import logging
from datetime import datetime

from clock_config import (
    LOGGER_NAME, TWELVE_HOUR_ANGLE, HOURS_TO_DEGREES, MINUTES_TO_DEGREES,
    CLOCK_X, CLOCK_Y, CENTER_DEAD_ZONE,
)

logger = logging.getLogger(LOGGER_NAME + '.model')

NO_ANGLE = None

KEY_PLUS = '+'

BUTTON_LEFT = 'left'
BUTTON_MIDDLE = 'middle'
BUTTON_RIGHT = 'right'


class ClockTime:
    """The time shown by the clock: 12-hour display, no AM/PM."""

    def __init__(self, hour=0, minute=0, second=0):
        self.hour = 0
        self.minute = 0
        self.second = 0
        self.set_fields(hour, minute, second)

    def __repr__(self):
        return f"ClockTime({self.hour}, {self.minute}, {self.second})"

    def __eq__(self, other):
        if not isinstance(other, ClockTime):
            return NotImplemented
        return self.as_tuple() == other.as_tuple()

    def as_tuple(self):
        return (self.hour, self.minute, self.second)

    def copy(self):
        return ClockTime(*self.as_tuple())

    def advance(self):
        """Advance by one second, rolling seconds into minutes and minutes into hours."""
        if self.second == 59:
            self.second = 0
            if self.minute == 59:
                self.minute = 0
                self.hour = (self.hour + 1) % 12
            else:
                self.minute += 1
        else:
            self.second += 1

    def set_fields(self, hour=None, minute=None, second=None):
        """Overwrite the given fields; fields left as None are unchanged.

        Raises:
            ValueError: if a field is outside its display range. Nothing is
                changed in that case.
        """
        _check_range('hour', hour, 12)
        _check_range('minute', minute, 60)
        _check_range('second', second, 60)
        if hour is not None:
            self.hour = hour
        if minute is not None:
            self.minute = minute
        if second is not None:
            self.second = second


def _check_range(name, value, limit):
    if value is not None and not 0 <= value < limit:
        raise ValueError(f"{name} must be in [0, {limit - 1}], got {value}")


def parse_time(text):
    """Parse 'H:MM' or 'H:MM:SS' into a ClockTime.

    Hours may be given on a 24-hour clock; they are folded onto the 12-hour face.
    """
    parts = text.strip().split(':')
    if len(parts) not in (2, 3) or not all(p.isdigit() for p in parts):
        raise ValueError(f"expected H:MM or H:MM:SS, got {text!r}")
    hour, minute = int(parts[0]), int(parts[1])
    second = int(parts[2]) if len(parts) == 3 else 0
    if hour > 23:
        raise ValueError(f"hour must be in [0, 23], got {hour}")
    return ClockTime(hour % 12, minute, second)


def angle_from_point(x, y, center_x=CLOCK_X, center_y=CLOCK_Y):
    """Convert a hand tip position to an angle around the clock center.

    Args:
        x, y: Point in widget pixels
        center_x, center_y: Clock center in widget pixels

    Returns:
        Whole degrees in [0, 360), 0 = 3 o'clock, clockwise on screen;
        or NO_ANGLE if the point is too close to the center to have a direction.
    """
    tip_x = x - center_x
    tip_y = y - center_y
    hypotenuse = math.hypot(tip_x, tip_y)
    if hypotenuse < CENTER_DEAD_ZONE:
        return NO_ANGLE

    cosine = tip_x / hypotenuse
    sine = max(-1.0, min(tip_y / hypotenuse, 1.0))
    asine = math.asin(sine)

    # asin alone cannot tell the left half from the right half
    if (sine <= 0 and cosine <= 0) or (sine >= 0 and cosine <= 0):
        angle = math.pi - asine
    elif sine <= 0 and cosine >= 0:
        angle = (math.pi * 2) + asine
    elif sine >= 0 and cosine >= 0:
        angle = asine
    else:
        angle = 0.0

    # rounding to 6 places absorbs float noise at the cardinal points before truncation
    return int(round(math.degrees(angle), 6)) % 360


def hour_from_angle(angle):
    return ((angle - TWELVE_HOUR_ANGLE) // HOURS_TO_DEGREES) % 12


def minute_from_angle(angle):
    return ((angle - TWELVE_HOUR_ANGLE) // MINUTES_TO_DEGREES) % 60


class ClockModel:
    """Owns the displayed time and turns ticks and user input into time changes.

    The methods mirror the callbacks the GUI delivers: tick(), key_down() and
    mouse_up(). Input methods return True when the displayed time changed.
    """

    def __init__(self, time=None, center=(CLOCK_X, CLOCK_Y)):
        self.time = time if time is not None else ClockTime()
        self.center = center

    @classmethod
    def from_now(cls, now=None):
        now = now or datetime.now()
        return cls(ClockTime(now.hour % 12, now.minute, now.second))

    def tick(self):
        self.time.advance()
        logger.debug("tick -> %02d:%02d:%02d", *self.time.as_tuple())

    def key_down(self, key, shift_held=False):
        """Handle a key press.

        Args:
            key: Key name; only KEY_PLUS is recognized
            shift_held: True advances the hour instead of the minute
        """
        if key != KEY_PLUS:
            return False
        t = self.time
        if shift_held:
            t.set_fields(hour=(t.hour + 1) % 12)
        elif t.minute == 59:
            t.set_fields(hour=(t.hour + 1) % 12, minute=0)
        else:
            t.set_fields(minute=t.minute + 1)
        logger.info("time set from keyboard to %02d:%02d", t.hour, t.minute)
        return True

    def mouse_up(self, button, x, y):
        """Handle a mouse button release at (x, y).

        Left sets the hour, right sets the minute, middle sets the hour and
        clears the minute. Clicks on the center are ignored.
        """
        if button not in (BUTTON_LEFT, BUTTON_MIDDLE, BUTTON_RIGHT):
            return False
        angle = angle_from_point(x, y, *self.center)
        if angle is NO_ANGLE:
            logger.debug("ignored %s click at the center (%d, %d)", button, x, y)
            return False

        if button == BUTTON_LEFT:
            self.time.set_fields(hour=hour_from_angle(angle))
        elif button == BUTTON_MIDDLE:
            self.time.set_fields(hour=hour_from_angle(angle), minute=0)
        else:
            self.time.set_fields(minute=minute_from_angle(angle))
        logger.info("time set by %s click at %d degrees to %02d:%02d",
                    button, angle, self.time.hour, self.time.minute)
        return True
