"""Toolkit-independent drawing of the clock face.

The face talks to a *canvas*, any object providing::

    draw_line(x0, y0, x1, y1, color, width)
    draw_ellipse(x, y, w, h, color, width)
    fill_ellipse(x, y, w, h, color)

clock.QtCanvas and clock_pil.PilCanvas are the two implementations.
"""
import math
import logging
from collections import namedtuple

from clock_config import (
    LOGGER_NAME, CLOCK_X, CLOCK_Y, CLOCK_SIZE, CLOCK_LINE_WIDTH, HAND_NUT_SIZE,
    HOURS_TO_DEGREES, MINUTES_TO_DEGREES, SECONDS_TO_DEGREES, MINUTES_TO_FRACTION,
    TWELVE_HOUR_ANGLE, LARGE_MARK_INTERVAL, LARGE_MARK_LENGTH, SMALL_MARK_LENGTH,
    HOUR_HAND_LENGTH, MINUTE_HAND_LENGTH, SECOND_HAND_LENGTH,
    BACKGROUND_COLOR, MARK_COLOR, FACE_COLOR, NUT_COLOR,
    HOUR_HAND_COLOR, MINUTE_HAND_COLOR, SECOND_HAND_COLOR,
)

logger = logging.getLogger(LOGGER_NAME + '.face')

HandGeometry = namedtuple('HandGeometry', ['hour', 'minute', 'second'])
TickMark = namedtuple('TickMark', ['index', 'outer', 'inner', 'large'])


def hour_hand_angle(clock_time):
    """Hour hand angle in degrees; creeps forward with the minutes."""
    hours = clock_time.hour + clock_time.minute * MINUTES_TO_FRACTION
    return hours * HOURS_TO_DEGREES + TWELVE_HOUR_ANGLE


def minute_hand_angle(clock_time):
    return clock_time.minute * MINUTES_TO_DEGREES + TWELVE_HOUR_ANGLE


def second_hand_angle(clock_time):
    return clock_time.second * SECONDS_TO_DEGREES + TWELVE_HOUR_ANGLE


def point_on_circle(angle, radius, center=(CLOCK_X, CLOCK_Y)):
    """Pixel at `radius` from `center` in the direction `angle` (degrees, 0 = 3 o'clock)."""
    radians = math.radians(angle)
    return (center[0] + round(math.cos(radians) * radius),
            center[1] + round(math.sin(radians) * radius))


def tick_marks(center=(CLOCK_X, CLOCK_Y), radius=CLOCK_SIZE):
    """The twelve hour marks, long at every third hour."""
    marks = []
    for index in range(12):
        angle = index * HOURS_TO_DEGREES + TWELVE_HOUR_ANGLE
        large = index % LARGE_MARK_INTERVAL == 0
        length = LARGE_MARK_LENGTH if large else SMALL_MARK_LENGTH
        marks.append(TickMark(index,
                              point_on_circle(angle, radius, center),
                              point_on_circle(angle, radius - length, center),
                              large))
    return marks


class Hand:
    """A straight clock hand from the face center to its tip."""

    def __init__(self, length, color, width=CLOCK_LINE_WIDTH):
        """
        Args:
            length: Distance from center to tip in pixels
            color: Color name
            width: Line width in pixels
        """
        self.length = length
        self.color = color
        self.width = width
        self.tip = None  # last drawn tip, needed to erase it

    def tip_at(self, angle, center):
        return point_on_circle(angle, self.length, center)

    def erase(self, canvas, center, background):
        if self.tip is None:
            return
        canvas.draw_line(center[0], center[1], self.tip[0], self.tip[1], background, self.width)

    def draw(self, canvas, center, angle):
        self.tip = self.tip_at(angle, center)
        canvas.draw_line(center[0], center[1], self.tip[0], self.tip[1], self.color, self.width)
        return self.tip


class ClockFace:
    """Draws the face, the marks and the three hands for a given time."""

    def __init__(self, center=(CLOCK_X, CLOCK_Y), radius=CLOCK_SIZE, background=BACKGROUND_COLOR):
        self.center = center
        self.radius = radius
        self.background = background
        self.hour = Hand(HOUR_HAND_LENGTH, HOUR_HAND_COLOR)
        self.minute = Hand(MINUTE_HAND_LENGTH, MINUTE_HAND_COLOR)
        self.second = Hand(SECOND_HAND_LENGTH, SECOND_HAND_COLOR)

    @property
    def hands(self):
        return (self.hour, self.minute, self.second)

    @property
    def last_geometry(self):
        """Tips drawn by the last redraw, or None before the first one."""
        if self.hour.tip is None:
            return None
        return HandGeometry(self.hour.tip, self.minute.tip, self.second.tip)

    def geometry(self, clock_time):
        return HandGeometry(self.hour.tip_at(hour_hand_angle(clock_time), self.center),
                            self.minute.tip_at(minute_hand_angle(clock_time), self.center),
                            self.second.tip_at(second_hand_angle(clock_time), self.center))

    def redraw(self, canvas, clock_time):
        """Erase the old hands and draw the face for `clock_time`.

        Returns:
            HandGeometry of the newly drawn hands
        """
        cx, cy = self.center

        for hand in self.hands:
            hand.erase(canvas, self.center, self.background)

        for mark in tick_marks(self.center, self.radius):
            canvas.draw_line(mark.outer[0], mark.outer[1], mark.inner[0], mark.inner[1],
                             MARK_COLOR, CLOCK_LINE_WIDTH)
        diameter = int(self.radius) * 2
        canvas.draw_ellipse(cx - int(self.radius), cy - int(self.radius), diameter, diameter,
                            FACE_COLOR, CLOCK_LINE_WIDTH)

        self.hour.draw(canvas, self.center, hour_hand_angle(clock_time))
        self.minute.draw(canvas, self.center, minute_hand_angle(clock_time))
        self.second.draw(canvas, self.center, second_hand_angle(clock_time))
        canvas.fill_ellipse(cx - HAND_NUT_SIZE // 2, cy - HAND_NUT_SIZE // 2,
                            HAND_NUT_SIZE, HAND_NUT_SIZE, NUT_COLOR)

        geometry = self.last_geometry
        logger.debug("redraw %r -> %r", clock_time, geometry)
        return geometry
