"""
Clock constants
===============
Central registry for the face geometry, colors and program information.
Every other module reads its numbers from here.
"""

APP_NAME = "Analog Clock"
APP_VERSION = "1.0.0"
APP_AUTHOR = "the Analog Clock authors"
APP_COMMENTS = ("Displays an analog clock. Click near the face's edge to set the hour "
                "(left/middle button) or the minute (right button), or use the plus key.")
WINDOW_TITLE = f"{APP_NAME} v{APP_VERSION} by: {APP_AUTHOR}"
TOOLTIP = "Click near the face's edge or use the plus key to set the time."

LOGGER_NAME = "analogclock"

# Timing
TIMER_INTERVAL_MS = 1000

# Unit conversions
HOURS_TO_DEGREES = 30
MINUTES_TO_DEGREES = 6
SECONDS_TO_DEGREES = 6
MINUTES_TO_FRACTION = 1.0 / 60.0
TWELVE_HOUR_ANGLE = -90  # noon/midnight, in degrees from the 3 o'clock direction

# Face geometry (pixels)
CLOCK_SIZE = 120.0  # face radius
CLOCK_LINE_WIDTH = 2
HAND_NUT_SIZE = 3
LARGE_MARK_INTERVAL = 3
CLOCK_X = int(CLOCK_SIZE * 1.1)
CLOCK_Y = int(CLOCK_SIZE * 1.1)
WIDGET_SIZE = int(CLOCK_SIZE * 2.2)

HOUR_HAND_LENGTH = CLOCK_SIZE / 1.6
MINUTE_HAND_LENGTH = HOUR_HAND_LENGTH * 1.5
SECOND_HAND_LENGTH = HOUR_HAND_LENGTH * 1.5
LARGE_MARK_LENGTH = HOUR_HAND_LENGTH / 2.5
SMALL_MARK_LENGTH = LARGE_MARK_LENGTH / 2.0

# Clicks closer than this to the center carry no usable direction.
CENTER_DEAD_ZONE = HAND_NUT_SIZE

# Colors (names understood by both QColor and PIL)
BACKGROUND_COLOR = 'black'
MARK_COLOR = 'yellow'
FACE_COLOR = 'blue'
HOUR_HAND_COLOR = 'green'
MINUTE_HAND_COLOR = 'green'
SECOND_HAND_COLOR = 'red'
NUT_COLOR = 'white'
