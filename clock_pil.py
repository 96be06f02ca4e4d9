"""Render the clock face with PIL, without a display."""
import logging

from PIL import Image, ImageDraw

from clock_config import LOGGER_NAME, WIDGET_SIZE, BACKGROUND_COLOR
from clock_face import ClockFace

logger = logging.getLogger(LOGGER_NAME + '.pil')


class PilCanvas:
    """Canvas for ClockFace that draws on a PIL image."""

    def __init__(self, image):
        self.image = image
        self.draw = ImageDraw.Draw(image)

    def draw_line(self, x0, y0, x1, y1, color, width):
        self.draw.line([(x0, y0), (x1, y1)], fill=color, width=width)

    def draw_ellipse(self, x, y, w, h, color, width):
        self.draw.ellipse([x, y, x + w, y + h], outline=color, width=width)

    def fill_ellipse(self, x, y, w, h, color):
        self.draw.ellipse([x, y, x + w, y + h], fill=color, outline=color)


def new_image(size=WIDGET_SIZE):
    return Image.new('RGB', (size, size), BACKGROUND_COLOR)


def render_image(clock_time, image=None, face=None):
    """Draw `clock_time` onto `image`.

    Passing the same image and face again redraws in place, erasing the
    previous hands the way the widget does.

    Args:
        clock_time: ClockTime to show
        image: Target RGB image (default: a fresh background-filled image)
        face: ClockFace remembering the previously drawn hands

    Returns:
        The image drawn on
    """
    if image is None:
        image = new_image()
    if face is None:
        face = ClockFace()
    face.redraw(PilCanvas(image), clock_time)
    return image


def render_snapshot(clock_time, path):
    image = render_image(clock_time)
    image.save(path)
    logger.info("Saved snapshot of %02d:%02d:%02d to %s", *clock_time.as_tuple(), path)
    return image
