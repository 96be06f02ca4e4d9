# ============================================================
# IMPORTS
# ============================================================

import os

# Qt must not look for a display when the widget tests run
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from clock_model import ClockTime, ClockModel


# ============================================================
# TEST CANVAS (TEST HELPER)
# ============================================================

class RecordingCanvas:
    """
    Canvas that records every draw call instead of drawing.
    Each call is stored as (method_name, args).
    """
    def __init__(self):
        self.calls = []

    def draw_line(self, x0, y0, x1, y1, color, width):
        self.calls.append(("draw_line", (x0, y0, x1, y1, color, width)))

    def draw_ellipse(self, x, y, w, h, color, width):
        self.calls.append(("draw_ellipse", (x, y, w, h, color, width)))

    def fill_ellipse(self, x, y, w, h, color):
        self.calls.append(("fill_ellipse", (x, y, w, h, color)))

    def lines(self, color=None):
        return [args for name, args in self.calls
                if name == "draw_line" and (color is None or args[4] == color)]


# ============================================================
# PYTEST FIXTURES
# ============================================================

@pytest.fixture
def canvas():
    return RecordingCanvas()


@pytest.fixture
def model():
    """
    ClockModel starting at a fixed time, 03:00:00.
    """
    return ClockModel(ClockTime(3, 0, 0))


@pytest.fixture(scope="session")
def qapp():
    """
    One QApplication for all widget tests.
    """
    from qt import get_app
    return get_app([])


@pytest.fixture(scope="session")
def qtest(qapp):
    """
    QTest from whichever Qt binding qt.py picked, for simulated input.
    """
    import importlib
    from qt import QT_LIB
    return importlib.import_module(QT_LIB + ".QtTest").QTest
