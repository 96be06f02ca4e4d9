import logging

from qt import QtWidgets, QtCore, QtGui, qt_enum, event_position
from clock_config import (
    LOGGER_NAME, WIDGET_SIZE, TIMER_INTERVAL_MS, BACKGROUND_COLOR, TOOLTIP,
)
from clock_face import ClockFace
from clock_model import ClockModel, KEY_PLUS, BUTTON_LEFT, BUTTON_MIDDLE, BUTTON_RIGHT

logger = logging.getLogger(LOGGER_NAME + '.widget')


class QtCanvas:
    """Canvas for ClockFace that draws with a QPainter."""

    def __init__(self, painter):
        self.painter = painter

    def draw_line(self, x0, y0, x1, y1, color, width):
        self.painter.setPen(QtGui.QPen(QtGui.QColor(color), width))
        self.painter.drawLine(x0, y0, x1, y1)

    def draw_ellipse(self, x, y, w, h, color, width):
        self.painter.setPen(QtGui.QPen(QtGui.QColor(color), width))
        self.painter.setBrush(QtGui.QBrush())
        self.painter.drawEllipse(x, y, w, h)

    def fill_ellipse(self, x, y, w, h, color):
        self.painter.setPen(QtGui.QPen(QtGui.QColor(color), 1))
        self.painter.setBrush(QtGui.QBrush(QtGui.QColor(color)))
        self.painter.drawEllipse(x, y, w, h)


class ClockWidget(QtWidgets.QWidget):
    """Analog clock driven by a one second timer, settable by mouse and keyboard.

    Hands are drawn into an off-screen pixmap; paintEvent only copies that
    pixmap to the screen, so erasing the old hands never flickers.
    """

    def __init__(self, model=None, face=None, parent=None):
        """
        Args:
            model: ClockModel holding the displayed time (default: current time)
            face: ClockFace used for drawing
            parent: Parent widget
        """
        super().__init__(parent)
        self.model = model if model is not None else ClockModel.from_now()
        self.face = face if face is not None else ClockFace()

        self.setFixedSize(WIDGET_SIZE, WIDGET_SIZE)
        self.setToolTip(TOOLTIP)
        self.setFocusPolicy(qt_enum('FocusPolicy', 'StrongFocus'))

        self.buffer = QtGui.QPixmap(WIDGET_SIZE, WIDGET_SIZE)
        self.buffer.fill(QtGui.QColor(BACKGROUND_COLOR))

        self._buttons = {
            qt_enum('MouseButton', 'LeftButton'): BUTTON_LEFT,
            qt_enum('MouseButton', 'MiddleButton'): BUTTON_MIDDLE,
            qt_enum('MouseButton', 'RightButton'): BUTTON_RIGHT,
        }
        self._key_plus = qt_enum('Key', 'Key_Plus')
        self._shift = qt_enum('KeyboardModifier', 'ShiftModifier')
        self._keypad = qt_enum('KeyboardModifier', 'KeypadModifier')

        self.timer = QtCore.QTimer(self)
        self.timer.timeout.connect(self.on_tick)
        self.timer.start(TIMER_INTERVAL_MS)

        self.redraw()

    def redraw(self):
        """Draw the current time into the buffer and schedule a repaint."""
        painter = QtGui.QPainter(self.buffer)
        try:
            geometry = self.face.redraw(QtCanvas(painter), self.model.time)
        finally:
            painter.end()
        self.update()
        return geometry

    def on_tick(self):
        self.model.tick()
        self.redraw()

    def on_key_down(self, key, shift_held):
        if self.model.key_down(key, shift_held):
            self.redraw()

    def on_mouse_up(self, button, x, y):
        if self.model.mouse_up(button, x, y):
            self.redraw()

    def paintEvent(self, event):
        painter = QtGui.QPainter(self)
        painter.drawPixmap(0, 0, self.buffer)
        painter.end()

    def keyPressEvent(self, event):
        if event.key() == self._key_plus:
            modifiers = event.modifiers()
            # Shift only counts on the keypad plus; the main-keyboard plus needs Shift to type
            shift_held = bool(modifiers & self._keypad) and bool(modifiers & self._shift)
            self.on_key_down(KEY_PLUS, shift_held)
        else:
            super().keyPressEvent(event)

    def mouseReleaseEvent(self, event):
        button = self._buttons.get(event.button())
        if button is not None:
            x, y = event_position(event)
            self.on_mouse_up(button, x, y)
        super().mouseReleaseEvent(event)
