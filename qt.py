"""Picks whichever Qt binding is installed and smooths over Qt5/Qt6 differences."""
import importlib
import sys


for QT_LIB in ('PyQt5', 'PySide2', 'PyQt6', 'PySide6', None):
    if QT_LIB is None:
        raise ImportError("No suitable Qt library found.")
    try:
        QtWidgets = importlib.import_module(QT_LIB + '.QtWidgets')
        QtCore = importlib.import_module(QT_LIB + '.QtCore')
        QtGui = importlib.import_module(QT_LIB + '.QtGui')
        break
    except ImportError:
        pass


def qt_enum(scope, name):
    """Look up a Qt.* enum member, e.g. qt_enum('MouseButton', 'LeftButton').

    Qt6 only has the scoped form; older Qt5 bindings only the flat one.
    """
    try:
        return getattr(getattr(QtCore.Qt, scope), name)
    except AttributeError:
        return getattr(QtCore.Qt, name)


def event_position(event):
    """Integer (x, y) of a mouse event in widget coordinates."""
    try:
        pos = event.position()
    except AttributeError:
        pos = event.pos()
    return int(pos.x()), int(pos.y())


def get_app(argv=None):
    app = QtWidgets.QApplication.instance()
    if app is None:
        app = QtWidgets.QApplication(sys.argv if argv is None else argv)
    return app


def run_app():
    app = QtWidgets.QApplication.instance()
    if sys.flags.interactive != 1:
        if hasattr(app, 'exec_'):
            sys.exit(app.exec_())
        else:
            sys.exit(app.exec())
