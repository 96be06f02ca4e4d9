"""Analog clock application: main window, menu bar and command line."""
import argparse
import logging

from qt import QtWidgets, QtGui, get_app, run_app
from clock import ClockWidget
from clock_config import LOGGER_NAME, WINDOW_TITLE, APP_COMMENTS
from clock_logging import setup_logging
from clock_model import ClockModel, parse_time
from clock_pil import render_snapshot

logger = logging.getLogger(LOGGER_NAME + '.app')


class ClockWindow(QtWidgets.QMainWindow):
    def __init__(self, clock=None):
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)

        self.clock = clock if clock is not None else ClockWidget()
        self.setCentralWidget(self.clock)

        self._create_menus()
        self.setFixedSize(self.sizeHint())
        self.clock.setFocus()

    def _create_menus(self):
        program_menu = self.menuBar().addMenu("&Program")

        self.act_information = program_menu.addAction("&Information")
        self.act_information.setShortcut(QtGui.QKeySequence("Ctrl+I"))
        self.act_information.triggered.connect(self.show_information)

        self.act_quit = program_menu.addAction("&Quit")
        self.act_quit.setShortcut(QtGui.QKeySequence("Ctrl+Q"))
        self.act_quit.triggered.connect(self.close)

    def show_information(self):
        QtWidgets.QMessageBox.information(self, self.windowTitle(), APP_COMMENTS)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Analog desktop clock.")
    parser.add_argument(
        "--time",
        type=parse_time,
        help="Start time as H:MM or H:MM:SS instead of the current time.",
    )
    parser.add_argument(
        "--snapshot",
        metavar="PATH",
        help="Write an image of the clock face to PATH and exit.",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level.",
    )
    parser.add_argument("--log-file", help="Also write the log to this file.")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    setup_logging(getattr(logging, args.log_level), args.log_file)

    model = ClockModel(args.time) if args.time is not None else ClockModel.from_now()

    if args.snapshot:
        render_snapshot(model.time, args.snapshot)
        return 0

    get_app()
    window = ClockWindow(ClockWidget(model))
    window.show()
    logger.info("Clock started at %02d:%02d:%02d", *model.time.as_tuple())
    run_app()


if __name__ == '__main__':
    main()
