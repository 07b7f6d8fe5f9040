# main.py
"""
EarthScene - application entry point
"""

import argparse
import logging
import sys

from PyQt6.QtWidgets import QApplication, QMessageBox

from .config import Config
from .logging_config import setup_logging
from .ui import EarthSceneWindow

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description=f"{Config.APP_NAME} viewer")
    parser.add_argument("--textures", default=None,
                        help="Directory holding the texture images")
    parser.add_argument("--log-level", default=Config.DEBUG_LOG_LEVEL,
                        help="Logging level (DEBUG, INFO, WARNING, ...)")
    parser.add_argument("--log-file", default=None,
                        help="Also write log records to this file")
    return parser.parse_args(argv)


def main(argv=None):
    """Main entry point"""
    args = parse_args(argv)
    setup_logging(args.log_level, args.log_file)

    app = QApplication(sys.argv[:1])

    # Set application properties from Config
    app.setApplicationName(Config.APP_NAME)
    app.setApplicationVersion(Config.APP_VERSION)
    app.setOrganizationName(Config.ORGANIZATION)

    # Create and show main window
    try:
        window = EarthSceneWindow(args.textures)
    except Exception as e:
        logger.exception("Could not create the scene")
        QMessageBox.critical(None, "Error", f"Could not create the scene:\n{e}")
        return 1

    app.aboutToQuit.connect(window.dispose)
    window.show()

    return app.exec()


if __name__ == '__main__':
    sys.exit(main())
