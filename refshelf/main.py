"""RefShelf — entry point."""

import sys
import os
import logging

from refshelf.branding import AppBranding
from refshelf.config.settings import AppSettings
from refshelf.core.version import Version


def setup_logging(data_dir: str):
    """Configure logging to file and console."""
    log_dir = os.path.join(data_dir, 'logs')
    os.makedirs(log_dir, exist_ok=True)
    log_file = os.path.join(log_dir, 'refshelf.log')

    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        handlers=[
            logging.FileHandler(log_file, encoding='utf-8'),
            logging.StreamHandler(),
        ],
    )


def main():
    # High-DPI support
    os.environ.setdefault('QT_ENABLE_HIGHDPI_SCALING', '1')

    settings = AppSettings.load()
    settings.ensure_dirs()

    setup_logging(settings.data_dir)
    logger = logging.getLogger(__name__)
    logger.info("RefShelf %s starting", AppBranding.VERSION)

    from PyQt6.QtWidgets import QApplication
    from refshelf.ui.main_window import MainWindow
    from refshelf.ui.qt_scheduler import QtTaskScheduler

    app = QApplication(sys.argv)
    app.setApplicationName(AppBranding.APP_NAME)
    app.setOrganizationName(AppBranding.APP_NAME)

    # Shared by every update check; callbacks come back on this thread
    scheduler = QtTaskScheduler()

    window = MainWindow(settings, scheduler, Version.parse(AppBranding.VERSION))
    window.show()
    window.start_background_check()

    exit_code = app.exec()

    # A background check that has not fired yet is simply dropped
    scheduler.shutdown()
    settings.save()

    logger.info("Goodbye")
    sys.exit(exit_code)


if __name__ == '__main__':
    main()
