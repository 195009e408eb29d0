# postercrop/gui.py
# Entry point for the PosterCrop GUI. No heavy work here.

from __future__ import annotations

import sys
import traceback
from PySide6.QtWidgets import QApplication, QMessageBox

from postercrop.utils.logging_utils import build_logger


def main() -> int:
    """
    Create the Qt application, show the main window, report startup errors
    in a dialog.
    """
    app = QApplication(sys.argv)

    app.setApplicationName("PosterCrop")
    app.setApplicationDisplayName("PosterCrop - Print & Web Export")
    app.setApplicationVersion("1.0")
    app.setOrganizationName("PosterCrop")

    logger = build_logger("postercrop")

    try:
        # deferred so a broken install shows a dialog instead of a traceback
        from postercrop.ui_main_window import MainWindow

        window = MainWindow()
        window.show()
        return app.exec()

    except ImportError as e:
        error_text = (
            f"Failed to import required modules:\n\n"
            f"{str(e)}\n\n"
            f"Please ensure all dependencies are installed:\n"
            f"  pip install -e ."
        )
        logger.error(error_text)
        QMessageBox.critical(None, "Import Error - PosterCrop", error_text)
        return 1

    except Exception as e:
        logger.error("Application startup failed: %s", e)
        msg_box = QMessageBox()
        msg_box.setIcon(QMessageBox.Icon.Critical)
        msg_box.setWindowTitle("Startup Error - PosterCrop")
        msg_box.setText("Application failed to start:")
        msg_box.setInformativeText(str(e))
        msg_box.setDetailedText(traceback.format_exc())
        msg_box.setStandardButtons(QMessageBox.StandardButton.Ok)
        msg_box.exec()
        return 1


if __name__ == "__main__":
    sys.exit(main())
