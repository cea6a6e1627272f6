"""Main GUI application entry point."""

import sys

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QApplication

from sd_efficiency.config import create_default_config
from sd_efficiency.gui.main_window import MainWindow
from sd_efficiency.gui.presenters import GUIPresenter
from sd_efficiency.gui.resources.styles.theme import Theme
from sd_efficiency.orchestration import create_dashboard_session
from sd_efficiency.utils import configure_logging


def main(data_file: str | None = None) -> int:
    """Launch the SD Efficiency Pro dashboard.

    Args:
        data_file: Optional path of the JSON entry log

    Returns:
        Qt event loop exit code
    """
    overrides = {"data_file": data_file} if data_file else {}
    config = create_default_config(**overrides)
    configure_logging(config.log_level)

    # Enable high DPI scaling
    QApplication.setHighDpiScaleFactorRoundingPolicy(
        Qt.HighDpiScaleFactorRoundingPolicy.PassThrough
    )

    app = QApplication.instance() or QApplication(sys.argv)
    app.setApplicationName("SD Efficiency Pro")
    app.setOrganizationName("SdEfficiency")

    # Initialize theme system and apply stylesheet
    theme = Theme.get_instance()
    app.setStyleSheet(theme.get_stylesheet())

    presenter = GUIPresenter()
    session = create_dashboard_session(config, presenter=presenter)

    window = MainWindow(session, presenter)
    window.show()

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
