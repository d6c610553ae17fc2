#!/usr/bin/env python3
"""
Roster Manager
Desktop Application Entry Point

Opens the roster window over an empty player registry.
"""
import sys
from pathlib import Path

# Run from a source checkout without installing
sys.path.insert(0, str(Path(__file__).parent / "src"))

from PySide6.QtWidgets import QApplication
from PySide6.QtCore import Qt

from config.roster_settings import RosterSettings
from logging_config import setup_logging, setup_registry_logging, get_logger
from player_registry.player_registry import PlayerRegistry
from ui.main_window import MainWindow


def main():
    """Initialize and run the application."""
    setup_logging(level=RosterSettings.LOG_LEVEL, log_dir=RosterSettings.LOG_DIR)
    setup_registry_logging()
    logger = get_logger(__name__)

    QApplication.setHighDpiScaleFactorRoundingPolicy(
        Qt.HighDpiScaleFactorRoundingPolicy.PassThrough
    )

    app = QApplication(sys.argv)
    app.setApplicationName("Roster Manager")

    window = MainWindow(PlayerRegistry())
    window.show()

    logger.info(f"Roster Manager started ({RosterSettings.summary()})")

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
