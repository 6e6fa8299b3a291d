"""
Application Initialization
==========================
This module constructs the MVC (Model-View-Controller) pieces and starts
the Qt Event Loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Resolves the start-up configuration and sets up logging.
2. Instantiates the Data Model (ConverterState) and its ConverterStore.
3. Instantiates the Main Window (View), passing the store in.
"""
import argparse
import logging
import sys
from typing import Optional, Sequence

from PySide6.QtCore import QCoreApplication
from PySide6.QtWidgets import QApplication

from binaryconverter.config import (
    APP_ID, ORG_ID, VISIBLE_APP_NAME, AppConfig, ConfigError, load_config
)
from binaryconverter.controller.store import ConverterStore
from binaryconverter.logging_config import setup_logging
from binaryconverter.model.state import CompatibilityMode, ConverterState
from binaryconverter.view.main_window import MainWindow

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="binary-converter",
        description="Convert binary digit strings to decimal.",
    )
    parser.add_argument(
        "--limit",
        dest="digits_limit",
        help="Maximum number of digits while the limit is enabled (default: 8)",
    )
    parser.add_argument(
        "--no-limit",
        dest="digits_limit_enabled",
        action="store_const",
        const=False,
        help="Start with the digit limit disabled",
    )
    parser.add_argument(
        "--legacy",
        dest="rules",
        action="store_const",
        const=CompatibilityMode.LEGACY,
        help="Use the original loose validation and the one-past-limit boundary",
    )
    parser.add_argument(
        "--log-level",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    parser.add_argument(
        "--log-file",
        help="Also write logs to this file",
    )
    return parser


def parse_config(argv: Optional[Sequence[str]] = None) -> AppConfig:
    parser = build_parser()
    # Qt consumes its own flags (e.g. -platform), leave them in place
    args, _ = parser.parse_known_args(argv)
    try:
        return load_config(vars(args))
    except ConfigError as e:
        parser.error(str(e))


def create_state(config: AppConfig) -> ConverterState:
    return ConverterState(
        digits_limit_enabled=config.digits_limit_enabled,
        digits_limit=config.digits_limit,
        rules=config.rules,
    )


def create_app(argv: Sequence[str]) -> QApplication:
    """Create and configure the QApplication instance."""
    QCoreApplication.setOrganizationName(ORG_ID)
    QCoreApplication.setApplicationName(APP_ID)

    app = QApplication(list(argv))
    app.setApplicationDisplayName(VISIBLE_APP_NAME)
    return app


def main(argv: Optional[Sequence[str]] = None) -> int:
    argv = list(sys.argv if argv is None else argv)

    # 1. Configuration + Logging
    config = parse_config(argv[1:])
    setup_logging(level=config.log_level, log_file=config.log_file)
    logger.info(f"Starting with {config}")

    # 2. Create the Qt Application
    app = create_app(argv)

    # 3. Model + Store
    store = ConverterStore(create_state(config))

    # 4. Main Window
    window = MainWindow(store)
    window.show()

    # 5. Event Loop
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
