# Main.py
"""
Entry point for the integer calculator.

Responsibilities:
- Detect run mode (script vs PyInstaller .exe)
- Verify required files exist in development mode
- Configure logging, load configuration and start the Qt GUI
"""
import logging
import sys

from IntCalc import config_manager as config_manager, error as E, UI as UI

logger = logging.getLogger("IntCalc")


def check_files_exist():
    """
    Fail fast in development if required files are missing / moved / renamed.
    In production (.exe) the files are embedded by the bundler and this check is skipped.
    """
    missing_files = config_manager.missing_files()

    if missing_files:
        for file_name in missing_files:
            logger.error("Error 1000: %s%s", E.ERROR_MESSAGES["1000"], file_name)
        sys.exit(1)


def configure_logging(settings):
    level = logging.DEBUG if settings.get("debug") else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main():
    """
    Load configuration and start the GUI.
    - Keep this thin: no business logic here.
    """
    all_settings = config_manager.load_setting_value("all")
    configure_logging(all_settings)
    logger.info("Config loaded: %s", all_settings)

    # Script vs bundled .exe
    if not getattr(sys, 'frozen', False):
        logger.info("Developer Mode: Checking file paths...")
        check_files_exist()
    else:
        logger.info("Production mode (.exe) is starting...")

    # Delegate control to the UI layer; the UI owns the event loop.
    UI.main()


if __name__ == "__main__":
    main()
