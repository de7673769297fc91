"""
Logging Configuration for Flask App
====================================

Configure logging to console and (optionally) a rotating file.
"""
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path


def setup_logging(app):
    """
    Setup logging for the Flask application.

    Logs are written to:
    - Console (stderr), warnings and above
    - File (<LOG_DIR>/app.log) when LOG_TO_FILE is enabled

    File rotation:
    - Max size: 10MB per file
    - Backup count: 5 files
    """
    log_level = logging.DEBUG if app.debug else logging.INFO
    log_level_console = logging.WARNING

    detailed_formatter = logging.Formatter(
        '[%(asctime)s] %(levelname)s in %(module)s:%(lineno)d - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    simple_formatter = logging.Formatter(
        '%(levelname)s - %(message)s'
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Remove existing handlers to avoid duplicates when the factory runs twice
    root_logger.handlers.clear()

    if app.config.get("LOG_TO_FILE", True):
        log_dir = Path(app.config.get("LOG_DIR", "logs"))
        log_dir.mkdir(parents=True, exist_ok=True)

        # delay=True defers opening the file until the first record
        file_handler = RotatingFileHandler(
            log_dir / "app.log",
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=5,
            encoding='utf-8',
            delay=True
        )
        file_handler.setLevel(log_level)
        file_handler.setFormatter(detailed_formatter)
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level_console)
    console_handler.setFormatter(simple_formatter)
    root_logger.addHandler(console_handler)

    # elasticsearch/urllib3 are chatty at INFO
    logging.getLogger("elastic_transport").setLevel(logging.WARNING)
    logging.getLogger("urllib3").setLevel(logging.WARNING)

    app.logger.setLevel(log_level)
    app.logger.propagate = True

    app.logger.info("=" * 60)
    app.logger.info(f"Blog API started - file logging: {bool(app.config.get('LOG_TO_FILE', True))}")
    app.logger.info(f"Log level: {logging.getLevelName(log_level)}")
    app.logger.info("=" * 60)

    return app
