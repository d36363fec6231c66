"""
Centralized Logging Configuration for LingoStack

One set of handlers serves both the ``lingostack`` logger tree (services,
session engine) and the Flask ``app.logger`` (routes, error handlers):
- Human-readable lines for development, one JSON object per line for production
- Rotating log file next to the console output
"""

import os
import json
import logging
import logging.handlers
from typing import List, Optional

LOGGER_NAME = 'lingostack'
LOG_FILE_NAME = 'lingostack.log'

TEXT_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


class JsonFormatter(logging.Formatter):
    """Formats each record as a single JSON object."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            'time': self.formatTime(record, DATE_FORMAT),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
        }
        if record.exc_info:
            payload['exception'] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def _build_handlers(level: int, log_dir: Optional[str], json_format: bool, to_file: bool) -> List[logging.Handler]:
    if json_format:
        formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(TEXT_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    handlers = [console_handler]

    if to_file:
        os.makedirs(log_dir, exist_ok=True)
        handlers.append(logging.handlers.RotatingFileHandler(
            os.path.join(log_dir, LOG_FILE_NAME),
            maxBytes=10 * 1024 * 1024,  # 10 MB
            backupCount=5,
            encoding='utf-8'
        ))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
    return handlers


def setup_logging(
    app=None,
    log_level: str = 'INFO',
    log_dir: Optional[str] = None,
    json_format: bool = False,
    to_file: bool = True,
) -> logging.Logger:
    """
    Configure application logging.

    Args:
        app: Flask application whose ``app.logger`` shares the handlers (optional)
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_dir: Directory for log files (default: logs/)
        json_format: Use JSON format for structured logging
        to_file: Also write to a rotating log file

    Returns:
        The configured ``lingostack`` logger
    """
    level = getattr(logging, str(log_level).upper(), logging.INFO)
    if to_file and log_dir is None:
        base_dir = os.path.dirname(os.path.dirname(os.path.dirname(__file__)))
        log_dir = os.path.join(base_dir, 'logs')

    logger = logging.getLogger(LOGGER_NAME)
    # Handlers from an earlier app (tests create many) are closed before replacing them
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    targets = [logger]
    if app is not None:
        for handler in list(app.logger.handlers):
            app.logger.removeHandler(handler)
        targets.append(app.logger)

    handlers = _build_handlers(level, log_dir, json_format, to_file)
    for target in targets:
        target.setLevel(level)
        for handler in handlers:
            target.addHandler(handler)
        target.propagate = False

    if app is not None:
        logging.getLogger('werkzeug').setLevel(logging.WARNING)

    logger.info(f"Logging initialized: level={log_level}, dir={log_dir if to_file else '<console>'}")

    return logger


def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """Get a logger inside the ``lingostack`` tree, e.g. ``get_logger('lingostack.vocabulary')``."""
    return logging.getLogger(name)
