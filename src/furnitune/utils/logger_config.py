"""
Logging setup for Furnitune
Format: YYYY-MM-DD HH:MM:SS - [Module] - [Source] - Description
"""

import logging
from datetime import datetime


class FurnituneFormatter(logging.Formatter):
    """Custom formatter with module and source context"""

    def format(self, record):
        # Extract module and source from extra fields, falling back to the logger name
        module = getattr(record, 'module_name', record.name.split('.')[-1].upper())
        source = getattr(record, 'source', record.levelname)

        timestamp = datetime.now().strftime('%Y-%m-%d %H:%M:%S')

        colors = {
            'DEBUG': '\033[36m',    # Cyan
            'INFO': '\033[32m',     # Green
            'WARNING': '\033[33m',  # Yellow
            'ERROR': '\033[31m',    # Red
            'CRITICAL': '\033[35m'  # Magenta
        }
        reset = '\033[0m'

        color = colors.get(record.levelname, '')

        formatted = f"{timestamp} - [{module}] - [{source}] - {record.getMessage()}"
        if record.exc_info:
            formatted = f"{formatted}\n{self.formatException(record.exc_info)}"

        return f"{color}{formatted}{reset}"


def setup_logger(name='furnitune', level=None):
    """Setup package logger with custom formatting"""
    logger = logging.getLogger(name)

    # Avoid duplicate handlers
    if logger.handlers:
        return logger

    if level is None:
        from ..core.config import FurnituneConfig
        level = FurnituneConfig.get_log_level()

    logger.setLevel(level)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(FurnituneFormatter())

    logger.addHandler(console_handler)
    logger.propagate = False

    return logger


def log(logger, level, message, module='SYSTEM', source='CORE'):
    """Helper function to log with module and source context"""
    extra = {'module_name': module, 'source': source}

    if level == 'debug':
        logger.debug(message, extra=extra)
    elif level == 'info':
        logger.info(message, extra=extra)
    elif level == 'warning':
        logger.warning(message, extra=extra)
    elif level == 'error':
        logger.error(message, extra=extra)
    elif level == 'critical':
        logger.critical(message, extra=extra)
