"""
Logging System for Checkout Scraper
Format: YYYY-MM-DD HH:MM:SS - [Module] - [Source] - Description
"""

import logging
from datetime import datetime


LEVEL_COLORS = {
    'DEBUG': '\033[36m',    # Cyan
    'INFO': '\033[32m',     # Green
    'WARNING': '\033[33m',  # Yellow
    'ERROR': '\033[31m',    # Red
    'CRITICAL': '\033[35m'  # Magenta
}
RESET = '\033[0m'

_root_level = logging.INFO


class ScraperFormatter(logging.Formatter):
    """Formatter that prefixes every record with its module and source context"""

    def __init__(self, use_color: bool = True):
        super().__init__()
        self.use_color = use_color

    def format(self, record):
        module = getattr(record, 'module_name', 'SYSTEM')
        source = getattr(record, 'source', 'CORE')
        timestamp = datetime.fromtimestamp(record.created).strftime('%Y-%m-%d %H:%M:%S')

        formatted = f"{timestamp} - [{module}] - [{source}] - {record.getMessage()}"
        if record.exc_info:
            formatted = f"{formatted}\n{self.formatException(record.exc_info)}"

        if not self.use_color:
            return formatted
        color = LEVEL_COLORS.get(record.levelname, '')
        return f"{color}{formatted}{RESET}"


def set_log_level(level):
    """Change the level of every scraper logger created so far (and later ones)"""
    global _root_level
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    _root_level = level

    for name, logger in logging.Logger.manager.loggerDict.items():
        if isinstance(logger, logging.Logger) and name.startswith('checkout_scraper'):
            logger.setLevel(level)
            for handler in logger.handlers:
                handler.setLevel(level)


def setup_logger(name='checkout_scraper'):
    """Setup logger with the scraper formatter"""
    if not name.startswith('checkout_scraper'):
        name = f"checkout_scraper.{name}"
    logger = logging.getLogger(name)

    # Avoid duplicate handlers
    if logger.handlers:
        return logger

    logger.setLevel(_root_level)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(_root_level)
    console_handler.setFormatter(ScraperFormatter())

    logger.addHandler(console_handler)
    logger.propagate = False

    return logger


def log(logger, level, message, module='SYSTEM', source='CORE', exc_info=None):
    """Helper function to log with module and source context"""
    extra = {'module_name': module, 'source': source}

    if level == 'debug':
        logger.debug(message, extra=extra, exc_info=exc_info)
    elif level == 'info':
        logger.info(message, extra=extra, exc_info=exc_info)
    elif level == 'warning':
        logger.warning(message, extra=extra, exc_info=exc_info)
    elif level == 'error':
        logger.error(message, extra=extra, exc_info=exc_info)
    elif level == 'critical':
        logger.critical(message, extra=extra, exc_info=exc_info)
