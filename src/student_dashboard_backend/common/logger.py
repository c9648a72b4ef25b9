'''
universal logger
'''
import logging
import sys

from .config import settings

def setup_logger(level: str = settings.LOG_LEVEL):
    """
    Configures and returns the application logger.
    The level comes from LOG_LEVEL; unknown names fall back to INFO.
    """
    logger = logging.getLogger('SD-backend')
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    handler = logging.StreamHandler(sys.stdout)

    formatter = logging.Formatter(
        '%(asctime)s - %(module)s - %(levelname)s\n - %(message)s'
    )
    handler.setFormatter(formatter)

    if not logger.handlers:
        logger.addHandler(handler)

    return logger

# Create a single logger instance to be imported by other modules
log = setup_logger()
