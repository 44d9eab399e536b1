import logging

LOG_FORMAT = '%(asctime)s %(levelname)s [%(name)s] %(message)s'


def configure_logging(level='INFO'):
    """Configure the package logger once"""
    logger = logging.getLogger('peak_sun_hours')
    if isinstance(level, str):
        level = level.upper()
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    return logger
