import logging
import sys


def setup_logger(name="bikecalc", level=logging.INFO, stream=None):
    """Setup logger with consistent formatting, writing to stream (stdout by default)"""
    if stream is None:
        stream = sys.stdout
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Prevent duplicate handlers, drop ones bound to another stream
    for handler in list(logger.handlers):
        if getattr(handler, 'stream', None) is stream:
            handler.setLevel(level)
            return logger
        logger.removeHandler(handler)

    handler = logging.StreamHandler(stream)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    ))
    logger.addHandler(handler)

    return logger


def fmt_duration(seconds):
    """Format seconds as H:MM:SS, or M:SS under an hour"""
    s = int(round(seconds))
    h, s = divmod(s, 3600)
    m, s = divmod(s, 60)
    if h > 0:
        return "{}:{:02d}:{:02d}".format(h, m, s)
    return "{}:{:02d}".format(m, s)
