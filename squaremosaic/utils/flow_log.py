import logging
import time

logger = logging.getLogger('squaremosaic')

_LEVELS = {
    'DEBUG': logging.DEBUG,
    'INFO': logging.INFO,
    'WARNING': logging.WARNING,
    'ERROR': logging.ERROR,
}


def log_flow(component: str, message: str, *, level: str = "DEBUG"):
    """Timestamped flow logging for layout/loader diagnostics."""
    log_level = _LEVELS.get(level, logging.DEBUG)
    if not logger.isEnabledFor(log_level):
        return
    now = time.time()
    ts = time.strftime("%H:%M:%S", time.localtime(now)) + f".{int((now % 1) * 1000):03d}"
    logger.log(log_level, f"[{ts}][TRACE][{component}][{level}] {message}")
