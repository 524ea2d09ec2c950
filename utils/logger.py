# utils/logger.py - shared logger setup and header redaction
import logging


def get_logger(name: str = "easyapi"):
    """Library logger: silent until the application configures logging."""
    logger = logging.getLogger(name)
    if not any(isinstance(h, logging.NullHandler) for h in logger.handlers):
        logger.addHandler(logging.NullHandler())
    return logger


def configure_logging(name: str = "easyapi", level=logging.INFO):
    """Console output for scripts; call once from the application, not from library code."""
    logger = logging.getLogger(name)
    if not any(type(h) is logging.StreamHandler for h in logger.handlers):
        handler = logging.StreamHandler()
        formatter = logging.Formatter("%(asctime)s [%(levelname)s] %(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.setLevel(level)
    return logger


def redact_headers(headers):
    """Copy of headers safe to log (Authorization value replaced)."""
    safe = dict(headers or {})
    if "Authorization" in safe:
        safe["Authorization"] = safe["Authorization"].split(" ", 1)[0] + " [REDACTED]"
    return safe
