import logging

from utils.logger import configure_logging, get_logger, redact_headers


def test_get_logger_only_adds_null_handler():
    first = get_logger("easyapi.test.lib")
    second = get_logger("easyapi.test.lib")
    assert first is second
    assert len(first.handlers) == 1
    assert isinstance(first.handlers[0], logging.NullHandler)


def test_configure_logging_adds_one_stream_handler():
    logger = configure_logging("easyapi.test.app", level=logging.DEBUG)
    configure_logging("easyapi.test.app", level=logging.DEBUG)
    streams = [h for h in logger.handlers if type(h) is logging.StreamHandler]
    assert len(streams) == 1
    assert logger.level == logging.DEBUG


def test_redact_headers_hides_token():
    headers = {"Authorization": "Bearer abc123", "Content-Type": "multipart/form-data"}
    safe = redact_headers(headers)
    assert safe == {"Authorization": "Bearer [REDACTED]", "Content-Type": "multipart/form-data"}
    assert headers["Authorization"] == "Bearer abc123"
    assert redact_headers(None) == {}
