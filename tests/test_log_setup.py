import io
import logging

from core.log_setup import configure_logging, get_logger


def test_configure_logging_replaces_its_own_handler():
    first = configure_logging()
    second = configure_logging()

    handlers = [h for h in logging.getLogger().handlers if h.get_name() == "audiotool-console"]
    assert handlers == [second]
    assert first is not second


def test_configure_logging_format():
    stream = io.StringIO()
    configure_logging(stream=stream)

    get_logger("core.test").warning("filename empty after removing prefix, skipping: %s", "x")

    assert stream.getvalue() == "WARNING: filename empty after removing prefix, skipping: x\n"


def test_get_logger_default_name():
    assert get_logger().name == "core.log_setup"
