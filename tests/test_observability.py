import io
import json
import logging

import pytest

from nearme.config import ObservabilityConfig
from nearme.observability import JsonFormatter, configure_logging


@pytest.fixture
def nearme_logger():
    logger = logging.getLogger("nearme")
    saved_handlers, saved_level = list(logger.handlers), logger.level
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    for handler in saved_handlers:
        logger.addHandler(handler)
    logger.setLevel(saved_level)


def test_configure_logging_sets_level_and_format(nearme_logger):
    handler = configure_logging(ObservabilityConfig(level="debug", format="%(levelname)s|%(message)s"))

    assert nearme_logger.level == logging.DEBUG
    assert nearme_logger.handlers == [handler]
    assert isinstance(handler.formatter, logging.Formatter)
    assert not isinstance(handler.formatter, JsonFormatter)


def test_configure_logging_replaces_previous_handler(nearme_logger):
    first = configure_logging(ObservabilityConfig())
    second = configure_logging(ObservabilityConfig())

    assert nearme_logger.handlers == [second]
    assert first is not second


def test_structured_logging_keeps_extra_fields(nearme_logger):
    handler = configure_logging(ObservabilityConfig(structured=True))
    stream = io.StringIO()
    handler.setStream(stream)

    logging.getLogger("nearme.services.dialer").info(
        "Device can't make phone calls", extra={"url": "tel://5551234"}
    )

    payload = json.loads(stream.getvalue().strip())
    assert payload["message"] == "Device can't make phone calls"
    assert payload["logger"] == "nearme.services.dialer"
    assert payload["level"] == "INFO"
    assert payload["url"] == "tel://5551234"
