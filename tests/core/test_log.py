#!/usr/bin/env python3
import logging

import pytest

from pubmeta.core.log import configure_logging


@pytest.fixture(autouse=True)
def _restore_logger():
    logger = logging.getLogger("pubmeta")
    level, handlers = logger.level, list(logger.handlers)
    yield
    logger.setLevel(level)
    logger.handlers[:] = handlers


def test_configure_logging_applies_level():
    assert configure_logging({"logging": {"level": "debug"}}) == logging.DEBUG
    assert logging.getLogger("pubmeta").level == logging.DEBUG


def test_configure_logging_unknown_level_falls_back_to_warning():
    assert configure_logging({"logging": {"level": "LOUD"}}) == logging.WARNING


def test_configure_logging_adds_single_handler():
    logging.getLogger("pubmeta").handlers[:] = []
    configure_logging({})
    configure_logging({})
    assert len(logging.getLogger("pubmeta").handlers) == 1
