#!/usr/bin/env python3
"""
Tests for the rich logging setup
"""

import logging

from rich.logging import RichHandler

from scripts.lib.logging_utils import setup_logging


def test_single_rich_handler(root_logger):
    setup_logging("info")
    setup_logging("debug")

    rich_handlers = [h for h in root_logger.handlers if isinstance(h, RichHandler)]
    assert len(rich_handlers) == 1
    assert root_logger.level == logging.DEBUG


def test_returns_package_logger(root_logger):
    assert setup_logging().name == "scripts"
