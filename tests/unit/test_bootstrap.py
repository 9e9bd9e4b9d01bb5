"""Unit tests for logging setup"""

import logging
from src.bootstrap import configure_logging


class DebugConfig:
    LOG_LEVEL = "DEBUG"
    LOG_FORMAT = "%(levelname)s %(message)s"


class TestConfigureLogging:

    def test_applies_configured_level(self):
        root = logging.getLogger()
        previous = root.level
        try:
            configure_logging(DebugConfig)

            assert root.level == logging.DEBUG
        finally:
            root.setLevel(previous)

    def test_defaults_to_application_config(self):
        root = logging.getLogger()
        previous = root.level
        try:
            configure_logging()

            assert root.level == logging.INFO
        finally:
            root.setLevel(previous)
