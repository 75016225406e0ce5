"""Tests for logging and settings."""

import logging

import pytest
from rich.logging import RichHandler

from disc_profile.config import Settings
from disc_profile.utils.logging import PACKAGE_LOGGER, get_logger, setup_logging


@pytest.fixture(autouse=True)
def restore_package_level():
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    level = package_logger.level
    yield
    package_logger.setLevel(level)


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_package_level_follows_argument(self):
        package_logger = setup_logging("DEBUG")
        assert package_logger.name == PACKAGE_LOGGER
        assert package_logger.level == logging.DEBUG

        setup_logging("error")
        assert package_logger.level == logging.ERROR

    def test_defaults_to_configured_level(self):
        """LOG_LEVEL is WARNING in the test environment."""
        assert setup_logging().level == logging.WARNING

    def test_unknown_level_falls_back_to_info(self):
        assert setup_logging("chatty").level == logging.INFO

    def test_handler_attached_once(self):
        setup_logging("INFO")
        package_logger = setup_logging("INFO")
        handlers = [h for h in package_logger.handlers if isinstance(h, RichHandler)]
        assert len(handlers) == 1

    def test_library_loggers_quieted(self):
        setup_logging("DEBUG")
        assert logging.getLogger("httpx").level == logging.WARNING
        assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING

    def test_module_loggers_are_package_children(self):
        assert get_logger() is logging.getLogger(PACKAGE_LOGGER)
        assert get_logger("disc_profile.storage.recorder").parent.name in (
            PACKAGE_LOGGER,
            "disc_profile.storage",
        )


class TestSettings:
    """Tests for Settings."""

    def test_no_filesystem_side_effects(self, tmp_path):
        settings = Settings(base_dir=tmp_path, remote_url="https://x.supabase.co")
        assert settings.remote_url == "https://x.supabase.co"
        assert settings.question_limit == 25
        assert list(tmp_path.iterdir()) == []

    def test_question_limit_must_be_positive(self):
        with pytest.raises(ValueError):
            Settings(question_limit=0)
