import pytest
from pydantic import ValidationError

from habitcheck.config import HabitCheckSettings
from habitcheck.utils.logger import setup_logger


def test_defaults():
    settings = HabitCheckSettings(_env_file=None)

    assert settings.WEEKLY_WINDOW_DAYS == 7
    assert settings.TIMELINE_DAYS == 30
    assert settings.get_data_file_path("habits").name == "habits.json"


def test_values_are_normalized():
    settings = HabitCheckSettings(_env_file=None, LOG_LEVEL="debug", ENVIRONMENT="Testing")

    assert settings.LOG_LEVEL == "DEBUG"
    assert settings.is_testing


@pytest.mark.parametrize("field, value", [
    ("LOG_LEVEL", "LOUD"),
    ("ENVIRONMENT", "moon"),
    ("TIMEZONE", "Mars/Olympus"),
    ("WEEKLY_WINDOW_DAYS", 0),
])
def test_invalid_values_are_rejected(field, value):
    with pytest.raises(ValidationError):
        HabitCheckSettings(_env_file=None, **{field: value})


def test_unknown_data_file():
    with pytest.raises(ValueError):
        HabitCheckSettings(_env_file=None).get_data_file_path("journal")


def test_logging_config_with_file(tmp_path):
    settings = HabitCheckSettings(_env_file=None, LOG_TO_FILE=True, LOGS_DIR=tmp_path / "logs")

    config = settings.get_logging_config()
    assert config["loggers"]["habitcheck"]["handlers"] == ["console", "file"]
    assert config["handlers"]["file"]["class"] == "logging.handlers.RotatingFileHandler"

    logger = setup_logger(settings)
    logger.info("configured")
    assert (tmp_path / "logs").is_dir()

    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
