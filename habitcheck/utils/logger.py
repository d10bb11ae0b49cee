import logging
import logging.config
from pathlib import Path
from typing import Optional

from ..config import HabitCheckSettings, settings as default_settings


def setup_logger(settings: Optional[HabitCheckSettings] = None) -> logging.Logger:
    settings = settings or default_settings
    if settings.LOG_TO_FILE:
        Path(settings.LOGS_DIR).mkdir(exist_ok=True, parents=True)
    logging.config.dictConfig(settings.get_logging_config())
    return logging.getLogger("habitcheck")
