import logging
from logging.handlers import RotatingFileHandler
from typing import Optional

from .config import settings

_HANDLER_MARK = "_appliance_energy_handler"


def configure_logging(level: Optional[str] = None) -> None:
    logger = logging.getLogger()
    logger.setLevel((level or settings.log_level).upper())

    # Safe to call again (app lifespan, CLI, tests)
    for h in list(logger.handlers):
        if getattr(h, _HANDLER_MARK, False):
            logger.removeHandler(h)
            h.close()

    fmt = logging.Formatter(
        "%(asctime)s %(levelname)s %(name)s - %(message)s"
    )

    # Console
    ch = logging.StreamHandler()
    ch.setFormatter(fmt)
    setattr(ch, _HANDLER_MARK, True)
    logger.addHandler(ch)

    # Rotating file, only when configured
    if settings.log_file:
        fh = RotatingFileHandler(
            settings.log_file,
            maxBytes=settings.log_max_bytes,
            backupCount=settings.log_backup_count,
        )
        fh.setFormatter(fmt)
        setattr(fh, _HANDLER_MARK, True)
        logger.addHandler(fh)

    # Silence noisy httpx request logging
    logging.getLogger("httpx").setLevel(logging.WARNING)
