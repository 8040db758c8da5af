# scop/utils/logger.py
# ---------------------------------------------------------------
# Минимальный логгер для всего пакета.
# ---------------------------------------------------------------

import logging


def init_logger():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    return logging.getLogger("Scop")


logger = init_logger()


def set_level(level: str) -> None:
    """Сменить уровень логгера по имени («DEBUG», «INFO», …)."""
    logger.setLevel(getattr(logging, str(level).upper(), logging.INFO))
