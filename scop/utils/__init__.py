# scop/utils/__init__.py
"""
Пакет утилит.

Экспортируем:
    * logger    – готовый объект logging.Logger (с level INFO)
    * set_level – сменить уровень логгера по имени
"""

from .logger import logger, set_level

__all__ = ["logger", "set_level"]
