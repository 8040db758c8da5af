"""
Простой загрузчик/сохранитель конфигурации просмотрщика в формате JSON.
Если файл не найден – создаётся файл с настройками по‑умолчанию.
"""

import json
from pathlib import Path
from scop.utils.logger import logger

DEFAULT_CONFIG = {
    "log_level": "INFO",
    "center_model": True,
    "diffuse_texture": "res/textures/mlp.tga",
}

class Config:
    """Singleton‑подобный объект конфигурации."""
    _instance = None

    def __new__(cls, path: str = "scop.json"):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance.path = Path(path)
            cls._instance._load()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Забыть текущий экземпляр (следующий Config() перечитает файл)."""
        cls._instance = None

    def _load(self):
        if self.path.is_file():
            try:
                with self.path.open("r", encoding="utf-8") as f:
                    self.data = json.load(f)
                logger.info("[Config] Loaded configuration.")
            except (OSError, ValueError) as exc:
                logger.error(f"[Config] Failed to read config: {exc}")
                self.data = DEFAULT_CONFIG.copy()
                self.save()
        else:
            logger.info("[Config] No config file – creating default.")
            self.data = DEFAULT_CONFIG.copy()
            self.save()

    def save(self):
        try:
            with self.path.open("w", encoding="utf-8") as f:
                json.dump(self.data, f, indent=4)
            logger.info("[Config] Configuration saved.")
        except OSError as exc:
            logger.error(f"[Config] Unable to save config: {exc}")

    def __getitem__(self, key):
        return self.data.get(key, DEFAULT_CONFIG.get(key))
