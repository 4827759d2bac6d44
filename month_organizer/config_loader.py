"""
Модуль для загрузки и валидации конфигурации приложения.

По умолчанию утилита работает без файла конфигурации: все параметры
берутся из значений по умолчанию и аргументов командной строки.
Необязательный INI-файл настраивает только логирование.
"""

import configparser
from pathlib import Path
from typing import Optional
from dataclasses import dataclass, field


VALID_LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']


@dataclass
class OrganizerConfig:
    """Конфигурация раскладки файлов."""
    target_dir: Path = Path(".")


@dataclass
class LoggingConfig:
    """Конфигурация логирования."""
    level: str = 'INFO'
    log_file: Optional[Path] = None
    max_log_size: int = 10
    backup_count: int = 5


@dataclass
class Config:
    """Основная конфигурация приложения."""
    organizer: OrganizerConfig = field(default_factory=OrganizerConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


class ConfigLoader:
    """Класс для загрузки и валидации конфигурации."""

    def __init__(self, config_path: Optional[str] = None):
        """
        Инициализация загрузчика конфигурации.

        Args:
            config_path: Путь к файлу конфигурации (None - только значения по умолчанию)
        """
        self.config_path = Path(config_path) if config_path else None
        self._config: Optional[Config] = None

    def load_config(self) -> Config:
        """
        Загружает конфигурацию из файла или из значений по умолчанию.

        Returns:
            Config: Объект конфигурации

        Raises:
            FileNotFoundError: Если файл конфигурации не найден
            ValueError: Если конфигурация некорректна
        """
        if self.config_path is None:
            self._config = Config()
            self._validate_config()
            return self._config

        if not self.config_path.exists():
            raise FileNotFoundError(f"Файл конфигурации не найден: {self.config_path}")

        config_parser = configparser.ConfigParser()
        config_parser.read(self.config_path, encoding='utf-8')

        try:
            # Раскладка настраивается только аргументом командной строки
            self._config = Config(logging=self._load_logging_config(config_parser))

            self._validate_config()

            return self._config

        except Exception as e:
            raise ValueError(f"Ошибка загрузки конфигурации: {e}")

    def _load_logging_config(self, parser: configparser.ConfigParser) -> LoggingConfig:
        """Загружает конфигурацию логирования."""
        section = 'logging'

        if not parser.has_section(section):
            return LoggingConfig()

        log_file = parser.get(section, 'log_file', fallback=None)

        return LoggingConfig(
            level=parser.get(section, 'level', fallback='INFO'),
            log_file=Path(log_file) if log_file else None,
            max_log_size=parser.getint(section, 'max_log_size', fallback=10),
            backup_count=parser.getint(section, 'backup_count', fallback=5)
        )

    def _validate_config(self) -> None:
        """Валидирует загруженную конфигурацию."""
        if not self._config:
            raise ValueError("Конфигурация не загружена")

        if self._config.logging.level.upper() not in VALID_LOG_LEVELS:
            raise ValueError(f"Некорректный уровень логирования: {self._config.logging.level}")

        if self._config.logging.max_log_size <= 0:
            raise ValueError("Размер файла лога должен быть больше 0")

        if self._config.logging.backup_count < 0:
            raise ValueError("Количество архивов лога не может быть отрицательным")

    def get_config(self) -> Config:
        """
        Возвращает загруженную конфигурацию.

        Raises:
            ValueError: Если конфигурация не загружена
        """
        if self._config is None:
            raise ValueError("Конфигурация не загружена. Вызовите load_config() сначала.")
        return self._config


def load_config(config_path: Optional[str] = None, target_dir: Optional[str] = None) -> Config:
    """
    Удобная функция для быстрой загрузки конфигурации.

    Args:
        config_path: Путь к файлу конфигурации (необязательно)
        target_dir: Каталог для раскладки из командной строки (None - текущий)

    Returns:
        Config: Объект конфигурации
    """
    loader = ConfigLoader(config_path)
    config = loader.load_config()
    if target_dir is not None:
        config.organizer.target_dir = Path(target_dir)
    return config
