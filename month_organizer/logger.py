"""
Модуль для настройки и управления логированием приложения.

Обеспечивает централизованную настройку логирования с цветным выводом
в консоль и необязательным файлом лога с ротацией.
"""

import logging
import logging.handlers
import sys
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional

try:
    from .config_loader import LoggingConfig
except ImportError:
    from config_loader import LoggingConfig


LOGGER_NAME = 'month_organizer'
MAX_REPORTED_ERRORS = 10


class ColoredFormatter(logging.Formatter):
    """Форматтер с цветным выводом для консоли."""

    # Цветовые коды ANSI
    COLORS = {
        'DEBUG': '\033[36m',      # Cyan
        'INFO': '\033[32m',       # Green
        'WARNING': '\033[33m',    # Yellow
        'ERROR': '\033[31m',      # Red
        'CRITICAL': '\033[35m',   # Magenta
        'RESET': '\033[0m'        # Reset
    }

    def format(self, record):
        """Форматирует запись лога с цветом."""
        # Запись общая для всех обработчиков, поэтому цвет не сохраняем в ней
        levelname = record.levelname
        if levelname in self.COLORS:
            record.levelname = f"{self.COLORS[levelname]}{levelname}{self.COLORS['RESET']}"
        try:
            return super().format(record)
        finally:
            record.levelname = levelname


class OrganizerLogger:
    """Класс для управления логированием приложения Month Organizer."""

    def __init__(self, config: LoggingConfig):
        """
        Инициализация логгера.

        Args:
            config: Конфигурация логирования
        """
        self.config = config
        self.logger: Optional[logging.Logger] = None
        self._setup_logger()

    def _setup_logger(self) -> None:
        """Настраивает логгер с консольным и (при наличии) файловым выводом."""
        level = getattr(logging, self.config.level.upper())

        self.logger = logging.getLogger(LOGGER_NAME)
        self.logger.setLevel(level)

        # Очищаем существующие обработчики
        for handler in self.logger.handlers[:]:
            handler.close()
            self.logger.removeHandler(handler)

        formatter = logging.Formatter(
            fmt='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        colored_formatter = ColoredFormatter(
            fmt='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

        # stdout занят итогами работы, поэтому лог идет в stderr
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(colored_formatter)
        console_handler.setLevel(level)
        self.logger.addHandler(console_handler)

        if self.config.log_file:
            log_file_path = Path(self.config.log_file)
            log_file_path.parent.mkdir(parents=True, exist_ok=True)

            file_handler = logging.handlers.RotatingFileHandler(
                filename=log_file_path,
                maxBytes=self.config.max_log_size * 1024 * 1024,  # MB в байты
                backupCount=self.config.backup_count,
                encoding='utf-8'
            )
            file_handler.setFormatter(formatter)
            file_handler.setLevel(level)
            self.logger.addHandler(file_handler)

        # Предотвращаем дублирование сообщений
        self.logger.propagate = False

    def log_run_start(self, target_dir: Path, total_entries: int) -> None:
        """
        Логирует начало раскладки.

        Args:
            target_dir: Каталог, который раскладывается
            total_entries: Количество записей в каталоге
        """
        self.logger.info(f"🚀 Начало раскладки файлов по месяцам")
        self.logger.info(f"📁 Каталог: {target_dir}")
        self.logger.info(f"📊 Всего записей: {total_entries}")
        self.logger.info(f"⏰ Время начала: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")

    def log_run_end(self, moved_files: int, failed_files: int, skipped_directories: int,
                    filename_dates: int, metadata_dates: int, elapsed_ms: int,
                    errors: Optional[List[Dict[str, str]]] = None) -> None:
        """
        Логирует завершение раскладки.

        Args:
            moved_files: Перемещено файлов
            failed_files: Ошибок при перемещении
            skipped_directories: Пропущено каталогов
            filename_dates: Дат, взятых из имени файла
            metadata_dates: Дат, взятых из метаданных
            elapsed_ms: Продолжительность в миллисекундах
            errors: Ошибки отдельных файлов (file_name, error)
        """
        self.logger.info(f"✅ Раскладка завершена")
        self.logger.info(f"📊 Статистика:")
        self.logger.info(f"   • Перемещено: {moved_files}")
        self.logger.info(f"   • Ошибок: {failed_files}")
        self.logger.info(f"   • Пропущено каталогов: {skipped_directories}")
        self.logger.info(f"   • Дата из имени: {filename_dates}, из метаданных: {metadata_dates}")
        self.logger.info(f"⏰ Продолжительность: {elapsed_ms} мс")

        if errors:
            self.logger.warning(f"⚠️ Не разложено файлов: {len(errors)}")
            for error in errors[:MAX_REPORTED_ERRORS]:
                self.logger.warning(f"   • {error['file_name']}: {error['error']}")
            if len(errors) > MAX_REPORTED_ERRORS:
                self.logger.warning(f"   ... и еще {len(errors) - MAX_REPORTED_ERRORS} ошибок")

    def log_file_moved(self, name: str, source_path: Path, target_path: Path) -> None:
        """Логирует успешное перемещение файла."""
        self.logger.info(f"📁 Файл {name} перемещен: {source_path} → {target_path}")

    def log_file_error(self, name: str, error: Exception) -> None:
        """
        Логирует ошибку при обработке файла.

        Args:
            name: Имя файла
            error: Исключение
        """
        self.logger.error(f"❌ Ошибка при обработке файла {name}: {error}")

    def log_date_fallback(self, name: str, reason: Exception) -> None:
        """Логирует переход к дате из метаданных файла."""
        self.logger.debug(f"🕒 Дата не получена из имени {name} ({reason}), используются метаданные")

    def log_metadata_unavailable(self, name: str, error: Exception) -> None:
        """
        Логирует недоступность метаданных файла.

        Файл не перемещается, чтобы не попасть в папку ошибочного месяца.
        """
        self.logger.error(f"🗂️ Метаданные файла {name} недоступны, файл пропущен: {error}")

    def log_folder_created(self, folder: Path) -> None:
        """Логирует создание папки месяца."""
        self.logger.info(f"📂 Создана папка: {folder}")

    def log_folder_create_failed(self, month: int, year: int, error: Exception) -> None:
        """
        Логирует ошибку создания папки месяца.

        Args:
            month: Номер месяца
            year: Год
            error: Исключение
        """
        self.logger.warning(f"⚠️ Не удалось создать папку для месяца {month:02d}-{year}: {error}")

    def log_directory_skipped(self, name: str) -> None:
        """Логирует пропуск вложенного каталога."""
        self.logger.debug(f"⏭️ Каталог пропущен: {name}")

    def log_system_info(self, info: str) -> None:
        """Логирует системную информацию."""
        self.logger.info(f"ℹ️ {info}")

    def log_critical_error(self, message: str, error: Exception = None) -> None:
        """
        Логирует критическую ошибку.

        Args:
            message: Сообщение об ошибке
            error: Исключение (опционально)
        """
        if error:
            self.logger.critical(f"💥 {message}: {error}")
        else:
            self.logger.critical(f"💥 {message}")
