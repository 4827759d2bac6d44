"""
Модуль бизнес-логики раскладки файлов.

Объединяет разбор даты, папки месяцев и перемещение файлов: каждый файл
верхнего уровня каталога получает дату (из имени или из метаданных) и
переносится в папку своего месяца.
"""

import re
import time
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, Dict, List

try:
    from .config_loader import Config
    from .creation_time import CreationTimeProvider, MetadataUnavailableError, select_creation_time_provider
    from .date_parser import FilenameDateError, compile_filename_pattern, parse_date_from_filename
    from .file_ops import DirectoryEntry, FileOperationError, FileOps
    from .logger import OrganizerLogger
    from .month_folders import MonthFolderError, MonthFolders
except ImportError:
    from config_loader import Config
    from creation_time import CreationTimeProvider, MetadataUnavailableError, select_creation_time_provider
    from date_parser import FilenameDateError, compile_filename_pattern, parse_date_from_filename
    from file_ops import DirectoryEntry, FileOperationError, FileOps
    from logger import OrganizerLogger
    from month_folders import MonthFolderError, MonthFolders


DATE_SOURCE_FILENAME = 'filename'
DATE_SOURCE_METADATA = 'metadata'


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class RunContext:
    """Параметры одного запуска, передаваемые во все шаги раскладки."""
    target_dir: Path
    pattern: re.Pattern = field(default_factory=compile_filename_pattern)
    provider: CreationTimeProvider = field(default_factory=select_creation_time_provider)
    now: Callable[[], datetime] = utc_now

    @classmethod
    def from_config(cls, config: Config) -> 'RunContext':
        return cls(target_dir=Path(config.organizer.target_dir))


@dataclass(frozen=True)
class ResolvedDate:
    """Дата файла и ее источник."""
    date: datetime
    source: str


class RunStats:
    """Класс для хранения статистики раскладки."""

    def __init__(self):
        self.total_entries = 0
        self.processed_files = 0
        self.moved_files = 0
        self.failed_files = 0
        self.skipped_directories = 0
        self.filename_dates = 0
        self.metadata_dates = 0
        self.errors: List[Dict[str, str]] = []
        self._perf_start = None
        self._perf_end = None

    def start(self) -> None:
        self._perf_start = time.perf_counter()

    def finish(self) -> None:
        self._perf_end = time.perf_counter()

    def add_error(self, file_name: str, error: Exception):
        """Добавляет ошибку в список."""
        self.errors.append({
            'file_name': file_name,
            'error': str(error)
        })

    def get_elapsed_ms(self) -> int:
        """Возвращает прошедшее время в целых миллисекундах."""
        if self._perf_start is None:
            return 0
        end = self._perf_end if self._perf_end is not None else time.perf_counter()
        return int((end - self._perf_start) * 1000)


class Organizer:
    """Основной класс для раскладки файлов по папкам месяцев."""

    def __init__(self, context: RunContext, logger: OrganizerLogger):
        """
        Инициализация раскладки.

        Args:
            context: Параметры запуска
            logger: Логгер для записи операций
        """
        self.context = context
        self.logger = logger
        self.file_ops = FileOps(context.target_dir, logger)
        self.folders = MonthFolders(context.target_dir)
        self.stats = RunStats()

    def resolve_date(self, entry: DirectoryEntry) -> ResolvedDate:
        """
        Определяет дату файла: сначала по имени, затем по метаданным.

        Args:
            entry: Запись каталога

        Returns:
            ResolvedDate: Дата и ее источник

        Raises:
            MetadataUnavailableError: Если имя не подошло, а метаданные не читаются
        """
        try:
            date = parse_date_from_filename(entry.name, self.context.pattern, self.context.now())
            return ResolvedDate(date, DATE_SOURCE_FILENAME)
        except FilenameDateError as e:
            self.logger.log_date_fallback(entry.name, e)

        date = self.context.provider.get_creation_time(entry.path)
        return ResolvedDate(date, DATE_SOURCE_METADATA)

    def resolve_month_folder(self, date: datetime) -> Path:
        """
        Возвращает папку месяца, создавая ее при отсутствии.

        Ошибка создания только логируется: перемещение все равно
        выполняется и, если папки нет, завершится ошибкой.
        """
        if self.folders.exists(date):
            return self.folders.folder_path(date)

        try:
            folder = self.folders.create(date)
        except MonthFolderError as e:
            self.logger.log_folder_create_failed(date.month, date.year, e.error)
            return e.path

        self.logger.log_folder_created(folder)
        return folder

    def process_entry(self, entry: DirectoryEntry) -> Path:
        """
        Раскладывает один файл.

        Args:
            entry: Запись каталога (не каталог)

        Returns:
            Path: Новый путь к файлу

        Raises:
            MetadataUnavailableError: Если дату определить не удалось
            FileOperationError: Если файл не удалось переместить
        """
        resolved = self.resolve_date(entry)
        if resolved.source == DATE_SOURCE_FILENAME:
            self.stats.filename_dates += 1
        else:
            self.stats.metadata_dates += 1

        folder = self.resolve_month_folder(resolved.date)
        return self.file_ops.move_file(entry, folder)

    def organize(self) -> RunStats:
        """
        Раскладывает все файлы верхнего уровня каталога.

        Ошибки отдельных файлов не прерывают раскладку.

        Returns:
            RunStats: Статистика раскладки

        Raises:
            DirectoryListingError: Если каталог нельзя прочитать
        """
        self.stats.start()

        entries = self.file_ops.list_entries()
        self.stats.total_entries = len(entries)
        self.logger.log_run_start(self.context.target_dir, len(entries))

        for entry in entries:
            if entry.is_dir:
                self.stats.skipped_directories += 1
                self.logger.log_directory_skipped(entry.name)
                continue

            self.stats.processed_files += 1
            try:
                self.process_entry(entry)
            except MetadataUnavailableError as e:
                self.stats.failed_files += 1
                self.stats.add_error(entry.name, e)
                self.logger.log_metadata_unavailable(entry.name, e)
                continue
            except FileOperationError as e:
                self.stats.failed_files += 1
                self.stats.add_error(entry.name, e)
                continue

            self.stats.moved_files += 1

        self.stats.finish()

        self.logger.log_run_end(
            moved_files=self.stats.moved_files,
            failed_files=self.stats.failed_files,
            skipped_directories=self.stats.skipped_directories,
            filename_dates=self.stats.filename_dates,
            metadata_dates=self.stats.metadata_dates,
            elapsed_ms=self.stats.get_elapsed_ms(),
            errors=self.stats.errors
        )

        return self.stats


def create_organizer(config: Config, logger: OrganizerLogger) -> Organizer:
    """
    Удобная функция для создания объекта раскладки.

    Args:
        config: Конфигурация приложения
        logger: Логгер

    Returns:
        Organizer: Объект раскладки
    """
    return Organizer(RunContext.from_config(config), logger)
