"""
Модуль для операций с файловой системой.

Обеспечивает чтение содержимого раскладываемого каталога и перемещение
файлов в папки месяцев.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Union

try:
    from .exceptions import OrganizerError
    from .logger import OrganizerLogger
except ImportError:
    from exceptions import OrganizerError
    from logger import OrganizerLogger


class FileOperationError(OrganizerError):
    """Исключение для ошибок операций с файлами."""
    pass


class DirectoryListingError(OrganizerError):
    """Исключение для случая, когда каталог нельзя прочитать."""
    pass


@dataclass(frozen=True)
class DirectoryEntry:
    """Запись каталога, прочитанная в начале раскладки."""
    name: str
    path: Path
    is_dir: bool


class FileOps:
    """Класс для операций с файловой системой."""

    def __init__(self, target_dir: Union[str, Path], logger: OrganizerLogger):
        """
        Инициализация операций с файлами.

        Args:
            target_dir: Раскладываемый каталог
            logger: Логгер для записи операций
        """
        self.target_dir = Path(target_dir)
        self.logger = logger

    def list_entries(self) -> List[DirectoryEntry]:
        """
        Читает записи верхнего уровня каталога в порядке, который отдает ОС.

        Символические ссылки на каталоги считаются файлами.

        Returns:
            List[DirectoryEntry]: Записи каталога

        Raises:
            DirectoryListingError: Если каталог не существует, не является
                каталогом или недоступен
        """
        try:
            with os.scandir(self.target_dir) as it:
                entries = [
                    DirectoryEntry(
                        name=e.name,
                        path=Path(e.path),
                        is_dir=e.is_dir(follow_symlinks=False)
                    )
                    for e in it
                ]
        except OSError as e:
            self.logger.log_critical_error(f"Не удалось прочитать каталог {self.target_dir}", e)
            raise DirectoryListingError(str(e))

        return entries

    def move_file(self, entry: DirectoryEntry, dest_dir: Union[str, Path]) -> Path:
        """
        Перемещает файл в папку месяца переименованием.

        Конфликты имен не разрешаются: действует семантика rename платформы.

        Args:
            entry: Запись каталога
            dest_dir: Папка назначения

        Returns:
            Path: Новый путь к файлу

        Raises:
            FileOperationError: Если переименование не удалось
        """
        source_path = self.target_dir / entry.name
        target_path = Path(dest_dir) / entry.name

        try:
            os.rename(source_path, target_path)
        except OSError as e:
            print(f"Erro ao mover o arquivo: {e}")
            self.logger.log_file_error(entry.name, e)
            raise FileOperationError(f"Ошибка перемещения файла {entry.name}: {e}")

        self.logger.log_file_moved(entry.name, source_path, target_path)
        return target_path
