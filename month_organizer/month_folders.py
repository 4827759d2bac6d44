"""
Модуль папок месяцев.

Имя папки - название месяца на португальском и год через дефис
(например, janeiro-2024). Папки создаются внутри раскладываемого
каталога по мере необходимости.
"""

import os
from datetime import datetime
from pathlib import Path
from typing import Dict, Union

try:
    from .exceptions import OrganizerError
except ImportError:
    from exceptions import OrganizerError


FOLDER_MODE = 0o777


MONTH_NAMES: Dict[int, str] = {
    1: 'janeiro',
    2: 'fevereiro',
    3: 'marco',
    4: 'abril',
    5: 'maio',
    6: 'junho',
    7: 'julho',
    8: 'agosto',
    9: 'setembro',
    10: 'outubro',
    11: 'novembro',
    12: 'dezembro',
}


class MonthFolderError(OrganizerError):
    """Исключение для ошибок создания папки месяца."""

    def __init__(self, label: str, path: Path, error: Exception):
        super().__init__(f"Ошибка создания папки {label}: {error}")
        self.label = label
        self.path = path
        self.error = error


def month_folder_label(date: datetime) -> str:
    """
    Возвращает имя папки месяца для даты.

    Args:
        date: Дата файла

    Returns:
        str: Имя папки, например "janeiro-2024"
    """
    return f"{MONTH_NAMES[date.month]}-{date.year}"


class MonthFolders:
    """Проверка и создание папок месяцев внутри базового каталога."""

    def __init__(self, base_dir: Union[str, Path], mode: int = FOLDER_MODE):
        """
        Args:
            base_dir: Каталог, внутри которого создаются папки
            mode: Права создаваемых папок (с учетом umask)
        """
        self.base_dir = Path(base_dir)
        self.mode = mode

    def folder_path(self, date: datetime) -> Path:
        """Возвращает путь к папке месяца для даты."""
        return self.base_dir / month_folder_label(date)

    def exists(self, date: datetime) -> bool:
        """
        Проверяет, существует ли папка месяца.

        Любая ошибка кроме "не найдено" тоже считается отсутствием папки:
        тогда будет предпринята попытка ее создать.
        """
        try:
            os.stat(self.folder_path(date))
        except OSError:
            return False
        return True

    def create(self, date: datetime) -> Path:
        """
        Создает папку месяца.

        Args:
            date: Дата файла

        Returns:
            Path: Путь к созданной папке

        Raises:
            MonthFolderError: Если папку создать не удалось (в том числе если она уже есть)
        """
        path = self.folder_path(date)
        try:
            path.mkdir(mode=self.mode)
        except OSError as e:
            raise MonthFolderError(path.name, path, e)
        return path
