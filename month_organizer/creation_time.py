"""
Получение даты создания файла из метаданных файловой системы.

Поле времени создания зависит от платформы, поэтому доступ к нему
спрятан за общим интерфейсом CreationTimeProvider. Там, где времени
создания нет (например, Linux), используется время изменения.
"""

import os
import sys
from datetime import datetime
from pathlib import Path
from typing import Union

try:
    from .exceptions import OrganizerError
except ImportError:
    from exceptions import OrganizerError


class MetadataUnavailableError(OrganizerError):
    """Метаданные файла не удалось прочитать."""


class CreationTimeProvider:
    """Интерфейс получения наилучшего доступного времени создания файла."""

    name = 'base'

    def get_creation_time(self, path: Union[str, Path]) -> datetime:
        """
        Возвращает время создания файла в локальном часовом поясе.

        Args:
            path: Путь к файлу

        Returns:
            datetime: Время создания (без округления до полуночи)

        Raises:
            MetadataUnavailableError: Если метаданные не читаются
        """
        try:
            stat_result = os.stat(path, follow_symlinks=False)
        except OSError as e:
            raise MetadataUnavailableError(f"Не удалось прочитать метаданные {path}: {e}")

        timestamp = self._timestamp(stat_result)
        # Время за пределами 1..9999 года не представимо в datetime
        try:
            return datetime.fromtimestamp(timestamp)
        except (OSError, OverflowError, ValueError) as e:
            raise MetadataUnavailableError(f"Некорректное время файла {path} ({timestamp}): {e}")

    def _timestamp(self, stat_result: os.stat_result) -> float:
        raise NotImplementedError


class ModificationTimeProvider(CreationTimeProvider):
    """Время последнего изменения файла."""

    name = 'mtime'

    def _timestamp(self, stat_result: os.stat_result) -> float:
        return stat_result.st_mtime


class BirthTimeProvider(CreationTimeProvider):
    """Время рождения файла (macOS, BSD), иначе время изменения."""

    name = 'birthtime'

    def _timestamp(self, stat_result: os.stat_result) -> float:
        birthtime = getattr(stat_result, 'st_birthtime', None)
        # Нулевое значение означает, что файловая система его не хранит
        if birthtime:
            return birthtime
        return stat_result.st_mtime


class WindowsCreationTimeProvider(CreationTimeProvider):
    """Время создания на Windows: st_birthtime (Python 3.12+) или st_ctime."""

    name = 'windows'

    def _timestamp(self, stat_result: os.stat_result) -> float:
        birthtime = getattr(stat_result, 'st_birthtime', None)
        if birthtime:
            return birthtime
        return stat_result.st_ctime


def select_creation_time_provider(platform: str = sys.platform) -> CreationTimeProvider:
    """
    Выбирает реализацию для текущей платформы.

    Args:
        platform: Идентификатор платформы (как sys.platform)

    Returns:
        CreationTimeProvider: Реализация получения времени создания
    """
    if platform.startswith('win'):
        return WindowsCreationTimeProvider()
    return BirthTimeProvider()
