"""
Извлечение даты из имени файла вида YYYYMMDD_<id>.<ext>.

Дата строится на полночь UTC. Значения месяца и дня вне диапазона
переносятся в соседние месяцы (13-й месяц - январь следующего года,
32 января - 1 февраля).
"""

import re
from datetime import datetime, timedelta, timezone
from typing import Optional

try:
    from .exceptions import OrganizerError
except ImportError:
    from exceptions import OrganizerError


FILENAME_PATTERN = r'^(\d{4})(\d{2})(\d{2})_(\w+)\.(\w+)$'


class FilenameDateError(OrganizerError):
    """Дату нельзя получить из имени файла."""


class NoPatternMatchError(FilenameDateError):
    """Имя файла не соответствует шаблону."""


class MalformedDateFieldError(FilenameDateError):
    """Числовое поле даты не разбирается."""


class FutureDateError(FilenameDateError):
    """Дата в имени файла позже текущего момента."""


def compile_filename_pattern(pattern: str = FILENAME_PATTERN) -> re.Pattern:
    """Компилирует шаблон имени файла (только ASCII-цифры и буквы)."""
    return re.compile(pattern, re.ASCII)


_DEFAULT_PATTERN = compile_filename_pattern()


def build_utc_date(year: int, month: int, day: int) -> datetime:
    """
    Строит дату на полночь UTC с переносом месяца и дня.

    Args:
        year: Год
        month: Месяц (значения вне 1..12 переносятся на соседние годы)
        day: День (значения вне диапазона месяца переносятся на соседние месяцы)

    Returns:
        datetime: Дата с часовым поясом UTC

    Raises:
        ValueError: Если год выходит за допустимый диапазон
    """
    year += (month - 1) // 12
    month = (month - 1) % 12 + 1
    first_day = datetime(year, month, 1, tzinfo=timezone.utc)
    return first_day + timedelta(days=day - 1)


def parse_date_from_filename(file_name: str, pattern: Optional[re.Pattern] = None,
                             now: Optional[datetime] = None) -> datetime:
    """
    Извлекает дату создания из имени файла.

    Args:
        file_name: Имя файла
        pattern: Скомпилированный шаблон (по умолчанию FILENAME_PATTERN)
        now: Текущий момент для проверки даты из будущего (по умолчанию сейчас, UTC)

    Returns:
        datetime: Дата на полночь UTC

    Raises:
        NoPatternMatchError: Если имя не соответствует шаблону
        MalformedDateFieldError: Если год, месяц или день не разбираются
        FutureDateError: Если дата позже текущего момента
    """
    if pattern is None:
        pattern = _DEFAULT_PATTERN

    match = pattern.fullmatch(file_name)
    if match is None:
        raise NoPatternMatchError(f"Файл не соответствует шаблону: {file_name}")

    try:
        year = int(match.group(1))
        month = int(match.group(2))
        day = int(match.group(3))
        date = build_utc_date(year, month, day)
    except (ValueError, OverflowError) as e:
        raise MalformedDateFieldError(f"Некорректная дата в имени {file_name}: {e}")

    if now is None:
        now = datetime.now(timezone.utc)

    if date > now:
        raise FutureDateError(f"Дата в имени {file_name} позже текущей: {date.date()}")

    return date
