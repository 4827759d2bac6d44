"""
Базовые исключения утилиты раскладки файлов.

Каждый модуль объявляет свои ошибки как наследников OrganizerError.
"""


class OrganizerError(Exception):
    """Базовое исключение утилиты."""
