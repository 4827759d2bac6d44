"""
Month Organizer

Утилита для раскладки файлов из плоского каталога по папкам месяцев
(например, janeiro-2024).
"""

__version__ = "1.0.0"
__author__ = "Month Organizer Team"
__description__ = "Utility for organizing files of a flat directory into per-month folders"
