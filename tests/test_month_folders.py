"""
Тесты для модуля month_folders.py
"""

import shutil
import tempfile
from datetime import datetime, timezone
from pathlib import Path
from unittest.mock import patch

import pytest

from month_organizer.month_folders import (
    MONTH_NAMES,
    MonthFolderError,
    MonthFolders,
    month_folder_label,
)


class TestMonthFolderLabel:
    """Тесты для month_folder_label."""

    def test_month_names_table(self):
        """Тест таблицы названий месяцев."""
        assert list(MONTH_NAMES) == list(range(1, 13))
        assert MONTH_NAMES[1] == 'janeiro'
        assert MONTH_NAMES[3] == 'marco'
        assert MONTH_NAMES[12] == 'dezembro'

    @pytest.mark.parametrize("month, expected", [
        (1, 'janeiro-2024'),
        (2, 'fevereiro-2024'),
        (6, 'junho-2024'),
        (10, 'outubro-2024'),
    ])
    def test_label(self, month, expected):
        assert month_folder_label(datetime(2024, month, 15, tzinfo=timezone.utc)) == expected

    def test_label_ignores_day_and_time(self):
        """Тест: день и время не влияют на имя папки."""
        first = month_folder_label(datetime(2024, 1, 1))
        last = month_folder_label(datetime(2024, 1, 31, 23, 59, 59))
        assert first == last == 'janeiro-2024'

    def test_label_is_stable(self):
        date = datetime(1999, 11, 5)
        assert month_folder_label(date) == month_folder_label(date) == 'novembro-1999'


class TestMonthFolders:
    """Тесты для класса MonthFolders."""

    @pytest.fixture
    def temp_dir(self):
        """Создает временную директорию для тестов."""
        temp_path = tempfile.mkdtemp()
        yield Path(temp_path)
        shutil.rmtree(temp_path, ignore_errors=True)

    @pytest.fixture
    def folders(self, temp_dir):
        return MonthFolders(temp_dir)

    def test_folder_path(self, folders, temp_dir):
        assert folders.folder_path(datetime(2024, 1, 15)) == temp_dir / 'janeiro-2024'

    def test_exists_and_create(self, folders, temp_dir):
        """Тест создания отсутствующей папки."""
        date = datetime(2024, 2, 20)

        assert not folders.exists(date)

        path = folders.create(date)

        assert path == temp_dir / 'fevereiro-2024'
        assert path.is_dir()
        assert folders.exists(date)

    def test_create_existing_folder_raises(self, folders):
        """Тест: повторное создание сообщает ошибку с ожидаемым путем."""
        date = datetime(2024, 2, 20)
        folders.create(date)

        with pytest.raises(MonthFolderError) as exc_info:
            folders.create(date)

        assert exc_info.value.label == 'fevereiro-2024'
        assert exc_info.value.path == folders.folder_path(date)
        assert isinstance(exc_info.value.error, FileExistsError)

    def test_create_in_missing_base_dir_raises(self, temp_dir):
        folders = MonthFolders(temp_dir / 'missing')

        with pytest.raises(MonthFolderError):
            folders.create(datetime(2024, 1, 1))

    def test_exists_treats_errors_as_missing(self, folders):
        """Тест: ошибки stat кроме "не найдено" считаются отсутствием папки."""
        with patch('month_organizer.month_folders.os.stat', side_effect=PermissionError("denied")):
            assert folders.exists(datetime(2024, 1, 1)) is False

    def test_exists_for_plain_file(self, folders, temp_dir):
        """Тест: файл с именем папки считается существующим."""
        (temp_dir / 'marco-2024').write_text("not a folder")
        assert folders.exists(datetime(2024, 3, 1))


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
