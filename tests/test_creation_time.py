"""
Тесты для модуля creation_time.py
"""

import os
import shutil
import tempfile
from datetime import datetime
from pathlib import Path
from types import SimpleNamespace
from unittest.mock import patch

import pytest

from month_organizer.creation_time import (
    BirthTimeProvider,
    CreationTimeProvider,
    MetadataUnavailableError,
    ModificationTimeProvider,
    WindowsCreationTimeProvider,
    select_creation_time_provider,
)


# 2023-03-10 12:00:00 UTC
MTIME = 1678449600


class TestProviders:
    """Тесты для реализаций CreationTimeProvider."""

    @pytest.fixture
    def temp_dir(self):
        """Создает временную директорию для тестов."""
        temp_path = tempfile.mkdtemp()
        yield Path(temp_path)
        shutil.rmtree(temp_path, ignore_errors=True)

    @pytest.fixture
    def test_file(self, temp_dir):
        """Создает файл с известным временем изменения."""
        path = temp_dir / "notes.txt"
        path.write_text("test content")
        os.utime(path, (MTIME, MTIME))
        return path

    def test_modification_time_provider(self, test_file):
        """Тест получения времени изменения."""
        result = ModificationTimeProvider().get_creation_time(test_file)

        assert result == datetime.fromtimestamp(MTIME)
        assert result.tzinfo is None

    def test_missing_file_raises(self, temp_dir):
        """Тест ошибки для несуществующего файла."""
        with pytest.raises(MetadataUnavailableError):
            ModificationTimeProvider().get_creation_time(temp_dir / "missing.txt")

    @pytest.mark.parametrize("timestamp", [3e11, -1e13, float('nan')])
    def test_out_of_range_timestamp_raises(self, test_file, timestamp):
        """Тест: непредставимое время файла - это недоступные метаданные."""
        provider = ModificationTimeProvider()

        with patch.object(provider, '_timestamp', return_value=timestamp):
            with pytest.raises(MetadataUnavailableError, match="Некорректное время файла"):
                provider.get_creation_time(test_file)

    def test_birthtime_provider_returns_a_date(self, test_file):
        """Тест: реализация по умолчанию всегда возвращает дату."""
        result = BirthTimeProvider().get_creation_time(test_file)
        assert isinstance(result, datetime)

    def test_base_provider_is_abstract(self, test_file):
        """Тест базового интерфейса."""
        with pytest.raises(NotImplementedError):
            CreationTimeProvider().get_creation_time(test_file)


class TestTimestampSelection:
    """Тесты выбора поля метаданных."""

    def test_birthtime_used_when_present(self):
        stat_result = SimpleNamespace(st_birthtime=100.0, st_mtime=200.0, st_ctime=300.0)
        assert BirthTimeProvider()._timestamp(stat_result) == 100.0

    def test_birthtime_falls_back_to_mtime(self):
        stat_result = SimpleNamespace(st_mtime=200.0, st_ctime=300.0)
        assert BirthTimeProvider()._timestamp(stat_result) == 200.0

    def test_zero_birthtime_falls_back_to_mtime(self):
        stat_result = SimpleNamespace(st_birthtime=0, st_mtime=200.0, st_ctime=300.0)
        assert BirthTimeProvider()._timestamp(stat_result) == 200.0

    def test_windows_uses_ctime_without_birthtime(self):
        stat_result = SimpleNamespace(st_mtime=200.0, st_ctime=300.0)
        assert WindowsCreationTimeProvider()._timestamp(stat_result) == 300.0

    def test_windows_prefers_birthtime(self):
        stat_result = SimpleNamespace(st_birthtime=100.0, st_mtime=200.0, st_ctime=300.0)
        assert WindowsCreationTimeProvider()._timestamp(stat_result) == 100.0


class TestSelectCreationTimeProvider:
    """Тесты для select_creation_time_provider."""

    def test_windows(self):
        assert isinstance(select_creation_time_provider('win32'), WindowsCreationTimeProvider)

    @pytest.mark.parametrize("platform", ['linux', 'darwin', 'freebsd13'])
    def test_other_platforms(self, platform):
        assert isinstance(select_creation_time_provider(platform), BirthTimeProvider)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
