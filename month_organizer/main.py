"""
Главный модуль CLI интерфейса утилиты раскладки файлов по месяцам.

Использование: month-organizer [directory]
Без аргумента раскладывается текущий каталог.
"""

import argparse
import sys
from typing import List, Optional

try:
    from .config_loader import load_config
    from .file_ops import DirectoryListingError
    from .logger import OrganizerLogger
    from .organizer import create_organizer
except ImportError:
    from config_loader import load_config
    from file_ops import DirectoryListingError
    from logger import OrganizerLogger
    from organizer import create_organizer


class OrganizerCLI:
    """Класс для обработки команд CLI."""

    def __init__(self):
        self.config = None
        self.logger = None
        self.organizer = None

    def setup(self, directory: Optional[str] = None, config_path: Optional[str] = None,
              verbose: bool = False) -> bool:
        """
        Инициализирует CLI с конфигурацией.

        Args:
            directory: Раскладываемый каталог (None - текущий)
            config_path: Путь к файлу конфигурации (необязательно)
            verbose: Подробный вывод (уровень DEBUG)

        Returns:
            bool: True если инициализация успешна
        """
        try:
            self.config = load_config(config_path, target_dir=directory)
            if verbose:
                self.config.logging.level = 'DEBUG'

            self.logger = OrganizerLogger(self.config.logging)
            self.organizer = create_organizer(self.config, self.logger)

            if config_path:
                self.logger.log_system_info(f"Конфигурация загружена из: {config_path}")
            return True

        except Exception as e:
            print(f"❌ Ошибка инициализации: {e}")
            return False

    def cmd_organize(self) -> int:
        """
        Команда раскладки файлов.

        Returns:
            int: Код возврата (0 - раскладка выполнена, 1 - каталог не читается)
        """
        try:
            stats = self.organizer.organize()
        except DirectoryListingError as e:
            print(f"erro ao abrir a pasta! erro: {e}")
            return 1

        print(f"Total de arquivos movidos: {stats.moved_files} arquivos movidos")
        print(f"Tempo passado:             {stats.get_elapsed_ms()} milliseconds")

        return 0


def create_parser() -> argparse.ArgumentParser:
    """
    Создает парсер аргументов командной строки.

    Returns:
        argparse.ArgumentParser: Настроенный парсер
    """
    parser = argparse.ArgumentParser(
        prog='month-organizer',
        description="Раскладывает файлы каталога по папкам месяцев (janeiro-2024, ...)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Дата файла берется из имени вида YYYYMMDD_<id>.<ext>, иначе из даты
создания файла (или даты изменения, если создание не хранится).

Примеры использования:

  # Раскладка текущего каталога
  month-organizer

  # Раскладка указанного каталога
  month-organizer ~/Fotos
        """
    )

    parser.add_argument(
        'directory',
        nargs='?',
        default=None,
        help='Каталог для раскладки (по умолчанию: текущий)'
    )
    parser.add_argument(
        '--config',
        default=None,
        help='Путь к INI-файлу с настройками логирования'
    )
    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Подробный вывод'
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Главная функция CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    cli = OrganizerCLI()

    if not cli.setup(args.directory, args.config, args.verbose):
        return 1

    try:
        return cli.cmd_organize()

    except KeyboardInterrupt:
        print("\n⚠️ Операция прервана пользователем")
        return 1
    except Exception as e:
        print(f"❌ Неожиданная ошибка: {e}")
        if args.verbose:
            import traceback
            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
