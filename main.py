import sys
from typing import NoReturn

from src.app import run_export
from src.constants import DEFAULT_CONFIG_PATH
from src.utils import log


def main() -> NoReturn:
    """The main entry point of the script."""
    config_path = sys.argv[1] if len(sys.argv) > 1 else DEFAULT_CONFIG_PATH

    try:
        log("🚀 Экспорт каталогов запущен. Нажмите Ctrl+C для выхода.")
        failures = run_export(config_path)
    except KeyboardInterrupt:
        log("🛑 Получен сигнал завершения. Выход.", top=2)
        sys.exit(130)

    log("---", top=1)
    if failures:
        log(f"⚠️ Экспорт завершён. Каталогов с ошибками: {failures}.")
        sys.exit(1)

    log("🏁 Экспорт успешно завершён.")
    sys.exit(0)


if __name__ == "__main__":
    main()
