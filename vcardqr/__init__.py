"""
Пакет vCard QR Generator
========================

Генерация сканируемых QR-кодов с визитной карточкой (vCard 3.0).

Этот пакет предоставляет:
    - Сериализацию контакта в текст vCard 3.0 с экранированием
    - Разбор цвета (#RRGGBB) с безопасным значением по умолчанию
    - Построение матрицы QR-кода (qrcode, ISO/IEC 18004)
    - Растеризацию матрицы с цветными тёмными модулями (Pillow)
    - Упаковку в PNG и data URI (base64)

Пример базового использования:
    >>> from vcardqr import ContactRecord, generate_vcard_qr, get_logger
    >>>
    >>> logger = get_logger(__name__)
    >>> record = ContactRecord(given_name="John", family_name="Doe")
    >>> image = generate_vcard_qr(record, color="#FF0000")
    >>> image.transport_string[:22]
    'data:image/png;base64,'

Управление конфигурацией:
    >>> import os
    >>> os.environ['VCARDQR_LOG_LEVEL'] = 'DEBUG'
    >>>
    >>> from vcardqr import VCardQRGenerator, load_config
    >>> config = load_config()  # один раз при старте сервиса
    >>> VCardQRGenerator.from_config(record, config).render_data_uri()

Лицензия: MIT
Python: 3.10+
"""

import json
import logging
import logging.handlers
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

# =============================================================================
# МЕТАДАННЫЕ ВЕРСИИ
# =============================================================================

__version__ = "0.1.0"
__author__ = "vCard QR Generator Development Team"
__description__ = "vCard contact to QR code PNG data URI encoder"
__license__ = "MIT"
__python_requires__ = ">=3.10"

VERSION_MAJOR = 0
VERSION_MINOR = 1
VERSION_PATCH = 0

_ROOT_LOGGER_NAME = "vcardqr"

# =============================================================================
# КОНФИГУРАЦИЯ ЛОГИРОВАНИЯ
# =============================================================================


def _setup_logging() -> None:
    """
    Инициализировать общепакетную конфигурацию логирования.

    Настраивает логгер пакета с:
    - Консольным обработчиком (stderr) для WARNING и выше
    - Ротирующим файловым обработчиком для всех уровней
      (отключается через VCARDQR_LOG_FILE=0)

    Уровень задаётся переменной окружения VCARDQR_LOG_LEVEL
    (DEBUG, INFO, WARNING, ERROR, CRITICAL). Функция идемпотентна.
    """
    log_level_str = os.environ.get("VCARDQR_LOG_LEVEL", "INFO").upper()
    log_level_map = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    log_level = log_level_map.get(log_level_str, logging.INFO)

    root_logger = logging.getLogger(_ROOT_LOGGER_NAME)
    if root_logger.handlers:
        return

    root_logger.setLevel(log_level)

    formatter = logging.Formatter(
        fmt=("[%(asctime)s] %(levelname)-8s " "[%(name)s.%(funcName)s:%(lineno)d] %(message)s"),
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if os.environ.get("VCARDQR_LOG_FILE", "1") != "0":
        try:
            log_dir = Path("logs")
            log_dir.mkdir(exist_ok=True)

            file_handler = logging.handlers.RotatingFileHandler(
                filename=log_dir / "vcardqr.log",
                maxBytes=10 * 1024 * 1024,  # 10 МБ
                backupCount=5,
                encoding="utf-8",
            )
            file_handler.setLevel(log_level)
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)
        except OSError as e:
            root_logger.warning(
                "Не удалось инициализировать файловое логирование: %s. "
                "Используется только консоль.",
                e,
            )

    root_logger.propagate = False


def get_logger(module_name: str) -> logging.Logger:
    """
    Получить логгер в пространстве имён пакета ('vcardqr.<module_name>').

    Args:
        module_name: Имя модуля, обычно `__name__`.

    Returns:
        Экземпляр logging.Logger, наследующий обработчики пакета.

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.info("QR generated: %d bytes", 1024)
    """
    if not module_name.startswith(_ROOT_LOGGER_NAME):
        if module_name == "__main__":
            full_name = f"{_ROOT_LOGGER_NAME}.main"
        else:
            clean_name = module_name.lstrip(".")
            full_name = f"{_ROOT_LOGGER_NAME}.{clean_name}"
    else:
        full_name = module_name

    return logging.getLogger(full_name)


# =============================================================================
# УПРАВЛЕНИЕ КОНФИГУРАЦИЕЙ
# =============================================================================

_DEFAULT_CONFIG: Dict[str, Any] = {
    "error_correction": "M",
    "default_color": "#000000",
}


def load_config(config_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Загрузить настройки генератора (error_correction, default_color) из JSON.

    Вызывается вызывающим сервисом один раз; результат передаётся
    в VCardQRGenerator.from_config(). Конвейер сам файлы не читает.

    Args:
        config_path: Путь к JSON-файлу, по умолчанию 'vcardqr.json'.

    Returns:
        Значения по умолчанию, переопределённые пользовательскими.
    """
    logger = get_logger(__name__)
    config_path = config_path or Path("vcardqr.json")
    config = _DEFAULT_CONFIG.copy()

    if not config_path.exists():
        logger.debug("Файл конфигурации %s не найден, используются значения по умолчанию", config_path)
        return config

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            user_config = json.load(f)
        if not isinstance(user_config, dict):
            raise ValueError(f"ожидался JSON-объект, получен {type(user_config).__name__}")
    except (OSError, ValueError) as e:
        logger.warning(
            "Не удалось загрузить %s: %s. Используется конфигурация по умолчанию.",
            config_path,
            e,
        )
        return config

    config.update(user_config)
    logger.info("Конфигурация загружена из %s", config_path)
    return config


_setup_logging()

# =============================================================================
# ПУБЛИЧНЫЙ API
# =============================================================================

from vcardqr.barcodegen import (  # noqa: E402
    EncodedImage,
    ModuleMatrix,
    VCardQRGenerator,
    composite,
    decode_transport_string,
    encode_container,
    encode_symbol,
    generate_from_payload,
    generate_vcard_qr,
)
from vcardqr.exceptions import (  # noqa: E402
    ContainerWriteFailureError,
    EncodingError,
    PayloadTooLargeError,
)
from vcardqr.model import (  # noqa: E402
    ContactRecord,
    ErrorCorrectionLevel,
    RGBColor,
    resolve_color,
)
from vcardqr.vcard import SerializedCard, serialize_contact  # noqa: E402

__all__ = [
    "__version__",
    "get_logger",
    "load_config",
    "ContactRecord",
    "ErrorCorrectionLevel",
    "RGBColor",
    "resolve_color",
    "SerializedCard",
    "serialize_contact",
    "ModuleMatrix",
    "encode_symbol",
    "composite",
    "EncodedImage",
    "encode_container",
    "decode_transport_string",
    "VCardQRGenerator",
    "generate_vcard_qr",
    "generate_from_payload",
    "EncodingError",
    "PayloadTooLargeError",
    "ContainerWriteFailureError",
]
