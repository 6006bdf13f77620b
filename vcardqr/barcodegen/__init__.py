"""
barcodegen

Модуль генерации QR-визиток с типизированным API.

- Матрица QR-кода (qrcode), растеризация с цветом (Pillow), PNG и data URI.
- Детерминированный результат: одинаковый вход даёт побайтно одинаковый PNG.

Public API:
    - encode_symbol / ModuleMatrix: матрица модулей QR
    - composite: растеризация матрицы в RGB-изображение
    - encode_container / EncodedImage: PNG + data URI
    - decode_transport_string: обратное преобразование data URI → PNG
    - VCardQRGenerator: весь конвейер (class)
    - generate_vcard_qr / generate_from_payload: удобные функции

Примеры:
    >>> from vcardqr.barcodegen import generate_vcard_qr
    >>> uri = generate_vcard_qr(record, color="#0055AA").transport_string

Зависимости:
    Pillow, qrcode
"""

from vcardqr.barcodegen.container import (
    EncodedImage,
    decode_transport_string,
    encode_container,
)
from vcardqr.barcodegen.raster import MODULE_SCALE, QUIET_ZONE, composite
from vcardqr.barcodegen.symbol import ModuleMatrix, encode_symbol
from vcardqr.barcodegen.vcard_qr_generator import (
    VCardQRGenerator,
    generate_from_payload,
    generate_vcard_qr,
)

__all__ = [
    "ModuleMatrix",
    "encode_symbol",
    "QUIET_ZONE",
    "MODULE_SCALE",
    "composite",
    "EncodedImage",
    "encode_container",
    "decode_transport_string",
    "VCardQRGenerator",
    "generate_vcard_qr",
    "generate_from_payload",
]
