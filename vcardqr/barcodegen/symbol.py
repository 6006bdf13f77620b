"""
RU: Построение матрицы модулей QR-кода (делегировано библиотеке qrcode)
EN: QR module matrix construction (delegated to the qrcode library)

Provides:
- Automatic version selection and deterministic mask selection
- Single 8-bit byte segment over the UTF-8 payload (exact capacity)
- Typed ModuleMatrix result and PayloadTooLargeError on overflow

Requirements: qrcode
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Final, Optional, Tuple, Union

import qrcode
from qrcode.exceptions import DataOverflowError
from qrcode.util import MODE_8BIT_BYTE, QRData

from vcardqr.exceptions import PayloadTooLargeError
from vcardqr.model.enums import ErrorCorrectionLevel
from vcardqr.vcard.serializer import SerializedCard

logger = logging.getLogger(__name__)

__all__ = [
    "ModuleMatrix",
    "encode_symbol",
]

DEFAULT_ERROR_CORRECTION: Final[ErrorCorrectionLevel] = ErrorCorrectionLevel.M


@dataclass(frozen=True)
class ModuleMatrix:
    """Square grid of QR modules, ``True`` = dark.

    Attributes:
        modules: Rows of the symbol without quiet zone.
        version: QR version (1..40).
        error_correction: Level the symbol was built with.
    """

    modules: Tuple[Tuple[bool, ...], ...]
    version: int
    error_correction: ErrorCorrectionLevel

    @property
    def size(self) -> int:
        return len(self.modules)

    def is_dark(self, row: int, col: int) -> bool:
        return self.modules[row][col]

    def dark_count(self) -> int:
        return sum(sum(row) for row in self.modules)


def _too_large(payload_bytes: int, level: ErrorCorrectionLevel) -> PayloadTooLargeError:
    logger.error(
        "Payload of %d bytes exceeds QR capacity %d at level %s",
        payload_bytes,
        level.max_payload_bytes,
        level.value,
    )
    return PayloadTooLargeError(
        "Payload exceeds QR symbol capacity",
        context={
            "payload_bytes": payload_bytes,
            "capacity": level.max_payload_bytes,
            "error_correction": level.value,
        },
    )


def encode_symbol(
    card: Union[SerializedCard, str],
    error_correction: Optional[ErrorCorrectionLevel] = None,
) -> ModuleMatrix:
    """Encode vCard text into a QR module matrix.

    Args:
        card: Serialized vCard (or raw text).
        error_correction: QR error correction level, M by default.

    Returns:
        ModuleMatrix: Deterministic grid for the given input.

    Raises:
        PayloadTooLargeError: Payload exceeds version 40 capacity at this level.

    Example:
        >>> matrix = encode_symbol(serialize_contact(record))
        >>> matrix.size
        41
    """
    level = error_correction or DEFAULT_ERROR_CORRECTION
    text = card.text if isinstance(card, SerializedCard) else card
    payload = text.encode("utf-8")

    # qrcode 8.x сообщает о переполнении через ValueError("Invalid version ..."),
    # поэтому ёмкость проверяется до построения символа
    if len(payload) > level.max_payload_bytes:
        raise _too_large(len(payload), level)

    qr = qrcode.QRCode(
        version=None,
        error_correction=level.qrcode_constant,
        box_size=1,
        border=0,
    )
    qr.add_data(QRData(payload, mode=MODE_8BIT_BYTE))
    try:
        qr.make(fit=True)
    except DataOverflowError as e:
        raise _too_large(len(payload), level) from e

    modules = tuple(tuple(bool(cell) for cell in row) for row in qr.get_matrix())
    logger.debug(
        "QR symbol built: version %d, %dx%d modules, level %s",
        qr.version,
        len(modules),
        len(modules),
        level.value,
    )
    return ModuleMatrix(modules=modules, version=qr.version, error_correction=level)
