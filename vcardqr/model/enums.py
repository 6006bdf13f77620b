"""
model/enums.py

(Краткое RU: Перечисления для модели QR-визитки.)

EN: Domain enums for the vCard QR encoder.

- QR error correction levels (ISO/IEC 18004) with their byte-mode capacity
  at the largest symbol version (40).
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Final, Literal

from qrcode.constants import (
    ERROR_CORRECT_H,
    ERROR_CORRECT_L,
    ERROR_CORRECT_M,
    ERROR_CORRECT_Q,
)

_logger: Final[logging.Logger] = logging.getLogger(__name__)

# === SYMBOL CONSTANTS ===
MAX_QR_VERSION: Final[int] = 40
MIN_QR_SIDE: Final[int] = 21  # версия 1: 17 + 4 * 1


class ErrorCorrectionLevel(str, Enum):
    L = "L"
    M = "M"
    Q = "Q"
    H = "H"

    @property
    def qrcode_constant(self) -> int:
        """Constant understood by ``qrcode.QRCode(error_correction=...)``."""
        return {
            ErrorCorrectionLevel.L: ERROR_CORRECT_L,
            ErrorCorrectionLevel.M: ERROR_CORRECT_M,
            ErrorCorrectionLevel.Q: ERROR_CORRECT_Q,
            ErrorCorrectionLevel.H: ERROR_CORRECT_H,
        }[self]

    @property
    def max_payload_bytes(self) -> int:
        """Byte-mode capacity of a version 40 symbol at this level."""
        return {
            ErrorCorrectionLevel.L: 2953,
            ErrorCorrectionLevel.M: 2331,
            ErrorCorrectionLevel.Q: 1663,
            ErrorCorrectionLevel.H: 1273,
        }[self]

    @classmethod
    def parse(cls, value: "ErrorCorrectionLevel | str") -> "ErrorCorrectionLevel":
        """Accept an enum member or a case-insensitive level letter.

        Raises:
            ValueError: Unknown level.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().upper())
        except ValueError:
            _logger.error("Unknown error correction level %r", value)
            raise ValueError(f"Unknown error correction level: {value!r}") from None

    def localized_name(self, lang: Literal["ru", "en"] = "ru") -> str:
        names_ru = {
            ErrorCorrectionLevel.L: "Низкий (~7%)",
            ErrorCorrectionLevel.M: "Средний (~15%)",
            ErrorCorrectionLevel.Q: "Квартиль (~25%)",
            ErrorCorrectionLevel.H: "Высокий (~30%)",
        }
        names_en = {
            ErrorCorrectionLevel.L: "Low (~7%)",
            ErrorCorrectionLevel.M: "Medium (~15%)",
            ErrorCorrectionLevel.Q: "Quartile (~25%)",
            ErrorCorrectionLevel.H: "High (~30%)",
        }
        return names_ru[self] if lang == "ru" else names_en[self]
