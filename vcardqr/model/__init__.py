"""
model

Доменные типы QR-визитки: запись контакта, цвет, уровни коррекции ошибок.
"""

from vcardqr.model.color import DEFAULT_COLOR, WHITE, RGBColor, resolve_color
from vcardqr.model.contact import ContactRecord
from vcardqr.model.enums import ErrorCorrectionLevel

__all__ = [
    "ContactRecord",
    "ErrorCorrectionLevel",
    "RGBColor",
    "DEFAULT_COLOR",
    "WHITE",
    "resolve_color",
]
