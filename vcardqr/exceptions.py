"""
Исключения конвейера кодирования vCard → QR → PNG.

Иерархия:
    EncodingError (базовое)
    ├── PayloadTooLargeError       (kind="PayloadTooLarge")
    └── ContainerWriteFailureError (kind="ContainerWriteFailure")

Обе ошибки терминальны для запроса: конвейер не повторяет попытку,
не обрезает данные и не возвращает частичный результат.

Security Note:
    Сообщения и контекст НЕ содержат значений полей контакта,
    только размеры и уровни коррекции.

Example:
    >>> from vcardqr.exceptions import EncodingError
    >>> try:
    ...     image = generate_vcard_qr(record)
    ... except EncodingError as e:
    ...     logger.error("QR generation failed: %s", e.kind)
"""

from __future__ import annotations

from typing import Any, Dict, Optional

__all__: list[str] = [
    "EncodingError",
    "PayloadTooLargeError",
    "ContainerWriteFailureError",
]


class EncodingError(Exception):
    """
    Базовое исключение конвейера кодирования.

    Attributes:
        message: Человекочитаемое сообщение об ошибке
        kind: Тег вида ошибки для сопоставления на стороне вызывающего сервиса
        context: Дополнительный контекст для отладки (без персональных данных)
    """

    kind: str = "EncodingError"

    def __init__(
        self,
        message: str,
        *,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        parts = [self.__class__.__name__, ": ", self.message]

        if self.context:
            ctx_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            parts.append(f" ({ctx_str})")

        return "".join(parts)

    def __repr__(self) -> str:
        """Представление для отладки."""
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"kind={self.kind!r}, "
            f"context={self.context!r})"
        )


class PayloadTooLargeError(EncodingError):
    """
    Данные vCard не помещаются в QR-код версии 40 на выбранном уровне коррекции.

    Example:
        >>> raise PayloadTooLargeError(
        ...     "Payload exceeds QR capacity",
        ...     context={"payload_bytes": 2332, "capacity": 2331, "error_correction": "M"},
        ... )
    """

    kind = "PayloadTooLarge"


class ContainerWriteFailureError(EncodingError):
    """Внутренний сбой кодека при записи PNG (не штатная ситуация)."""

    kind = "ContainerWriteFailure"
