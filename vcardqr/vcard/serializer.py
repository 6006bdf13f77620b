"""
RU: Сериализация записи контакта в текст vCard 3.0
EN: Contact record to vCard 3.0 text serializer

Line order is fixed:
    BEGIN, VERSION, FN, N, TEL (CELL), TEL (WORK), EMAIL, ORG, TITLE, ADR, URL, END

Optional lines are emitted only for non-blank values. Field values are
escaped (backslash, comma, semicolon, newline) and otherwise left as is.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Final, List, Optional, Tuple

from vcardqr.model.contact import ContactRecord

logger = logging.getLogger(__name__)

__all__ = [
    "SerializedCard",
    "serialize_contact",
    "escape_value",
]

VCARD_BEGIN: Final[str] = "BEGIN:VCARD"
VCARD_VERSION: Final[str] = "VERSION:3.0"
VCARD_END: Final[str] = "END:VCARD"
LINE_SEPARATOR: Final[str] = "\n"


@dataclass(frozen=True)
class SerializedCard:
    """Ordered vCard lines; ``text`` joins them without a trailing newline."""

    lines: Tuple[str, ...]

    @property
    def text(self) -> str:
        return LINE_SEPARATOR.join(self.lines)

    def to_bytes(self) -> bytes:
        return self.text.encode("utf-8")

    def __str__(self) -> str:
        return self.text


def escape_value(value: str) -> str:
    """Escape vCard structural characters inside a single field value."""
    return (
        value.replace("\\", "\\\\")
        .replace(",", "\\,")
        .replace(";", "\\;")
        .replace("\r\n", "\\n")
        .replace("\r", "\\n")
        .replace("\n", "\\n")
    )


def _present(value: Optional[str]) -> bool:
    return value is not None and bool(value.strip())


def serialize_contact(record: ContactRecord) -> SerializedCard:
    """Serialize a contact record into vCard 3.0 lines.

    Args:
        record: Contact to serialize.

    Returns:
        SerializedCard: Envelope, name lines and one line per populated
        optional field.

    Example:
        >>> serialize_contact(ContactRecord("John", "Doe")).text
        'BEGIN:VCARD\\nVERSION:3.0\\nFN:John Doe\\nN:Doe;John;;;\\nEND:VCARD'
    """
    given = escape_value(record.given_name)
    family = escape_value(record.family_name)

    lines: List[str] = [VCARD_BEGIN, VCARD_VERSION]
    lines.append(f"FN:{given} {family}")
    lines.append(f"N:{family};{given};;;")

    simple_fields = (
        ("TEL;TYPE=CELL", record.mobile),
        ("TEL;TYPE=WORK", record.work),
        ("EMAIL", record.email),
        ("ORG", record.organization),
        ("TITLE", record.title),
    )
    for prop, value in simple_fields:
        if _present(value):
            lines.append(f"{prop}:{escape_value(value)}")  # type: ignore[arg-type]

    address = (record.street, record.city, record.region)
    if any(_present(part) for part in address):
        # PO box и расширенный адрес пусты; индекс и страна тоже
        street, city, region = (
            escape_value(part) if _present(part) else "" for part in address  # type: ignore[arg-type]
        )
        lines.append(f"ADR;TYPE=WORK:;;{street};{city};{region};;;")

    if _present(record.website):
        lines.append(f"URL:{escape_value(record.website)}")  # type: ignore[arg-type]

    lines.append(VCARD_END)
    logger.debug("vCard serialized: %d lines", len(lines))
    return SerializedCard(tuple(lines))
