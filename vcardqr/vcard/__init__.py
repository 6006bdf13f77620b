"""
vcard

Сериализация контакта в текст vCard 3.0.
"""

from vcardqr.vcard.serializer import SerializedCard, escape_value, serialize_contact

__all__ = ["SerializedCard", "escape_value", "serialize_contact"]
