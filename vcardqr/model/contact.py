# RU: Доменная модель контакта (неизменяемая) с fail-fast проверкой типов и маппингом полей запроса.
# EN: Immutable contact record with fail-fast type validation and request-payload mapping.

import logging
from dataclasses import dataclass, fields
from typing import Any, ClassVar, Dict, Mapping, Optional, Tuple

logger = logging.getLogger(__name__)

__all__ = ["ContactRecord"]


@dataclass(frozen=True)
class ContactRecord:
    """
    Flat contact record handed over by the surrounding service:
        - Two mandatory names, nine optional string attributes
        - Immutable: created once per request, never mutated
        - Validation is limited to types; content is already validated
          by the caller

    Examples (integration):
        record = ContactRecord(given_name="John", family_name="Doe", mobile="+1 555 0100")
        record = ContactRecord.from_mapping(request_json)
    """

    given_name: str
    family_name: str
    mobile: Optional[str] = None
    work: Optional[str] = None
    email: Optional[str] = None
    organization: Optional[str] = None
    title: Optional[str] = None
    street: Optional[str] = None
    city: Optional[str] = None
    region: Optional[str] = None
    website: Optional[str] = None

    # Ключи тела запроса сервиса -> атрибуты записи
    _PAYLOAD_KEYS: ClassVar[Tuple[Tuple[str, str], ...]] = (
        ("first_name", "given_name"),
        ("last_name", "family_name"),
        ("mobile", "mobile"),
        ("work", "work"),
        ("email", "email"),
        ("company", "organization"),
        ("role", "title"),
        ("street", "street"),
        ("city", "city"),
        ("state", "region"),
        ("website", "website"),
    )

    def __post_init__(self) -> None:
        for name in ("given_name", "family_name"):
            value = getattr(self, name)
            if not isinstance(value, str):
                logger.error("%s must be str, got %r", name, type(value))
                raise TypeError(f"{name} must be str")
        for name in self.optional_fields():
            value = getattr(self, name)
            if value is not None and not isinstance(value, str):
                logger.error("%s must be str or None, got %r", name, type(value))
                raise TypeError(f"{name} must be str or None")

    @classmethod
    def optional_fields(cls) -> Tuple[str, ...]:
        return tuple(
            f.name for f in fields(cls) if f.name not in ("given_name", "family_name")
        )

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "ContactRecord":
        """
        Build a record from a request body (first_name, last_name, mobile, work,
        email, company, role, street, city, state, website).
        Unknown keys (e.g. "color") are ignored.

        Raises:
            ValueError: If first_name or last_name is missing.
            TypeError: If a value has the wrong type.
        """
        for key in ("first_name", "last_name"):
            if data.get(key) is None:
                logger.error("Mandatory key %r missing from contact payload", key)
                raise ValueError(f"Missing mandatory field: {key}")
        kwargs = {attr: data.get(key) for key, attr in cls._PAYLOAD_KEYS}
        return cls(**kwargs)

    def to_mapping(self) -> Dict[str, Optional[str]]:
        """Inverse of :meth:`from_mapping` (request-body key layout)."""
        return {key: getattr(self, attr) for key, attr in self._PAYLOAD_KEYS}
