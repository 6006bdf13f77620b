"""
RU: Генератор QR-визитки: контакт → vCard → матрица QR → RGB-изображение → PNG → data URI
EN: vCard QR generator: contact → vCard → QR matrix → RGB image → PNG → data URI

Provides:
- Linear, stateless pipeline (safe to call concurrently)
- Colored dark modules on a white background
- Batch and async generation
- Typed public API

Requirements: Pillow, qrcode
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional, Tuple

from PIL import Image

from vcardqr.barcodegen.container import EncodedImage, encode_container
from vcardqr.barcodegen.raster import composite
from vcardqr.barcodegen.symbol import DEFAULT_ERROR_CORRECTION, ModuleMatrix, encode_symbol
from vcardqr.model.color import RGBColor, resolve_color
from vcardqr.model.contact import ContactRecord
from vcardqr.model.enums import ErrorCorrectionLevel
from vcardqr.vcard.serializer import SerializedCard, serialize_contact

logger = logging.getLogger(__name__)

__all__ = [
    "VCardQRGenerator",
    "generate_vcard_qr",
    "generate_from_payload",
]


class VCardQRGenerator:
    """vCard QR code generator.

    Args:
        record: Contact to encode.
        color: Color spec for dark modules ("#RRGGBB"); black when absent or malformed.
        error_correction: QR error correction level, M when None.

    Examples:
        >>> gen = VCardQRGenerator(ContactRecord("John", "Doe"), color="#FF0000")
        >>> gen.render_data_uri()[:22]
        'data:image/png;base64,'
    """

    def __init__(
        self,
        record: ContactRecord,
        color: Optional[str] = None,
        error_correction: Optional[ErrorCorrectionLevel] = None,
    ) -> None:
        if not isinstance(record, ContactRecord):
            logger.error("record must be ContactRecord, got %r", type(record))
            raise TypeError("record must be ContactRecord")
        self.record = record
        self.color_spec = color
        self.error_correction = (
            ErrorCorrectionLevel.parse(error_correction)
            if error_correction is not None
            else DEFAULT_ERROR_CORRECTION
        )

    @classmethod
    def from_config(
        cls,
        record: ContactRecord,
        config: Mapping[str, Any],
        color: Optional[str] = None,
    ) -> "VCardQRGenerator":
        """Build a generator with defaults taken from an already loaded config.

        Args:
            record: Contact to encode.
            config: Mapping as returned by ``vcardqr.load_config()``.
            color: Explicit color; ``config["default_color"]`` when None.

        Raises:
            ValueError: Unknown ``error_correction`` value in config.

        Example:
            >>> gen = VCardQRGenerator.from_config(record, load_config())
        """
        return cls(
            record,
            color=color if color is not None else config.get("default_color"),
            error_correction=ErrorCorrectionLevel.parse(
                config.get("error_correction", DEFAULT_ERROR_CORRECTION)
            ),
        )

    @property
    def color(self) -> RGBColor:
        return resolve_color(self.color_spec)

    def serialize(self) -> SerializedCard:
        return serialize_contact(self.record)

    def render_matrix(self) -> ModuleMatrix:
        """Build the QR module matrix.

        Raises:
            PayloadTooLargeError: vCard text exceeds QR capacity.
        """
        return encode_symbol(self.serialize(), self.error_correction)

    def render_image(self) -> Image.Image:
        """Render the QR code as an RGB PIL image."""
        return composite(self.render_matrix(), self.color)

    def render(self) -> EncodedImage:
        """Run the full pipeline.

        Returns:
            EncodedImage: PNG bytes and data URI.

        Raises:
            PayloadTooLargeError: vCard text exceeds QR capacity.
            ContainerWriteFailureError: PNG codec fault.
        """
        image = encode_container(self.render_image())
        logger.info(
            "vCard QR generated: %dx%d px, %d PNG bytes",
            image.width,
            image.height,
            len(image.data),
        )
        return image

    def render_bytes(self) -> bytes:
        """PNG bytes of the rendered QR code."""
        return self.render().data

    def render_data_uri(self) -> str:
        """``data:image/png;base64,...`` string usable as an image source."""
        return self.render().transport_string

    @classmethod
    def batch_generate(
        cls, items: List[Dict[str, Any]], parallel: bool = False
    ) -> List[Tuple[Dict[str, Any], EncodedImage]]:
        """Batch-generate QR codes.

        Args:
            items: List of dicts {record, color, error_correction}.
            parallel: Run on a thread pool.

        Returns:
            List of (input_dict, EncodedImage) tuples, in input order.

        Raises:
            EncodingError: The first failing item aborts the batch.
        """
        from concurrent.futures import ThreadPoolExecutor

        def gen(item: Dict[str, Any]) -> Tuple[Dict[str, Any], EncodedImage]:
            generator = cls(
                record=item["record"],
                color=item.get("color"),
                error_correction=item.get("error_correction"),
            )
            return item, generator.render()

        if parallel:
            with ThreadPoolExecutor() as pool:
                result = list(pool.map(gen, items))
        else:
            result = [gen(i) for i in items]
        logger.info("Batch vCard QR generation complete: %d items", len(items))
        return result

    async def render_async(self) -> EncodedImage:
        """Async wrapper for render (runs in the loop's default executor)."""
        import asyncio

        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self.render)


def generate_vcard_qr(
    record: ContactRecord,
    color: Optional[str] = None,
    error_correction: Optional[ErrorCorrectionLevel] = None,
) -> EncodedImage:
    """Encode a contact record into a PNG QR code.

    Example:
        >>> generate_vcard_qr(ContactRecord("John", "Doe")).transport_string
        'data:image/png;base64,iVBORw0KGgo...'
    """
    return VCardQRGenerator(record, color, error_correction).render()


def generate_from_payload(
    payload: Mapping[str, Any],
    error_correction: Optional[ErrorCorrectionLevel] = None,
) -> EncodedImage:
    """Encode a request body (first_name, last_name, ..., color) into a PNG QR code.

    Raises:
        ValueError: Mandatory name missing.
        TypeError: Field of wrong type.
    """
    record = ContactRecord.from_mapping(payload)
    color = payload.get("color")
    return generate_vcard_qr(
        record,
        color if isinstance(color, str) else None,
        error_correction,
    )
