"""
RU: Упаковка изображения в PNG и data URI (base64)
EN: PNG container and base64 data URI transport encoding

Requirements: Pillow
"""

from __future__ import annotations

import base64
import binascii
import logging
from dataclasses import dataclass
from io import BytesIO
from typing import Final

from PIL import Image

from vcardqr.exceptions import ContainerWriteFailureError

logger = logging.getLogger(__name__)

__all__ = [
    "EncodedImage",
    "encode_container",
    "decode_transport_string",
]

PNG_MIME_TYPE: Final[str] = "image/png"
PNG_SIGNATURE: Final[bytes] = b"\x89PNG\r\n\x1a\n"
DATA_URI_PREFIX: Final[str] = f"data:{PNG_MIME_TYPE};base64,"


@dataclass(frozen=True)
class EncodedImage:
    """PNG bytes plus their data URI form."""

    data: bytes
    width: int
    height: int
    mime_type: str = PNG_MIME_TYPE

    @property
    def transport_string(self) -> str:
        return f"data:{self.mime_type};base64,{base64.b64encode(self.data).decode('ascii')}"


def encode_container(img: Image.Image) -> EncodedImage:
    """Serialize an image losslessly to PNG.

    Args:
        img: Pixel buffer to save.

    Returns:
        EncodedImage with PNG bytes and dimensions.

    Raises:
        ContainerWriteFailureError: Pillow/codec fault while writing.
    """
    buf = BytesIO()
    try:
        img.save(buf, format="PNG")
    except (OSError, ValueError, MemoryError) as e:
        logger.error("PNG encoding failed: %r", e)
        raise ContainerWriteFailureError(
            f"PNG encoding failed: {e}",
            context={"width": img.width, "height": img.height, "mode": img.mode},
        ) from e
    data = buf.getvalue()
    logger.debug("PNG written: %d bytes", len(data))
    return EncodedImage(data=data, width=img.width, height=img.height)


def decode_transport_string(transport: str) -> bytes:
    """Decode a ``data:image/png;base64,...`` string back into PNG bytes.

    Raises:
        ValueError: Not a base64 PNG data URI.
    """
    if not transport.startswith(DATA_URI_PREFIX):
        raise ValueError("Not a base64 PNG data URI")
    try:
        data = base64.b64decode(transport[len(DATA_URI_PREFIX):], validate=True)
    except binascii.Error as e:
        raise ValueError(f"Invalid base64 payload: {e}") from e
    if not data.startswith(PNG_SIGNATURE):
        raise ValueError("Decoded payload is not a PNG")
    return data
