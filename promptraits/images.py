"""Normalize uploaded photos into the JPEG payloads the handler expects."""

from __future__ import annotations

import base64
import io
import logging

from PIL import Image, UnidentifiedImageError

from promptraits.errors import InvalidRequest
from promptraits.models import ImageInput

logger = logging.getLogger(__name__)

DEFAULT_MAX_SIDE = 1536


def fit_within(image: Image.Image, max_side: int) -> Image.Image:
    """Downscale so the longer side is at most ``max_side``. Never upscales."""
    width, height = image.size
    longest = max(width, height)
    if longest <= max_side:
        return image

    scale = max_side / longest
    new_size = (max(1, round(width * scale)), max(1, round(height * scale)))
    return image.resize(new_size, Image.LANCZOS)


def encode_image(raw: bytes, max_side: int = DEFAULT_MAX_SIDE, quality: int = 90) -> ImageInput:
    try:
        image = Image.open(io.BytesIO(raw))
        image.load()
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError) as e:
        raise InvalidRequest("La imagen no es válida", str(e)) from e

    original_size = image.size
    image = fit_within(image.convert("RGB"), max_side)

    buf = io.BytesIO()
    image.save(buf, format="JPEG", quality=quality)
    data = base64.b64encode(buf.getvalue()).decode("ascii")

    logger.info(
        "Encoded upload %dx%d -> %dx%d (%d base64 chars)",
        original_size[0], original_size[1], image.width, image.height, len(data),
    )
    return ImageInput(data=data, mime_type="image/jpeg")
