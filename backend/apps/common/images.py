"""Text encoding for image lists stored in ``images`` columns.

Image references are persisted as a JSON array of strings. Decoding is total:
rows written by older clients or by hand may hold anything, and a bad value
must never break a listing, so it decodes to an empty list and is logged.
"""
import json
from typing import Any, Iterable, List, Optional

from .logger import get_logger

logger = get_logger(__name__).bind(component="common", layer="codec")


def encode_images(images: Optional[Iterable[str]]) -> str:
    return json.dumps([str(image) for image in (images or [])], ensure_ascii=False)


def decode_images(raw: Any, **context: Any) -> List[str]:
    if raw is None or raw == "":
        return []
    if isinstance(raw, (bytes, bytearray)):
        try:
            raw = raw.decode("utf-8")
        except UnicodeDecodeError:
            logger.warning("Undecodable image list bytes", length=len(raw), **context)
            return []
    try:
        value = json.loads(raw)
    except (TypeError, ValueError):
        logger.warning(
            "Malformed image list",
            length=len(raw) if isinstance(raw, str) else None,
            **context,
        )
        return []
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        logger.warning(
            "Image list has unexpected shape",
            type=type(value).__name__,
            **context,
        )
        return []
    return value


__all__ = ["encode_images", "decode_images"]
