import base64
import binascii
import io
import re

from PIL import Image, UnidentifiedImageError

from chromatype.services.errors import InvalidImageError

DEFAULT_MIME_TYPE = "image/png"

SUPPORTED_MIME_TYPES = {
    "image/png",
    "image/jpeg",
    "image/jpg",
    "image/webp",
}

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"

_HEADER_RE = re.compile(r"^data:(image/[a-zA-Z0-9.+-]+);base64,")


def parse_data_uri(data_uri: str) -> tuple[str, str]:
    """
    Split a data URI into its MIME type and raw base64 payload.

    A string without a header is treated as a bare PNG payload.
    """
    match = _HEADER_RE.match(data_uri)
    if match is None:
        return DEFAULT_MIME_TYPE, data_uri.strip()

    mime_type = match.group(1).lower()
    if mime_type not in SUPPORTED_MIME_TYPES:
        raise InvalidImageError(
            f"Unsupported image type {mime_type}. Allowed: {', '.join(sorted(SUPPORTED_MIME_TYPES))}"
        )

    return mime_type, data_uri[match.end():]


def decode_payload(payload: str) -> bytes:
    if not payload:
        raise InvalidImageError("Image payload is empty")
    try:
        return base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as e:
        raise InvalidImageError(f"Image payload is not valid base64: {e}") from e


def to_data_uri(image_data: bytes, mime_type: str = DEFAULT_MIME_TYPE) -> str:
    base64_data = base64.b64encode(image_data).decode("utf-8")
    return f"data:{mime_type};base64,{base64_data}"


def api_mime_type(mime_type: str) -> str:
    """image/jpg is accepted from clients but is not a registered type."""
    return "image/jpeg" if mime_type == "image/jpg" else mime_type


def ensure_png(image_data: bytes) -> bytes:
    """Return PNG bytes, re-encoding through Pillow when the input is another format."""
    if image_data.startswith(PNG_SIGNATURE):
        return image_data

    try:
        image = Image.open(io.BytesIO(image_data))
        image.load()
    except (UnidentifiedImageError, OSError) as e:
        raise InvalidImageError(f"Could not decode image data: {e}") from e

    if image.mode not in ("RGB", "RGBA", "L", "LA", "P"):
        image = image.convert("RGBA")

    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    return buffer.getvalue()


def get_image_dimensions(image_data: bytes) -> tuple[int, int]:
    """Get the width and height of an image."""
    try:
        image = Image.open(io.BytesIO(image_data))
    except (UnidentifiedImageError, OSError) as e:
        raise InvalidImageError(f"Could not decode image data: {e}") from e
    return image.size
