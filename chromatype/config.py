import os
from typing import Literal

from pydantic import BaseModel

DEFAULT_OCR_MODEL = "gemini-3-pro-preview"
DEFAULT_OPENAI_OCR_MODEL = "gpt-5.1"
DEFAULT_IMAGE_MODEL = "gemini-2.5-flash-image"


class Settings(BaseModel):
    """Process-wide configuration, read once at startup."""

    gemini_api_key: str | None = None
    openai_api_key: str | None = None
    ocr_provider: Literal["gemini", "openai"] = "gemini"
    ocr_model: str = DEFAULT_OCR_MODEL
    openai_ocr_model: str = DEFAULT_OPENAI_OCR_MODEL
    image_model: str = DEFAULT_IMAGE_MODEL
    ocr_timeout_seconds: float = 60.0
    generation_timeout_seconds: float = 180.0
    max_upload_bytes: int = 20 * 1024 * 1024

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            gemini_api_key=os.getenv("GEMINI_API_KEY") or os.getenv("API_KEY") or None,
            openai_api_key=os.getenv("OPENAI_API_KEY") or None,
            ocr_provider=os.getenv("OCR_PROVIDER", "gemini").lower(),
            ocr_model=os.getenv("OCR_MODEL", DEFAULT_OCR_MODEL),
            openai_ocr_model=os.getenv("OPENAI_OCR_MODEL", DEFAULT_OPENAI_OCR_MODEL),
            image_model=os.getenv("IMAGE_MODEL", DEFAULT_IMAGE_MODEL),
            ocr_timeout_seconds=float(os.getenv("OCR_TIMEOUT_SECONDS", "60")),
            generation_timeout_seconds=float(
                os.getenv("GENERATION_TIMEOUT_SECONDS", "180")
            ),
            max_upload_bytes=int(os.getenv("MAX_UPLOAD_BYTES", str(20 * 1024 * 1024))),
        )
