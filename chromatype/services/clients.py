import logging

from google import genai
from openai import AsyncOpenAI

from chromatype.config import Settings
from chromatype.services.style_compositor import StyleCompositor
from chromatype.services.text_extractor import (
    GeminiTextExtractor,
    OpenAITextExtractor,
    TextExtractor,
)

logger = logging.getLogger(__name__)


def build_genai_client(settings: Settings) -> genai.Client | None:
    """Construct the shared Gemini client, or None when no key is configured."""
    if not settings.gemini_api_key:
        logger.warning("GEMINI_API_KEY not set; image generation will fail until it is configured")
        return None
    return genai.Client(api_key=settings.gemini_api_key)


def build_text_extractor(
    settings: Settings, genai_client: genai.Client | None
) -> TextExtractor:
    if settings.ocr_provider == "openai":
        if settings.openai_api_key:
            return OpenAITextExtractor(
                AsyncOpenAI(api_key=settings.openai_api_key),
                model=settings.openai_ocr_model,
                timeout=settings.ocr_timeout_seconds,
            )
        logger.warning("OCR_PROVIDER=openai but OPENAI_API_KEY not set; using Gemini OCR")

    return GeminiTextExtractor(
        genai_client,
        model=settings.ocr_model,
        timeout=settings.ocr_timeout_seconds,
    )


def build_style_compositor(settings: Settings) -> StyleCompositor:
    genai_client = build_genai_client(settings)
    return StyleCompositor(
        genai_client,
        build_text_extractor(settings, genai_client),
        model=settings.image_model,
        timeout=settings.generation_timeout_seconds,
    )
