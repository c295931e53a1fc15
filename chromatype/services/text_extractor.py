import asyncio
import logging

from google import genai
from google.genai import types
from openai import AsyncOpenAI

from chromatype.services.data_uri import api_mime_type, to_data_uri
from chromatype.services.prompts import EMPTY_TEXT_SENTINEL, OCR_PROMPT

logger = logging.getLogger(__name__)


def normalize_detected_text(text: str | None) -> str:
    """Strip the model output; blank or missing output becomes the EMPTY sentinel."""
    if text is None:
        return EMPTY_TEXT_SENTINEL
    return text.strip() or EMPTY_TEXT_SENTINEL


class TextExtractor:
    """
    Best-effort OCR stage.

    Extraction degrades: any failure, including a timeout, is logged and
    reported as EMPTY so that composition still runs.
    """

    def __init__(self, timeout: float | None = None) -> None:
        self.timeout = timeout

    async def extract_text(self, image_data: bytes, mime_type: str) -> str:
        try:
            text = await asyncio.wait_for(
                self._request_text(image_data, mime_type), timeout=self.timeout
            )
        except Exception as e:
            logger.warning("OCR pre-processing failed: %r", e)
            return EMPTY_TEXT_SENTINEL

        detected = normalize_detected_text(text)
        if detected == EMPTY_TEXT_SENTINEL:
            logger.info("OCR found no text")
        else:
            logger.info("OCR detected %d characters of text", len(detected))
        return detected

    async def _request_text(self, image_data: bytes, mime_type: str) -> str | None:
        raise NotImplementedError


class GeminiTextExtractor(TextExtractor):
    """Transcribes text with a Gemini vision model."""

    def __init__(
        self, client: genai.Client, model: str, timeout: float | None = None
    ) -> None:
        super().__init__(timeout)
        self.client = client
        self.model = model

    async def _request_text(self, image_data: bytes, mime_type: str) -> str | None:
        response = await self.client.aio.models.generate_content(
            model=self.model,
            contents=[
                types.Part.from_bytes(data=image_data, mime_type=api_mime_type(mime_type)),
                OCR_PROMPT,
            ],
        )
        return response.text


class OpenAITextExtractor(TextExtractor):
    """Transcribes text with an OpenAI vision chat model."""

    def __init__(
        self, client: AsyncOpenAI, model: str, timeout: float | None = None
    ) -> None:
        super().__init__(timeout)
        self.client = client
        self.model = model

    async def _request_text(self, image_data: bytes, mime_type: str) -> str | None:
        response = await self.client.chat.completions.create(
            model=self.model,
            messages=[
                {
                    "role": "user",
                    "content": [
                        {"type": "text", "text": OCR_PROMPT},
                        {
                            "type": "image_url",
                            "image_url": {
                                "url": to_data_uri(image_data, api_mime_type(mime_type)),
                            },
                        },
                    ],
                }
            ],
            max_completion_tokens=2048,
        )

        return response.choices[0].message.content
