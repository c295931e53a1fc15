import asyncio
import logging

from google import genai
from google.genai import types

from chromatype.config import DEFAULT_IMAGE_MODEL
from chromatype.models.schemas import ColorTemplate, FontTemplate
from chromatype.services.data_uri import (
    api_mime_type,
    decode_payload,
    ensure_png,
    parse_data_uri,
    to_data_uri,
)
from chromatype.services.errors import (
    CompositionError,
    MissingCredentialError,
    NoImageReturnedError,
)
from chromatype.services.prompts import build_edit_prompt, has_detected_text
from chromatype.services.text_extractor import TextExtractor

logger = logging.getLogger(__name__)


class StyleCompositor:
    """Re-renders an image in a color grade and typography style with Gemini image editing."""

    def __init__(
        self,
        client: genai.Client | None,
        text_extractor: TextExtractor,
        model: str = DEFAULT_IMAGE_MODEL,
        timeout: float | None = None,
    ) -> None:
        self.client = client
        self.text_extractor = text_extractor
        self.model = model
        self.timeout = timeout

    async def edit_image_with_template(
        self,
        image_data_uri: str,
        color_template: ColorTemplate,
        font_template: FontTemplate,
    ) -> str:
        """
        Run OCR, then ask the image model to redraw the image in the chosen style.

        Composition fails hard: a missing client, a transport error, a timeout
        or a response without an inline image all raise CompositionError.
        OCR failures never reach the caller.

        Returns the edited image as a PNG data URI.
        """
        if self.client is None:
            logger.error("Gemini image edit aborted: API key is not configured")
            raise MissingCredentialError(
                "API key is missing. Please set GEMINI_API_KEY."
            )

        mime_type, payload = parse_data_uri(image_data_uri)
        image_data = decode_payload(payload)

        detected_text = await self.text_extractor.extract_text(image_data, mime_type)
        prompt = build_edit_prompt(color_template, font_template, detected_text)

        logger.info(
            "Editing image with color=%s font=%s text=%s",
            color_template.id,
            font_template.id,
            "yes" if has_detected_text(detected_text) else "no",
        )

        try:
            response = await asyncio.wait_for(
                self.client.aio.models.generate_content(
                    model=self.model,
                    contents=[
                        types.Part.from_bytes(
                            data=image_data, mime_type=api_mime_type(mime_type)
                        ),
                        prompt,
                    ],
                    config=types.GenerateContentConfig(
                        response_modalities=["IMAGE"],
                    ),
                ),
                timeout=self.timeout,
            )
            edited = ensure_png(self._first_inline_image(response))
        except CompositionError:
            logger.exception("Gemini image edit error")
            raise
        except Exception as e:
            logger.exception("Gemini image edit error")
            raise CompositionError(f"Gemini image edit failed: {e!r}") from e

        return to_data_uri(edited, "image/png")

    def _first_inline_image(self, response: types.GenerateContentResponse) -> bytes:
        if not response.candidates:
            raise NoImageReturnedError("Gemini API returned no candidates")

        candidate = response.candidates[0]
        if candidate.content is None or not candidate.content.parts:
            finish_reason = getattr(candidate, "finish_reason", "UNKNOWN")
            raise NoImageReturnedError(
                f"Gemini API returned no content. Finish reason: {finish_reason}"
            )

        parts = candidate.content.parts
        for index, part in enumerate(parts):
            if part.inline_data is not None and part.inline_data.data:
                ignored = len(parts) - index - 1
                if ignored:
                    logger.debug("Ignoring %d trailing response parts", ignored)
                return part.inline_data.data

        raise NoImageReturnedError("No image data returned from Gemini.")
