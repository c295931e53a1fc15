import asyncio
import logging

from chromatype.models.schemas import (
    ColorTemplate,
    FontTemplate,
    GeneratedResult,
    ProcessingState,
)
from chromatype.services.errors import GENERIC_FAILURE_MESSAGE, GenerationInProgressError
from chromatype.services.style_compositor import StyleCompositor

logger = logging.getLogger(__name__)


class GenerationSession:
    """
    Tracks the processing state and last result, and allows one generation at a time.

    State flow: idle -> processing -> success | error. Starting a new
    generation discards the previous result and a reset returns to idle.
    The result is only ever set from a complete successful generation.
    """

    def __init__(self, compositor: StyleCompositor) -> None:
        self.compositor = compositor
        self.state = ProcessingState()
        self.result: GeneratedResult | None = None
        self._lock = asyncio.Lock()

    @property
    def busy(self) -> bool:
        return self._lock.locked()

    async def generate(
        self,
        image_data_uri: str,
        color_template: ColorTemplate,
        font_template: FontTemplate,
    ) -> GeneratedResult:
        if self._lock.locked():
            raise GenerationInProgressError("A generation is already in progress")

        async with self._lock:
            self.result = None
            self.state = ProcessingState(
                status="processing", message="Applying style transformation..."
            )
            logger.info(
                "Generation started (color=%s, font=%s)", color_template.id, font_template.id
            )

            try:
                edited_image = await self.compositor.edit_image_with_template(
                    image_data_uri, color_template, font_template
                )
            except BaseException:
                self.state = ProcessingState(status="error", message=GENERIC_FAILURE_MESSAGE)
                raise

            self.result = GeneratedResult(
                original_image=image_data_uri,
                edited_image=edited_image,
                color_template_id=color_template.id,
                font_template_id=font_template.id,
            )
            self.state = ProcessingState(status="success")
            logger.info("Generation finished")
            return self.result

    def reset(self) -> None:
        """Discard the result and return to idle. Refused while a generation runs."""
        if self._lock.locked():
            raise GenerationInProgressError("Cannot reset while a generation is in progress")
        self.result = None
        self.state = ProcessingState(status="idle")
