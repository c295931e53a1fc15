from typing import Literal

from pydantic import BaseModel, ConfigDict


class ColorTemplate(BaseModel):
    """Color grade preset applied to the edited image."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: str
    colors: tuple[str, ...]  # hex strings, ordered
    edit_prompt: str


class FontTemplate(BaseModel):
    """Typography preset used to re-render detected text."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: str
    font_family: str  # preview style tag, not sent to the model
    text_style_prompt: str


ProcessingStatus = Literal["idle", "uploading", "processing", "success", "error"]


class ProcessingState(BaseModel):
    status: ProcessingStatus = "idle"
    message: str | None = None


class GeneratedResult(BaseModel):
    """Outcome of a successful generation."""

    model_config = ConfigDict(frozen=True)

    original_image: str  # data URI
    edited_image: str  # data URI, always image/png
    color_template_id: str
    font_template_id: str


class GenerateRequest(BaseModel):
    image: str  # data URI
    color_template_id: str
    font_template_id: str
