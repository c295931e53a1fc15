import io
from types import SimpleNamespace

import pytest
from google.genai import types
from PIL import Image

from chromatype.services.data_uri import to_data_uri
from chromatype.services.template_catalog import get_color_template, get_font_template

OCR_MODEL = "ocr-model"
IMAGE_MODEL = "image-model"


def make_image_bytes(image_format: str = "PNG", color: str = "red") -> bytes:
    image = Image.new("RGB", (8, 8), color)
    buffer = io.BytesIO()
    image.save(buffer, format=image_format)
    return buffer.getvalue()


def text_response(text: str | None) -> types.GenerateContentResponse:
    return types.GenerateContentResponse(
        candidates=[
            types.Candidate(
                content=types.Content(role="model", parts=[types.Part(text=text)])
            )
        ]
    )


def image_response(*parts: types.Part) -> types.GenerateContentResponse:
    return types.GenerateContentResponse(
        candidates=[types.Candidate(content=types.Content(role="model", parts=list(parts)))]
    )


def inline_part(data: bytes, mime_type: str = "image/png") -> types.Part:
    return types.Part(inline_data=types.Blob(data=data, mime_type=mime_type))


class FakeModels:
    """Stands in for client.aio.models; replies per model name."""

    def __init__(self, replies: dict) -> None:
        self.replies = replies
        self.calls: list[dict] = []

    async def generate_content(self, *, model, contents, config=None):
        self.calls.append({"model": model, "contents": contents, "config": config})
        reply = self.replies[model]
        if isinstance(reply, BaseException):
            raise reply
        return reply

    def calls_for(self, model: str) -> list[dict]:
        return [call for call in self.calls if call["model"] == model]


class FakeGenaiClient:
    def __init__(self, replies: dict) -> None:
        self.models = FakeModels(replies)
        self.aio = SimpleNamespace(models=self.models)


class FakeChatCompletions:
    def __init__(self, reply) -> None:
        self.reply = reply
        self.calls: list[dict] = []

    async def create(self, **kwargs):
        self.calls.append(kwargs)
        if isinstance(self.reply, BaseException):
            raise self.reply
        return SimpleNamespace(
            choices=[SimpleNamespace(message=SimpleNamespace(content=self.reply))]
        )


class FakeOpenAIClient:
    def __init__(self, reply) -> None:
        self.completions = FakeChatCompletions(reply)
        self.chat = SimpleNamespace(completions=self.completions)


def prompt_of(call: dict) -> str:
    return next(item for item in call["contents"] if isinstance(item, str))


@pytest.fixture
def png_bytes() -> bytes:
    return make_image_bytes("PNG")


@pytest.fixture
def png_data_uri(png_bytes) -> str:
    return to_data_uri(png_bytes, "image/png")


@pytest.fixture
def color_template():
    return get_color_template("neon-noir")


@pytest.fixture
def font_template():
    return get_font_template("bold-sans")
