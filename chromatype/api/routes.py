import logging
import time

from fastapi import APIRouter, Depends, File, Form, HTTPException, Request, UploadFile
from fastapi.responses import Response

from chromatype.config import Settings
from chromatype.models.schemas import (
    ColorTemplate,
    FontTemplate,
    GeneratedResult,
    GenerateRequest,
    ProcessingState,
)
from chromatype.services.data_uri import (
    SUPPORTED_MIME_TYPES,
    decode_payload,
    get_image_dimensions,
    parse_data_uri,
    to_data_uri,
)
from chromatype.services.errors import (
    GENERIC_FAILURE_MESSAGE,
    CompositionError,
    GenerationInProgressError,
    InvalidImageError,
    TemplateNotFoundError,
)
from chromatype.services.generation_session import GenerationSession
from chromatype.services.template_catalog import (
    COLOR_TEMPLATES,
    FONT_TEMPLATES,
    default_color_template,
    default_font_template,
    get_color_template,
    get_font_template,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def get_session(request: Request) -> GenerationSession:
    return request.app.state.session


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


@router.get("/api/templates/colors", response_model=list[ColorTemplate])
async def list_color_templates() -> list[ColorTemplate]:
    return list(COLOR_TEMPLATES)


@router.get("/api/templates/fonts", response_model=list[FontTemplate])
async def list_font_templates() -> list[FontTemplate]:
    return list(FONT_TEMPLATES)


@router.post("/api/generate", response_model=GeneratedResult)
async def generate(
    body: GenerateRequest,
    session: GenerationSession = Depends(get_session),
    settings: Settings = Depends(get_settings),
) -> GeneratedResult:
    """Restyle an image given as a data URI."""
    color_template, font_template = _resolve_templates(
        body.color_template_id, body.font_template_id
    )

    try:
        _, payload = parse_data_uri(body.image)
        image_data = decode_payload(payload)
    except InvalidImageError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e

    _check_image(image_data, settings)

    return await _run_generation(session, body.image, color_template, font_template)


@router.post("/api/generate/upload", response_model=GeneratedResult)
async def generate_upload(
    file: UploadFile = File(...),
    color_template_id: str | None = Form(None),
    font_template_id: str | None = Form(None),
    session: GenerationSession = Depends(get_session),
    settings: Settings = Depends(get_settings),
) -> GeneratedResult:
    """
    Restyle an uploaded image file.

    Template ids are optional and fall back to the first entry of each catalog.
    """
    if file.content_type not in SUPPORTED_MIME_TYPES:
        raise HTTPException(
            status_code=400,
            detail=f"Invalid file type. Allowed: {', '.join(sorted(SUPPORTED_MIME_TYPES))}",
        )

    color_template, font_template = _resolve_templates(color_template_id, font_template_id)

    image_data = await file.read()

    if not image_data:
        raise HTTPException(status_code=400, detail="Empty file uploaded")

    _check_image(image_data, settings)

    image_data_uri = to_data_uri(image_data, file.content_type)
    return await _run_generation(session, image_data_uri, color_template, font_template)


@router.get("/api/state", response_model=ProcessingState)
async def get_state(session: GenerationSession = Depends(get_session)) -> ProcessingState:
    return session.state


@router.get("/api/result", response_model=GeneratedResult)
async def get_result(session: GenerationSession = Depends(get_session)) -> GeneratedResult:
    if session.result is None:
        raise HTTPException(status_code=404, detail="No result available")
    return session.result


@router.get("/api/result/download")
async def download_result(session: GenerationSession = Depends(get_session)) -> Response:
    """Return the edited image as a PNG attachment."""
    result = session.result
    if result is None:
        raise HTTPException(status_code=404, detail="No result available")

    _, payload = parse_data_uri(result.edited_image)
    filename = (
        f"chromatype-{result.color_template_id}-{result.font_template_id}"
        f"-{int(time.time() * 1000)}.png"
    )

    return Response(
        content=decode_payload(payload),
        media_type="image/png",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.post("/api/reset", response_model=ProcessingState)
async def reset(session: GenerationSession = Depends(get_session)) -> ProcessingState:
    try:
        session.reset()
    except GenerationInProgressError as e:
        raise HTTPException(status_code=409, detail=str(e)) from e
    return session.state


def _resolve_templates(
    color_template_id: str | None, font_template_id: str | None
) -> tuple[ColorTemplate, FontTemplate]:
    try:
        color_template = (
            get_color_template(color_template_id)
            if color_template_id
            else default_color_template()
        )
        font_template = (
            get_font_template(font_template_id)
            if font_template_id
            else default_font_template()
        )
    except TemplateNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.args[0]) from e

    return color_template, font_template


def _check_image(image_data: bytes, settings: Settings) -> None:
    if len(image_data) > settings.max_upload_bytes:
        raise HTTPException(
            status_code=413,
            detail=f"Image exceeds the {settings.max_upload_bytes} byte limit",
        )

    try:
        get_image_dimensions(image_data)
    except InvalidImageError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e


async def _run_generation(
    session: GenerationSession,
    image_data_uri: str,
    color_template: ColorTemplate,
    font_template: FontTemplate,
) -> GeneratedResult:
    try:
        return await session.generate(image_data_uri, color_template, font_template)
    except GenerationInProgressError as e:
        raise HTTPException(status_code=409, detail=str(e)) from e
    except InvalidImageError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    except CompositionError as e:
        raise HTTPException(status_code=502, detail=GENERIC_FAILURE_MESSAGE) from e
