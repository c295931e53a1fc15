import logging
import os
from contextlib import asynccontextmanager
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from chromatype.api.routes import router
from chromatype.config import Settings
from chromatype.services.clients import build_style_compositor
from chromatype.services.generation_session import GenerationSession
from chromatype.services.style_compositor import StyleCompositor
from chromatype.services.template_catalog import COLOR_TEMPLATES, FONT_TEMPLATES

load_dotenv()

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
)

BASE_DIR = Path(__file__).resolve().parent
templates = Jinja2Templates(directory=str(BASE_DIR / "templates"))


def create_app(
    settings: Settings | None = None, compositor: StyleCompositor | None = None
) -> FastAPI:
    """
    Build the API. Clients are constructed once on startup and shared by
    both pipeline stages; pass a compositor to bypass construction.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app_settings = settings or Settings.from_env()
        app.state.settings = app_settings
        app.state.session = GenerationSession(
            compositor or build_style_compositor(app_settings)
        )
        yield

    app = FastAPI(
        title="ChromaType API",
        description="Restyle images with a color grade and typography template using Gemini",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.include_router(router)

    @app.get("/", response_class=HTMLResponse)
    async def index(request: Request) -> HTMLResponse:
        """Serve the test HTML page."""
        return templates.TemplateResponse(
            request,
            "index.html",
            {"color_templates": COLOR_TEMPLATES, "font_templates": FONT_TEMPLATES},
        )

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8002"))

    uvicorn.run("chromatype.main:app", host=host, port=port, reload=True)
