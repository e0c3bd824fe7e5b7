"""Server-rendered single-page form."""

import logging
from pathlib import Path
from typing import Annotated

from fastapi import APIRouter, Form, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from app.api.dependencies import Gateway
from app.core.errors import GatewayError, ValidationError
from app.core.presentation import (
    EMPTY_INPUT_MESSAGE,
    GENERIC_ERROR_MESSAGE,
    ResultView,
    build_result_view,
)
from app.models.correction import PARAGRAPH_MARKER

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parents[2] / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

router = APIRouter()


def _render(
    request: Request,
    text: str = "",
    view: ResultView | None = None,
    error: str | None = None,
) -> HTMLResponse:
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "text": text,
            "result": view,
            "error": error,
            "marker": PARAGRAPH_MARKER,
        },
    )


@router.get("/", response_class=HTMLResponse)
async def index(request: Request) -> HTMLResponse:
    return _render(request)


@router.post("/", response_class=HTMLResponse)
async def submit(
    request: Request,
    gateway: Gateway,
    text: Annotated[str, Form()] = "",
) -> HTMLResponse:
    """Run the check and render the page with the result or a single error message."""
    try:
        result = await gateway.check(text)
    except ValidationError:
        return _render(request, text, error=EMPTY_INPUT_MESSAGE)
    except GatewayError as exc:
        logger.info("Page check failed: %s", exc.message)
        return _render(request, text, error=GENERIC_ERROR_MESSAGE)

    return _render(request, text, view=build_result_view(result))
