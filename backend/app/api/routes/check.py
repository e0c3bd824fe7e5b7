"""Writing check endpoint, the JSON face of the correction gateway."""

from fastapi import APIRouter

from app.api.dependencies import Gateway
from app.models.correction import CorrectionRequest, CorrectionResult

router = APIRouter()


@router.post("/check", response_model=CorrectionResult)
@router.post("/api/spelling-check", response_model=CorrectionResult, include_in_schema=False)
async def check_endpoint(body: CorrectionRequest, gateway: Gateway) -> CorrectionResult:
    """Check a student's text.

    Empty input is answered with 400 and an exhausted fallback chain with 503;
    both are turned into ``{"error": ...}`` by the application's exception
    handlers.
    """
    return await gateway.check(body.text)
