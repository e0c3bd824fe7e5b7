"""API dependencies: the process-wide correction gateway."""

from typing import Annotated

from fastapi import Depends, Request

from app.core.correction_gateway import CorrectionGateway


def get_gateway(request: Request) -> CorrectionGateway:
    """Return the gateway built during application startup.

    Tests replace this dependency through ``app.dependency_overrides``.
    """
    gateway = getattr(request.app.state, "gateway", None)
    if gateway is None:
        raise RuntimeError("Correction gateway is not initialised; is the lifespan running?")
    return gateway


Gateway = Annotated[CorrectionGateway, Depends(get_gateway)]
