"""Shared test fixtures for Writing Helper backend tests."""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from app.api.dependencies import get_gateway
from app.core.correction_gateway import CorrectionGateway
from app.main import app
from app.models.correction import CorrectionError, CorrectionResult


def make_result(**overrides) -> CorrectionResult:
    """Build a CorrectionResult with one spelling error unless overridden."""
    data = {
        "has_errors": True,
        "corrected_text": "I saw the cat.",
        "errors": [
            CorrectionError(
                original="teh",
                correction="the",
                error_type="spelling",
                explanation="'The' is spelled t-h-e.",
            ),
        ],
        "feedback": "Nice work! Just one small spelling slip.",
    }
    data.update(overrides)
    return CorrectionResult(**data)


class FakeProvider:
    """Stand-in provider that records every call.

    Returns *result*, raises *error*, or with *echo* answers "no errors"
    with the received text as the corrected text.
    """

    def __init__(
        self,
        name: str,
        result: CorrectionResult | None = None,
        error: Exception | None = None,
        echo: bool = False,
        events: list[str] | None = None,
    ) -> None:
        self.name = name
        self.result = result
        self.error = error
        self.echo = echo
        self.events = events if events is not None else []
        self.calls: list[str] = []

    async def check(self, text: str) -> CorrectionResult:
        self.calls.append(text)
        self.events.append(f"{self.name}:start")
        try:
            if self.error is not None:
                raise self.error
            if self.echo:
                return CorrectionResult(
                    has_errors=False,
                    corrected_text=text,
                    errors=[],
                    feedback="Great job! Your writing is clear.",
                )
            return self.result
        finally:
            self.events.append(f"{self.name}:end")


@pytest.fixture
def events() -> list[str]:
    return []


@pytest.fixture
def primary(events) -> FakeProvider:
    return FakeProvider("primary", result=make_result(feedback="from primary"), events=events)


@pytest.fixture
def secondary(events) -> FakeProvider:
    return FakeProvider("secondary", result=make_result(feedback="from secondary"), events=events)


@pytest.fixture
def gateway(primary, secondary) -> CorrectionGateway:
    return CorrectionGateway([primary, secondary])


@pytest_asyncio.fixture
async def client_factory():
    """Yield a factory that builds an API client bound to a given gateway."""
    clients: list[AsyncClient] = []

    async def _make(gw: CorrectionGateway) -> AsyncClient:
        app.dependency_overrides[get_gateway] = lambda: gw
        ac = AsyncClient(transport=ASGITransport(app=app), base_url="http://test")
        clients.append(ac)
        return ac

    yield _make

    for ac in clients:
        await ac.aclose()
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client(client_factory, gateway) -> AsyncClient:
    return await client_factory(gateway)
