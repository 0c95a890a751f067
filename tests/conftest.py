from __future__ import annotations

from collections.abc import Callable, Iterator

import httpx
import pytest
from fastapi.testclient import TestClient

from main import app
from src.api import dependencies
from src.api.dependencies import get_orchestrator, get_platform_client
from src.config.settings import get_settings
from src.core.assessment_orchestrator import AssessmentOrchestrator
from src.core.platform_client import PlatformClient
from src.core.question_builder import QuestionSetBuilder
from src.models.framework import ACI_FRAMEWORK

PLATFORM_URL = "http://platform.test/api/trpc"

DOMAIN_RATINGS = {
    "Teaching & Learning": 5,
    "Student Support & Wellbeing": 4,
    "Professional Growth & Leadership": 2,
    "Technology & Innovation": 1,
}


@pytest.fixture(autouse=True)
def reset_singletons() -> Iterator[None]:
    """Every test starts without cached settings or singletons."""
    get_settings.cache_clear()
    dependencies._orchestrator = None
    dependencies._platform_client = None
    yield
    dependencies._orchestrator = None
    dependencies._platform_client = None
    get_settings.cache_clear()


@pytest.fixture
def question_builder() -> QuestionSetBuilder:
    """Deterministic builder: templates are used in turn."""
    return QuestionSetBuilder(ACI_FRAMEWORK, mode="rotate")


@pytest.fixture
def orchestrator(question_builder: QuestionSetBuilder) -> AssessmentOrchestrator:
    return AssessmentOrchestrator(question_builder=question_builder)


@pytest.fixture
def platform_handler() -> dict:
    """
    Mutable holder for the mocked platform behaviour.

    Tests set ``holder["handler"]`` to a function taking an httpx.Request
    and returning an httpx.Response; every request is recorded.
    """
    return {
        "handler": lambda request: httpx.Response(200, json={"result": {"data": None}}),
        "requests": [],
    }


@pytest.fixture
def make_platform_client() -> Callable[..., PlatformClient]:
    def _make(handler: Callable[[httpx.Request], httpx.Response], token: str = "secret") -> PlatformClient:
        return PlatformClient(
            base_url=PLATFORM_URL,
            token=token,
            transport=httpx.MockTransport(handler),
        )

    return _make


@pytest.fixture
def test_client(
    orchestrator: AssessmentOrchestrator,
    platform_handler: dict,
    make_platform_client: Callable[..., PlatformClient],
) -> Iterator[TestClient]:
    def _dispatch(request: httpx.Request) -> httpx.Response:
        platform_handler["requests"].append(request)
        return platform_handler["handler"](request)

    platform_client = make_platform_client(_dispatch)

    app.dependency_overrides[get_orchestrator] = lambda: orchestrator
    app.dependency_overrides[get_platform_client] = lambda: platform_client
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.pop(get_orchestrator, None)
    app.dependency_overrides.pop(get_platform_client, None)
