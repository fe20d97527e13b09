"""Shared pytest fixtures.

These fixtures provide:
* Canonical CoachingContext instances
* Test settings that ignore the developer's .env
* A TestClient wired to those settings
"""

import pytest
from fastapi.testclient import TestClient

from pillarcoach.config.settings import Settings, get_settings
from pillarcoach.core.coaching.models import CoachingContext
from pillarcoach.main import create_app

TEST_API_KEY = "test-key"


@pytest.fixture
def habit_context() -> CoachingContext:
    """A self-care user trying to quit snus."""
    return CoachingContext(
        pillar_type="self_care",
        current_challenges=["sluta snusa", "sover dåligt"],
        user_goals=["må bättre"],
    )


@pytest.fixture
def test_settings() -> Settings:
    return Settings(_env_file=None, api_keys=TEST_API_KEY)


@pytest.fixture
def client(test_settings: Settings):
    """TestClient with settings overridden for the whole app."""
    app = create_app()
    app.dependency_overrides[get_settings] = lambda: test_settings
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def auth_headers() -> dict[str, str]:
    return {"X-API-Key": TEST_API_KEY}
