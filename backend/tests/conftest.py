"""Shared test fixtures.

Profiles are built through ``make_profile`` so each test only states the
fields it cares about.
"""

from __future__ import annotations

from typing import Any, Callable, Generator

import pytest

from domain.health_plan.core.value_objects import Profile
from infrastructure.health_plan.factory import reset_plan_orchestrator

DEFAULT_PROFILE = dict(
    age=30,
    gender="female",
    weight=70.0,
    height=165.0,
    activity_level="sedentary",
    goal="lose",
    restrictions="",
    conditions="",
)


@pytest.fixture(autouse=True)
def _clear_rule_env(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Remove HEALTH_PLAN_* overrides and the cached orchestrator.

    Keeps a developer's .env from changing the bundled tables under test.
    Tests that need an override set it with monkeypatch.setenv.
    """
    monkeypatch.delenv("HEALTH_PLAN_KEYWORDS_FILE", raising=False)
    monkeypatch.delenv("HEALTH_PLAN_SUBSTITUTIONS_FILE", raising=False)
    reset_plan_orchestrator()
    yield
    reset_plan_orchestrator()


@pytest.fixture
def make_profile() -> Callable[..., Profile]:
    """Factory for profiles; defaults to a 30 year old sedentary woman."""

    def _make(**overrides: Any) -> Profile:
        data = {**DEFAULT_PROFILE, **overrides}
        return Profile(**data)

    return _make
