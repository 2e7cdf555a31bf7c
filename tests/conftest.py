"""Pytest configuration and fixtures."""

import os

import numpy as np
import pytest
import structlog

# Keep the developer's environment from leaking into tests
for _key in [k for k in os.environ if k.startswith("CORRGAME_")]:
    del os.environ[_key]

from corrgame.config import Settings  # noqa: E402
from corrgame.logging import ensure_logging  # noqa: E402
from corrgame.services.game_service import RoundController  # noqa: E402
from corrgame.stats.sampling import SampleGenerator  # noqa: E402


@pytest.fixture(autouse=True)
def reset_structlog():
    """Undo any logging configuration a test (e.g. the CLI) applied and restore the package defaults."""
    yield
    structlog.reset_defaults()
    ensure_logging()


@pytest.fixture
def settings() -> Settings:
    return Settings()


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(20240611)


@pytest.fixture
def generator(rng: np.random.Generator) -> SampleGenerator:
    return SampleGenerator(rng=rng)


@pytest.fixture
def controller(settings: Settings, rng: np.random.Generator) -> RoundController:
    return RoundController(settings=settings, rng=rng)
