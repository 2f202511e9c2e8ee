"""Pytest configuration and shared fixtures."""

import sys
from collections.abc import Generator
from pathlib import Path

import pytest

# Add src directory to path for imports
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from genpair.domain.models import GenerationRequest, Style
from genpair.infrastructure.logging import LoggerSetup


@pytest.fixture(autouse=True)
def reset_logging() -> Generator[None, None, None]:
    """Give every test a fresh logging setup bound to the current stderr."""
    LoggerSetup.reset()
    yield
    LoggerSetup.reset()


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test inside an empty temporary working directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def foo_bar_request() -> GenerationRequest:
    """namespace foo, class Bar, default cpp style."""
    return GenerationRequest(namespace_name="foo", class_name="Bar")


@pytest.fixture(params=list(Style))
def any_style(request: pytest.FixtureRequest) -> Style:
    """Parametrized fixture over every style."""
    return request.param
