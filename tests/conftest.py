"""Shared test fixtures and factories."""

import pytest

from genlab.config.paths import get_genlab_home


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    """Point GENLAB_HOME at a temp dir and run from an empty cwd."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("GENLAB_HOME", str(home))
    monkeypatch.delenv("GENLAB_LOG_LEVEL", raising=False)
    monkeypatch.chdir(tmp_path)
    get_genlab_home.cache_clear()
    yield home
    get_genlab_home.cache_clear()


@pytest.fixture
def cli_runner():
    """Create a Typer CLI test runner with colors disabled."""
    from typer.testing import CliRunner

    return CliRunner(env={"NO_COLOR": "1"})
