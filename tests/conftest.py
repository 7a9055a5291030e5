"""Pytest configuration and fixtures."""

from pathlib import Path

import pytest
import structlog

from fakes import VITE_CONFIG, FakeRunner
from vite_pages.config.settings import Settings
from vite_pages.core.models.project import ProjectConfig


@pytest.fixture(autouse=True)
def _reset_structlog():
    """CLI tests reconfigure structlog against CliRunner streams."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def settings() -> Settings:
    """Settings that never touch the global git config."""
    return Settings(mark_safe_directory=False, _env_file=None)


@pytest.fixture
def fake_runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def project(tmp_path: Path) -> ProjectConfig:
    """A project to be created under a temporary working directory."""
    return ProjectConfig(
        project_name="my-app",
        repo_url="https://github.com/alice/my-repo.git",
        git_name="Alice",
        git_email="alice@example.com",
        workdir=tmp_path,
    )


@pytest.fixture
def vite_config_lines() -> list[str]:
    """The stock Vite React config as lines."""
    return VITE_CONFIG.splitlines()
