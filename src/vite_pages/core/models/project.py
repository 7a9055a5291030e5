"""Project configuration models."""

import re
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from vite_pages.git.url_resolver import base_path_from_url, pages_site_url, repo_name_from_url

_PROJECT_NAME_RE = re.compile(r"^[^\s/\\]+$")


class ProjectConfig(BaseModel):
    """Everything needed to scaffold and publish one project."""

    project_name: str = "learning_react"
    repo_url: str
    git_name: str | None = None
    git_email: str | None = None
    workdir: Path = Field(default_factory=Path.cwd)

    @field_validator("project_name")
    @classmethod
    def _check_project_name(cls, value: str) -> str:
        value = value.strip()
        if not value or not _PROJECT_NAME_RE.match(value) or value in (".", ".."):
            raise ValueError(f"Invalid project name: {value!r}")
        return value

    @field_validator("repo_url")
    @classmethod
    def _check_repo_url(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Repository URL is required")
        return value

    @field_validator("git_name", "git_email")
    @classmethod
    def _blank_to_none(cls, value: str | None) -> str | None:
        if value is None:
            return None
        return value.strip() or None

    @property
    def project_path(self) -> Path:
        return self.workdir / self.project_name

    @property
    def repo_name(self) -> str:
        return repo_name_from_url(self.repo_url)

    @property
    def base_path(self) -> str:
        return base_path_from_url(self.repo_url)

    @property
    def site_url(self) -> str | None:
        return pages_site_url(self.repo_url)
