"""Git integration module for vite-pages."""

from vite_pages.git.repository import GitRepository
from vite_pages.git.url_resolver import (
    base_path_from_url,
    normalize_remote_url,
    pages_site_url,
    repo_name_from_url,
    validate_base_path,
)

__all__ = [
    "GitRepository",
    "base_path_from_url",
    "normalize_remote_url",
    "pages_site_url",
    "repo_name_from_url",
    "validate_base_path",
]
