"""Tests for repository URL helpers."""

import pytest

from vite_pages.core.exceptions import InvalidBasePathError
from vite_pages.git.url_resolver import (
    base_path_from_url,
    normalize_remote_url,
    pages_site_url,
    repo_name_from_url,
    validate_base_path,
)


@pytest.mark.unit
class TestRepoName:
    """Tests for repo_name_from_url."""

    def test_https_with_git_suffix(self) -> None:
        assert repo_name_from_url("https://github.com/alice/my-repo.git") == "my-repo"

    def test_https_without_git_suffix(self) -> None:
        assert repo_name_from_url("https://github.com/alice/my-repo") == "my-repo"

    def test_ssh(self) -> None:
        assert repo_name_from_url("git@github.com:alice/my-repo.git") == "my-repo"

    def test_scp_without_owner(self) -> None:
        assert repo_name_from_url("git@example.com:my-repo.git") == "my-repo"

    def test_trailing_slash_and_whitespace(self) -> None:
        assert repo_name_from_url("  https://github.com/alice/my-repo/ ") == "my-repo"

    def test_plain_name(self) -> None:
        assert repo_name_from_url("my-repo") == "my-repo"

    def test_empty(self) -> None:
        with pytest.raises(InvalidBasePathError):
            repo_name_from_url("")


@pytest.mark.unit
class TestBasePath:
    """Tests for base path derivation and validation."""

    def test_from_url_with_git_suffix(self) -> None:
        assert base_path_from_url("https://github.com/alice/my-repo.git") == "/my-repo/"

    def test_from_url_without_git_suffix(self) -> None:
        assert base_path_from_url("https://github.com/alice/my-repo") == "/my-repo/"

    def test_from_url_with_space(self) -> None:
        with pytest.raises(InvalidBasePathError):
            base_path_from_url("https://example.com/alice/my repo")

    def test_validate_accepts(self) -> None:
        assert validate_base_path("/my.site_v2/") == "/my.site_v2/"

    @pytest.mark.parametrize("bad", ["", "/", "/x", "x/", "/a/b/"])
    def test_validate_rejects(self, bad: str) -> None:
        with pytest.raises(InvalidBasePathError):
            validate_base_path(bad)


@pytest.mark.unit
class TestRemoteUrls:
    """Tests for remote URL normalization and Pages URLs."""

    def test_normalize_ssh_url(self) -> None:
        assert normalize_remote_url("git@github.com:org/repo.git") == "https://github.com/org/repo"

    def test_normalize_https_url(self) -> None:
        assert normalize_remote_url("https://github.com/org/repo.git") == "https://github.com/org/repo"

    def test_normalize_clean_url(self) -> None:
        assert normalize_remote_url("https://github.com/org/repo") == "https://github.com/org/repo"

    def test_pages_url(self) -> None:
        assert pages_site_url("https://github.com/Alice/my-repo.git") == "https://alice.github.io/my-repo/"

    def test_pages_url_from_ssh(self) -> None:
        assert pages_site_url("git@github.com:alice/my-repo.git") == "https://alice.github.io/my-repo/"

    def test_pages_url_other_host(self) -> None:
        assert pages_site_url("https://gitlab.com/alice/my-repo.git") is None
