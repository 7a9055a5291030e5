"""Repository URL helpers: repo names, base paths and Pages URLs."""

import re

from vite_pages.core.exceptions import InvalidBasePathError

_BASE_PATH_RE = re.compile(r"^/[^/\s'\"\\]+/$")


def normalize_remote_url(url: str) -> str:
    """Normalize a git remote URL to an HTTPS base URL.

    Handles:
    - git@github.com:org/repo.git -> https://github.com/org/repo
    - https://github.com/org/repo.git -> https://github.com/org/repo
    """
    url = url.strip().rstrip("/")
    # Strip .git suffix
    url = re.sub(r"\.git$", "", url)
    # Convert SSH to HTTPS
    ssh_match = re.match(r"git@([^:]+):(.+)", url)
    if ssh_match:
        host, path = ssh_match.groups()
        return f"https://{host}/{path}"
    return url


def repo_name_from_url(url: str) -> str:
    """Extract the repository name from a remote URL.

    Examples:
        "https://github.com/alice/my-repo.git" -> "my-repo"
        "https://github.com/alice/my-repo" -> "my-repo"
        "git@github.com:alice/my-repo.git" -> "my-repo"
    """
    name = re.sub(r"\.git$", "", url.strip().rstrip("/"))
    name = name.rsplit("/", 1)[-1]
    # scp-style remotes without a slash: git@host:repo
    name = name.rsplit(":", 1)[-1]
    if not name:
        raise InvalidBasePathError(
            f"Cannot derive a repository name from URL: {url!r}",
            details={"repo_url": url},
        )
    return name


def validate_base_path(base_path: str) -> str:
    """Return ``base_path`` if it has the ``/name/`` shape, else raise."""
    if not base_path or not _BASE_PATH_RE.match(base_path):
        raise InvalidBasePathError(
            f"Invalid base path: {base_path!r} (expected '/<name>/')",
            details={"base_path": base_path},
        )
    return base_path


def base_path_from_url(url: str) -> str:
    """Derive the ``/<repo>/`` base path a Pages site is served under."""
    return validate_base_path(f"/{repo_name_from_url(url)}/")


def pages_site_url(url: str) -> str | None:
    """Public GitHub Pages URL for a github.com remote, or None."""
    match = re.match(r"https://github\.com/([^/]+)/([^/]+)$", normalize_remote_url(url))
    if not match:
        return None
    owner, repo = match.groups()
    return f"https://{owner.lower()}.github.io/{repo}/"
