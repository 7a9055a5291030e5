"""Git repository operations on top of the command runner."""

from pathlib import Path

import structlog

from vite_pages.core.exceptions import CommandFailedError
from vite_pages.process.runner import CommandRunner

logger = structlog.get_logger(__name__)


class GitRepository:
    """Initializes, commits and pushes a local Git repository.

    Uses subprocess + git CLI directly (no gitpython dependency).
    """

    def __init__(
        self,
        path: str | Path,
        runner: CommandRunner | None = None,
        git_executable: str = "git",
    ) -> None:
        self._repo_path = Path(path).resolve()
        self._runner = runner or CommandRunner()
        self._git = git_executable

    def _run_git(self, *args: str, capture: bool = True) -> str:
        """Run a git command and return stdout."""
        result = self._runner.run([self._git, *args], cwd=self._repo_path, capture=capture)
        return result.stdout

    def init(self) -> None:
        self._run_git("init")

    def mark_safe_directory(self) -> None:
        """Trust the repository path in the global git config."""
        self._run_git("config", "--global", "--add", "safe.directory", str(self._repo_path))

    def configure_identity(self, name: str | None = None, email: str | None = None) -> None:
        """Set the local commit author; blank values are left unset."""
        if name:
            self._run_git("config", "user.name", name)
        if email:
            self._run_git("config", "user.email", email)

    def add_all(self) -> None:
        self._run_git("add", "-A")

    def commit(self, message: str) -> None:
        self._run_git("commit", "-m", message)

    def rename_branch(self, name: str) -> None:
        self._run_git("branch", "-M", name)

    def set_remote(self, url: str, name: str = "origin") -> None:
        """Add the remote, or repoint it if it already exists."""
        try:
            self._run_git("remote", "add", name, url)
        except CommandFailedError:
            logger.debug("Remote exists, updating URL", remote=name, url=url)
            self._run_git("remote", "set-url", name, url)

    def push(self, branch: str, remote: str = "origin") -> None:
        """Push and set upstream; runs attached to the terminal for credential prompts."""
        self._run_git("push", "-u", remote, branch, capture=False)
