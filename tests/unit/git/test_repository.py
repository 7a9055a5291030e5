"""Tests for Git repository operations."""

import subprocess
from pathlib import Path

import pytest

from fakes import FakeRunner
from vite_pages.core.exceptions import CommandFailedError
from vite_pages.git.repository import GitRepository


@pytest.fixture
def work_tree(tmp_path: Path) -> Path:
    """A directory with a couple of files, not yet a repository."""
    path = tmp_path / "my-app"
    path.mkdir()
    (path / "index.html").write_text("<div id=\"root\"></div>\n")
    (path / "vite.config.js").write_text("export default defineConfig({\n})\n")
    return path


@pytest.fixture
def bare_remote(tmp_path: Path) -> Path:
    """A local bare repository to push to."""
    remote = tmp_path / "remote.git"
    subprocess.run(["git", "init", "--bare", str(remote)], capture_output=True, check=True)
    return remote


def _git(work_tree: Path, *args: str) -> str:
    result = subprocess.run(
        ["git", *args], cwd=work_tree, capture_output=True, text=True, check=True
    )
    return result.stdout.strip()


@pytest.mark.unit
class TestGitRepository:
    """Tests for GitRepository against real repositories."""

    def test_init(self, work_tree: Path) -> None:
        GitRepository(work_tree).init()
        assert (work_tree / ".git").is_dir()

    def test_commit_and_rename_branch(self, work_tree: Path) -> None:
        repo = GitRepository(work_tree)
        repo.init()
        repo.configure_identity("Test", "test@test.com")
        repo.add_all()
        repo.commit("initial commit")
        repo.rename_branch("main")

        assert _git(work_tree, "rev-parse", "--abbrev-ref", "HEAD") == "main"
        assert _git(work_tree, "log", "--format=%s|%an") == "initial commit|Test"

    def test_set_remote_twice_updates_url(self, work_tree: Path) -> None:
        repo = GitRepository(work_tree)
        repo.init()
        repo.set_remote("https://github.com/alice/old.git")
        repo.set_remote("https://github.com/alice/new.git")
        assert _git(work_tree, "remote", "get-url", "origin") == "https://github.com/alice/new.git"

    def test_push_to_local_remote(self, work_tree: Path, bare_remote: Path) -> None:
        repo = GitRepository(work_tree)
        repo.init()
        repo.configure_identity("Test", "test@test.com")
        repo.add_all()
        repo.commit("initial commit")
        repo.rename_branch("main")
        repo.set_remote(str(bare_remote))
        repo.push("main")

        remote_head = subprocess.run(
            ["git", "--git-dir", str(bare_remote), "rev-parse", "main"],
            capture_output=True, text=True, check=True,
        )
        local_head = subprocess.run(
            ["git", "rev-parse", "HEAD"],
            cwd=work_tree, capture_output=True, text=True, check=True,
        )
        assert remote_head.stdout == local_head.stdout

    def test_commit_with_nothing_fails(self, work_tree: Path) -> None:
        empty = work_tree / "empty"
        empty.mkdir()
        repo = GitRepository(empty)
        repo.init()
        repo.configure_identity("Test", "test@test.com")
        with pytest.raises(CommandFailedError) as exc_info:
            repo.commit("initial commit")
        assert exc_info.value.returncode != 0


@pytest.mark.unit
class TestGitRepositoryCommands:
    """Tests for the exact git commands issued."""

    def test_blank_identity_skipped(self, tmp_path: Path) -> None:
        runner = FakeRunner()
        GitRepository(tmp_path, runner=runner).configure_identity(None, "")
        assert runner.commands() == []

    def test_identity(self, tmp_path: Path) -> None:
        runner = FakeRunner()
        GitRepository(tmp_path, runner=runner).configure_identity("Alice", "a@example.com")
        assert runner.commands() == [
            ("git", "config", "user.name", "Alice"),
            ("git", "config", "user.email", "a@example.com"),
        ]

    def test_mark_safe_directory(self, tmp_path: Path) -> None:
        runner = FakeRunner()
        GitRepository(tmp_path, runner=runner).mark_safe_directory()
        assert runner.commands() == [
            ("git", "config", "--global", "--add", "safe.directory", str(tmp_path.resolve())),
        ]

    def test_set_remote_falls_back_to_set_url(self, tmp_path: Path) -> None:
        runner = FakeRunner(fail_on=("git", "remote", "add"), returncode=3)
        GitRepository(tmp_path, runner=runner).set_remote("https://github.com/a/b.git")
        assert runner.commands() == [
            ("git", "remote", "add", "origin", "https://github.com/a/b.git"),
            ("git", "remote", "set-url", "origin", "https://github.com/a/b.git"),
        ]

    def test_custom_executable(self, tmp_path: Path) -> None:
        runner = FakeRunner()
        GitRepository(tmp_path, runner=runner, git_executable="/usr/local/bin/git").init()
        assert runner.commands() == [("/usr/local/bin/git", "init")]

    def test_public_operations(self) -> None:
        public = sorted(name for name in vars(GitRepository) if not name.startswith("_"))
        assert public == [
            "add_all",
            "commit",
            "configure_identity",
            "init",
            "mark_safe_directory",
            "push",
            "rename_branch",
            "set_remote",
        ]
