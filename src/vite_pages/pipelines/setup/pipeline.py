"""Scaffold-and-publish pipeline."""

from collections.abc import Callable

import structlog

from vite_pages.config.settings import Settings, get_settings
from vite_pages.core.exceptions import CommandFailedError, ConfigurationError, ViteSetupError
from vite_pages.core.models.pipeline import SetupReport, StepResult, StepStatus
from vite_pages.core.models.project import ProjectConfig
from vite_pages.git.repository import GitRepository
from vite_pages.patching.package_json import PACKAGE_FILENAME, patch_package_file
from vite_pages.patching.vite_config import CONFIG_FILENAME, patch_config_file
from vite_pages.process.runner import CommandRunner

logger = structlog.get_logger(__name__)


class SetupStep:
    """A named unit of work in the setup pipeline."""

    def __init__(self, name: str, description: str, action: Callable[[], None]) -> None:
        self.name = name
        self.description = description
        self.action = action


class SetupPipeline:
    """Pipeline that scaffolds a Vite app and publishes it to GitHub Pages.

    Runs an ordered list of steps:
    1. Create the Vite app with the npm generator
    2. Install dependencies
    3. Add preview/predeploy/deploy scripts to package.json
    4. Ensure vite.config.js declares the repository base path
    5. Initialize git and configure the author
    6. Commit everything on the default branch
    7. Push to the remote
    8. Install gh-pages
    9. Deploy

    The first failing step stops the run. Completed steps are not rolled
    back; the report says which step failed and which ones finished.
    """

    def __init__(
        self,
        project: ProjectConfig,
        settings: Settings | None = None,
        runner: CommandRunner | None = None,
        on_step: Callable[[SetupStep], None] | None = None,
    ) -> None:
        self._project = project
        self._settings = settings or get_settings()
        self._runner = runner or CommandRunner()
        self._on_step = on_step
        self._git = GitRepository(
            project.project_path,
            runner=self._runner,
            git_executable=self._settings.git_executable,
        )

    def steps(self) -> list[SetupStep]:
        """Steps in execution order."""
        return [
            SetupStep("scaffold", "Creating Vite React app", self._scaffold),
            SetupStep("install", "Installing dependencies", self._install),
            SetupStep(
                "package_scripts",
                "Updating package.json scripts (preview, predeploy, deploy)",
                self._package_scripts,
            ),
            SetupStep(
                "vite_config",
                f"Ensuring {CONFIG_FILENAME} has base: '{self._project.base_path}'",
                self._vite_config,
            ),
            SetupStep("git_init", "Initializing Git repository", self._git_init),
            SetupStep("commit", "Committing initial files", self._commit),
            SetupStep(
                "push",
                f"Pushing to origin {self._settings.default_branch}",
                self._push,
            ),
            SetupStep("install_gh_pages", "Installing gh-pages", self._install_gh_pages),
            SetupStep(
                "deploy",
                "Deploying to GitHub Pages (branch: gh-pages)",
                self._deploy,
            ),
        ]

    def run(self) -> SetupReport:
        """Run every step in order, halting on the first failure."""
        report = SetupReport()
        failed = False

        for step in self.steps():
            if failed:
                report.steps.append(
                    StepResult(
                        name=step.name,
                        description=step.description,
                        status=StepStatus.SKIPPED,
                    )
                )
                continue

            if self._on_step is not None:
                self._on_step(step)
            logger.debug("Starting step", step=step.name)

            try:
                step.action()
            except CommandFailedError as e:
                failed = True
                result = StepResult(
                    name=step.name,
                    description=step.description,
                    status=StepStatus.FAILED,
                    error=e.message,
                    exit_code=e.returncode,
                )
            except (ViteSetupError, OSError) as e:
                failed = True
                result = StepResult(
                    name=step.name,
                    description=step.description,
                    status=StepStatus.FAILED,
                    error=str(e),
                    exit_code=1,
                )
            else:
                result = StepResult(
                    name=step.name,
                    description=step.description,
                    status=StepStatus.SUCCEEDED,
                )

            if failed:
                logger.error(
                    "Step failed",
                    step=step.name,
                    error=result.error,
                    completed=[s.name for s in report.completed_steps],
                )
            report.steps.append(result)

        if not failed:
            logger.info("Setup complete", project=self._project.project_name)
        return report

    def _npm(self, *args: str, in_project: bool = True) -> None:
        cwd = self._project.project_path if in_project else self._project.workdir
        self._runner.run([self._settings.npm_executable, *args], cwd=cwd)

    def _scaffold(self) -> None:
        path = self._project.project_path
        if path.exists() and any(path.iterdir()):
            raise ConfigurationError(
                f"Project directory already exists and is not empty: {path}",
                details={"path": str(path)},
            )
        self._npm(
            "create",
            "vite@latest",
            self._project.project_name,
            "--",
            "--template",
            self._settings.vite_template,
            in_project=False,
        )
        if not path.is_dir():
            raise ConfigurationError(
                f"Project generator did not create {path}",
                details={"path": str(path)},
            )

    def _install(self) -> None:
        self._npm("install")

    def _package_scripts(self) -> None:
        patch_package_file(
            self._project.project_path / PACKAGE_FILENAME,
            dist_dir=self._settings.dist_dir,
        )

    def _vite_config(self) -> None:
        patch_config_file(
            self._project.project_path / CONFIG_FILENAME,
            self._project.base_path,
            on_missing_anchor=self._settings.on_missing_anchor,
        )

    def _git_init(self) -> None:
        self._git.init()
        if self._settings.mark_safe_directory:
            self._git.mark_safe_directory()
        self._git.configure_identity(self._project.git_name, self._project.git_email)

    def _commit(self) -> None:
        self._git.add_all()
        self._git.commit(self._settings.commit_message)
        self._git.rename_branch(self._settings.default_branch)

    def _push(self) -> None:
        self._git.set_remote(self._project.repo_url)
        self._git.push(self._settings.default_branch)

    def _install_gh_pages(self) -> None:
        self._npm("install", "gh-pages", "--save-dev")

    def _deploy(self) -> None:
        self._npm("run", "deploy")
