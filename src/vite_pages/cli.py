"""CLI for vite-pages."""

import sys
from pathlib import Path

import click
import structlog
from pydantic import ValidationError as PydanticValidationError

from vite_pages.config.logging import configure_logging
from vite_pages.config.settings import get_settings
from vite_pages.core.exceptions import ViteSetupError

logger = structlog.get_logger(__name__)


def _fail(message: str, code: int = 1) -> None:
    click.echo(message, err=True)
    sys.exit(code)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
def cli(verbose: bool) -> None:
    """vite-pages: Scaffold a Vite React app and publish it to GitHub Pages."""
    log_level = "DEBUG" if verbose else get_settings().log_level
    configure_logging(log_level=log_level)


@cli.command()
@click.option("--project-name", "-n", help="Project name (lowercase, no spaces)")
@click.option("--repo-url", "-r", help="GitHub repository URL")
@click.option("--git-name", help="Git user.name for local commits")
@click.option("--git-email", help="Git user.email for local commits")
@click.option(
    "--workdir",
    "-C",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=".",
    help="Directory to create the project in",
)
@click.option("--yes", "-y", is_flag=True, help="Skip the confirmation prompt")
def setup(
    project_name: str | None,
    repo_url: str | None,
    git_name: str | None,
    git_email: str | None,
    workdir: Path,
    yes: bool,
) -> None:
    """Create a Vite React app, push it to GitHub and deploy to Pages.

    Prompts for anything not given as an option.
    """
    from vite_pages.core.models.project import ProjectConfig
    from vite_pages.pipelines.setup import SetupPipeline

    settings = get_settings()

    click.echo("=== Vite + React -> GitHub Pages Setup ===")
    click.echo("This will:")
    click.echo("  1) Create a Vite React app")
    click.echo("  2) Initialize Git and push to your GitHub repo")
    click.echo("  3) Configure gh-pages and deploy (branch: gh-pages)")
    click.echo()

    if project_name is None:
        project_name = click.prompt(
            "Project name (lowercase, no spaces)", default=settings.default_project_name
        )
    if repo_url is None:
        repo_url = click.prompt(
            "GitHub repository URL (e.g., https://github.com/<user>/<repo>.git)",
            default="",
            show_default=False,
        )
    if not repo_url.strip():
        _fail("Repository URL is required. Aborting.")
    if git_name is None:
        git_name = click.prompt("Git user.name (for local commits)", default="", show_default=False)
    if git_email is None:
        git_email = click.prompt("Git user.email (for local commits)", default="", show_default=False)

    try:
        project = ProjectConfig(
            project_name=project_name,
            repo_url=repo_url,
            git_name=git_name,
            git_email=git_email,
            workdir=workdir.resolve(),
        )
        base_path = project.base_path
    except PydanticValidationError as e:
        _fail(f"Error: {e.errors()[0]['msg']}")
    except ViteSetupError as e:
        _fail(f"Error: {e.message}")

    click.echo()
    click.echo("==> Summary")
    click.echo(f"Project: {project.project_name}")
    click.echo(f"Repo URL: {project.repo_url}")
    click.echo(f"Repo name: {project.repo_name}")
    click.echo(f"Base path: {base_path}")
    click.echo(f"Git user.name: {project.git_name or ''}")
    click.echo(f"Git user.email: {project.git_email or ''}")
    click.echo()

    if not yes and not click.confirm("Proceed?", default=False):
        _fail("Aborted.")

    def _announce(step) -> None:
        click.echo()
        click.echo(f"==> {step.description}...")

    report = SetupPipeline(project, settings=settings, on_step=_announce).run()

    failed = report.failed_step
    if failed is not None:
        click.echo(err=True)
        click.echo(f"Step '{failed.name}' failed: {failed.error}", err=True)
        completed = ", ".join(s.name for s in report.completed_steps) or "none"
        click.echo(f"Completed steps (not rolled back): {completed}", err=True)
        sys.exit(report.exit_code)

    site = project.site_url or f"https://<your-username>.github.io/{project.repo_name}/"
    click.echo()
    click.echo("=========================================================")
    click.echo("Deployment triggered.")
    click.echo("Next steps (manual in GitHub UI):")
    click.echo("- Open your repository on GitHub -> Settings -> Pages")
    click.echo("- Select the 'gh-pages' branch (if not auto-selected) and save.")
    click.echo("- After a minute or two, your site should be live at:")
    click.echo(f"  {site}")
    click.echo("=========================================================")
    click.echo()
    click.echo("All done.")


@cli.command("patch-config")
@click.argument(
    "project_dir",
    default=".",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
)
@click.option("--repo-url", "-r", help="Repository URL to derive the base path from")
@click.option("--base-path", "-b", help="Explicit base path, e.g. /my-repo/")
@click.option(
    "--on-missing-anchor",
    type=click.Choice(["warn", "fail", "template"]),
    default=None,
    help="What to do if the config has no defineConfig({ line",
)
def patch_config(
    project_dir: Path,
    repo_url: str | None,
    base_path: str | None,
    on_missing_anchor: str | None,
) -> None:
    """Ensure vite.config.js in PROJECT_DIR declares the base path."""
    from vite_pages.git.url_resolver import base_path_from_url
    from vite_pages.patching.vite_config import CONFIG_FILENAME, patch_config_file

    if bool(repo_url) == bool(base_path):
        _fail("Error: pass exactly one of --repo-url or --base-path")

    policy = on_missing_anchor or get_settings().on_missing_anchor
    config_path = project_dir / CONFIG_FILENAME
    try:
        target = base_path or base_path_from_url(repo_url)
        result = patch_config_file(config_path, target, on_missing_anchor=policy)
    except ViteSetupError as e:
        _fail(f"Error: {e.message}")

    if result.base_unrecognized:
        line = result.unrecognized_index + 1
        click.echo(
            f"Warning: base on line {line} of {config_path} is not a string literal; left unchanged",
            err=True,
        )
        return
    if not result.anchor_found:
        click.echo(f"Warning: no defineConfig({{ line in {config_path}; base not set", err=True)
        return
    state = "updated" if result.changed else "already up to date"
    click.echo(f"{config_path}: {result.outcome.value}, {state} (base: '{target}')")


@cli.command("base-path")
@click.argument("repo_url")
def base_path(repo_url: str) -> None:
    """Print the Pages base path for REPO_URL."""
    from vite_pages.git.url_resolver import base_path_from_url

    try:
        click.echo(base_path_from_url(repo_url))
    except ViteSetupError as e:
        _fail(f"Error: {e.message}")


if __name__ == "__main__":
    cli()
