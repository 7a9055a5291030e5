"""External command runner using subprocess."""

import subprocess
from pathlib import Path
from typing import Sequence

import structlog
from pydantic import BaseModel, ConfigDict

from vite_pages.core.exceptions import CommandFailedError

logger = structlog.get_logger(__name__)

COMMAND_NOT_FOUND = 127


class CompletedCommand(BaseModel):
    """A command that exited with status 0."""

    model_config = ConfigDict(frozen=True)

    args: tuple[str, ...]
    cwd: Path
    stdout: str = ""


class CommandRunner:
    """Runs external commands in an explicit working directory.

    Any non-zero exit raises :class:`CommandFailedError`. There are no
    retries. Uncaptured commands inherit the terminal so tools such as
    ``git push`` can prompt for credentials.
    """

    def run(
        self,
        args: Sequence[str],
        cwd: str | Path,
        capture: bool = False,
    ) -> CompletedCommand:
        """Run ``args`` in ``cwd`` and return the completed command."""
        argv = tuple(args)
        workdir = Path(cwd)
        command = " ".join(argv)
        logger.debug("Running command", command=command, cwd=str(workdir))
        try:
            result = subprocess.run(
                argv,
                cwd=workdir,
                capture_output=capture,
                text=True,
                check=True,
            )
        except FileNotFoundError as e:
            raise CommandFailedError(
                f"Command not found: {argv[0]}",
                returncode=COMMAND_NOT_FOUND,
                details={"command": command, "cwd": str(workdir)},
            ) from e
        except subprocess.CalledProcessError as e:
            logger.error(
                "Command failed",
                command=command,
                cwd=str(workdir),
                returncode=e.returncode,
            )
            raise CommandFailedError(
                f"Command failed with exit code {e.returncode}: {command}",
                returncode=e.returncode,
                details={
                    "command": command,
                    "cwd": str(workdir),
                    "stderr": (e.stderr or "").strip(),
                },
            ) from e

        stdout = result.stdout.strip() if capture and result.stdout else ""
        return CompletedCommand(args=argv, cwd=workdir, stdout=stdout)
