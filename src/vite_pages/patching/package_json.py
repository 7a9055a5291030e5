"""``package.json`` script patching for gh-pages deployment."""

import json
from pathlib import Path
from typing import Any

import structlog

from vite_pages.core.exceptions import ConfigurationError

logger = structlog.get_logger(__name__)

PACKAGE_FILENAME = "package.json"


def deploy_scripts(dist_dir: str = "dist") -> dict[str, str]:
    """Scripts that build with Vite and publish ``dist_dir`` with gh-pages."""
    return {
        "preview": "vite build && vite preview --host",
        "predeploy": "npm run build",
        "deploy": f"gh-pages -d {dist_dir}",
    }


def patch_scripts(package: dict[str, Any], scripts: dict[str, str]) -> dict[str, Any]:
    """Return a copy of ``package`` with ``scripts`` merged in.

    Existing keys keep their position; new script names are appended.
    """
    current = package.get("scripts") or {}
    if not isinstance(current, dict):
        raise ConfigurationError(
            "package.json 'scripts' must be an object",
            details={"scripts": current},
        )
    patched = dict(package)
    patched["scripts"] = {**current, **scripts}
    return patched


def patch_package_file(path: str | Path, dist_dir: str = "dist") -> dict[str, Any]:
    """Add the preview/predeploy/deploy scripts to a ``package.json`` on disk."""
    path = Path(path)
    try:
        package = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise ConfigurationError(
            f"package.json not found: {path}", details={"path": str(path)}
        ) from e
    except json.JSONDecodeError as e:
        raise ConfigurationError(
            f"Invalid JSON in {path}: {e}", details={"path": str(path)}
        ) from e
    except UnicodeDecodeError as e:
        raise ConfigurationError(
            f"{path} is not valid UTF-8 text", details={"path": str(path)}
        ) from e
    if not isinstance(package, dict):
        raise ConfigurationError(
            f"{path} must contain a JSON object", details={"path": str(path)}
        )

    patched = patch_scripts(package, deploy_scripts(dist_dir))
    path.write_text(json.dumps(patched, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
    logger.info("package.json updated", path=str(path), scripts=sorted(patched["scripts"]))
    return patched
