"""Project file patchers."""

from vite_pages.patching.package_json import patch_package_file, patch_scripts
from vite_pages.patching.vite_config import patch, patch_config_file, render_template

__all__ = [
    "patch",
    "patch_config_file",
    "patch_package_file",
    "patch_scripts",
    "render_template",
]
