"""Setup pipeline."""

from vite_pages.pipelines.setup.pipeline import SetupPipeline, SetupStep

__all__ = ["SetupPipeline", "SetupStep"]
