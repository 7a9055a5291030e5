"""Processing pipelines for vite-pages."""

from vite_pages.pipelines.setup import SetupPipeline

__all__ = ["SetupPipeline"]
