"""Scaffold a Vite + React app and publish it to GitHub Pages."""

__version__ = "0.1.0"
