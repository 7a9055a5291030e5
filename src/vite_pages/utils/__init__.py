"""Utility helpers for vite-pages."""
