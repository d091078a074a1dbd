"""Command line interface for MBTA subway info."""

from .main import cli

__all__ = ["cli"]
