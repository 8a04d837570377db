"""Command-line interface for cookieconsent.

Provides commands for validating configuration, listing categories and
simulating consent decisions.
"""

from .main import cli, main

__all__ = ["cli", "main"]
