"""Command-line interface for the RevueCrafters checks.

This package provides the `revue-check` CLI tool that authenticates, runs the
ordered Revue CRUD scenario and reports per-step results.
"""

from .models import ExitCode
from .output import OutputHandler

__all__ = [
    'ExitCode',
    'OutputHandler',
]
