# SPDX-License-Identifier: MIT
"""Command-line interface for cpmaker."""

from .main import cli, main

__all__ = ["cli", "main"]
