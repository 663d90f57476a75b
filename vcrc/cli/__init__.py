"""VCRC command-line interface package.

Supports ``python -m vcrc.cli`` as an alternative to the ``vcrc`` entry point.
"""

from vcrc.cli.main import cli, main

__all__ = ["cli", "main"]
