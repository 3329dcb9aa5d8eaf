"""
Advisory Scan

Scan the dependencies of an npm project against the GitHub advisory database.
"""

__version__ = "1.0.0"

from .cli import main

__all__ = ["main"]
