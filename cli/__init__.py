"""CLI package for nso-auth

Interactive demo that walks the token pipeline from the browser login to
SplatNet 3 queries.
"""

from cli.main import main

__all__ = [
    "main",
]
