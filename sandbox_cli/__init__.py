"""Command line entry points for the sandbox bootstrap."""

from .cli import build_parser, main

__all__ = ["build_parser", "main"]
