"""Command-line surface for i18nctl."""

from .main import build_parser, main

__all__ = ["build_parser", "main"]
