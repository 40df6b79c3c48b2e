"""Presentation layer: argparse CLI over ContactService."""

from phonebook.cli.app import main

__all__ = ["main"]
