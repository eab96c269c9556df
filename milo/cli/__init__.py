"""Command-line interface for Milo."""

from milo.cli.parser import create_parser

__all__ = ["create_parser"]
