"""Stockroom CLI subcommands."""
