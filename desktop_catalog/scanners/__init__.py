"""Scanners for turning entry files into catalog entries."""

from .entries import parse_entries, parse_entry_file, read_main_group

__all__ = ["parse_entries", "parse_entry_file", "read_main_group"]
