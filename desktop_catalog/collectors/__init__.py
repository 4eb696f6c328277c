"""Collectors for discovering entry files to parse."""

from .discovery import ENTRY_SUFFIX, discover, file_key

__all__ = ["ENTRY_SUFFIX", "discover", "file_key"]
