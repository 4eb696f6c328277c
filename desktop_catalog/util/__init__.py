"""Utility module for desktop-catalog."""

from .shell import find_executable, spawn

__all__ = ["find_executable", "spawn"]
