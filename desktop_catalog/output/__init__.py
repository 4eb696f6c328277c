"""Output rendering module."""

from .render import render_listing

__all__ = ["render_listing"]
