"""Shared fixtures for building entry file trees."""

import os
import time
from pathlib import Path


def write_entry(directory: Path, relative: str, body: str, age: float = 100.0) -> Path:
    """Write an entry file and push its mtime into the past."""
    path = Path(directory) / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(body, encoding="utf-8")
    past = time.time() - age
    os.utime(path, (past, past))
    return path


def app_body(name: str = "Editor", exec_line: str = "editor %F", **extra: str) -> str:
    """Build a minimal application entry."""
    lines = ["[Desktop Entry]", "Type=Application", f"Name={name}", f"Exec={exec_line}"]
    lines.extend(f"{key}={value}" for key, value in extra.items())
    return "\n".join(lines) + "\n"
