"""Discovery of desktop entry files across application directories."""

import os
from pathlib import Path
from typing import Iterable

from desktop_catalog.models import DiscoveredFile

ENTRY_SUFFIX = ".desktop"
KEY_DELIMITER = "-"


def file_key(root: Path, path: Path) -> str:
    """
    Build the desktop file id for an entry file.
    
    The id is the path relative to the search directory with separators
    replaced, so ``<root>/kde/konsole.desktop`` becomes ``kde-konsole.desktop``.
    """
    relative = path.relative_to(root)
    return KEY_DELIMITER.join(relative.parts)


def discover(search_path: Iterable[str | Path]) -> list[DiscoveredFile]:
    """
    Enumerate entry files from an ordered list of application directories.
    
    Args:
        search_path: Directories to scan, highest priority first
    
    Returns:
        Discovered files in directory order, then lexical path order within
        each directory. A key seen in an earlier directory shadows the same
        key in later ones.
    
    Example:
        >>> [f.key for f in discover(["/usr/share/applications"])]
        ['firefox.desktop', 'kde-konsole.desktop', ...]
    """
    found: list[DiscoveredFile] = []
    seen: set[str] = set()
    
    for directory in search_path:
        root = Path(directory).expanduser()
        if not root.is_dir():
            continue
        
        for path in _walk_entries(root):
            key = file_key(root, path)
            if key in seen:
                continue
            
            # Best effort: unreadable files are left out silently
            if not os.access(path, os.R_OK):
                continue
            
            seen.add(key)
            found.append(DiscoveredFile(key=key, path=os.path.abspath(path)))
    
    return found


def _walk_entries(root: Path) -> list[Path]:
    """Recursively list entry files below root, sorted by path."""
    entries: list[Path] = []
    
    # os.walk skips subdirectories it cannot list
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames.sort()
        for filename in filenames:
            if filename.endswith(ENTRY_SUFFIX):
                path = Path(dirpath) / filename
                if path.is_file():
                    entries.append(path)
    
    entries.sort(key=lambda p: p.relative_to(root).parts)
    return entries
