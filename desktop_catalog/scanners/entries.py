"""Desktop entry parsing."""

import logging
import re
from pathlib import Path
from typing import Iterable

from desktop_catalog.models import AppEntry, DiscoveredFile
from desktop_catalog.util.shell import find_executable

logger = logging.getLogger(__name__)

MAIN_GROUP = "[Desktop Entry]"
APPLICATION_TYPE = "Application"
TRUE_VALUES = ("true", "1")

# Key = Value, spaces around '=' are optional
_KEY_VALUE_RE = re.compile(r"^([A-Za-z0-9-]+)\s*=\s*(.*)$")


def read_main_group(text: str) -> dict[str, str] | None:
    """
    Collect key/value pairs from the ``[Desktop Entry]`` group.
    
    Only the lines between the group header and the next line starting
    with ``[`` are looked at. The first occurrence of a key wins and values
    are taken verbatim (no unescaping).
    
    Args:
        text: Full content of an entry file
    
    Returns:
        Mapping of keys to values, or None if the file has no main group
    
    Example:
        >>> read_main_group("[Desktop Entry]\\nName = Foo\\n[Other]\\nName=Bar\\n")
        {'Name': 'Foo'}
    """
    lines = text.splitlines()
    try:
        start = lines.index(MAIN_GROUP)
    except ValueError:
        return None
    
    fields: dict[str, str] = {}
    for line in lines[start + 1:]:
        if line.startswith("["):
            break
        match = _KEY_VALUE_RE.match(line.strip())
        if not match:
            continue
        key, value = match.group(1), match.group(2).strip()
        fields.setdefault(key, value)
    
    return fields


def is_truthy(value: str | None) -> bool:
    """Interpret a boolean entry value."""
    return value is not None and value in TRUE_VALUES


def parse_entry_file(path: str | Path, executable_dirs: list[str] | None = None) -> AppEntry | None:
    """
    Parse a single entry file.
    
    Args:
        path: Path to the entry file
        executable_dirs: Directories searched when resolving TryExec
            (None means $PATH)
    
    Returns:
        AppEntry, or None when the file must be skipped
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.debug("Skipping unreadable entry %s: %s", path, e)
        return None
    
    fields = read_main_group(text)
    if fields is None:
        logger.warning("Skipping %s: no %s group", path, MAIN_GROUP)
        return None
    
    if fields.get("Type") != APPLICATION_TYPE:
        logger.debug("Skipping %s: not an application entry", path)
        return None
    
    name = fields.get("Name")
    if not name:
        logger.warning("Skipping %s: missing Name", path)
        return None
    
    # Entries without Exec are meta entries, nothing to launch
    exec_template = fields.get("Exec")
    if not exec_template:
        logger.debug("Skipping %s: missing Exec", path)
        return None
    
    try_exec = fields.get("TryExec")
    if try_exec and find_executable(try_exec, executable_dirs) is None:
        logger.debug("Skipping %s: TryExec %s not installed", path, try_exec)
        return None
    
    hidden = is_truthy(fields.get("Hidden")) or is_truthy(fields.get("NoDisplay"))
    
    return AppEntry(
        display_name=name,
        exec_template=exec_template,
        working_dir=fields.get("Path") or None,
        comment=fields.get("Comment") or None,
        visible=not hidden
    )


def parse_entries(files: Iterable[DiscoveredFile], executable_dirs: list[str] | None = None) -> dict[str, AppEntry]:
    """
    Parse discovered files into catalog entries keyed by Name.
    
    Files are processed in the given order and a later file overwrites an
    earlier one declaring the same Name. Malformed files are skipped.
    
    Args:
        files: Discovered files in discovery order
        executable_dirs: Directories searched when resolving TryExec
    
    Returns:
        Mapping of display name to AppEntry
    """
    entries: dict[str, AppEntry] = {}
    
    for discovered in files:
        entry = parse_entry_file(discovered.path, executable_dirs)
        if entry is None:
            continue
        entries[entry.display_name] = entry
    
    return entries
