"""Command synthesis from Exec templates."""

import os

from desktop_catalog.models import AppEntry, LaunchCommand

# File and URL placeholders; we never pass a target so they are dropped
FIELD_CODES = frozenset({"%f", "%F", "%u", "%U"})


def strip_field_codes(exec_template: str) -> str:
    """
    Remove file/URL field codes from an Exec value.
    
    The template is split on whitespace, tokens that are exactly a field
    code are dropped and the rest are joined with single spaces. Nothing
    else is quoted or unescaped.
    
    Example:
        >>> strip_field_codes("app %U --flag %f")
        'app --flag'
    """
    tokens = [token for token in exec_template.split() if token not in FIELD_CODES]
    return " ".join(tokens)


def build_command(entry: AppEntry, cwd: str | None = None) -> LaunchCommand:
    """
    Turn an entry into a shell command line and working directory.
    
    Args:
        entry: Entry to launch
        cwd: Fallback working directory (defaults to the current one)
    
    Returns:
        LaunchCommand to be run through a command interpreter
    """
    working_dir = entry.working_dir or cwd or os.getcwd()
    return LaunchCommand(
        command=strip_field_codes(entry.exec_template),
        working_dir=working_dir
    )
