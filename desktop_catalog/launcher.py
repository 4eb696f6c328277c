"""Selection boundary: listing the catalog and running a chosen entry."""

import logging
import sys
from typing import Callable

from desktop_catalog.cache import CatalogCache
from desktop_catalog.command import build_command
from desktop_catalog.config import Config
from desktop_catalog.models import AppEntry
from desktop_catalog.util.shell import spawn

logger = logging.getLogger(__name__)

ActionFn = Callable[[AppEntry], None]
AnnotateFn = Callable[[AppEntry], str]


class ApplicationNotFound(LookupError):
    """Raised when the selected name is not in the catalog."""
    
    def __init__(self, name: str):
        super().__init__(f"No application named '{name}'")
        self.name = name


def spawn_entry(entry: AppEntry) -> None:
    """Default action: run the entry's command through the shell, fire-and-forget."""
    launch = build_command(entry)
    logger.info("Launching %s: %s (cwd=%s)", entry.display_name, launch.command, launch.working_dir)
    spawn(launch.command, cwd=launch.working_dir)


def print_command(entry: AppEntry) -> None:
    """Alternative action: write the command line to stdout instead of running it."""
    print(build_command(entry).command, file=sys.stdout)


def annotate_comment(entry: AppEntry) -> str:
    """Default annotation: the entry's Comment."""
    return entry.comment or ""


ACTIONS: dict[str, ActionFn] = {
    "launch": spawn_entry,
    "print": print_command,
}


class Launcher:
    """Front door used by a selection UI to list and run applications."""
    
    def __init__(
        self,
        cache: CatalogCache,
        action: ActionFn = spawn_entry,
        annotate: AnnotateFn = annotate_comment
    ):
        self.cache = cache
        self.action = action
        self.annotate = annotate
    
    @classmethod
    def from_config(cls, config: Config) -> "Launcher":
        """Build a launcher with its own cache from configuration."""
        cache = CatalogCache(config.search_path(), config.executable_search_path())
        return cls(cache, action=ACTIONS[config.action])
    
    def list_apps(self, include_hidden: bool = False) -> dict[str, AppEntry]:
        """
        Entries available for selection, ordered by name.
        
        Args:
            include_hidden: Also return entries marked Hidden or NoDisplay
        
        Returns:
            Mapping of display name to entry, sorted case-insensitively
        """
        catalog = self.cache.get()
        entries = catalog.entries if include_hidden else catalog.visible_entries()
        return {name: entries[name] for name in sorted(entries, key=lambda n: (n.casefold(), n))}
    
    def run_selected(self, name: str) -> AppEntry:
        """
        Run the entry with the given display name using the action function.
        
        Hidden entries can still be run by name.
        
        Raises:
            ApplicationNotFound: If no entry has that name
            Exception: Whatever the action raises, e.g. OSError from spawning
        """
        entry = self.cache.get().entries.get(name)
        if entry is None:
            raise ApplicationNotFound(name)
        
        self.action(entry)
        return entry
