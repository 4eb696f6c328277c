"""In-memory catalog cache with mtime based invalidation."""

import logging
import os
import threading
import time
from pathlib import Path
from typing import Callable, Iterable

from desktop_catalog.collectors.discovery import discover
from desktop_catalog.models import AppEntry, Catalog, DiscoveredFile
from desktop_catalog.scanners.entries import parse_entries

logger = logging.getLogger(__name__)

DiscoverFn = Callable[[list[str]], list[DiscoveredFile]]
ParseFn = Callable[[list[DiscoveredFile], list[str] | None], dict[str, AppEntry]]


class CatalogCache:
    """Owns the current catalog and rebuilds it when the files change."""
    
    def __init__(
        self,
        search_path: Iterable[str | Path],
        executable_dirs: list[str] | None = None,
        discover_fn: DiscoverFn = discover,
        parse_fn: ParseFn = parse_entries,
        clock: Callable[[], float] = time.time
    ):
        """
        Initialize an empty cache.
        
        Args:
            search_path: Application directories, highest priority first
            executable_dirs: Directories used to resolve TryExec (None means $PATH)
            discover_fn: Discovery function, replaceable for tests
            parse_fn: Parser function, replaceable for tests
            clock: Source of the generated_at timestamp
        """
        self.search_path = [str(p) for p in search_path]
        self.executable_dirs = executable_dirs
        self._discover = discover_fn
        self._parse = parse_fn
        self._clock = clock
        self._catalog: Catalog | None = None
        self._lock = threading.Lock()
    
    def get(self) -> Catalog:
        """
        Return the current catalog, rebuilding it if stale.
        
        Discovery runs on every call. The catalog is rebuilt when the list of
        files changed (order included) or any file was modified at or after
        the previous build. Otherwise the same Catalog object is returned.
        """
        with self._lock:
            files = self._discover(self.search_path)
            
            if self._catalog is not None and not self._is_stale(files):
                return self._catalog
            
            entries = self._parse(files, self.executable_dirs)
            
            # Timestamp after parsing so edits made during the pass are seen next time
            catalog = Catalog(
                entries=entries,
                source_files=tuple(f.path for f in files),
                generated_at=self._clock()
            )
            logger.debug("Rebuilt catalog: %d entries from %d files", len(entries), len(files))
            self._catalog = catalog
            return catalog
    
    def _is_stale(self, files: list[DiscoveredFile]) -> bool:
        """Check whether freshly discovered files invalidate the cached catalog."""
        catalog = self._catalog
        if catalog is None:
            return True
        
        if tuple(f.path for f in files) != catalog.source_files:
            return True
        
        for discovered in files:
            try:
                mtime = os.stat(discovered.path).st_mtime
            except OSError:
                # Vanished between discovery and now
                return True
            if mtime >= catalog.generated_at:
                return True
        
        return False
    
    def invalidate(self) -> None:
        """Drop the cached catalog so the next get() rebuilds."""
        with self._lock:
            self._catalog = None
