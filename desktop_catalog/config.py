"""Configuration file management for desktop-catalog."""

import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Mapping

import yaml

ACTIONS = ("launch", "print")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def default_application_dirs(environ: Mapping[str, str] | None = None) -> list[str]:
    """
    Application directories from the XDG base directory variables.
    
    The user data directory comes first, then every system data directory
    in $XDG_DATA_DIRS order.
    """
    env = os.environ if environ is None else environ
    
    data_home = env.get("XDG_DATA_HOME") or str(Path.home() / ".local" / "share")
    data_dirs = env.get("XDG_DATA_DIRS") or "/usr/local/share:/usr/share"
    
    dirs = [os.path.join(data_home, "applications")]
    dirs.extend(os.path.join(d, "applications") for d in data_dirs.split(":") if d)
    return dirs


def default_executable_dirs(environ: Mapping[str, str] | None = None) -> list[str]:
    """Directories listed in $PATH."""
    env = os.environ if environ is None else environ
    return [d for d in env.get("PATH", "").split(os.pathsep) if d]


@dataclass
class Config:
    """Configuration for the catalog and launcher."""
    
    # Empty lists fall back to the environment
    application_dirs: list[str] = field(default_factory=list)
    executable_dirs: list[str] = field(default_factory=list)
    
    include_hidden: bool = False
    
    # What to do with the selected entry
    action: str = "launch"
    
    log_level: str = "WARNING"
    
    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        for name in ("application_dirs", "executable_dirs"):
            value = getattr(self, name)
            if not isinstance(value, list) or not all(isinstance(d, str) for d in value):
                raise ValueError(f"Invalid {name}: expected a list of directory paths, got {value!r}")
        
        if self.action not in ACTIONS:
            raise ValueError(f"Invalid action '{self.action}': must be one of {', '.join(ACTIONS)}")
        
        self.log_level = self.log_level.upper()
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"Invalid log level '{self.log_level}'")
    
    def search_path(self) -> list[str]:
        """Application directories to scan, highest priority first."""
        dirs = self.application_dirs or default_application_dirs()
        return [os.path.expanduser(d) for d in dirs]
    
    def executable_search_path(self) -> list[str]:
        """Directories used to resolve TryExec."""
        dirs = self.executable_dirs or default_executable_dirs()
        return [os.path.expanduser(d) for d in dirs]


def load_config(config_path: Path | str | None = None) -> Config:
    """
    Load configuration from file.
    
    Args:
        config_path: Path to config file. If None, checks default locations:
            1. ~/.desktop-catalog.yaml
            2. ~/.desktop-catalog.yml
            3. ~/.config/desktop-catalog/config.yaml
            4. ~/.config/desktop-catalog/config.yml
    
    Returns:
        Config object with loaded settings (or defaults if no config found)
    
    Raises:
        FileNotFoundError: If an explicit config_path does not exist
        ValueError: If the file cannot be parsed or holds invalid settings
    """
    if config_path:
        config_file = Path(config_path).expanduser()
        if not config_file.exists():
            raise FileNotFoundError(f"Config file not found: {config_file}")
    else:
        default_paths = [
            Path.home() / ".desktop-catalog.yaml",
            Path.home() / ".desktop-catalog.yml",
            Path.home() / ".config" / "desktop-catalog" / "config.yaml",
            Path.home() / ".config" / "desktop-catalog" / "config.yml",
        ]
        
        config_file = next((path for path in default_paths if path.exists()), None)
        if config_file is None:
            return Config()
    
    try:
        with open(config_file, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ValueError(f"Failed to load config from {config_file}: {e}") from e
    
    if not isinstance(data, dict):
        raise ValueError(f"Failed to load config from {config_file}: expected a mapping")
    
    known = {f.name for f in fields(Config)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"Unknown settings in {config_file}: {', '.join(unknown)}")
    
    try:
        return Config(**data)
    except (TypeError, AttributeError) as e:
        raise ValueError(f"Failed to load config from {config_file}: {e}") from e
