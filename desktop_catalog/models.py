"""Data models for the desktop application catalog."""

from types import MappingProxyType
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator


class DiscoveredFile(BaseModel):
    """A candidate entry file found during discovery."""
    
    model_config = ConfigDict(frozen=True)
    
    key: str = Field(description="Desktop file id derived from the path relative to its search directory")
    path: str = Field(description="Absolute path to the entry file")


class AppEntry(BaseModel):
    """A launchable application parsed from an entry file."""
    
    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "display_name": "Firefox",
                "exec_template": "firefox %u",
                "working_dir": None,
                "comment": "Browse the Web",
                "visible": True
            }
        }
    )
    
    display_name: str = Field(description="Value of the Name key, used as catalog key")
    exec_template: str = Field(min_length=1, description="Raw Exec value, field codes included")
    working_dir: str | None = Field(default=None, description="Value of the Path key")
    comment: str | None = Field(default=None, description="Value of the Comment key")
    visible: bool = Field(default=True, description="False when Hidden or NoDisplay is set")


class Catalog(BaseModel):
    """Snapshot of all parsed entries from one discovery pass."""
    
    model_config = ConfigDict(frozen=True)
    
    entries: Mapping[str, AppEntry] = Field(
        default_factory=dict,
        validate_default=True,
        description="Read-only mapping of display name to entry"
    )
    source_files: tuple[str, ...] = Field(
        default=(),
        description="Absolute paths in discovery order"
    )
    generated_at: float = Field(description="Epoch seconds captured after the build finished")
    
    @field_validator("entries", mode="after")
    @classmethod
    def freeze_entries(cls, value: Mapping[str, AppEntry]) -> Mapping[str, AppEntry]:
        """Copy entries into a read-only view so snapshots cannot be edited."""
        return MappingProxyType(dict(value))
    
    @field_serializer("entries")
    def serialize_entries(self, value: Mapping[str, AppEntry]) -> dict[str, Any]:
        return {name: entry.model_dump() for name, entry in value.items()}
    
    def __len__(self) -> int:
        return len(self.entries)
    
    def visible_entries(self) -> dict[str, AppEntry]:
        """Return only the entries that do not declare themselves hidden."""
        return {name: entry for name, entry in self.entries.items() if entry.visible}


class LaunchCommand(BaseModel):
    """Shell command line ready to spawn, plus where to run it."""
    
    model_config = ConfigDict(frozen=True)
    
    command: str = Field(description="Command line to run through a shell")
    working_dir: str = Field(description="Directory to start the command in")
