"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path


@dataclass(frozen=True)
class RegistrySettings:
    """Schema registry connectivity configuration."""

    url: str
    read_key: str | None
    write_key: str | None
    timeout_seconds: int

    def with_keys(self, *, read_key: str | None, write_key: str | None) -> RegistrySettings:
        """Return settings where explicitly given keys replace the configured ones.

        ``None`` keeps the configured key; an empty string clears it.
        """
        return replace(
            self,
            read_key=self.read_key if read_key is None else (read_key or None),
            write_key=self.write_key if write_key is None else (write_key or None),
        )


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path
    registry: RegistrySettings
