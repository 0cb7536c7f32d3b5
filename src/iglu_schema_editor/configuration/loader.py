"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any
from urllib.parse import urlparse

import yaml

from .runtime_settings import Configuration, RegistrySettings

DEFAULT_TIMEOUT_SECONDS = 30
_PLACEHOLDERS = frozenset({"<REQUIRED>", "<OPTIONAL>"})


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> Configuration:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, ValueError) as exc:
        raise ConfigurationError(f"Failed to read configuration file {path}: {exc}") from exc
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    registry = _parse_registry_section(parsed.get("registry"))
    return Configuration(path=path, registry=registry)


def _parse_registry_section(value: Any) -> RegistrySettings:
    section = _require_mapping(value, "registry")
    url = _require_url(section.get("url"), "registry.url")
    read_key = _optional_string(section.get("read_key"), "registry.read_key")
    write_key = _optional_string(section.get("write_key"), "registry.write_key")
    timeout_seconds = _require_positive_int(
        section.get("timeout_seconds", DEFAULT_TIMEOUT_SECONDS), "registry.timeout_seconds"
    )
    return RegistrySettings(
        url=url,
        read_key=read_key,
        write_key=write_key,
        timeout_seconds=timeout_seconds,
    )


def _require_url(value: Any, field_name: str) -> str:
    url = _require_non_empty_string(value, field_name)
    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ConfigurationError(f"{field_name} must be an http(s) URL: {url}")
    return url


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' is required.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    if stripped in _PLACEHOLDERS:
        raise ConfigurationError(f"{field_name} still contains the placeholder {stripped}.")
    return stripped


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if stripped == "<REQUIRED>":
        raise ConfigurationError(f"{field_name} still contains the placeholder {stripped}.")
    if stripped == "<OPTIONAL>":
        return None
    return stripped or None


def _require_positive_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value <= 0:
        raise ConfigurationError(f"{field_name} must be greater than zero.")
    return value
