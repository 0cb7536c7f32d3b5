"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "registry.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Registry configuration template for iglu-schema-editor.
# Replace the <REQUIRED> placeholder before running list, show, export, push, edit or catalog.
# Replace <OPTIONAL> placeholders only when your registry needs them.

registry:
  # Base URL of the schema registry; schemas are listed with GET on this URL.
  url: "<REQUIRED>"
  # Sent as the apikey header when listing schemas.
  # Overridden by --read-key or IGLU_READ_KEY.
  read_key: "<OPTIONAL>"
  # Sent as the apikey header when writing schemas.
  # Overridden by --write-key or IGLU_WRITE_KEY.
  write_key: "<OPTIONAL>"
  # Per-request timeout in seconds (default 30).
  timeout_seconds: 30
"""


def build_placeholder_configuration() -> str:
    """Build a YAML registry configuration template with placeholders and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder registry configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(
            f"Registry configuration file already exists: {destination.resolve()}"
        )
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
