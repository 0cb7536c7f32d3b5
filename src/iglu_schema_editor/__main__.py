"""Module entry point for `python -m iglu_schema_editor`."""

from .cli import main

if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
