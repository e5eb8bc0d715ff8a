"""Project file handling (pyproject.toml, changelog)."""
