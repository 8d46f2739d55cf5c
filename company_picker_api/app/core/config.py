"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
server runs out of the box on ``localhost:5000`` with ``companies.json``
and ``user.json`` in the current working directory.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List


def _split_origins(raw: str) -> List[str]:
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Company Picker API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    # Empty means console only.
    log_file: str = os.getenv("LOG_FILE", "")

    # Directory holding the JSON files.  Relative paths are resolved
    # against the current working directory at the time of use.
    data_dir: str = os.getenv("DATA_DIR", ".")
    companies_file: str = os.getenv("COMPANIES_FILE", "companies.json")
    selections_file: str = os.getenv("USER_SELECTIONS_FILE", "user.json")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "5000"))

    # Comma‑separated list of allowed origins.  ``*`` permits any origin.
    cors_origins: List[str] = field(
        default_factory=lambda: _split_origins(os.getenv("CORS_ORIGINS", "*"))
    )

    def _resolve(self, name: str) -> Path:
        path = Path(name)
        if path.is_absolute():
            return path
        return Path(self.data_dir) / path

    def companies_path(self) -> Path:
        """Return the path of the master catalog file."""
        return self._resolve(self.companies_file)

    def selections_path(self) -> Path:
        """Return the path of the persisted selection file."""
        return self._resolve(self.selections_file)


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
