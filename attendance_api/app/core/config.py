"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts with no configuration at all: it listens on every
interface on port 5000 and keeps its records in
``data/attendance.json`` under the project root.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional


def _split_origins(raw: str) -> List[str]:
    origins = [item.strip() for item in raw.split(",") if item.strip()]
    return origins or ["*"]


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Attendance Log API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Optional path of a log file.  When unset only the console handler
    # is attached.
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Network binding.  ``0.0.0.0`` makes the service reachable from other
    # devices on the local network (phones, tablets).
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "5000"))

    # Location of the JSON file holding the record set.  A relative path
    # is resolved against the project root by ``get_data_file_path``.
    data_file: str = os.getenv("DATA_FILE", os.path.join("data", "attendance.json"))

    # Comma-separated list of allowed origins; ``*`` permits any origin.
    cors_origins: List[str] = field(default_factory=lambda: _split_origins(os.getenv("CORS_ORIGINS", "*")))

    # IANA zone name (e.g. ``Asia/Kolkata``) used when stamping
    # ``loginDate``/``loginTime``.  Server local time when unset.
    timezone: Optional[str] = os.getenv("TIMEZONE") or None


def get_data_file_path(config: Optional[Settings] = None) -> str:
    """Compute the absolute path of the records file.

    If ``data_file`` is an absolute path, use it directly.  Otherwise
    resolve it relative to the project root.
    """
    config = config or settings
    if os.path.isabs(config.data_file):
        return config.data_file
    base_dir = Path(__file__).resolve().parent.parent.parent.parent  # project root
    return str((base_dir / config.data_file).resolve())


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
