"""
Runtime configuration for the catalog server.

Values come from environment variables with defaults suited to running
locally.  ``settings`` is built once at import time, so variables must be
set before this module is imported.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Product Catalog")
    host: str = os.getenv("HOST", "127.0.0.1")
    port: int = int(os.getenv("PORT", "3001"))
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Directory holding the products document.  Relative paths are resolved
    # against the working directory the server is started from.
    data_dir: str = os.getenv("CATALOG_DATA_DIR", "data")
    data_file: str = os.getenv("CATALOG_DATA_FILE", "products.json")

    @property
    def data_path(self) -> Path:
        return Path(self.data_dir).resolve() / self.data_file


settings = Settings()
