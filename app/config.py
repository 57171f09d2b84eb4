# -*- coding: utf-8 -*-


from pathlib import Path
from dataclasses import dataclass
from typing import Optional
import os

from dotenv import load_dotenv

# ============================================================================
# Load .env file for local environment configuration
# ============================================================================
load_dotenv()  # Load from .env file in project root

# ============================================================================
# Read settings from environment variables (from .env or system)
# ============================================================================
# API Settings
_API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:8000/api")
_API_TIMEOUT = int(os.getenv("API_TIMEOUT", "30"))
_API_VERIFY_SSL = os.getenv("API_VERIFY_SSL", "false").lower() in ("true", "1", "yes")
_API_ACCESS_TOKEN = os.getenv("API_ACCESS_TOKEN", None)
_API_REFRESH_TOKEN = os.getenv("API_REFRESH_TOKEN", None)

# Local storage
_DATA_DIR = os.getenv("DATA_DIR", None)
_LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG").upper()

# UI language (ar | en)
_DEFAULT_LANGUAGE = os.getenv("DEFAULT_LANGUAGE", "ar")


@dataclass
class Config:
    """Application configuration."""

    # Application Info
    APP_NAME: str = "Project Records Wizard"
    APP_TITLE_AR: str = "معالج سجلات المشاريع"
    VERSION: str = "1.0.0"

    # HTTP API Backend Settings
    # If .env not found, uses default (http://localhost:8000/api)
    API_BASE_URL: str = _API_BASE_URL
    API_TIMEOUT: int = _API_TIMEOUT
    API_VERIFY_SSL: bool = _API_VERIFY_SSL
    API_ACCESS_TOKEN: Optional[str] = _API_ACCESS_TOKEN
    API_REFRESH_TOKEN: Optional[str] = _API_REFRESH_TOKEN
    API_TOKEN_REFRESH_ENDPOINT: str = "auth/token/refresh/"
    API_FILES_ENDPOINT: str = "files"

    # Paths
    PROJECT_ROOT: Path = Path(__file__).parent.parent
    DATA_DIR: Path = Path(_DATA_DIR) if _DATA_DIR else PROJECT_ROOT / "data"
    LOGS_DIR: Path = PROJECT_ROOT / "logs"

    # Draft storage for a project that does not exist on the server yet
    DRAFT_FILE: str = "wizard_drafts.json"
    DRAFT_STORAGE_KEY: str = "wizard_setup_state_v1"

    # Logging
    LOG_FILE: str = "app.log"
    LOG_PATH: Path = LOGS_DIR / LOG_FILE
    LOG_LEVEL: str = _LOG_LEVEL
    LOG_MAX_BYTES: int = 5 * 1024 * 1024  # 5MB
    LOG_BACKUP_COUNT: int = 3

    # Localization
    DEFAULT_LANGUAGE: str = _DEFAULT_LANGUAGE

    # Internal project code
    INTERNAL_CODE_PREFIX: str = "M"
    INTERNAL_CODE_MAX_LENGTH: int = 40

    # Financial tolerances
    MONEY_TOLERANCE: float = 0.01
    VAT_RATE: float = 0.05

    @classmethod
    def draft_path(cls) -> Path:
        """Location of the local draft file."""
        return Path(cls.DATA_DIR) / cls.DRAFT_FILE
