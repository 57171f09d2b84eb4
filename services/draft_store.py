# -*- coding: utf-8 -*-
"""
Local draft store for a project that does not exist on the server yet.

The setup selections are kept in a small JSON file under DATA_DIR, under a
fixed key, until the project is created or a blank project is started.

Usage:
    store = DraftStore()
    store.save_setup(setup)
    setup = store.load_setup()   # None when nothing is stored
    store.clear()
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional

from app.config import Config
from models.project_setup import ProjectSetup
from utils.logger import get_logger

logger = get_logger(__name__)


class DraftStore:
    """JSON-file key/value store holding the setup draft."""

    def __init__(self, path: Optional[Path] = None, key: Optional[str] = None):
        self.path = Path(path) if path else Config.draft_path()
        self.key = key or Config.DRAFT_STORAGE_KEY

    def _read(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                raw = json.load(f)
        except (OSError, ValueError) as e:
            logger.error(f"Failed to read draft file {self.path}: {e}")
            return {}
        return raw if isinstance(raw, dict) else {}

    def _write(self, data: Dict[str, Any]):
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=2)

    def load_setup(self) -> Optional[ProjectSetup]:
        value = self._read().get(self.key)
        if not isinstance(value, dict):
            return None
        return ProjectSetup.from_dict(value)

    def save_setup(self, setup: ProjectSetup):
        data = self._read()
        data[self.key] = setup.to_dict()
        self._write(data)
        logger.debug(f"Setup draft saved to {self.path.name}")

    def clear(self):
        """Forget the setup draft (other keys in the file are kept)."""
        data = self._read()
        if self.key not in data:
            return
        data.pop(self.key)
        self._write(data)
        logger.info("Setup draft cleared")
