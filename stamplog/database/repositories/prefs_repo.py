"""
Preferences repository module.

Persists user-facing display preferences across sessions as a small
JSON object.
"""

import json
import logging
from pathlib import Path
from typing import Dict
from stamplog.config.settings import Settings

logger = logging.getLogger(__name__)

SHOW_MILLISECONDS_KEY = "show_milliseconds"


class PreferencesRepository:
    """
    Repository for display preferences.

    Attributes:
        prefs_path (Path): Path to the JSON preferences file
        default_show_milliseconds (bool): Value used until the user sets one
    """

    def __init__(
        self,
        prefs_path: Path = Settings.PREFS_FILE,
        default_show_milliseconds: bool = Settings.SHOW_MILLISECONDS
    ) -> None:
        self.prefs_path = prefs_path
        self.default_show_milliseconds = default_show_milliseconds

    def load(self) -> Dict:
        if not self.prefs_path.exists():
            return {}

        try:
            with open(self.prefs_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
                return data if isinstance(data, dict) else {}
        except (ValueError, OSError) as e:
            logger.error(f"Preferences read error: {e}")
            return {}

    def save(self, data: Dict) -> bool:
        try:
            self.prefs_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.prefs_path, 'w', encoding='utf-8') as f:
                json.dump(data, f, ensure_ascii=False, indent=2)
            return True
        except OSError as e:
            logger.error(f"Preferences write error: {e}")
            return False

    def get_show_milliseconds(self) -> bool:
        value = self.load().get(SHOW_MILLISECONDS_KEY)
        return value if isinstance(value, bool) else self.default_show_milliseconds

    def set_show_milliseconds(self, enabled: bool) -> bool:
        data = self.load()
        data[SHOW_MILLISECONDS_KEY] = bool(enabled)
        return self.save(data)
