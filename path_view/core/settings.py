import json
import logging
import os
from typing import Any, Dict

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS: Dict[str, Any] = {"locale": "", "region_style": "underline", "start_path": "", "log_level": "WARNING"}

LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR"}


def default_settings_path() -> str:
    return os.environ.get("PATH_VIEW_SETTINGS") or os.path.join(os.path.expanduser("~"), ".path_view.json")


class Settings:
    def __init__(self, path: str) -> None:
        self.path = path
        self.data: Dict[str, Any] = dict(DEFAULT_SETTINGS)
        self.load()

    def load(self) -> None:
        if not os.path.exists(self.path):
            return
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                obj = json.load(f)
        except (OSError, ValueError) as exc:
            logger.warning("Ignoring unreadable settings %s: %s", self.path, exc)
            return
        if isinstance(obj, dict):
            self.data.update(obj)

    def save(self) -> None:
        tmp_path = self.path + ".tmp"
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(self.data, f, indent=2)
        os.replace(tmp_path, self.path)

    @property
    def locale(self) -> str:
        value = self.data.get("locale", "")
        return str(value) if value is not None else ""

    @locale.setter
    def locale(self, value: str) -> None:
        self.data["locale"] = value or ""
        self.save()

    @property
    def region_style(self) -> str:
        value = self.data.get("region_style", "underline")
        return str(value) if value else "underline"

    @region_style.setter
    def region_style(self, value: str) -> None:
        self.data["region_style"] = value or "underline"
        self.save()

    @property
    def start_path(self) -> str:
        value = self.data.get("start_path", "")
        return str(value) if value is not None else ""

    @start_path.setter
    def start_path(self, value: str) -> None:
        self.data["start_path"] = value or ""
        self.save()

    @property
    def log_level(self) -> str:
        value = str(self.data.get("log_level", "WARNING")).upper()
        return value if value in LOG_LEVELS else "WARNING"

    @log_level.setter
    def log_level(self, value: str) -> None:
        v = (value or "WARNING").upper()
        if v not in LOG_LEVELS:
            v = "WARNING"
        self.data["log_level"] = v
        self.save()
