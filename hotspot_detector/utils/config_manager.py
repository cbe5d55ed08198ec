# config_manager.py - JSON config manager

import json
import logging
import os

from hotspot_detector.core.detector import DetectorConfig

logger = logging.getLogger(__name__)


class Config:
    def __init__(self, path="hotspot_config.json"):
        self.path = path
        self.data = {
            "min_n": 3,
            "max_n": 6,
            "log_level": "INFO",
            "show_corpus_stats": True,
        }
        self._load()

    def _load(self):
        if not os.path.exists(self.path):
            return
        try:
            with open(self.path, "r", encoding="utf8") as f:
                loaded = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("config %s unreadable, using defaults: %s", self.path, e)
            return
        if not isinstance(loaded, dict):
            logger.warning("config %s is not a JSON object, using defaults", self.path)
            return
        self.data.update(loaded)

    def save(self):
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(self.data, f, indent=2)

    def show(self):
        for k, v in self.data.items():
            print(f"{k:18} = {v}")

    def set(self, key, val):
        if key not in self.data:
            raise KeyError(f"no such option: {key}")
        current = self.data[key]
        if isinstance(current, bool) and isinstance(val, str):
            val = val.strip().lower() in ("1", "true", "yes", "on")
        self.data[key] = type(current)(val)
        self.save()

    def detector_config(self) -> DetectorConfig:
        bounds = {}
        for key in ("min_n", "max_n"):
            val = self.data[key]
            # bool passes isinstance(val, int)
            if isinstance(val, bool) or not isinstance(val, (int, str)):
                raise ValueError(f"{key} must be an integer, got {val!r}")
            try:
                bounds[key] = int(val)
            except ValueError:
                raise ValueError(f"{key} must be an integer, got {val!r}") from None
        return DetectorConfig(**bounds)
