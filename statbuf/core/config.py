import logging
import yaml
from pathlib import Path
from typing import Any, Dict, Optional

from statbuf.core.domain.stat_buffer import DEFAULT_CAPACITY, StdDevMethod


DEFAULT_STD_DEV_METHOD = StdDevMethod.RECOMPUTE
DEFAULT_LOG_LEVEL = "ERROR"


class Config:
    def __init__(self, path: str):
        """
        Load YAML configuration from the given path.

        Args:
            path: Path to config.yaml, e.g. 'configs/config.yaml' in project root.
        """
        self.path = Path(path)
        if not self.path.exists():
            raise FileNotFoundError(f"Config file not found: {self.path}")

        with open(self.path, "r") as f:
            self._data: Dict[str, Any] = yaml.safe_load(f) or {}

    def get(self, key: str, default=None):
        """Get a config value by key."""
        return self._data.get(key, default)

    @property
    def capacity(self) -> int:
        buffer_props = self._data.get("buffer", {})
        capacity = buffer_props.get("capacity", DEFAULT_CAPACITY)
        if not isinstance(capacity, int) or isinstance(capacity, bool) or capacity < 0:
            raise ValueError(f"buffer.capacity must be a non-negative integer, got {capacity!r}")
        return capacity

    @property
    def std_dev_method(self) -> StdDevMethod:
        buffer_props = self._data.get("buffer", {})
        raw = buffer_props.get("std_dev_method", DEFAULT_STD_DEV_METHOD.name)
        try:
            return StdDevMethod.from_str(raw)
        except ValueError:
            return DEFAULT_STD_DEV_METHOD

    @property
    def input_filename(self) -> Optional[str]:
        input_props = self._data.get("input", {})
        return input_props.get("filename")

    @property
    def output_filename(self) -> Optional[str]:
        output_props = self._data.get("output", {})
        return output_props.get("filename")

    @property
    def log_level(self) -> int:
        raw = str(self._data.get("log_level", DEFAULT_LOG_LEVEL)).upper()
        level = logging.getLevelName(raw)
        if not isinstance(level, int):
            return logging.getLevelName(DEFAULT_LOG_LEVEL)
        return level
