import logging
import os
from dataclasses import dataclass

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass
class Settings:
    log_level: str = DEFAULT_LOG_LEVEL
    log_format: str = DEFAULT_LOG_FORMAT

    @classmethod
    def from_env(cls, environ=None) -> "Settings":
        """Read settings from SHUNT_LOG_LEVEL. Unknown levels fall back to WARNING."""
        env = os.environ if environ is None else environ
        level = env.get("SHUNT_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            level = DEFAULT_LOG_LEVEL
        return cls(log_level=level)

    @property
    def level(self) -> int:
        return logging.getLevelName(self.log_level)
