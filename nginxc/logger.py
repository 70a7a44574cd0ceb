from typing import NotRequired, TypedDict
import logging
from nginxc.utils import resolve_config


class LoggerConfig(TypedDict):
    name: NotRequired[str]
    is_enabled: NotRequired[bool]
    level: NotRequired[int]
    format: NotRequired[str]


class LoggerConfigRequired(TypedDict):
    name: str
    is_enabled: bool
    level: int
    format: str


DEFAULT_LOGGER_CONFIG: LoggerConfigRequired = {
    "name": "nginxc",
    "is_enabled": True,
    "level": logging.INFO,
    "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
}


class Logger:
    def __init__(self, config: LoggerConfig | None = None):
        self.config = resolve_config(config or {}, DEFAULT_LOGGER_CONFIG)
        self.is_enabled = self.config["is_enabled"]
        self.logger = logging.getLogger(self.config["name"])
        self.set_configuration()

    def set_configuration(self):
        # named loggers are process-wide; callers check is_enabled instead
        if not self.is_enabled:
            return

        self.logger.setLevel(self.config["level"])
        self.formatter = logging.Formatter(self.config["format"])
        # loggers are process-wide, so reuse the handler from an earlier Logger
        for handler in self.logger.handlers:
            if getattr(handler, "_nginxc_handler", False):
                handler.setFormatter(self.formatter)
                self.ch = handler
                return
        self.ch = logging.StreamHandler()
        self.ch._nginxc_handler = True
        self.ch.setFormatter(self.formatter)
        self.logger.addHandler(self.ch)
