from __future__ import annotations

import logging
import sys
from typing import Iterable


APP_LOGGER = "solax"
API_LOGGER = "solax.api"

# Connection-pool chatter from requests, shown only when asked for by name.
_NOISY_MODULES = ("urllib3",)


class ConsoleLog:
    """Console logging for the CLI; records go to stderr so stdout carries only readings."""

    def __init__(self, level: str = "INFO", quiet: bool = False, debug_modules: Iterable[str] | None = None):
        self.level = level.upper()
        self.quiet = quiet
        self.debug_modules = list(debug_modules or [])

    def setup(self) -> logging.Logger:
        root = logging.getLogger()
        root.handlers.clear()
        root.setLevel(logging.DEBUG)

        if not self.quiet:
            handler = logging.StreamHandler(sys.stderr)
            handler.setLevel(getattr(logging, self.level, logging.INFO))
            fmt = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
            handler.setFormatter(logging.Formatter(fmt, datefmt="%Y-%m-%d %H:%M:%S"))
            root.addHandler(handler)

        for name in _NOISY_MODULES:
            if name not in self.debug_modules:
                logging.getLogger(name).setLevel(logging.WARNING)
        for name in self.debug_modules:
            logging.getLogger(name).setLevel(logging.DEBUG)

        return logging.getLogger(APP_LOGGER)
