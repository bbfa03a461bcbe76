#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Logging mixin shared by EasyList components.

Components log under the ``easylist`` logger, which carries only a
``NullHandler`` until the application opts in. The level is process-wide and
set through ``configure_logging``; building a component never changes it.

Author: Silan Hu (silan.hu@u.nus.edu)
"""

import logging
import threading
from typing import Any, Optional, Union

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_HANDLER_LOCK = threading.Lock()
_ROOT_LOGGER_NAME = "easylist"

logging.getLogger(_ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def _resolve_level(level: Union[int, str]) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).strip().upper())
    if not isinstance(resolved, int):
        raise ValueError("Unknown log level: {0}".format(level))
    return resolved


def configure_logging(
    level: Optional[Union[int, str]] = None, console: bool = False
) -> logging.Logger:
    """
    Set the ``easylist`` logger level and optionally attach a console handler.

    The console handler is attached at most once per process.
    """
    root = logging.getLogger(_ROOT_LOGGER_NAME)
    if level is not None:
        root.setLevel(_resolve_level(level))
    if console:
        with _HANDLER_LOCK:
            if not any(getattr(h, "_easylist_handler", False) for h in root.handlers):
                handler = logging.StreamHandler()
                handler.setFormatter(logging.Formatter(_LOG_FORMAT))
                handler._easylist_handler = True  # type: ignore[attr-defined]
                root.addHandler(handler)
    return root


class ModernLogger:
    """
    Mixin giving a component its own child logger under ``easylist``.

    Subclasses call ``ModernLogger.__init__(self, name=...)`` and then log
    with ``self.debug(...)``, ``self.warning(...)`` and so on.
    """

    def __init__(self, name: str) -> None:
        if name.startswith(_ROOT_LOGGER_NAME + ".") or name == _ROOT_LOGGER_NAME:
            logger_name = name
        else:
            logger_name = "{0}.{1}".format(_ROOT_LOGGER_NAME, name)
        self._logger = logging.getLogger(logger_name)

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.debug(message, *args, **kwargs)

    def info(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.info(message, *args, **kwargs)

    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.warning(message, *args, **kwargs)

    def error(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.error(message, *args, **kwargs)

    def critical(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.critical(message, *args, **kwargs)
