#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Client-side configuration for EasyList.

Values come from keyword overrides first, then ``EASYLIST_*`` environment
variables, then the defaults below.

Author: Silan Hu (silan.hu@u.nus.edu)
"""

import logging
import os
import threading
from dataclasses import dataclass, replace
from typing import Any, Mapping, Optional

from .utils.exceptions import ConfigurationError
from .utils.logger import configure_logging

DEFAULT_PACKAGE_NAME = "llist"
DEFAULT_GRPC_METHOD = "/easylist.RecordService/Execute"

_ENV_KEYS = {
    "package_name": "EASYLIST_PACKAGE",
    "default_user_module": "EASYLIST_USER_MODULE",
    "log_level": "EASYLIST_LOG_LEVEL",
    "grpc_method": "EASYLIST_GRPC_METHOD",
}


@dataclass(frozen=True)
class EasyListConfig:
    """
    Settings shared by list handles and executors.

    ``log_level`` is process-wide: it takes effect when the config becomes the
    global one through ``get_config`` or ``set_config``, never per handle.
    """

    package_name: str = DEFAULT_PACKAGE_NAME
    default_user_module: Optional[str] = None
    log_level: str = "WARNING"
    grpc_method: str = DEFAULT_GRPC_METHOD

    def __post_init__(self) -> None:
        if not isinstance(self.package_name, str) or not self.package_name.strip():
            raise ConfigurationError(
                "package_name must be a non-empty string", config_key="package_name"
            )
        if self.default_user_module is not None and not isinstance(
            self.default_user_module, str
        ):
            raise ConfigurationError(
                "default_user_module must be a string or None",
                config_key="default_user_module",
            )
        if not isinstance(logging.getLevelName(str(self.log_level).upper()), int):
            raise ConfigurationError(
                "Unknown log level: {0}".format(self.log_level), config_key="log_level"
            )
        if not str(self.grpc_method).startswith("/"):
            raise ConfigurationError(
                "grpc_method must be a full method path such as '/pkg.Service/Method'",
                config_key="grpc_method",
            )

    @classmethod
    def from_env(
        cls, environ: Optional[Mapping[str, str]] = None, **overrides: Any
    ) -> "EasyListConfig":
        """
        Build a config from environment variables plus explicit overrides.
        """
        env = os.environ if environ is None else environ
        values = {}
        for field_name, env_key in _ENV_KEYS.items():
            raw = env.get(env_key)
            if raw is not None and raw.strip():
                values[field_name] = raw.strip()
        values.update(overrides)
        return cls(**values)

    def with_overrides(self, **overrides: Any) -> "EasyListConfig":
        return replace(self, **overrides)


_config_lock = threading.Lock()
_global_config: Optional[EasyListConfig] = None


def get_config() -> EasyListConfig:
    """
    Return the process-wide config, loading it from the environment once.
    """
    global _global_config
    with _config_lock:
        if _global_config is None:
            _global_config = EasyListConfig.from_env()
            configure_logging(_global_config.log_level)
        return _global_config


def create_config(**overrides: Any) -> EasyListConfig:
    return EasyListConfig.from_env(**overrides)


def set_config(config: Optional[EasyListConfig]) -> None:
    """
    Replace the process-wide config. ``None`` reloads from the environment
    on next access.
    """
    global _global_config
    with _config_lock:
        _global_config = config
        if config is not None:
            configure_logging(config.log_level)
