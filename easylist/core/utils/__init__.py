#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Utility exports for EasyList core.

Author: Silan Hu (silan.hu@u.nus.edu)
"""

from .logger import ModernLogger, configure_logging
from .exceptions import (
    ConfigurationError,
    DecodingError,
    EasyListError,
    ExceptionTranslator,
    InvalidValueError,
    RemoteExecutionError,
    SerializationError,
)

__all__ = [
    "ModernLogger",
    "configure_logging",
    "EasyListError",
    "RemoteExecutionError",
    "DecodingError",
    "InvalidValueError",
    "SerializationError",
    "ConfigurationError",
    "ExceptionTranslator",
]
