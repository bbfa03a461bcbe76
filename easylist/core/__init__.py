#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
EasyList core module exports (lazy-loaded).

Author: Silan Hu (silan.hu@u.nus.edu)
"""

from importlib import import_module
from typing import Any, Dict, Tuple

_EXPORT_MAP: Dict[str, Tuple[str, str]] = {
    "RecordExecutor": ("easylist.core.executors", "RecordExecutor"),
    "GrpcRecordExecutor": ("easylist.core.executors", "GrpcRecordExecutor"),
    "EasyListConfig": ("easylist.core.config", "EasyListConfig"),
    "get_config": ("easylist.core.config", "get_config"),
    "create_config": ("easylist.core.config", "create_config"),
    "set_config": ("easylist.core.config", "set_config"),
}

__all__ = sorted(_EXPORT_MAP.keys())


def __getattr__(name: str) -> Any:
    if name not in _EXPORT_MAP:
        raise AttributeError("module 'easylist.core' has no attribute '{0}'".format(name))

    module_name, attr_name = _EXPORT_MAP[name]
    module = import_module(module_name)
    value = getattr(module, attr_name)
    globals()[name] = value
    return value
