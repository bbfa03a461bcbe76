#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
EasyList public API with lazy imports.

This avoids importing grpc unless the gRPC executor is actually requested.

Author: Silan Hu (silan.hu@u.nus.edu)
"""

from importlib import import_module
from typing import Any, Dict, Tuple

from ._version import __version__

__author__ = "Silan Hu"
__email__ = "silan.hu@u.nus.edu"

_EXPORT_MAP: Dict[str, Tuple[str, str]] = {
    "LargeList": ("easylist.large_list", "LargeList"),
    "AsyncLargeList": ("easylist.large_list", "AsyncLargeList"),
    "RecordExecutor": ("easylist.core.executors", "RecordExecutor"),
    "GrpcRecordExecutor": ("easylist.core.executors", "GrpcRecordExecutor"),
    "Key": ("easylist.core.data", "Key"),
    "Policy": ("easylist.core.data", "Policy"),
    "UdfCall": ("easylist.core.data", "UdfCall"),
    "ValueType": ("easylist.core.data", "ValueType"),
    "EasyListConfig": ("easylist.core.config", "EasyListConfig"),
    "get_config": ("easylist.core.config", "get_config"),
    "create_config": ("easylist.core.config", "create_config"),
    "EasyListError": ("easylist.core.utils.exceptions", "EasyListError"),
    "RemoteExecutionError": ("easylist.core.utils.exceptions", "RemoteExecutionError"),
    "DecodingError": ("easylist.core.utils.exceptions", "DecodingError"),
    "InvalidValueError": ("easylist.core.utils.exceptions", "InvalidValueError"),
}

__all__ = ["__version__", *sorted(_EXPORT_MAP.keys())]


def __getattr__(name: str) -> Any:
    """
    Resolve public API symbols lazily.
    """
    if name not in _EXPORT_MAP:
        raise AttributeError("module 'easylist' has no attribute '{0}'".format(name))

    module_name, attr_name = _EXPORT_MAP[name]
    module = import_module(module_name)
    value = getattr(module, attr_name)
    globals()[name] = value
    return value
