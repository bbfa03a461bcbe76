#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Record executors (lazy-loaded so grpc is imported only when needed).

Author: Silan Hu (silan.hu@u.nus.edu)
"""

from importlib import import_module
from typing import Any, Dict, Tuple

from .base import RecordExecutor

_EXPORT_MAP: Dict[str, Tuple[str, str]] = {
    "GrpcRecordExecutor": ("easylist.core.executors.grpc_executor", "GrpcRecordExecutor"),
}

__all__ = ["RecordExecutor", *sorted(_EXPORT_MAP.keys())]


def __getattr__(name: str) -> Any:
    if name not in _EXPORT_MAP:
        raise AttributeError(
            "module 'easylist.core.executors' has no attribute '{0}'".format(name)
        )

    module_name, attr_name = _EXPORT_MAP[name]
    module = import_module(module_name)
    value = getattr(module, attr_name)
    globals()[name] = value
    return value
